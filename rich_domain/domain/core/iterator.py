"""Bidirectional cursor over an in-memory sequence.

The iterator never raises: exhausted traversal returns ``None`` and
structural operations on an empty sequence are no-ops. Callers check
``has_next()``/``has_prev()``/``is_empty()`` instead of catching errors.

The backing list is always owned by the iterator. ``initial_data`` is
copied on construction and ``to_array()`` returns a copy.
"""

from collections.abc import Iterable
from enum import StrEnum, auto
from typing import Generic, TypeVar

T = TypeVar("T")


class LastCommand(StrEnum):
    """Direction of the last cursor move."""

    NEXT = auto()
    PREV = auto()
    NONE = auto()


class Iterator(Generic[T]):
    """Sequential traversal through a list without exposing it.

    Two flags change traversal at direction changes and boundaries:

    - ``return_current_on_reversion``: after moving forward onto the last
      element, the first ``prev()`` returns that element again instead of
      stepping back (symmetric for ``next()`` after moving back onto the
      first element).
    - ``restart_on_finish``: when no element is left in the requested
      direction, the cursor wraps to the opposite boundary and returns
      that element instead of ``None``.

    The cursor ranges from ``-1`` (before the first element) to
    ``total()`` (past the last element).
    """

    __slots__ = (
        "_current_index",
        "_items",
        "_last_command",
        "_restart_on_finish",
        "_return_current_on_reversion",
    )

    def __init__(
        self,
        initial_data: Iterable[T] | None = None,
        return_current_on_reversion: bool = False,
        restart_on_finish: bool = False,
    ) -> None:
        self._current_index = -1
        self._items: list[T] = list(initial_data) if initial_data is not None else []
        self._last_command = LastCommand.NONE
        self._return_current_on_reversion = bool(return_current_on_reversion)
        self._restart_on_finish = bool(restart_on_finish)

    @classmethod
    def create(
        cls,
        initial_data: Iterable[T] | None = None,
        return_current_on_reversion: bool = False,
        restart_on_finish: bool = False,
    ) -> "Iterator[T]":
        """Create an iterator.

        Args:
            initial_data: Elements to traverse (copied)
            return_current_on_reversion: Replay the current element when
                the traversal direction changes at a boundary
            restart_on_finish: Wrap around instead of returning None

        Returns:
            New iterator with the cursor before the first element
        """
        return cls(
            initial_data=initial_data,
            return_current_on_reversion=return_current_on_reversion,
            restart_on_finish=restart_on_finish,
        )

    # === Configuration and position ===

    @property
    def return_current_on_reversion(self) -> bool:
        return self._return_current_on_reversion

    @property
    def restart_on_finish(self) -> bool:
        return self._restart_on_finish

    @property
    def current_index(self) -> int:
        """Cursor position, from -1 (before start) to total() (past end)."""
        return self._current_index

    @property
    def last_command(self) -> LastCommand:
        return self._last_command

    # === Queries ===

    def has_next(self) -> bool:
        """Check if an element exists after the cursor."""
        if self.is_empty():
            return False
        return self._current_index + 1 < len(self._items)

    def has_prev(self) -> bool:
        """Check if an element exists before the cursor."""
        if self.is_empty():
            return False
        return self._current_index - 1 >= 0

    def is_empty(self) -> bool:
        return not self._items

    def total(self) -> int:
        return len(self._items)

    def first(self) -> T | None:
        """First element, or None when empty. The cursor does not move."""
        return self._items[0] if self._items else None

    def last(self) -> T | None:
        """Last element, or None when empty. The cursor does not move."""
        return self._items[-1] if self._items else None

    # === Traversal ===

    def next(self) -> T | None:
        """Advance the cursor and return the element under it.

        Returns:
            Next element, the replayed first element on reversion, the
            first element on wraparound, or None when exhausted
        """
        if self.has_next():
            if self._last_command is LastCommand.PREV and self._current_index == 0:
                self._last_command = LastCommand.NEXT
                return self._items[self._current_index]
            self._current_index += 1
            self._last_command = (
                LastCommand.NEXT if self._return_current_on_reversion else LastCommand.NONE
            )
            return self._items[self._current_index]

        if not self._restart_on_finish:
            return None
        return self.to_first().first()

    def prev(self) -> T | None:
        """Move the cursor back and return the element under it.

        Returns:
            Previous element, the replayed last element on reversion, the
            last element on wraparound, or None when exhausted
        """
        if self.has_prev():
            last_index = len(self._items) - 1
            if self._last_command is LastCommand.NEXT and self._current_index == last_index:
                self._last_command = LastCommand.PREV
                return self._items[self._current_index]
            self._current_index -= 1
            self._last_command = (
                LastCommand.PREV if self._return_current_on_reversion else LastCommand.NONE
            )
            return self._items[self._current_index]

        if not self._restart_on_finish:
            return None
        return self.to_last().last()

    def to_first(self) -> "Iterator[T]":
        """Move the cursor toward the start.

        From anywhere past the first element the cursor lands on it. From
        the first element, or before it, the cursor moves before the start
        so the next ``next()`` yields the first element.
        """
        if self._current_index in (0, -1):
            self._current_index = -1
        else:
            self._current_index = 0
        return self

    def to_last(self) -> "Iterator[T]":
        """Move the cursor toward the end.

        Mirror of ``to_first``: from the last element or a fresh cursor it
        moves past the end, from anywhere else it lands on the last element.
        """
        if self._current_index in (len(self._items) - 1, -1):
            self._current_index = len(self._items)
        else:
            self._current_index = len(self._items) - 1
        return self

    # === Mutation ===

    def clear(self) -> "Iterator[T]":
        self._items.clear()
        self._current_index = -1
        return self

    def add_to_end(self, data: T) -> "Iterator[T]":
        """Append an element. The cursor is unaffected."""
        self._items.append(data)
        return self

    def add(self, data: T) -> "Iterator[T]":
        return self.add_to_end(data)

    def add_to_start(self, data: T) -> "Iterator[T]":
        """Prepend an element and reset the cursor before it."""
        self._current_index = -1
        self._items.insert(0, data)
        return self

    def remove_last(self) -> "Iterator[T]":
        """Remove the last element, pulling a past-end cursor back."""
        if self._current_index >= len(self._items):
            self._current_index -= 1
        if self._items:
            self._items.pop()
        return self

    def remove_first(self) -> "Iterator[T]":
        """Remove the first element, keeping the cursor on the same element."""
        if self._current_index > 0:
            self._current_index -= 1
        if self._items:
            self._items.pop(0)
        return self

    def remove_item(self, item: T) -> None:
        """Remove the first element equal to ``item``, if any.

        When the removed element sat at or before the cursor, the cursor
        moves back one position so it keeps pointing at the same element.
        """
        for index, value in enumerate(self._items):
            if value == item:
                del self._items[index]
                if index <= self._current_index:
                    self._current_index = max(self._current_index - 1, -1)
                return

    # === Copies ===

    def clone(self) -> "Iterator[T]":
        """New iterator with the same flags and items, cursor reset."""
        return Iterator.create(
            initial_data=self._items,
            return_current_on_reversion=self._return_current_on_reversion,
            restart_on_finish=self._restart_on_finish,
        )

    def to_array(self) -> list[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        # Walks a snapshot; the cursor is not touched
        return iter(list(self._items))

    def __repr__(self) -> str:
        return (
            f"Iterator(items={self._items!r}, current_index={self._current_index}, "
            f"last_command={self._last_command.value!r})"
        )
