"""Undo/redo log of property snapshots addressed by short tokens.

The log is an ``Iterator`` of ``HistoryEntry``; the iterator cursor is the
current version pointer. ``back()``/``forward()`` move that pointer and
return the entry under it, ``snapshot()`` appends a new entry and moves
the pointer to the end of the log.
"""

from datetime import UTC, datetime
from enum import StrEnum, auto
from typing import Generic, TypeVar

import attrs
from attrs import define, field

from rich_domain.config import get_logger

from .identity import ID
from .iterator import Iterator

logger = get_logger(__name__)

P = TypeVar("P")


class HistoryAction(StrEnum):
    CREATE = auto()
    UPDATE = auto()


@define(frozen=True, slots=True)
class HistoryEntry(Generic[P]):
    """Snapshot of an owner's props at a point in time."""

    props: P
    action: HistoryAction = field(default=HistoryAction.UPDATE, converter=HistoryAction)
    token: ID | None = None
    occurred_at: datetime | None = None
    id: ID | None = None


class History(Generic[P]):
    """Token-addressable snapshot log with one-step undo and redo."""

    def __init__(self, initial: HistoryEntry[P] | None = None) -> None:
        seed = []
        if initial is not None:
            seed.append(
                attrs.evolve(
                    initial,
                    action=HistoryAction.CREATE,
                    token=ID.short(),
                    occurred_at=datetime.now(UTC),
                )
            )
        self._log: Iterator[HistoryEntry[P]] = Iterator.create(
            initial_data=seed,
            return_current_on_reversion=True,
            restart_on_finish=False,
        )

    def _token_exists(self, token: ID) -> bool:
        return any(
            entry.token is not None and token.equal(entry.token)
            for entry in reversed(self._log.to_array())
        )

    def snapshot(self, entry: HistoryEntry[P]) -> HistoryEntry[P]:
        """Append a snapshot and move the cursor to the end of the log.

        From the newest version the cursor moves past the new entry; after
        stepping back it lands on the new entry.

        A supplied token is shortened; a token already present in the log
        is replaced by a freshly minted one.

        Args:
            entry: Snapshot to store

        Returns:
            The stored entry, carrying its final token and timestamp
        """
        token = entry.token.to_short() if entry.token is not None else ID.short()
        if self._token_exists(token):
            logger.debug("History token {token} already in use, minting a new one", token=token.value())
            token = ID.short()

        stored = attrs.evolve(
            entry,
            token=token,
            occurred_at=entry.occurred_at or datetime.now(UTC),
        )
        self._log.add(stored)
        self._log.to_last()
        return stored

    def back(self, token: ID | None = None) -> HistoryEntry[P] | None:
        """Step back one version, or back to the version holding ``token``.

        Returns:
            The matching or previous entry; the first entry once history
            is exhausted; None for an empty log
        """
        current = self._log.prev()

        if token is not None:
            while current is not None:
                if current.token is not None and current.token.equal(token):
                    return current
                current = self._log.prev() if self._log.has_prev() else None

        if self._log.has_prev():
            return self._log.prev()

        self._log.to_first()
        return self._log.first()

    def forward(self, token: ID | None = None) -> HistoryEntry[P] | None:
        """Step forward one version, or forward to the version holding ``token``.

        Returns:
            The matching or next entry; the last entry once history is
            exhausted; None for an empty log
        """
        current = self._log.next()

        if token is not None:
            while current is not None:
                if current.token is not None and current.token.equal(token):
                    return current
                current = self._log.next() if self._log.has_next() else None

        if self._log.has_next():
            return self._log.next()

        self._log.to_last()
        return self._log.last()

    def list(self) -> list[HistoryEntry[P]]:
        return self._log.to_array()

    def count(self) -> int:
        return self._log.total()
