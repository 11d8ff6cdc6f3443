"""Guarded property access shared by value objects, entities and aggregates.

Every accepted write is recorded as a history snapshot, so instances can
step back and forward through their own prop states.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from attrs import define

from rich_domain.config import get_logger, settings
from rich_domain.domain.core import ID, History, HistoryAction, HistoryEntry

from .shared import copy_props, utc_now

logger = get_logger(__name__)

P = TypeVar("P")

Validation = Callable[[Any], bool]

_VALIDATION_FAILED = "Trying to set value: '{value}' for key: '{key}' but failed validation on {owner}"


@define(frozen=True, slots=True)
class InstanceSettings:
    """Per-instance switches for prop access."""

    disable_getters: bool = False
    disable_setters: bool = False


class Setter:
    """Second half of ``instance.set(key).to(value)``."""

    __slots__ = ("_key", "_owner")

    def __init__(self, owner: "GettersAndSetters", key: str) -> None:
        self._owner = owner
        self._key = key

    def to(self, value: Any, validation: Validation | None = None) -> "GettersAndSetters":
        """Apply ``value`` if it passes validation.

        Args:
            value: New prop value
            validation: Optional predicate the value must satisfy

        Returns:
            The owning instance, changed or not
        """
        return self._owner._apply(self._key, value, validation)


class HistoryView(Generic[P]):
    """Public handle over an instance's prop history.

    ``back`` and ``forward`` copy the reached state onto the instance.
    """

    __slots__ = ("_owner",)

    def __init__(self, owner: "GettersAndSetters[P]") -> None:
        self._owner = owner

    def back(self, token: ID | None = None) -> HistoryEntry[P] | None:
        entry = self._owner._history.back(token)
        if entry is not None:
            self._owner._restore_props(entry.props)
        return entry

    def forward(self, token: ID | None = None) -> HistoryEntry[P] | None:
        entry = self._owner._history.forward(token)
        if entry is not None:
            self._owner._restore_props(entry.props)
        return entry

    def snapshot(self, token: ID | None = None) -> HistoryEntry[P]:
        """Record the current props, optionally under ``token``."""
        return self._owner._history.snapshot(self._owner._history_entry(token=token))

    def list(self) -> list[HistoryEntry[P]]:
        return self._owner._history.list()

    def count(self) -> int:
        return self._owner._history.count()


class GettersAndSetters(Generic[P]):
    """Base for domain instances holding a ``props`` bag.

    Subclasses may override ``validation(key, value)`` to veto writes made
    through ``set`` and ``change``.
    """

    def __init__(self, props: P, config: InstanceSettings | None = None) -> None:
        self.props: P = copy_props(props)
        self.config = config if config is not None else InstanceSettings()
        self._history: History[P] = (
            History(self._history_entry(action=HistoryAction.CREATE))
            if settings.domain.track_history
            else History()
        )

    def validation(self, key: str, value: Any) -> bool:
        """Hook run before every write. Accepts everything by default."""
        return True

    def get(self, key: str) -> Any:
        """Read a prop, or None when getters are disabled."""
        if self.config.disable_getters:
            logger.warning(
                "Trying to get key: '{key}' but the getters are deactivated on {owner}",
                key=key,
                owner=type(self).__name__,
            )
            return None
        if not isinstance(self.props, dict):
            return None
        return self.props.get(key)

    def set(self, key: str) -> Setter:
        """Start a write: ``instance.set("name").to("Jane")``."""
        return Setter(self, key)

    def change(self, key: str, value: Any, validation: Validation | None = None) -> "GettersAndSetters[P]":
        """Write a prop in one call. Same rules as ``set(key).to(value)``."""
        return self._apply(key, value, validation)

    def history(self) -> HistoryView[P]:
        return HistoryView(self)

    def get_raw(self) -> P:
        return self.props

    # === Internals ===

    def _apply(self, key: str, value: Any, validation: Validation | None) -> "GettersAndSetters[P]":
        owner = type(self).__name__
        if self.config.disable_setters:
            logger.warning(
                "Trying to set value: '{value}' for key: '{key}' but the setters are deactivated on {owner}",
                value=value,
                key=key,
                owner=owner,
            )
            return self
        if callable(validation) and not validation(value):
            logger.warning(_VALIDATION_FAILED, value=value, key=key, owner=owner)
            return self
        if not self.validation(key, value):
            logger.warning(_VALIDATION_FAILED, value=value, key=key, owner=owner)
            return self
        if not isinstance(self.props, dict):
            logger.warning("Cannot set key: '{key}' on {owner}, props are not a mapping", key=key, owner=owner)
            return self

        if self._assign(key, value):
            self._snapshot_props()
        return self

    def _assign(self, key: str, value: Any) -> bool:
        """Store ``value`` under ``key``. Returns False when nothing changed."""
        self.props = {**self.props, key: value}
        return True

    def _snapshot_props(self) -> None:
        if settings.domain.track_history:
            self._history.snapshot(self._history_entry(token=ID.short()))

    def _history_entry(
        self,
        action: HistoryAction = HistoryAction.UPDATE,
        token: ID | None = None,
    ) -> HistoryEntry[P]:
        return HistoryEntry(
            props=copy_props(self.props),
            action=action,
            token=token,
            occurred_at=utc_now(),
            id=self._history_id(),
        )

    def _history_id(self) -> ID | None:
        return None

    def _restore_props(self, props: P) -> None:
        self.props = copy_props(props)
