"""Entities: domain objects with identity and lifecycle timestamps."""

import copy
from datetime import datetime
from typing import Any, ClassVar

from toolz import dissoc, valmap

from rich_domain.config import get_logger
from rich_domain.domain.core import ID, AutoMapper, DomainKind, Result, validator

from .getters_and_setters import GettersAndSetters, InstanceSettings
from .shared import Adapter, Builder, apply_adapter, ensure_utc, utc_now

logger = get_logger(__name__)

# Props excluded from structural comparison
IDENTITY_KEYS = ("id", "created_at", "updated_at")


def _resolve_id(value: Any) -> ID:
    if validator.is_id(value):
        return value
    if validator.is_string(value) or validator.is_number(value):
        return ID.create(value)
    return ID.create()


class Entity(GettersAndSetters[dict[str, Any]]):
    """Domain object identified by an ``ID``.

    Props always carry ``id`` (the string value), ``created_at`` and
    ``updated_at``. The ID is taken from ``props["id"]`` when it is a
    string, a number or an ``ID``; otherwise a new one is generated.
    Every accepted write refreshes ``updated_at``.

    Raises:
        TypeError: If props is not a dict
    """

    domain_kind: ClassVar[DomainKind] = DomainKind.ENTITY
    auto_mapper: ClassVar[AutoMapper] = AutoMapper()

    def __init__(self, props: dict[str, Any], config: InstanceSettings | None = None) -> None:
        if not isinstance(props, dict):
            raise TypeError(
                f"Props must be a 'dict' for entities, but received: '{type(props).__name__}' "
                f"as props on class '{type(self).__name__}'"
            )
        self._id = _resolve_id(props.get("id"))
        now = utc_now()
        timestamps = {
            key: ensure_utc(value) if isinstance(value, datetime) else value
            for key, value in props.items()
            if key in ("created_at", "updated_at")
        }
        super().__init__(
            {"created_at": now, "updated_at": now, **props, **timestamps, "id": self._id.value()},
            config,
        )

    @property
    def id(self) -> ID:
        return self._id

    def is_new(self) -> bool:
        """True when the ID was generated rather than provided."""
        return self._id.is_new()

    def hash_code(self) -> ID:
        return ID.create(f"[Entity@{type(self).__name__}]:{self._id.value()}")

    def is_equal(self, other: Any) -> bool:
        """Same ID and same props, ignoring identity and timestamps."""
        if not isinstance(other, Entity):
            return False
        if not self._id.equal(other.id):
            return False
        return self._comparable(self.props) == self._comparable(other.props)

    def _comparable(self, props: dict[str, Any]) -> dict[str, Any]:
        return valmap(self.auto_mapper.value_object_to_obj, dissoc(props, *IDENTITY_KEYS))

    def clone(self, **overrides: Any) -> "Entity":
        """Copy with the same ID unless ``id`` is overridden."""
        return self.from_props({**self.props, **overrides}, self.config)

    @classmethod
    def from_props(cls, props: dict[str, Any], config: InstanceSettings | None = None) -> "Entity":
        """Build an instance from trusted props. Override when the constructor differs."""
        return cls(props, config=config)

    def to_object(self, adapter: Adapter | Builder | None = None) -> Any:
        """Plain dict with ``id``, ``created_at``, ``updated_at`` and mapped props.

        Args:
            adapter: Optional object with ``adapt_one(obj)`` or
                ``build(obj)`` returning a Result
        """
        adapted, value = apply_adapter(self, adapter)
        if adapted:
            return value
        return copy.deepcopy(self.auto_mapper.entity_to_obj(self))

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        return cls.is_valid_props(value)

    @classmethod
    def is_valid_props(cls, props: Any) -> bool:
        return props is not None

    @classmethod
    def init(cls, props: Any) -> Any:
        raise NotImplementedError("method not implemented: init")

    @classmethod
    def create(cls, props: Any) -> Result:
        if not cls.is_valid_props(props):
            return Result.fail(f"Invalid props to create an instance of {cls.__name__}")
        return Result.ok(cls(props))

    # === Internals ===

    def _assign(self, key: str, value: Any) -> bool:
        if key == "id":
            if validator.is_id(value):
                self._id = value
            elif validator.is_string(value) or validator.is_number(value):
                self._id = ID.create(value)
            else:
                logger.warning(
                    "Rejected id of type '{kind}' on {owner}",
                    kind=type(value).__name__,
                    owner=type(self).__name__,
                )
                return False
            value = self._id.value()

        self.props = {**self.props, key: value, "updated_at": utc_now()}
        return True

    def _history_id(self) -> ID | None:
        return getattr(self, "_id", None)

    def _restore_props(self, props: dict[str, Any]) -> None:
        super()._restore_props(props)
        restored = self.props.get("id")
        if restored is not None and restored != self._id.value():
            self._id = ID.create(restored)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id.value()!r})"
