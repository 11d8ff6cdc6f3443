"""Value objects: domain values compared by their props, not by identity."""

import copy
from typing import Any, ClassVar, TypeVar

from toolz import dissoc, valmap

from rich_domain.domain.core import AutoMapper, DomainKind, Result

from .getters_and_setters import GettersAndSetters, InstanceSettings
from .shared import Adapter, Builder, apply_adapter

P = TypeVar("P")

TIMESTAMP_KEYS = ("created_at", "updated_at")


class ValueObject(GettersAndSetters[P]):
    """Immutable-by-convention value with structural equality.

    Props may be a dict or a single value. Subclasses usually validate in
    ``create`` and keep the constructor for trusted input.

    Example:
        >>> class Name(ValueObject[dict]):
        ...     pass
        >>> Name.create({"value": "Jane"}).value().to_object()
        'Jane'
    """

    domain_kind: ClassVar[DomainKind] = DomainKind.VALUE_OBJECT
    auto_mapper: ClassVar[AutoMapper] = AutoMapper()

    def __init__(self, props: P, config: InstanceSettings | None = None) -> None:
        super().__init__(props, config)

    def is_equal(self, other: Any) -> bool:
        """Structural equality of props, ignoring timestamps."""
        if not isinstance(other, ValueObject):
            return False
        return self._comparable(self.props) == self._comparable(other.props)

    def _comparable(self, props: Any) -> Any:
        # Dict props keep their keys so renamed props never compare equal
        if isinstance(props, dict):
            return valmap(self.auto_mapper.value_object_to_obj, dissoc(props, *TIMESTAMP_KEYS))
        return self.auto_mapper.props_to_obj(props)

    def clone(self, **overrides: Any) -> "ValueObject[P]":
        """Copy of this value object, with dict props optionally overridden."""
        if isinstance(self.props, dict):
            return self.from_props({**self.props, **overrides}, self.config)
        return self.from_props(self.props, self.config)

    @classmethod
    def from_props(cls, props: P, config: InstanceSettings | None = None) -> "ValueObject[P]":
        """Build an instance from trusted props. Override when the constructor differs."""
        return cls(props, config=config)

    def to_object(self, adapter: Adapter | Builder | None = None) -> Any:
        """Plain representation of this value object.

        Args:
            adapter: Optional object with ``adapt_one(obj)`` or
                ``build(obj)`` returning a Result

        Returns:
            Adapter output, or a detached copy of the mapped props
        """
        adapted, value = apply_adapter(self, adapter)
        if adapted:
            return value
        return copy.deepcopy(self.auto_mapper.value_object_to_obj(self))

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        return cls.is_valid_props(value)

    @classmethod
    def is_valid_props(cls, props: Any) -> bool:
        return props is not None

    @classmethod
    def init(cls, value: Any) -> Any:
        raise NotImplementedError("method not implemented: init")

    @classmethod
    def create(cls, props: Any) -> Result:
        if not cls.is_valid_props(props):
            return Result.fail(f"Invalid props to create an instance of {cls.__name__}")
        return Result.ok(cls(props))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.props!r})"
