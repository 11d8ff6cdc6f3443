"""Type predicates used to dispatch on the shape of domain values.

Pure functions with no shared state. Domain base classes declare their
kind through the ``domain_kind`` class marker, so these predicates never
import the entity layer.
"""

from datetime import date, datetime
from enum import Enum, StrEnum, auto
from typing import Any

from .identity import ID


class DomainKind(StrEnum):
    """Marker carried by domain base classes as ``domain_kind``."""

    VALUE_OBJECT = auto()
    ENTITY = auto()
    AGGREGATE = auto()


def _kind_of(value: Any) -> DomainKind | None:
    return getattr(type(value), "domain_kind", None)


def is_array(value: Any) -> bool:
    return isinstance(value, list | tuple)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    # bool is an int subclass but is its own shape here
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_date(value: Any) -> bool:
    return isinstance(value, datetime | date)


def is_object(value: Any) -> bool:
    """Plain mapping of data, not a domain object."""
    return isinstance(value, dict)


def is_null(value: Any) -> bool:
    return value is None


def is_function(value: Any) -> bool:
    return callable(value) and not isinstance(value, type)


def is_symbol(value: Any) -> bool:
    return isinstance(value, Enum)


def is_id(value: Any) -> bool:
    return isinstance(value, ID)


def is_value_object(value: Any) -> bool:
    return _kind_of(value) is DomainKind.VALUE_OBJECT


def is_entity(value: Any) -> bool:
    """Entity that is not an aggregate."""
    return _kind_of(value) is DomainKind.ENTITY


def is_aggregate(value: Any) -> bool:
    return _kind_of(value) is DomainKind.AGGREGATE


def is_scalar(value: Any) -> bool:
    """Single value: boolean, number, string or date."""
    return is_boolean(value) or is_number(value) or is_string(value) or is_date(value)
