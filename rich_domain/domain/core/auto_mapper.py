"""Recursive flattening of domain objects into plain serializable data.

Value objects, entities, aggregates, identifiers, enums and sequences are
turned into nested dicts, lists and scalars. Mapping is best effort:
unrecognized shapes pass through verbatim (or are omitted from entity
output) and nothing raises.

Which values count as leaves and which as containers is decided entirely
by the type-predicate collaborator handed to ``AutoMapper``; swapping it
changes the mapping without touching this module.
"""

from enum import StrEnum, auto
from types import ModuleType
from typing import Any

from toolz import valmap

from rich_domain.config import get_logger

from . import validator

logger = get_logger(__name__)

# Entity metadata always present in entity output
ENTITY_METADATA_KEYS = ("id", "created_at", "updated_at")


class Shape(StrEnum):
    """Closed set of value shapes the mapper knows how to handle."""

    NULL = auto()
    SYMBOL = auto()
    SCALAR = auto()
    PLAIN = auto()
    IDENTIFIER = auto()
    VALUE_OBJECT = auto()
    ENTITY = auto()
    ARRAY = auto()
    UNKNOWN = auto()


class AutoMapper:
    """Transform domain resources into plain objects.

    Args:
        checks: Type-predicate collaborator exposing ``is_null``,
            ``is_symbol``, ``is_scalar``, ``is_object``, ``is_id``,
            ``is_value_object``, ``is_entity``, ``is_aggregate`` and
            ``is_array``. Defaults to the ``validator`` module.
    """

    def __init__(self, checks: ModuleType | Any = validator) -> None:
        self._checks = checks

    def classify(self, value: Any) -> Shape:
        """Resolve the shape of ``value``. Order matters: enums are strings too."""
        checks = self._checks
        if checks.is_null(value):
            return Shape.NULL
        if checks.is_symbol(value):
            return Shape.SYMBOL
        if checks.is_id(value):
            return Shape.IDENTIFIER
        if checks.is_value_object(value):
            return Shape.VALUE_OBJECT
        if checks.is_entity(value) or checks.is_aggregate(value):
            return Shape.ENTITY
        if checks.is_scalar(value):
            return Shape.SCALAR
        if checks.is_object(value):
            return Shape.PLAIN
        if checks.is_array(value):
            return Shape.ARRAY
        return Shape.UNKNOWN

    # === Value objects ===

    def value_object_to_obj(self, value: Any) -> Any:
        """Transform a value object into a simple value.

        A value object whose props hold a single key collapses to that
        key's mapped value, so ``Name({"value": "jane"})`` becomes
        ``"jane"``. Several keys produce a dict keyed by prop name.

        Args:
            value: Value object, or any value reached while recursing

        Returns:
            Plain value: scalar, dict, list or None
        """
        shape = self.classify(value)

        if shape is Shape.VALUE_OBJECT:
            return self.props_to_obj(value.props)
        if shape is Shape.ENTITY:
            return self.entity_to_obj(value)
        return self._map_leaf(value, shape)

    def props_to_obj(self, props: Any) -> Any:
        """Map a props bag, collapsing a single-key dict to its value."""
        shape = self.classify(props)

        if shape is Shape.PLAIN:
            mapped = valmap(self._map_member, props)
            if len(mapped) == 1:
                return next(iter(mapped.values()))
            return mapped
        if shape is Shape.VALUE_OBJECT:
            return self.value_object_to_obj(props)
        return self._map_leaf(props, shape)

    def _map_member(self, member: Any) -> Any:
        shape = self.classify(member)

        if shape is Shape.VALUE_OBJECT:
            return self.value_object_to_obj(member)
        if shape is Shape.ENTITY:
            return self.entity_to_obj(member)
        return self._map_leaf(member, shape)

    def _map_leaf(self, value: Any, shape: Shape) -> Any:
        if shape is Shape.SYMBOL:
            return value.value
        if shape is Shape.IDENTIFIER:
            return value.value()
        if shape is Shape.ARRAY:
            return [self.value_object_to_obj(item) for item in value]
        # null, scalar, plain and unknown values pass through
        return value

    # === Entities ===

    def entity_to_obj(self, value: Any) -> Any:
        """Transform an entity or aggregate into a simple dict.

        The result always holds ``id`` (string), ``created_at`` and
        ``updated_at``. Array props map each element as an entity, nested
        entities recurse, value objects and simple values go through
        ``value_object_to_obj``. Props of any other shape are omitted.

        Args:
            value: Entity, aggregate, or any value reached while recursing

        Returns:
            Plain dict for entities; mapped value otherwise
        """
        shape = self.classify(value)

        if shape is Shape.VALUE_OBJECT:
            return self.value_object_to_obj(value)
        if shape is Shape.ARRAY:
            return [self.entity_to_obj(item) for item in value]
        if shape is not Shape.ENTITY:
            return self._map_leaf(value, shape)

        props = value.props
        result: dict[str, Any] = {
            "id": value.id.value(),
            "created_at": props.get("created_at"),
            "updated_at": props.get("updated_at"),
        }

        for key, member in props.items():
            if key in ENTITY_METADATA_KEYS:
                continue

            member_shape = self.classify(member)
            if member_shape is Shape.ARRAY:
                result[key] = [self.entity_to_obj(item) for item in member]
            elif member_shape is Shape.ENTITY:
                result[key] = self.entity_to_obj(member)
            elif member_shape is Shape.IDENTIFIER:
                result[key] = member.value()
            elif member_shape is Shape.UNKNOWN:
                logger.debug(
                    "Omitting {key} of {owner} from mapped output",
                    key=key,
                    owner=type(value).__name__,
                )
            else:
                result[key] = self.value_object_to_obj(member)

        return result
