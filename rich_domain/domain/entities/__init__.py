"""Domain base classes: value objects, entities, aggregates and their events."""

from .aggregate import Aggregate
from .entity import Entity
from .events import DomainEvent, EventHandler, EventMetrics
from .factory import CreateManyResult, DomainClassProps, create_many_domain_instances, domain_class
from .getters_and_setters import GettersAndSetters, HistoryView, InstanceSettings
from .shared import Adapter, Builder, ensure_utc, utc_now
from .value_object import ValueObject

__all__ = [
    "Adapter",
    "Aggregate",
    "Builder",
    "CreateManyResult",
    "DomainClassProps",
    "DomainEvent",
    "Entity",
    "EventHandler",
    "EventMetrics",
    "GettersAndSetters",
    "HistoryView",
    "InstanceSettings",
    "ValueObject",
    "create_many_domain_instances",
    "domain_class",
    "ensure_utc",
    "utc_now",
]
