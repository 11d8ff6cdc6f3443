"""rich-domain domain layer: core primitives and domain base classes."""

# Export all domain components
from . import core, entities

# Re-export key types for convenience
from .core import (
    ID,
    AutoMapper,
    History,
    HistoryEntry,
    Iterator,
    Result,
    fail,
    ok,
    validator,
)
from .entities import (
    Aggregate,
    CreateManyResult,
    DomainEvent,
    Entity,
    EventHandler,
    InstanceSettings,
    ValueObject,
    create_many_domain_instances,
    domain_class,
)

__all__ = [
    # Modules
    "core",
    "entities",
    "validator",
    # Core primitives
    "ID",
    "AutoMapper",
    "History",
    "HistoryEntry",
    "Iterator",
    "Result",
    "fail",
    "ok",
    # Domain base classes
    "Aggregate",
    "CreateManyResult",
    "DomainEvent",
    "Entity",
    "EventHandler",
    "InstanceSettings",
    "ValueObject",
    "create_many_domain_instances",
    "domain_class",
]
