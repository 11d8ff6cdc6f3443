"""rich-domain: building blocks for rich domain models."""

from .domain import (
    ID,
    Aggregate,
    AutoMapper,
    Entity,
    EventHandler,
    History,
    Iterator,
    Result,
    ValueObject,
    create_many_domain_instances,
    domain_class,
    fail,
    ok,
)

__version__ = "0.1.0"

__all__ = [
    "ID",
    "Aggregate",
    "AutoMapper",
    "Entity",
    "EventHandler",
    "History",
    "Iterator",
    "Result",
    "ValueObject",
    "create_many_domain_instances",
    "domain_class",
    "fail",
    "ok",
]
