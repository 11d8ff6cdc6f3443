"""Domain events raised by aggregates and the handlers that dispatch them."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Any

from attrs import define, field

from .shared import utc_now

if TYPE_CHECKING:
    from .aggregate import Aggregate

# Receives the dispatched event; the return value is ignored
DispatchCallback = Callable[["DomainEvent"], Any]


def noop_callback(event: "DomainEvent") -> None:
    return None


class EventHandler(ABC):
    """Reacts to an event raised by an aggregate.

    ``event_name`` identifies the handler inside an aggregate and defaults
    to the class name.

    Example:
        >>> class OrderPlaced(EventHandler):
        ...     def dispatch(self, event, handler):
        ...         handler(event)
        >>> order.add_event(OrderPlaced())
        >>> order.dispatch_event("OrderPlaced", send_email)
    """

    def __init__(self, event_name: str | None = None) -> None:
        self.event_name = event_name or type(self).__name__

    @abstractmethod
    def dispatch(self, event: "DomainEvent", handler: DispatchCallback) -> None:
        """Handle ``event``, calling ``handler`` as the dispatch side effect."""


@define(frozen=True, slots=True)
class DomainEvent:
    """An aggregate paired with the handler that will dispatch it."""

    aggregate: "Aggregate"
    callback: EventHandler
    created_at: datetime = field(factory=utc_now)

    @property
    def event_name(self) -> str:
        return self.callback.event_name


@define(frozen=True, slots=True)
class EventMetrics:
    """Event counters of an aggregate."""

    current: int
    total: int
    dispatch: int
