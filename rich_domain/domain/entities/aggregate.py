"""Aggregates: entities that collect domain events until dispatched."""

from typing import Any, ClassVar, Literal

import attrs

from rich_domain.config import get_logger
from rich_domain.domain.core import ID, DomainKind

from .entity import Entity
from .events import DispatchCallback, DomainEvent, EventHandler, EventMetrics, noop_callback
from .getters_and_setters import InstanceSettings

logger = get_logger(__name__)

ReplaceOption = Literal["REPLACE_DUPLICATED"]


class Aggregate(Entity):
    """Consistency boundary that records events for later dispatch.

    Events stay on the aggregate until dispatched, deleted or cleared.
    ``events_metrics`` tracks pending and dispatched counts.
    """

    domain_kind: ClassVar[DomainKind] = DomainKind.AGGREGATE

    def __init__(
        self,
        props: dict[str, Any],
        config: InstanceSettings | None = None,
        events: list[DomainEvent] | None = None,
    ) -> None:
        super().__init__(props, config)
        self._domain_events: list[DomainEvent] = list(events) if events else []
        self._dispatched_count = 0

    def hash_code(self) -> ID:
        return ID.create(f"[Aggregate@{type(self).__name__}]:{self.id.value()}")

    @property
    def events_metrics(self) -> EventMetrics:
        current = len(self._domain_events)
        return EventMetrics(
            current=current,
            total=current + self._dispatched_count,
            dispatch=self._dispatched_count,
        )

    def add_event(self, handler: EventHandler, replace: ReplaceOption | None = None) -> None:
        """Record an event handled by ``handler``.

        Args:
            handler: Event handler; its ``event_name`` identifies the event
            replace: "REPLACE_DUPLICATED" drops pending events of the same name first
        """
        if replace == "REPLACE_DUPLICATED":
            self.delete_event(handler.event_name)
        self._domain_events.append(DomainEvent(aggregate=self, callback=handler))

    def dispatch_event(self, event_name: str | None = None, handler: DispatchCallback | None = None) -> None:
        """Dispatch pending events named ``event_name``, or all of them."""
        if not event_name:
            self.dispatch_all(handler)
            return

        callback = handler or noop_callback
        matching = [
            event
            for event in self._domain_events
            if event.event_name == event_name and event.aggregate.id.equal(self.id)
        ]
        if not matching:
            logger.debug(
                "No pending '{event_name}' event on {owner}",
                event_name=event_name,
                owner=type(self).__name__,
            )
            return

        for event in matching:
            self._dispatched_count += 1
            event.callback.dispatch(event, callback)
        self.delete_event(event_name)

    def dispatch_all(self, handler: DispatchCallback | None = None) -> None:
        """Dispatch every pending event and clear the queue."""
        callback = handler or noop_callback
        for event in list(self._domain_events):
            if event.aggregate.id.equal(self.id):
                self._dispatched_count += 1
                event.callback.dispatch(event, callback)
        self._domain_events = []

    def clear_events(self, reset_metrics: bool = False) -> None:
        if reset_metrics:
            self._dispatched_count = 0
        self._domain_events = []

    def delete_event(self, event_name: str) -> int:
        """Drop pending events named ``event_name``. Returns how many were dropped."""
        before = len(self._domain_events)
        self._domain_events = [
            event for event in self._domain_events if event.event_name != event_name
        ]
        return before - len(self._domain_events)

    def clone(self, copy_events: bool = False, **overrides: Any) -> "Aggregate":
        """Copy with the same ID unless overridden; pending events only when asked."""
        aggregate = self.from_props({**self.props, **overrides}, self.config)
        if copy_events:
            aggregate._domain_events = [
                attrs.evolve(event, aggregate=aggregate) for event in self._domain_events
            ]
        return aggregate
