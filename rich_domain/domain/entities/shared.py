"""Shared utilities and protocols for domain entities."""

from datetime import UTC, datetime
from typing import Any, Protocol, TypeVar

S = TypeVar("S", contravariant=True)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Ensure datetime is timezone-aware with UTC."""
    if dt is None:
        return None
    return dt.replace(tzinfo=UTC) if dt.tzinfo is None else dt


def utc_now() -> datetime:
    return datetime.now(UTC)


def copy_props(props: Any) -> Any:
    """Shallow copy of a props bag; scalars are returned as they are."""
    if isinstance(props, dict):
        return dict(props)
    if isinstance(props, list):
        return list(props)
    return props


class Adapter(Protocol[S]):
    """Converts a domain object into another representation."""

    def adapt_one(self, item: S) -> Any: ...


class Builder(Protocol[S]):
    """Builds another representation of a domain object, wrapped in a Result."""

    def build(self, target: S) -> Any: ...


def apply_adapter(target: Any, adapter: Any) -> tuple[bool, Any]:
    """Run ``adapter`` on ``target`` when it looks like an Adapter or a Builder.

    Returns:
        (True, adapted value) when an adapter method ran, (False, None) otherwise
    """
    adapt_one = getattr(adapter, "adapt_one", None)
    if callable(adapt_one):
        return True, adapt_one(target)
    build = getattr(adapter, "build", None)
    if callable(build):
        return True, build(target).value()
    return False, None
