"""Batch creation of domain instances through their ``create`` classmethods."""

from collections.abc import Iterable
from typing import Any

from attrs import define

from rich_domain.config import get_logger
from rich_domain.domain.core import Iterator, Result

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class DomainClassProps:
    """A domain class paired with the props to create it from."""

    domain_class: Any
    props: Any


@define(frozen=True, slots=True)
class CreateManyResult:
    """Per-item results plus their combination."""

    data: Iterator[Result]
    result: Result


def domain_class(cls: Any, props: Any) -> DomainClassProps:
    return DomainClassProps(domain_class=cls, props=props)


def create_many_domain_instances(items: Iterable[DomainClassProps] | None) -> CreateManyResult:
    """Create several domain instances in one call.

    Each class's ``create`` runs with its props. A class without a callable
    ``create`` yields a failed result instead of raising.

    Args:
        items: Pairs built with ``domain_class``

    Returns:
        CreateManyResult whose ``result`` is the first failure, or the
        first success when every item was created

    Example:
        >>> outcome = create_many_domain_instances([
        ...     domain_class(Name, {"value": "Jane"}),
        ...     domain_class(Age, {"value": 21}),
        ... ])
        >>> outcome.result.is_ok()
        True
    """
    results: list[Result] = []
    for item in items or []:
        create = getattr(item.domain_class, "create", None)
        if not callable(create):
            name = getattr(item.domain_class, "__name__", repr(item.domain_class))
            logger.warning("No static 'create' method found in class {name}", name=name)
            results.append(Result.fail(f"No static 'create' method found in class {name}."))
            continue
        results.append(create(item.props))

    return CreateManyResult(
        data=Result.iterate(results),
        result=Result.combine(results),
    )
