"""Test configuration - domain fixtures available to every test module."""

from tests.fixtures.models import (
    address,
    history_disabled,
    name,
    order,
    short_id_length,
    user,
)

# Re-export for pytest discovery
__all__ = [
    "address",
    "history_disabled",
    "name",
    "order",
    "short_id_length",
    "user",
]
