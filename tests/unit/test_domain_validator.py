"""Tests for type predicates."""

from datetime import UTC, date, datetime
from enum import Enum

import pytest

from rich_domain.domain.core import ID, validator


class Color(Enum):
    RED = "red"


class TestScalarPredicates:
    """Test predicates on plain values."""

    @pytest.mark.parametrize("value", [0, 1.5, -3])
    def test_numbers(self, value):
        assert validator.is_number(value)
        assert validator.is_scalar(value)

    def test_bool_is_not_number(self):
        """Test booleans are their own shape."""
        assert validator.is_boolean(True)
        assert not validator.is_number(True)

    def test_dates(self):
        assert validator.is_date(datetime.now(UTC))
        assert validator.is_date(date(2024, 1, 1))
        assert not validator.is_date("2024-01-01")

    def test_containers(self):
        assert validator.is_array([1])
        assert validator.is_array((1,))
        assert validator.is_object({})
        assert not validator.is_object([])

    def test_misc(self):
        assert validator.is_null(None)
        assert validator.is_string("x")
        assert validator.is_symbol(Color.RED)
        assert validator.is_function(len)
        assert not validator.is_function(Color)


class TestDomainPredicates:
    """Test predicates on domain objects."""

    def test_domain_kinds(self, name, user, order):
        """Test each base class reports its own kind only."""
        assert validator.is_id(ID.create())
        assert validator.is_value_object(name)
        assert validator.is_entity(user)
        assert not validator.is_entity(order)
        assert validator.is_aggregate(order)
        assert not validator.is_value_object({"props": 1})
