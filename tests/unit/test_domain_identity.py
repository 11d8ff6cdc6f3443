"""Tests for ID identity values."""

import re

from rich_domain.domain.core import ID


class TestIDCreation:
    """Test creating identifiers."""

    def test_create_without_value_is_new(self):
        """Test a generated ID is a UUID flagged as new."""
        uid = ID.create()

        assert uid.is_new()
        assert re.fullmatch(r"[0-9a-f-]{36}", uid.value())

    def test_create_with_value(self):
        """Test a provided value is kept and not new."""
        uid = ID.create("user-1")

        assert uid.value() == "user-1"
        assert not uid.is_new()
        assert str(uid) == "user-1"

    def test_create_with_number(self):
        """Test numbers are stored as strings."""
        assert ID.create(42).value() == "42"

    def test_generated_ids_are_unique(self):
        """Test two generated IDs differ."""
        assert not ID.create().equal(ID.create())


class TestShortID:
    """Test short token form."""

    def test_short_format(self, short_id_length):
        """Test short IDs are uppercase without dashes."""
        uid = ID.short()

        assert len(uid.value()) == short_id_length
        assert uid.value() == uid.value().upper()
        assert "-" not in uid.value()
        assert uid.is_short()

    def test_to_short_keeps_trailing_characters(self):
        """Test long values keep their last characters."""
        uid = ID.create("same-token-value-123456")

        assert uid.to_short().value() == "TOKENVALUE123456"

    def test_to_short_mutates_in_place(self):
        """Test to_short() returns the same instance."""
        uid = ID.create("same-token-value-123456")

        assert uid.to_short() is uid
        assert uid.is_short()

    def test_short_value_gets_random_prefix(self, short_id_length):
        """Test values shorter than the target length are padded randomly."""
        first = ID.short("abc")
        second = ID.short("abc")

        assert len(first.value()) == short_id_length
        assert first.value().endswith("ABC")
        assert not first.equal(second)

    def test_short_id_length_setting(self, monkeypatch):
        """Test the configured length is honoured."""
        from rich_domain.config import settings

        monkeypatch.setattr(settings.domain, "short_id_length", 8)

        assert len(ID.short().value()) == 8


class TestIDComparison:
    """Test equality and copies."""

    def test_equal_compares_values(self):
        """Test equal() ignores newness."""
        assert ID.create("a").equal(ID.create("a"))
        assert not ID.create("a").equal(ID.create("b"))
        assert not ID.create("a").equal(None)

    def test_deep_equal_includes_newness(self):
        """Test deep_equal() also compares the new flag."""
        uid = ID.create("a")

        assert uid.deep_equal(ID.create("a"))
        assert not uid.deep_equal(uid.clone_as_new())

    def test_clone(self):
        """Test clone() keeps the value and is not new."""
        uid = ID.create()

        cloned = uid.clone()

        assert cloned.equal(uid)
        assert cloned is not uid
        assert not cloned.is_new()
        assert uid.clone_as_new().is_new()
