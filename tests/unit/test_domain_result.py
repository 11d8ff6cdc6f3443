"""Tests for Result and the ok/fail helpers."""

import pytest

from rich_domain.domain.core import Result, fail, ok


class RecordingCommand:
    """Command that records each execution payload."""

    def __init__(self):
        self.calls = []

    def execute(self, *args):
        self.calls.append(args)
        return "executed"


class TestResultState:
    """Test success and failure results."""

    def test_ok(self):
        """Test a success result exposes its value."""
        result = Result.ok({"id": 1}, metadata={"source": "test"})

        assert result.is_ok()
        assert not result.is_fail()
        assert result.value() == {"id": 1}
        assert result.error() is None
        assert result.metadata() == {"source": "test"}

    def test_fail(self):
        """Test a failure result exposes its error."""
        result = Result.fail("boom")

        assert result.is_fail()
        assert result.value() is None
        assert result.error() == "boom"
        assert result.metadata() == {}

    def test_helpers(self):
        """Test module-level ok() and fail()."""
        assert ok(1).value() == 1
        assert ok().value() is None
        assert fail("nope").error() == "nope"
        assert fail().error() == "void error. no message!"

    def test_to_object(self):
        """Test the plain dict view of a result."""
        assert fail("x").to_object() == {
            "is_ok": False,
            "is_fail": True,
            "data": None,
            "error": "x",
            "metadata": {},
        }

    def test_results_are_immutable(self):
        """Test results cannot be modified after creation."""
        result = ok(1)

        with pytest.raises(AttributeError):
            result._data = 2


class TestResultCombine:
    """Test combining several results."""

    def test_combine_empty_fails(self):
        """Test combining nothing is a failure."""
        result = Result.combine([])

        assert result.is_fail()
        assert result.error() == "No results provided on combine param"

    def test_combine_returns_first_failure(self):
        """Test the first failing result wins."""
        first_failure = fail("first")

        result = Result.combine([ok(1), first_failure, fail("second")])

        assert result is first_failure

    def test_combine_all_ok_returns_first(self):
        """Test all-success combines to the first result."""
        first = ok(1)

        assert Result.combine([first, ok(2)]) is first

    def test_iterate(self):
        """Test iterate() wraps results in a replaying iterator."""
        iterator = Result.iterate([ok(1), ok(2)])

        assert iterator.total() == 2
        assert iterator.return_current_on_reversion


class TestResultExecute:
    """Test running commands conditionally."""

    def test_execute_on_success(self):
        """Test a command runs only when the option matches."""
        command = RecordingCommand()

        assert ok().execute(command).on("success") == "executed"
        assert ok().execute(command).on("fail") is None
        assert command.calls == [()]

    def test_execute_on_fail_with_data(self):
        """Test with_data() passes a payload to the command."""
        command = RecordingCommand()

        fail("x").execute(command).with_data({"reason": "x"}).on("fail")

        assert command.calls == [({"reason": "x"},)]
