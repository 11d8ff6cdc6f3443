"""Discriminated success/failure result type.

Domain operations return a ``Result`` instead of raising, so callers branch
on ``is_ok()``/``is_fail()`` and read ``value()`` or ``error()``.
"""

from collections.abc import Iterable
from typing import Any, Generic, Literal, Protocol, TypeVar

from attrs import define, field

from .iterator import Iterator

T = TypeVar("T")
E = TypeVar("E")
M = TypeVar("M")

ResultOption = Literal["success", "fail"]

COMBINE_EMPTY_ERROR = "No results provided on combine param"
VOID_ERROR = "void error. no message!"


class Command(Protocol):
    """Anything with an ``execute`` method taking an optional payload."""

    def execute(self, *args: Any) -> Any: ...


@define(frozen=True, slots=True)
class ResultHook:
    """Runs a command with a fixed payload when the result state matches."""

    _result: "Result"
    _command: Command
    _data: Any

    def on(self, option: ResultOption) -> Any:
        if self._result.matches(option):
            return self._command.execute(self._data)
        return None


@define(frozen=True, slots=True)
class ResultExecution:
    """Runs a command when the result state matches."""

    _result: "Result"
    _command: Command

    def on(self, option: ResultOption) -> Any:
        if self._result.matches(option):
            return self._command.execute()
        return None

    def with_data(self, data: Any) -> ResultHook:
        return ResultHook(self._result, self._command, data)


@define(frozen=True, slots=True)
class Result(Generic[T, E, M]):
    """Outcome of an operation: a value on success or an error on failure."""

    _is_ok: bool
    _data: T | None = None
    _error: E | None = None
    _metadata: M | dict = field(factory=dict)

    @classmethod
    def ok(cls, data: T | None = None, metadata: M | None = None) -> "Result[T, E, M]":
        return cls(True, data, None, metadata if metadata is not None else {})

    @classmethod
    def fail(cls, error: E, metadata: M | None = None) -> "Result[T, E, M]":
        return cls(False, None, error, metadata if metadata is not None else {})

    @staticmethod
    def iterate(results: Iterable["Result"] | None = None) -> Iterator["Result"]:
        """Wrap results in an iterator that replays on direction change."""
        return Iterator.create(initial_data=results, return_current_on_reversion=True)

    @classmethod
    def combine(cls, results: Iterable["Result"]) -> "Result":
        """Return the first failure, or the first result when all succeeded.

        An empty collection is itself a failure.
        """
        iterator = cls.iterate(results)
        if iterator.is_empty():
            return cls.fail(COMBINE_EMPTY_ERROR)
        while iterator.has_next():
            current = iterator.next()
            if current.is_fail():
                return current
        return iterator.first()

    def execute(self, command: Command) -> ResultExecution:
        """Run ``command`` on success or failure.

        Example:
            >>> result.execute(notify).on("fail")
            >>> result.execute(notify).with_data(payload).on("success")
        """
        return ResultExecution(self, command)

    def matches(self, option: ResultOption) -> bool:
        return (option == "success" and self._is_ok) or (option == "fail" and not self._is_ok)

    def value(self) -> T | None:
        return self._data

    def error(self) -> E | None:
        return self._error

    def metadata(self) -> M | dict:
        return self._metadata

    def is_ok(self) -> bool:
        return self._is_ok

    def is_fail(self) -> bool:
        return not self._is_ok

    def to_object(self) -> dict[str, Any]:
        return {
            "is_ok": self._is_ok,
            "is_fail": not self._is_ok,
            "data": self._data,
            "error": self._error,
            "metadata": self._metadata,
        }


def ok(data: Any = None, metadata: Any = None) -> Result:
    """Create a success result."""
    return Result.ok(data, metadata)


def fail(error: Any = None, metadata: Any = None) -> Result:
    """Create a failure result. A missing error gets a placeholder message."""
    return Result.fail(error if error is not None else VOID_ERROR, metadata)
