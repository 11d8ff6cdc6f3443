"""Core building blocks: identity, results, traversal, history and mapping."""

from . import validator
from .auto_mapper import AutoMapper, Shape
from .history import History, HistoryAction, HistoryEntry
from .identity import ID
from .iterator import Iterator, LastCommand
from .result import Command, Result, fail, ok
from .validator import DomainKind

__all__ = [
    "ID",
    "AutoMapper",
    "Command",
    "DomainKind",
    "History",
    "HistoryAction",
    "HistoryEntry",
    "Iterator",
    "LastCommand",
    "Result",
    "Shape",
    "fail",
    "ok",
    "validator",
]
