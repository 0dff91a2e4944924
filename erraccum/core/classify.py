# erraccum/core/classify.py
"""
Classifier

Maps any value handed to Accumulator.add() onto the closed set of
Classification tags. The accumulator dispatches on the tag once per value.

Checks run in a fixed order:
1. PASSTHROUGH_ERROR   exceptions, records, error-like objects/mappings
2. NESTED_ACCUMULATOR  anything implementing ErrorSource
3. SEQUENCE            list / tuple (empty ones too)
4. IGNORABLE           falsy, NaN, structurally-empty records
5. OPAQUE              everything else
"""

from __future__ import annotations

from enum import Enum
from types import SimpleNamespace
from typing import Any, List, Mapping, Optional, Protocol, runtime_checkable
import numbers

from .record import ErrorRecord

SEQUENCE_TYPES = (list, tuple)

_TRACE_FIELDS = ("trace", "stack")


class Classification(str, Enum):
    """How a value contributes records"""
    IGNORABLE = "ignorable"
    PASSTHROUGH_ERROR = "passthrough_error"
    NESTED_ACCUMULATOR = "nested_accumulator"
    SEQUENCE = "sequence"
    OPAQUE = "opaque"


@runtime_checkable
class ErrorSource(Protocol):
    """
    Anything that accumulates records and can be merged into an accumulator.
    """

    def add(self, value: Any) -> Any:
        ...

    def has(self) -> bool:
        ...

    def error(self) -> Optional[Any]:
        ...

    def errors(self) -> List[ErrorRecord]:
        ...


def _has_attr(obj: Any, name: str) -> bool:
    try:
        return hasattr(obj, name)
    except Exception:
        return False


def is_error_like(value: Any) -> bool:
    if isinstance(value, (BaseException, ErrorRecord)):
        return True
    if isinstance(value, Mapping):
        try:
            return "message" in value and any(k in value for k in _TRACE_FIELDS)
        except Exception:
            return False
    return _has_attr(value, "message") and any(_has_attr(value, k) for k in _TRACE_FIELDS)


def is_error_source(value: Any) -> bool:
    if isinstance(value, type):
        # the class itself, not an instance
        return False
    try:
        return isinstance(value, ErrorSource)
    except Exception:
        return False


def _is_nan(value: Any) -> bool:
    if not isinstance(value, numbers.Number):
        return False
    try:
        return bool(value != value)
    except Exception:
        return False


def _is_empty_record(value: Any) -> bool:
    if type(value) is object:
        return True
    if isinstance(value, SimpleNamespace):
        return not vars(value)
    if isinstance(value, type) or callable(value):
        return False
    try:
        attrs = vars(value)
        has_slots = hasattr(type(value), "__slots__")
    except Exception:
        # no instance __dict__ (builtins, slotted classes)
        return False
    # plain instance without a single attribute
    return isinstance(attrs, dict) and not attrs and not has_slots


def is_ignorable(value: Any) -> bool:
    try:
        if not value:
            return True
    except Exception:
        # ambiguous truth value (array-likes and friends)
        return False
    return _is_nan(value) or _is_empty_record(value)


def classify(value: Any) -> Classification:
    """Classify ``value``. Total over all inputs, never raises."""
    if is_error_like(value):
        return Classification.PASSTHROUGH_ERROR
    if is_error_source(value):
        return Classification.NESTED_ACCUMULATOR
    if isinstance(value, SEQUENCE_TYPES):
        return Classification.SEQUENCE
    if is_ignorable(value):
        return Classification.IGNORABLE
    return Classification.OPAQUE
