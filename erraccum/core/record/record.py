# erraccum/core/record/record.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
import traceback

from ..errors import codes


_MISSING = object()


@dataclass(frozen=True)
class ErrorRecord:
    """
    One normalized accumulated entry.

    ``message`` keeps whatever type the source carried (structured
    messages survive); ``trace`` is always text.
    """
    name: str
    message: Any
    trace: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "message": self.message,
            "trace": self.trace,
        }


# ---------------------------
# Safe field access
# ---------------------------

def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


def _get_attr(obj: Any, name: str, default: Any = None) -> Any:
    try:
        return getattr(obj, name)
    except Exception:
        return default


def _get_mapping(d: Any, key: str, default: Any = None) -> Any:
    try:
        return d.get(key, default)
    except Exception:
        return default


def _as_trace(x: Any) -> Optional[str]:
    if isinstance(x, str) and x.strip():
        return x
    return None


# ---------------------------
# Passthrough
# ---------------------------

def _exception_message(exc: BaseException) -> Any:
    # error types that carry an explicit message field win over args
    message = _get_attr(exc, "message", _MISSING)
    if message is not _MISSING and not callable(message):
        return message

    args = _get_attr(exc, "args", ()) or ()
    if len(args) == 0:
        return None
    if len(args) == 1:
        return args[0]
    return list(args)


def _exception_trace(exc: BaseException) -> Optional[str]:
    trace = _as_trace(_get_attr(exc, "trace")) or _as_trace(_get_attr(exc, "stack"))
    if trace:
        return trace

    tb = _get_attr(exc, "__traceback__")
    if tb is None:
        return None
    try:
        return "".join(traceback.format_exception(type(exc), exc, tb)).rstrip("\n")
    except Exception:
        return None


def record_from_error(value: Any) -> ErrorRecord:
    """
    Build a record from an error-like value without re-wrapping it.

    Missing fields are replaced by placeholders: ``None`` for the message
    and a single "no trace available" line for the trace.
    """
    if isinstance(value, ErrorRecord):
        return value

    if isinstance(value, BaseException):
        name: Any = type(value).__name__
        message = _exception_message(value)
        trace = _exception_trace(value)
    elif isinstance(value, Mapping):
        name = _get_mapping(value, "name") or codes.ERROR
        message = _get_mapping(value, "message")
        trace = _as_trace(_get_mapping(value, "trace")) or _as_trace(_get_mapping(value, "stack"))
    else:
        name = _get_attr(value, "name") or codes.ERROR
        message = _get_attr(value, "message")
        trace = _as_trace(_get_attr(value, "trace")) or _as_trace(_get_attr(value, "stack"))

    name = _safe_str(name)
    return ErrorRecord(
        name=name,
        message=message,
        trace=trace or codes.no_trace_line(name),
    )
