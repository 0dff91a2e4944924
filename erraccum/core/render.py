# erraccum/core/render.py
"""
Display encoding for accumulated values.

encode() is the JSON-style text encoding used for synthesized messages;
encode_items() builds the aggregate ``message``/``name`` arrays one element
at a time. render_value() produces the type-tagged message of a
synthesized record.

None of them raises: anything json cannot encode falls back to repr().
"""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from datetime import date, time
from enum import Enum
from typing import Any, Iterable
import ast
import functools
import inspect
import json
import re


def _json_default(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    if isinstance(obj, (date, time)):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (bytes, bytearray)):
        return f"<{len(obj)} bytes>"
    attrs = getattr(obj, "__dict__", None)
    if isinstance(attrs, dict) and attrs:
        return attrs
    return repr(obj)


def encode(value: Any) -> str:
    """JSON-encode ``value`` for display."""
    try:
        return json.dumps(value, default=_json_default, ensure_ascii=False)
    except Exception:
        # circular references, non-string keys, failing __dict__ ...
        return json.dumps(_safe_repr(value), ensure_ascii=False)


def encode_items(values: Iterable[Any]) -> str:
    """
    JSON-encode ``values`` as an array, one element per value.

    Elements json cannot encode are replaced by their repr() on their own,
    so the result is always an array of the same length.
    """
    items = []
    for value in values:
        try:
            json.dumps(value, default=_json_default)
        except Exception:
            value = _safe_repr(value)
        items.append(value)
    return encode(items)


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return f"<unrepresentable {type(value).__name__}>"


# ---- type-tagged rendering ----

def _is_function(value: Any) -> bool:
    return inspect.isroutine(value) or isinstance(value, functools.partial)


def _lambda_source(source: str) -> str:
    # getsource() returns the whole statement holding the lambda; keep the
    # longest prefix starting at the first "lambda" that parses as one
    start = source.find("lambda")
    if start < 0:
        return source
    text = source[start:]
    for end in range(len(text), 0, -1):
        try:
            tree = ast.parse(text[:end], mode="eval")
        except (SyntaxError, ValueError):
            continue
        if isinstance(tree.body, ast.Lambda):
            return text[:end].strip()
    return source


def _function_source(value: Any) -> str:
    try:
        source = inspect.getsource(value).strip()
    except Exception:
        return _safe_repr(value)
    if getattr(value, "__name__", None) == "<lambda>":
        return _lambda_source(source)
    return source


def _blob_size(value: Any) -> int:
    if isinstance(value, memoryview):
        return value.nbytes
    return len(value)


def render_value(value: Any) -> str:
    """
    Render a non-error value as ``"<tag>: <text>"``.

    Strings go through encode() like any other value, so ``"hello"``
    renders as ``'str: "hello"'``.
    """
    try:
        if _is_function(value):
            return f"function: {_function_source(value)}"
        if isinstance(value, (date, time)):
            return f"Date: {value.isoformat()}"
        if isinstance(value, re.Pattern):
            pattern = value.pattern
            if isinstance(pattern, bytes):
                pattern = pattern.decode("utf-8", errors="replace")
            return f"RegExp: /{pattern}/"
        if isinstance(value, Enum):
            return f"Symbol: {type(value).__name__}.{value.name}"
        if isinstance(value, (bytes, bytearray, memoryview)):
            return f"Blob: {type(value).__name__} <{_blob_size(value)} bytes>"
    except Exception:
        return f"{type(value).__name__}: {encode(_safe_repr(value))}"

    return f"{type(value).__name__}: {encode(value)}"
