# erraccum/core/trace/__init__.py
from .provider import TraceProvider, StackTraceProvider, NullTraceProvider

__all__ = [
    "TraceProvider",
    "StackTraceProvider",
    "NullTraceProvider",
]
