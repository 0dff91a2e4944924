# erraccum/core/record/__init__.py
"""
Record types for erraccum.

No side effects on import.
"""

from .record import ErrorRecord, record_from_error

__all__ = [
    "ErrorRecord",
    "record_from_error",
]
