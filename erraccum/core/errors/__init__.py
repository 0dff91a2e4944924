# erraccum/core/errors/__init__.py
"""
Core error types for erraccum.

This package defines the components responsible for:
- Naming accumulated records
- Representing the aggregate failure
- Reporting invalid configuration

No side effects on import.
"""

from . import codes
from .exceptions import AccumulatedError, ConfigError

__all__ = [
    "codes",
    "AccumulatedError",
    "ConfigError",
]
