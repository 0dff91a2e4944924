# erraccum/__init__.py
"""
erraccum - deferred error accumulation

Register everything that might be wrong, then fail once with a single
aggregate error that lists every entry in order.

Basic usage:
    >>> from erraccum import Accumulator
    >>> acc = Accumulator()
    >>> acc.add(None).add("").add([])       # ignored
    >>> acc.has()
    False
    >>> acc.add("bad value").add(ValueError("boom"))
    >>> [r.message for r in acc.errors()]
    ['str: "bad value"', 'boom']
    >>> acc.try_()                          # raises AccumulatedError

Merging:
    >>> fields = Accumulator().add(ValueError("name is empty"))
    >>> acc = Accumulator().add(fields).add([check_a(), check_b()])

Only errors:
    >>> acc.err(user.email or ValueError("email missing"))

Configuration (optional YAML, code defaults otherwise):
    >>> from erraccum import Accumulator, load_config
    >>> acc = Accumulator(config=load_config("erraccum.yml"))
"""

__version__ = "0.1.0"

from .core.accumulator import Accumulator, BASE_FRAME_OFFSET, SEQUENCE_FRAME_INCREMENT
from .core.classify import Classification, ErrorSource, classify
from .core.errors import AccumulatedError, ConfigError
from .core.record import ErrorRecord
from .core.render import encode, render_value
from .core.trace import NullTraceProvider, StackTraceProvider, TraceProvider
from .config import AccumulatorConfig, ConfigIssue, load_config, validate_config

__all__ = [
    # Version
    "__version__",

    # User-facing API
    "Accumulator",
    "ErrorRecord",
    "AccumulatedError",
    "ConfigError",

    # Classification
    "Classification",
    "ErrorSource",
    "classify",

    # Rendering
    "encode",
    "render_value",

    # Trace capture
    "TraceProvider",
    "StackTraceProvider",
    "NullTraceProvider",
    "BASE_FRAME_OFFSET",
    "SEQUENCE_FRAME_INCREMENT",

    # Configuration
    "AccumulatorConfig",
    "ConfigIssue",
    "load_config",
    "validate_config",
]
