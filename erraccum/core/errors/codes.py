# erraccum/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- record names (stable public contract) ----
# generic tag for synthesized records and nameless error-likes
ERROR: Final[str] = "Error"


# ---- placeholders ----

# Suffix of the single trace line used when no trace can be obtained.
NO_TRACE_AVAILABLE: Final[str] = "no trace available"


def no_trace_line(name: str) -> str:
    """Deterministic one-line trace for records without a usable trace."""
    return f"{name}: {NO_TRACE_AVAILABLE}"
