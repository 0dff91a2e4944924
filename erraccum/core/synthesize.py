# erraccum/core/synthesize.py
from __future__ import annotations

from typing import Any, Final
import logging

from .errors import codes
from .record import ErrorRecord
from .render import render_value
from .trace import TraceProvider

logger = logging.getLogger(__name__)

# Frames owned by the synthesizer itself (synthesize_record), discarded on
# top of the caller-supplied frame offset.
RECORD_FRAMES: Final[int] = 1


def synthesize_record(value: Any, frame_offset: int, trace_provider: TraceProvider) -> ErrorRecord:
    """
    Build a record from a non-error value.

    ``frame_offset`` is the number of accumulator frames sitting between
    this function's caller and the user code that called ``add``.
    """
    name = codes.ERROR
    message = render_value(value)

    try:
        frames = trace_provider.capture(frame_offset + RECORD_FRAMES)
    except Exception:
        # accumulation must not crash because tracing failed
        logger.debug("trace capture failed", exc_info=True)
        frames = None

    if isinstance(frames, str) and frames:
        trace = f"{name}: {message}\n{frames}"
    else:
        trace = codes.no_trace_line(name)

    return ErrorRecord(name=name, message=message, trace=trace)
