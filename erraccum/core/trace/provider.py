# erraccum/core/trace/provider.py
"""
Call-trace capture

Synthesized records carry the call site that produced them. Capturing the
stack is a host capability, so it is injected into the accumulator as a
TraceProvider and can be replaced by a stub in tests.

Contract:
- capture(skip) is called by the record synthesizer
- skip counts frames to discard starting at the caller of capture()
- the returned text lists the remaining frames innermost first
- None means "no trace available"
"""

from __future__ import annotations

from typing import Optional, Protocol
import inspect
import traceback


class TraceProvider(Protocol):
    """
    Abstract trace capture interface
    """

    def capture(self, skip: int) -> Optional[str]:
        """Return the current call trace with ``skip`` leading frames dropped"""
        ...


class StackTraceProvider:
    """
    Captures the live interpreter stack.

    Frames are listed innermost first so the first line blames the code
    that called into the accumulator.
    """

    def __init__(self, limit: Optional[int] = None) -> None:
        self.limit = limit

    def capture(self, skip: int) -> Optional[str]:
        frame = inspect.currentframe()
        if frame is None:
            # interpreter without frame introspection
            return None

        try:
            frame = frame.f_back
            for _ in range(skip):
                if frame is None:
                    return None
                frame = frame.f_back
            if frame is None:
                return None

            summary = traceback.StackSummary.extract(
                traceback.walk_stack(frame),
                limit=self.limit,
            )
            return "".join(summary.format()).rstrip("\n") or None
        finally:
            del frame


class NullTraceProvider:
    """
    Null provider (no-op, for disabled trace capture)
    """

    def capture(self, skip: int) -> Optional[str]:
        return None
