# erraccum/core/accumulator.py
"""
Accumulator

Collects "things that might be wrong" without failing, then raises one
aggregate failure at a point the caller chooses:

    >>> acc = Accumulator()
    >>> acc.add(check_name(form)).add(check_email(form)).add(sub_acc)
    >>> acc.try_()   # raises AccumulatedError if anything was collected

Frame bookkeeping:
    Synthesized records capture the call stack and drop the accumulator's
    own frames so the trace starts at the code that called add()/err().
    BASE_FRAME_OFFSET covers the public method plus the first _merge frame;
    every level of sequence recursion adds SEQUENCE_FRAME_INCREMENT.
"""

from __future__ import annotations

from typing import Any, Final, List, Optional
import logging

from ..config import AccumulatorConfig
from .aggregate import build_aggregate
from .classify import Classification, classify
from .errors import AccumulatedError, ConfigError
from .record import ErrorRecord, record_from_error
from .synthesize import synthesize_record
from .trace import NullTraceProvider, StackTraceProvider, TraceProvider

logger = logging.getLogger(__name__)

BASE_FRAME_OFFSET: Final[int] = 2
SEQUENCE_FRAME_INCREMENT: Final[int] = 1


class Accumulator:
    """
    Ordered, append-only collection of ErrorRecord.

    Not thread-safe: callers sharing one instance across threads must
    serialize add()/err() themselves.
    """

    def __init__(
        self,
        *,
        config: Optional[AccumulatorConfig] = None,
        trace_provider: Optional[TraceProvider] = None,
    ) -> None:
        self.config = config or AccumulatorConfig.default()
        self._check_config(self.config)
        self._records: List[ErrorRecord] = []
        self._trace_provider = trace_provider or self._default_trace_provider(self.config)

    # ---- public API ----

    def add(self, value: Any) -> "Accumulator":
        """Accumulate ``value``. Never raises; returns self for chaining."""
        before = len(self._records)
        self._merge(value, BASE_FRAME_OFFSET, errors_only=False)
        self._log_added(before)
        return self

    def err(self, value: Any) -> "Accumulator":
        """
        Accumulate only error-like values and nested accumulators.

        Anything else (including values that add() would synthesize a
        record for) is dropped, so ``acc.err(result or ValueError("..."))``
        records the error only when ``result`` is missing.
        """
        before = len(self._records)
        self._merge(value, BASE_FRAME_OFFSET, errors_only=True)
        self._log_added(before)
        return self

    def has(self) -> bool:
        return len(self._records) > 0

    def try_(self) -> "Accumulator":
        """Raise the aggregate error if anything was accumulated, else return self."""
        error = self.error()
        if error is None:
            return self
        logger.debug("raising aggregate of %d record(s)", len(error.records))
        raise error

    def error(self) -> Optional[AccumulatedError]:
        return build_aggregate(self._records)

    def errors(self) -> List[ErrorRecord]:
        """Snapshot of the accumulated records, in insertion order."""
        return list(self._records)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(records={len(self._records)})"

    # ---- internals ----

    def _merge(self, value: Any, frame_offset: int, errors_only: bool) -> None:
        tag = classify(value)

        if tag is Classification.PASSTHROUGH_ERROR:
            self._records.append(record_from_error(value))

        elif tag is Classification.NESTED_ACCUMULATOR:
            self._records.extend(self._source_records(value))

        elif tag is Classification.SEQUENCE:
            for item in value:
                self._merge(item, frame_offset + SEQUENCE_FRAME_INCREMENT, errors_only)

        elif tag is Classification.OPAQUE and not errors_only:
            self._records.append(synthesize_record(value, frame_offset, self._trace_provider))

    def _source_records(self, source: Any) -> List[ErrorRecord]:
        try:
            entries = list(source.errors())
        except Exception as e:
            # a broken foreign accumulator still leaves a trace of itself
            logger.debug("could not read records from %r", source, exc_info=True)
            return [record_from_error(e)]
        return [e if isinstance(e, ErrorRecord) else record_from_error(e) for e in entries]

    def _log_added(self, before: int) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "accumulated %d record(s) (total=%d)",
                len(self._records) - before,
                len(self._records),
            )

    @staticmethod
    def _check_config(config: AccumulatorConfig) -> None:
        issues = config.validate()
        errors = [i for i in issues if i.level == "error"]
        if errors:
            raise ConfigError(errors)
        for issue in issues:
            logger.warning("accumulator config: %s", issue)

    @staticmethod
    def _default_trace_provider(config: AccumulatorConfig) -> TraceProvider:
        if not config.capture_traces:
            return NullTraceProvider()
        return StackTraceProvider(limit=config.trace_limit)
