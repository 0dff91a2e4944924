"""
Tests for call-site capture of synthesized records
"""

import inspect
import os

import pytest

from erraccum import (
    Accumulator,
    AccumulatorConfig,
    BASE_FRAME_OFFSET,
    NullTraceProvider,
    SEQUENCE_FRAME_INCREMENT,
    StackTraceProvider,
)
from erraccum.core.synthesize import RECORD_FRAMES

THIS_FILE = os.path.basename(__file__)
INTERNALS = os.path.join("erraccum", "core")


class RecordingProvider:
    """Stub provider that remembers every requested skip"""

    def __init__(self, frames="  stub frame"):
        self.frames = frames
        self.skips = []

    def capture(self, skip):
        self.skips.append(skip)
        return self.frames


class FailingProvider:
    def capture(self, skip):
        raise RuntimeError("stack unavailable")


def _capture_one_level_down(provider):
    return provider.capture(1)


def _frame_lines(trace):
    return [line for line in trace.splitlines() if line.startswith("  File ")]


class TestFrameOffsets:
    def test_top_level_value(self):
        provider = RecordingProvider()
        Accumulator(trace_provider=provider).add("x")

        assert provider.skips == [BASE_FRAME_OFFSET + RECORD_FRAMES]

    def test_each_sequence_level_adds_increment(self):
        provider = RecordingProvider()
        Accumulator(trace_provider=provider).add([["x"], "y"])

        base = BASE_FRAME_OFFSET + RECORD_FRAMES
        assert provider.skips == [
            base + 2 * SEQUENCE_FRAME_INCREMENT,
            base + SEQUENCE_FRAME_INCREMENT,
        ]

    def test_passthrough_does_not_capture(self):
        provider = RecordingProvider()
        Accumulator(trace_provider=provider).add(ValueError("boom"))

        assert provider.skips == []

    def test_trace_layout(self):
        acc = Accumulator(trace_provider=RecordingProvider()).add("x")

        assert acc.errors()[0].trace == 'Error: str: "x"\n  stub frame'


class TestDegradedTraces:
    @pytest.mark.parametrize("provider", [
        NullTraceProvider(),
        RecordingProvider(frames=None),
        RecordingProvider(frames=""),
        FailingProvider(),
    ])
    def test_placeholder_line(self, provider):
        acc = Accumulator(trace_provider=provider).add("x")

        assert acc.has()
        assert acc.errors()[0].trace == "Error: no trace available"

    def test_capture_disabled_by_config(self):
        acc = Accumulator(config=AccumulatorConfig(capture_traces=False)).add(1)

        assert acc.errors()[0].trace == "Error: no trace available"


class TestStackTraceProvider:
    def test_skip_discards_caller_frames(self):
        trace = _capture_one_level_down(StackTraceProvider())

        first = trace.splitlines()[0]
        assert THIS_FILE in first
        assert "in test_skip_discards_caller_frames" in first

    def test_skip_past_stack_returns_none(self):
        assert StackTraceProvider().capture(100_000) is None

    def test_limit(self):
        trace = _capture_one_level_down(StackTraceProvider(limit=2))
        assert len(_frame_lines(trace)) == 2


class TestCallSite:
    def test_blames_add_call_site(self):
        acc = Accumulator()
        line = inspect.currentframe().f_lineno + 1
        acc.add("here")

        trace = acc.errors()[0].trace
        header, first = trace.splitlines()[:2]
        assert header == 'Error: str: "here"'
        assert THIS_FILE in first
        assert f"line {line}," in first
        assert INTERNALS not in trace

    def test_nested_sequences_blame_outer_add(self):
        acc = Accumulator()
        line = inspect.currentframe().f_lineno + 1
        acc.add([[["deep"]], ["shallow"]])

        assert len(acc.errors()) == 2
        for record in acc.errors():
            first = record.trace.splitlines()[1]
            assert THIS_FILE in first
            assert f"line {line}," in first
            assert INTERNALS not in record.trace

    def test_trace_limit_from_config(self):
        acc = Accumulator(config=AccumulatorConfig(trace_limit=1)).add("x")

        trace = acc.errors()[0].trace
        frames = _frame_lines(trace)
        assert len(frames) == 1
        assert THIS_FILE in frames[0]
