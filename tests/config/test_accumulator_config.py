"""
Tests for accumulator configuration loading and validation
"""

import logging

import pytest

from erraccum import AccumulatorConfig, ConfigIssue, load_config, validate_config


@pytest.fixture
def write_yaml(tmp_path):
    def _write(text):
        path = tmp_path / "config.yml"
        path.write_text(text, encoding="utf-8")
        return path
    return _write


class TestLoadConfig:
    def test_defaults(self):
        config = AccumulatorConfig.default()

        assert config.capture_traces is True
        assert config.trace_limit is None

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "missing.yml") == AccumulatorConfig.default()

    def test_yaml_values(self, write_yaml):
        path = write_yaml("accumulator:\n  capture_traces: false\n  trace_limit: 5\n")

        assert load_config(path) == AccumulatorConfig(capture_traces=False, trace_limit=5)

    def test_partial_yaml_keeps_code_defaults(self, write_yaml):
        path = write_yaml("accumulator:\n  trace_limit: 3\n")

        assert load_config(path) == AccumulatorConfig(capture_traces=True, trace_limit=3)

    def test_unknown_keys_are_ignored(self, write_yaml, caplog):
        path = write_yaml("accumulator:\n  trace_limit: 3\n  colour: blue\n")

        with caplog.at_level(logging.WARNING, logger="erraccum.config.loader"):
            config = load_config(path)

        assert config.trace_limit == 3
        assert "colour" in caplog.text

    def test_broken_yaml_gives_defaults(self, write_yaml, caplog):
        path = write_yaml("accumulator: [unclosed\n")

        with caplog.at_level(logging.WARNING, logger="erraccum.config.loader"):
            config = load_config(path)

        assert config == AccumulatorConfig.default()
        assert "using defaults" in caplog.text

    @pytest.mark.parametrize("text", ["- a\n- b\n", "accumulator: 3\n", ""])
    def test_unexpected_shapes_give_defaults(self, write_yaml, text):
        assert load_config(write_yaml(text)) == AccumulatorConfig.default()

    def test_to_dict(self):
        config = AccumulatorConfig(trace_limit=4)

        assert config.to_dict() == {"accumulator": {"capture_traces": True, "trace_limit": 4}}


class TestValidateConfig:
    def test_default_is_clean(self):
        assert validate_config(AccumulatorConfig.default()) == []
        assert AccumulatorConfig(trace_limit=10).validate() == []

    @pytest.mark.parametrize("config, path", [
        (AccumulatorConfig(trace_limit=0), "accumulator.trace_limit"),
        (AccumulatorConfig(trace_limit=-2), "accumulator.trace_limit"),
        (AccumulatorConfig(trace_limit="abc"), "accumulator.trace_limit"),
        (AccumulatorConfig(trace_limit=True), "accumulator.trace_limit"),
        (AccumulatorConfig(capture_traces="yes"), "accumulator.capture_traces"),
    ])
    def test_errors(self, config, path):
        issues = validate_config(config)

        assert [i.level for i in issues] == ["error"]
        assert issues[0].path == path

    def test_limit_without_capture_warns(self):
        issues = validate_config(AccumulatorConfig(capture_traces=False, trace_limit=5))

        assert [i.level for i in issues] == ["warn"]

    def test_issue_str(self):
        issue = ConfigIssue(level="warn", path="accumulator.trace_limit", message="m", hint="h")

        assert str(issue) == "[warn] [accumulator.trace_limit] m\n   Hint: h"
