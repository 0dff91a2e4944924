# erraccum/config/validator.py
"""
Configuration Validator

Validates configuration for illegal/misleading combinations.
Returns structured issues with level (warn/error), path, message, hint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, TYPE_CHECKING

if TYPE_CHECKING:
    from .loader import AccumulatorConfig


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "accumulator.trace_limit"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"[{self.level}] [{self.path}] {self.message}{hint_str}"


def validate_config(config: "AccumulatorConfig") -> List[ConfigIssue]:
    """
    Validate configuration for illegal/misleading combinations.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    if not isinstance(config.capture_traces, bool):
        issues.append(ConfigIssue(
            level="error",
            path="accumulator.capture_traces",
            message=f"Invalid capture_traces value: {config.capture_traces!r} (must be true or false)",
            hint="Set accumulator.capture_traces to true or false",
        ))

    limit = config.trace_limit
    if limit is not None:
        if isinstance(limit, bool) or not isinstance(limit, int):
            issues.append(ConfigIssue(
                level="error",
                path="accumulator.trace_limit",
                message=f"Invalid trace_limit value: {limit!r} (must be a positive integer or null)",
                hint="Set accumulator.trace_limit to a positive integer, or remove it for full traces",
            ))
        elif limit < 1:
            issues.append(ConfigIssue(
                level="error",
                path="accumulator.trace_limit",
                message=f"trace_limit={limit} would drop every frame",
                hint="Set accumulator.trace_limit to 1 or more",
            ))
        elif config.capture_traces is False:
            issues.append(ConfigIssue(
                level="warn",
                path="accumulator.trace_limit",
                message="trace_limit has no effect when capture_traces=false",
                hint="Set accumulator.capture_traces=true to keep call sites",
            ))

    return issues


__all__ = [
    "ConfigIssue",
    "validate_config",
]
