# erraccum/config/__init__.py
"""
Accumulator configuration

YAML is input parameters, code has defaults (YAML can be deleted).
"""

from .loader import AccumulatorConfig, DEFAULT_CONFIG_PATH, load_config
from .validator import ConfigIssue, validate_config

__all__ = [
    "AccumulatorConfig",
    "DEFAULT_CONFIG_PATH",
    "ConfigIssue",
    "load_config",
    "validate_config",
]
