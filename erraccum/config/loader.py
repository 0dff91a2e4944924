# erraccum/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

import yaml

from .validator import ConfigIssue, validate_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".erraccum" / "config.yml"


@dataclass(frozen=True)
class AccumulatorConfig:
    """
    Accumulator configuration.

    capture_traces: record the call site of synthesized records
    trace_limit:    keep at most this many frames per synthesized trace
    """
    capture_traces: bool = True
    trace_limit: Optional[int] = None

    @classmethod
    def default(cls) -> "AccumulatorConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccumulatorConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in data if k not in known)
        if unknown:
            logger.warning("Ignoring unknown accumulator config keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "AccumulatorConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries ~/.erraccum/config.yml

        Returns:
            AccumulatorConfig instance (always has code defaults as fallback)
        """
        yaml_data = _load_yaml(config_path)
        if not yaml_data:
            return cls.default()

        section = yaml_data.get("accumulator")
        if not isinstance(section, dict):
            return cls.default()
        return cls.from_dict(section)

    def validate(self) -> List[ConfigIssue]:
        return validate_config(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "accumulator": {
                "capture_traces": self.capture_traces,
                "trace_limit": self.trace_limit,
            },
        }


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not path.exists():
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Could not read config %s, using defaults: %s", path, e)
        return None

    if not isinstance(data, dict):
        return None
    return data


def load_config(config_path: Optional[Path] = None) -> AccumulatorConfig:
    """
    Load accumulator configuration.

    Note:
        - If YAML is not found or invalid, returns code defaults
        - Values are not validated here; see AccumulatorConfig.validate()
    """
    return AccumulatorConfig.from_yaml(config_path)


__all__ = [
    "AccumulatorConfig",
    "DEFAULT_CONFIG_PATH",
    "load_config",
]
