"""
Configuration schema for the hullfilter CLI.

This module defines the run configuration: document paths and keys, the
overlap threshold, worker count and log level.
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict
import yaml

from hullfilter_core.analytics.overlap import DEFAULT_OVERLAP_THRESHOLD
from hullfilter_io.schemas import INPUT_KEY, OUTPUT_KEY
from hullfilter_io.store import DEFAULT_INDENT, DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class FilterConfig:
    """
    Run configuration for the overlap filter.

    Loaded from YAML (optional) and validated at construction.
    Immutable after construction (frozen dataclass).
    """

    input_path: Path = DEFAULT_INPUT_PATH
    output_path: Path = DEFAULT_OUTPUT_PATH
    input_key: str = INPUT_KEY
    output_key: str = OUTPUT_KEY
    indent: int = DEFAULT_INDENT

    overlap_threshold: float = DEFAULT_OVERLAP_THRESHOLD
    max_workers: int = 1

    log_level: str = "INFO"

    def __post_init__(self):
        """Validate filter configuration."""
        for name in ("input_path", "output_path"):
            if not isinstance(getattr(self, name), (str, Path)):
                raise ValueError(f"{name} must be a path, got {getattr(self, name)!r}")

        for name in ("input_key", "output_key", "log_level"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string, got {getattr(self, name)!r}")

        # bool is an int subclass; YAML true/false must not pass as numbers
        for name in ("indent", "max_workers"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")

        if isinstance(self.overlap_threshold, bool) or not isinstance(
            self.overlap_threshold, (int, float)
        ):
            raise ValueError(
                f"overlap_threshold must be a number, got {self.overlap_threshold!r}"
            )

        object.__setattr__(self, "input_path", Path(self.input_path))
        object.__setattr__(self, "output_path", Path(self.output_path))
        object.__setattr__(self, "log_level", str(self.log_level).upper())

        if not self.input_key:
            raise ValueError("input_key cannot be empty")

        if not self.output_key:
            raise ValueError("output_key cannot be empty")

        if self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")

        if not 0.0 <= self.overlap_threshold:
            raise ValueError(
                f"overlap_threshold must be >= 0.0, got {self.overlap_threshold}"
            )

        if self.max_workers < 1:
            raise ValueError(
                f"max_workers must be >= 1, got {self.max_workers}"
            )

        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )

    @property
    def logging_level(self) -> int:
        """log_level as a logging module constant."""
        return getattr(logging, self.log_level)

    def with_overrides(self, **overrides: Any) -> "FilterConfig":
        """
        Copy of this config with non-None overrides applied.

        Used by the CLI so command-line flags win over the YAML file.
        """
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return FilterConfig(**values)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FilterConfig":
        """
        Build configuration from a mapping.

        Raises:
            ValueError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown config keys: {sorted(unknown)}. "
                f"Valid keys: {sorted(known)}"
            )
        return cls(**data)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "FilterConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            input_path: "convex_hulls.json"
            output_path: "result_convex_hulls.json"
            input_key: "convex hulls"
            output_key: "result convex hulls"
            indent: 3

            overlap_threshold: 0.5
            max_workers: 4

            log_level: "INFO"
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(yaml_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Config {yaml_path} must be a YAML mapping")

        return cls.from_dict(data)
