"""
Configuration schema for the solid-shapes CLI.

Defines the list of shapes to measure and the logging level, loaded from
YAML and validated at construction.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Union
import yaml


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _coerce_number(value):
    """Parse numeric strings as float; leave everything else untouched."""
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    return value


@dataclass(frozen=True)
class ShapeConfig:
    """Single shape entry: registry kind plus keyword dimensions."""

    kind: str
    dimensions: Dict[str, float] = field(default_factory=dict)

    def __post_init__(self):
        """Validate shape configuration."""
        if not isinstance(self.kind, str) or not self.kind:
            raise ValueError(f"Shape kind must be a non-empty string, got {self.kind!r}")

        if not isinstance(self.dimensions, dict):
            raise ValueError(
                f"Dimensions for '{self.kind}' must be a mapping, "
                f"got {type(self.dimensions).__name__}"
            )

        for name in self.dimensions:
            if not isinstance(name, str):
                raise ValueError(
                    f"Dimension names for '{self.kind}' must be strings, got {name!r}"
                )

        # PyYAML reads exponents without a dot (1e3) as strings
        object.__setattr__(
            self,
            'dimensions',
            {name: _coerce_number(value) for name, value in self.dimensions.items()},
        )


@dataclass(frozen=True)
class CalculatorConfig:
    """
    Main configuration for the CLI.

    Immutable after construction (frozen dataclass).
    """

    shapes: List[ShapeConfig] = field(default_factory=list)
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate calculator configuration."""
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )

    @property
    def logging_level(self) -> int:
        """log_level as a stdlib logging constant."""
        return getattr(logging, self.log_level)

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "CalculatorConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            log_level: INFO

            shapes:
              - kind: square
                dimensions: {length: 10}
              - kind: rectangle
                dimensions: {width: 10, height: 20}
              - kind: cube
                dimensions: {edge: 6}

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If YAML is invalid or doesn't match the schema
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping in {path}")

        shapes_data = data.get("shapes") or []
        if not isinstance(shapes_data, list):
            raise ValueError(f"'shapes' must be a list in {path}")

        shapes = []
        for index, entry in enumerate(shapes_data):
            if not isinstance(entry, dict):
                raise ValueError(f"Shape #{index} must be a mapping in {path}")
            try:
                shapes.append(
                    ShapeConfig(
                        kind=entry["kind"],
                        dimensions=entry.get("dimensions") or {},
                    )
                )
            except KeyError as e:
                raise ValueError(f"Shape #{index} missing required field: {e}") from e

        return cls(
            shapes=shapes,
            log_level=str(data.get("log_level", "WARNING")).upper(),
        )
