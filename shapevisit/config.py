"""
Configuration schema for shape surveys.

Defines which operations a survey runs and how it logs. Shapes themselves
are never part of the configuration.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import logging

import yaml

from shapevisit.logging import StructuredLogger, LogEvent


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class LoggingConfig:
    """Structured logging configuration."""

    level: str = "INFO"
    component: str = "shapevisit"

    def __post_init__(self):
        """Validate logging configuration."""
        if self.level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )

        if not self.component:
            raise ValueError("component cannot be empty")

    @property
    def level_number(self) -> int:
        return getattr(logging, self.level)


@dataclass(frozen=True)
class SurveyConfig:
    """
    Main configuration for ShapeSurvey.

    Loaded from YAML and validated at construction.
    Immutable after construction (frozen dataclass).
    """

    operations: List[str] = field(default_factory=lambda: ["area", "perimeter"])
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        """Validate survey configuration."""
        if not self.operations:
            raise ValueError("operations cannot be empty")

        non_strings = [op for op in self.operations if not isinstance(op, str) or not op]
        if non_strings:
            raise ValueError(f"operations must be non-empty names, got {non_strings}")

        duplicates = sorted({op for op in self.operations if self.operations.count(op) > 1})
        if duplicates:
            raise ValueError(f"Duplicate operations: {duplicates}")

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "SurveyConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            operations:
              - area
              - perimeter

            logging:
              level: "DEBUG"
              component: "survey"

        Raises:
            FileNotFoundError: If yaml_path does not exist
            ValueError: If a section fails validation
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"{yaml_path}: top level must be a mapping, got {type(data).__name__}")

        logging_data = data.get("logging") or {}
        if not isinstance(logging_data, dict):
            raise ValueError(f"{yaml_path}: 'logging' must be a mapping, got {type(logging_data).__name__}")

        unknown = sorted(set(logging_data) - {"level", "component"})
        if unknown:
            raise ValueError(f"{yaml_path}: unknown 'logging' keys: {unknown}")
        logging_config = LoggingConfig(**logging_data)

        # A bare string names a single operation
        operations = data.get("operations", ["area", "perimeter"])
        if isinstance(operations, str):
            operations = [operations]
        elif operations is None:
            operations = []
        elif not isinstance(operations, list):
            raise ValueError(
                f"{yaml_path}: 'operations' must be a list of names, got {type(operations).__name__}"
            )

        return cls(
            operations=operations,
            logging=logging_config,
        )


def load_survey_config(yaml_path: Path, logger: Optional[StructuredLogger] = None) -> SurveyConfig:
    """
    Load SurveyConfig from YAML, logging the outcome when a logger is given.

    Raises:
        FileNotFoundError: If yaml_path does not exist
        ValueError: If a section fails validation
    """
    try:
        config = SurveyConfig.from_yaml(yaml_path)
    except (TypeError, ValueError) as e:
        if logger is not None:
            logger.error(
                event=LogEvent.CONFIG_INVALID,
                message=f"Invalid survey config: {yaml_path}",
                metadata={'path': str(yaml_path)},
                exc_info=e,
            )
        raise

    if logger is not None:
        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message=f"Loaded survey config: {yaml_path}",
            metadata={'path': str(yaml_path), 'operations': list(config.operations)},
        )
    return config
