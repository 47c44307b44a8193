"""Configuration management for listings."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List

import yaml

from ..errors import ConfigError
from ..nodes import DEFAULT_MAX_DEPTH

DEFAULT_LISTING_TEMPLATES = [
    # English Wikivoyage
    "listing", "see", "do", "buy", "eat", "drink", "sleep", "go", "marker", "vcard",
    # French Wikivoyage
    "voir", "faire", "acheter", "manger", "sortir", "se loger",
]

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Configuration for listing extraction."""

    listing_templates: List[str] = field(
        default_factory=lambda: list(DEFAULT_LISTING_TEMPLATES)
    )
    max_depth: int = DEFAULT_MAX_DEPTH
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not isinstance(self.listing_templates, list) or not all(
            isinstance(name, str) for name in self.listing_templates
        ):
            raise ConfigError("listing_templates must be a list of template names")
        self.listing_templates = [name.strip().lower() for name in self.listing_templates]

        # bool is an int subclass
        if not isinstance(self.max_depth, int) or isinstance(self.max_depth, bool):
            raise ConfigError(f"max_depth must be an integer, got {self.max_depth!r}")
        if self.max_depth < 1:
            raise ConfigError(f"max_depth must be positive, got {self.max_depth}")

        if not isinstance(self.log_level, str):
            raise ConfigError(f"log_level must be a string, got {self.log_level!r}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(config_path, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "listing_templates": self.listing_templates,
            "max_depth": self.max_depth,
            "log_level": self.log_level,
        }
