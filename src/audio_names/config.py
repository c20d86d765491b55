"""Configuration for audio name resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .naming.loader import NamesLoader
from .naming.names import Names


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    def apply(self) -> None:
        """Configure the root logger. Existing handlers are kept; only the level changes then."""
        level = self.level.upper()
        logging.basicConfig(level=level, format=self.format)
        logging.getLogger().setLevel(level)


@dataclass
class Config:
    """Main configuration container."""
    names: Names = field(default_factory=Names)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> Config:
        """Create config from dictionary."""
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")
        try:
            logging_config = LoggingConfig(**(data.get("logging") or {}))
        except TypeError as e:
            raise ValueError(f"Invalid logging section: {e}") from e
        return cls(
            names=NamesLoader().load_dict(data.get("names")),
            logging=logging_config,
        )

    @classmethod
    def from_yaml(cls, path: str) -> Config:
        """Load config from YAML file."""
        import yaml
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_json(cls, path: str) -> Config:
        """Load config from JSON file."""
        import json
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: str) -> Config:
        """Load config from a YAML or JSON file, chosen by extension."""
        if str(path).endswith(".json"):
            return cls.from_json(path)
        return cls.from_yaml(path)

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the file layout."""
        return {
            "names": {
                "stream": [str(t) for t in self.names.stream],
                "endpoint": [str(t) for t in self.names.endpoint],
                "device": [str(t) for t in self.names.device],
                "overrides": [
                    {
                        "types": sorted(t.value for t in o.types),
                        "property": o.property.value,
                        "value": o.value,
                        "templates": [str(t) for t in o.templates],
                    }
                    for o in self.names.overrides
                ],
            },
            "logging": {"level": self.logging.level, "format": self.logging.format},
        }
