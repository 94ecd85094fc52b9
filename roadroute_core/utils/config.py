"""Configuration utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar

from roadroute_core.utils.helpers import normalize_methods, setup_logging

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="RouterConfig")

DEFAULT_ENV_PREFIX = "ROADROUTE_"


class ConfigSource(Enum):
    """Configuration sources."""

    FILE = auto()
    ENV = auto()
    DICT = auto()
    DEFAULT = auto()


@dataclass
class RouteSpec:
    """Route entry declared in configuration."""

    pattern: str
    methods: List[str] = field(default_factory=lambda: ["*"])
    name: str = ""
    handler: str = ""
    priority: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "RouteSpec":
        """Create a route entry from a mapping."""
        if not isinstance(data, dict):
            raise RouteConfigError(f"Route entry must be a mapping, got {type(data).__name__}")
        if not data.get("pattern"):
            raise RouteConfigError(f"Route entry missing pattern: {data}")

        known = {"pattern", "methods", "name", "handler", "priority", "metadata"}
        metadata = dict(data.get("metadata") or {})
        metadata.update({k: v for k, v in data.items() if k not in known})

        return cls(
            pattern=str(data["pattern"]),
            methods=normalize_methods(data.get("methods")),
            name=str(data.get("name") or ""),
            handler=str(data.get("handler") or ""),
            priority=int(data.get("priority", 0)),
            metadata=metadata,
        )


@dataclass
class RouterConfig:
    """Router configuration."""

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"
    log_unmatched: bool = False

    # Route table
    routes: List[RouteSpec] = field(default_factory=list)

    source: ConfigSource = field(default=ConfigSource.DEFAULT, compare=False)

    def __post_init__(self):
        """Normalize route entries."""
        self.routes = [
            route if isinstance(route, RouteSpec) else RouteSpec.from_dict(route)
            for route in self.routes or []
        ]

    @classmethod
    def from_dict(
        cls: Type[T],
        data: Dict[str, Any],
        source: ConfigSource = ConfigSource.DICT,
    ) -> T:
        """Create config from dictionary.

        Raises:
            RouteConfigError: If data is not a mapping
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise RouteConfigError(
                f"Config root must be a mapping, got {type(data).__name__}"
            )

        # Filter to only valid fields
        valid_fields = {
            f.name for f in cls.__dataclass_fields__.values() if f.name != "source"
        }
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(source=source, **filtered)

    @classmethod
    def from_json(cls: Type[T], path: str) -> T:
        """Load config from JSON file."""
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data, source=ConfigSource.FILE)

    @classmethod
    def from_yaml(cls: Type[T], path: str) -> T:
        """Load config from YAML file."""
        try:
            import yaml
        except ImportError:
            raise ImportError("PyYAML required for YAML config")

        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data, source=ConfigSource.FILE)

    @classmethod
    def from_env(cls: Type[T], prefix: str = DEFAULT_ENV_PREFIX) -> T:
        """Load config from environment variables.

        Only scalar settings are read; routes come from files.
        """
        return cls.from_dict(_read_env(prefix), source=ConfigSource.ENV)

    def configure_logging(self, stream: Optional[Any] = None) -> logging.Logger:
        """Apply log_level and log_format to the package logger."""
        return setup_logging(self.log_level, self.log_format, stream=stream)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "log_level": self.log_level,
            "log_format": self.log_format,
            "log_unmatched": self.log_unmatched,
            "routes": [
                {
                    "pattern": r.pattern,
                    "methods": list(r.methods),
                    "name": r.name,
                    "handler": r.handler,
                    "priority": r.priority,
                    "metadata": dict(r.metadata),
                }
                for r in self.routes
            ],
        }

    def merge(self, overrides: Dict[str, Any]) -> "RouterConfig":
        """Merge explicit overrides (overrides take precedence)."""
        data = self.to_dict()
        data.update(overrides)
        return RouterConfig.from_dict(data, source=self.source)


def _read_env(prefix: str) -> Dict[str, Any]:
    """Collect scalar settings from prefixed environment variables."""
    data: Dict[str, Any] = {}
    defaults = RouterConfig().to_dict()

    for key, value in os.environ.items():
        if key.startswith(prefix):
            config_key = key[len(prefix):].lower()
            if config_key == "routes":
                continue

            # Type conversion, string settings stay strings
            if isinstance(defaults.get(config_key), str):
                data[config_key] = value
            elif value.lower() in ("true", "false"):
                data[config_key] = value.lower() == "true"
            elif value.isdigit():
                data[config_key] = int(value)
            else:
                try:
                    data[config_key] = float(value)
                except ValueError:
                    data[config_key] = value

    return data


def load_config(
    path: Optional[str] = None,
    env_prefix: str = DEFAULT_ENV_PREFIX,
) -> RouterConfig:
    """Load configuration from multiple sources.

    Priority (highest to lowest):
    1. Environment variables
    2. Config file (if provided)
    3. Defaults
    """
    config = RouterConfig()

    # Load from file if provided
    if path:
        path_obj = Path(path)
        if not path_obj.exists():
            logger.warning(f"Config file not found: {path}")
        elif path.endswith(".json"):
            config = RouterConfig.from_json(path)
        elif path.endswith((".yaml", ".yml")):
            config = RouterConfig.from_yaml(path)
        else:
            logger.warning(f"Unknown config format: {path}")

    # Override with environment variables
    overrides = _read_env(env_prefix)
    if overrides:
        config = config.merge(overrides)

    logger.debug(
        f"Loaded config from {config.source.name.lower()} "
        f"with {len(config.routes)} route(s)"
    )
    return config


class RouteConfigError(ValueError):
    """Invalid route entry in configuration."""

    pass


__all__ = [
    "RouterConfig",
    "RouteSpec",
    "ConfigSource",
    "RouteConfigError",
    "load_config",
]
