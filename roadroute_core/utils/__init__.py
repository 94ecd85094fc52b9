"""Utils module - Configuration and logging helpers."""

from roadroute_core.utils.config import (
    RouterConfig,
    RouteSpec,
    RouteConfigError,
    ConfigSource,
    load_config,
)
from roadroute_core.utils.helpers import (
    JSONFormatter,
    setup_logging,
    normalize_methods,
)

__all__ = [
    "RouterConfig",
    "RouteSpec",
    "RouteConfigError",
    "ConfigSource",
    "load_config",
    "JSONFormatter",
    "setup_logging",
    "normalize_methods",
]
