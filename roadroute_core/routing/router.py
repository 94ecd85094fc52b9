"""Router - Request routing engine.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from roadroute_core.routing.matcher import PathMatcher
from roadroute_core.routing.params import RouteParameters
from roadroute_core.utils.config import RouteConfigError, RouterConfig
from roadroute_core.utils.helpers import normalize_methods

logger = logging.getLogger(__name__)


@dataclass
class Route:
    """Route definition."""

    pattern: str
    handler: Optional[Callable] = None
    methods: List[str] = field(default_factory=lambda: ["*"])
    name: str = ""
    priority: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)

    _matcher: PathMatcher = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Build the path matcher."""
        self.methods = normalize_methods(self.methods)
        self._matcher = PathMatcher(self.pattern)

    @property
    def matcher(self) -> PathMatcher:
        return self._matcher

    def allows(self, method: str) -> bool:
        """Check if route accepts the HTTP method."""
        return "*" in self.methods or method.upper() in self.methods

    def matches(self, path: str, method: str = "GET") -> Optional[RouteParameters]:
        """Check if route matches path and method.

        Returns:
            RouteParameters if match, None otherwise
        """
        if not self.allows(method):
            return None

        return self._matcher.match(path)


class Router:
    """Request Router.

    Features:
    - Path parameters (/users/:id)
    - Method filtering
    - Route prioritization
    - Route tables from configuration

    Usage:
        router = Router()
        router.add("/users/:id", handler=get_user, methods=["GET"])

        match = router.match("/users/123", "GET")
        if match:
            route, params = match
    """

    def __init__(self, log_unmatched: bool = False):
        self._routes: List[Route] = []
        self._lock = threading.RLock()
        self.log_unmatched = log_unmatched

    @classmethod
    def from_config(
        cls,
        config: RouterConfig,
        handlers: Optional[Dict[str, Callable]] = None,
    ) -> "Router":
        """Build a router from the routes declared in config.

        Args:
            config: Router configuration
            handlers: Handler callables by name

        Raises:
            RouteConfigError: If a route names an unknown handler
        """
        handlers = handlers or {}
        router = cls(log_unmatched=config.log_unmatched)

        for entry in config.routes:
            handler = None
            if entry.handler:
                if entry.handler not in handlers:
                    raise RouteConfigError(
                        f"Unknown handler '{entry.handler}' for route {entry.pattern}"
                    )
                handler = handlers[entry.handler]

            router._register(Route(
                pattern=entry.pattern,
                handler=handler,
                methods=entry.methods,
                name=entry.name,
                priority=entry.priority,
                metadata=dict(entry.metadata),
            ))

        return router

    def add(
        self,
        pattern: str,
        handler: Optional[Callable] = None,
        methods: Optional[List[str]] = None,
        name: str = "",
        priority: int = 0,
        **kwargs,
    ) -> "Router":
        """Add a route.

        Args:
            pattern: URL pattern
            handler: Request handler function
            methods: HTTP methods
            name: Route name
            priority: Route priority
        """
        route = Route(
            pattern=pattern,
            handler=handler,
            methods=methods or ["*"],
            name=name,
            priority=priority,
            metadata=kwargs,
        )
        return self._register(route)

    def _register(self, route: Route) -> "Router":
        """Insert a route keeping priority order."""
        with self._lock:
            self._routes.append(route)
            # Stable sort keeps registration order within a priority
            self._routes.sort(key=lambda r: r.priority, reverse=True)

        logger.debug(
            f"Added route {route.pattern} methods={','.join(route.methods)} "
            f"priority={route.priority}"
        )
        return self

    def match(
        self,
        path: str,
        method: str = "GET",
    ) -> Optional[Tuple[Route, RouteParameters]]:
        """Match a request to a route.

        Args:
            path: Request path
            method: HTTP method

        Returns:
            Tuple of (route, params) if match, None otherwise
        """
        with self._lock:
            routes = list(self._routes)

        for route in routes:
            params = route.matches(path, method)
            if params is not None:
                logger.debug(f"{method} {path} -> {route.name or route.pattern}")
                return route, params

        if self.log_unmatched:
            logger.info(f"No route for {method} {path}")
        else:
            logger.debug(f"No route for {method} {path}")
        return None

    def remove(self, name: str) -> bool:
        """Remove a route by name."""
        with self._lock:
            for i, route in enumerate(self._routes):
                if route.name == name:
                    self._routes.pop(i)
                    logger.debug(f"Removed route {name}")
                    return True
        return False

    def get_routes(self) -> List[Route]:
        """Get all routes."""
        with self._lock:
            return self._routes.copy()

    def get(self, pattern: str, **kwargs) -> "Router":
        """Add GET route."""
        return self.add(pattern, methods=["GET"], **kwargs)

    def post(self, pattern: str, **kwargs) -> "Router":
        """Add POST route."""
        return self.add(pattern, methods=["POST"], **kwargs)

    def put(self, pattern: str, **kwargs) -> "Router":
        """Add PUT route."""
        return self.add(pattern, methods=["PUT"], **kwargs)

    def delete(self, pattern: str, **kwargs) -> "Router":
        """Add DELETE route."""
        return self.add(pattern, methods=["DELETE"], **kwargs)

    def patch(self, pattern: str, **kwargs) -> "Router":
        """Add PATCH route."""
        return self.add(pattern, methods=["PATCH"], **kwargs)

    def __len__(self) -> int:
        with self._lock:
            return len(self._routes)


__all__ = [
    "Router",
    "Route",
]
