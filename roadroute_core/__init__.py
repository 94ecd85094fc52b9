"""RoadRoute - Route path matching for the BlackRoad gateway.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

RoadRoute decides whether a request path satisfies a route pattern and
extracts the values bound to its ``:name`` placeholders:

    /users/:user_id/friend/:friend_id
    /users/1/friend/2            ->  {user_id: "1", friend_id: "2"}

Request Flow:
1. Routes are registered on a Router (in code or from a config file)
2. Router tests each route's PathMatcher in priority order
3. First match returns (route, RouteParameters); no match returns None

Usage:
    from roadroute_core import Router

    router = Router()
    router.get("/users/:user_id", handler=get_user)

    match = router.match("/users/42", "GET")
    if match:
        route, params = match
        route.handler(params["user_id"])
"""

__version__ = "0.1.0"
__author__ = "BlackRoad OS, Inc."

# Routing
from roadroute_core.routing.matcher import (
    PathMatcher,
    PathCursor,
    capture_route_parameter,
)
from roadroute_core.routing.params import RouteParameters
from roadroute_core.routing.router import Router, Route

# Utils
from roadroute_core.utils.config import (
    RouterConfig,
    RouteSpec,
    RouteConfigError,
    load_config,
)
from roadroute_core.utils.helpers import setup_logging

__all__ = [
    # Version
    "__version__",
    # Routing
    "PathMatcher",
    "PathCursor",
    "capture_route_parameter",
    "RouteParameters",
    "Router",
    "Route",
    # Utils
    "RouterConfig",
    "RouteSpec",
    "RouteConfigError",
    "load_config",
    "setup_logging",
]
