"""Routing module - Path matching and request routing."""

from roadroute_core.routing.matcher import (
    PathMatcher,
    PathCursor,
    capture_route_parameter,
)
from roadroute_core.routing.params import RouteParameters
from roadroute_core.routing.router import Router, Route

__all__ = [
    "PathMatcher",
    "PathCursor",
    "capture_route_parameter",
    "RouteParameters",
    "Router",
    "Route",
]
