"""Path Matcher - Route pattern matching.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from roadroute_core.routing.params import RouteParameters

SEPARATOR = "/"
PARAM_PREFIX = ":"


class PathCursor:
    """Read position over an immutable path or pattern string."""

    __slots__ = ("text", "position")

    def __init__(self, text: str, position: int = 0):
        self.text = text
        self.position = position

    def next(self) -> Optional[str]:
        """Consume one character, or return None when exhausted."""
        if self.position >= len(self.text):
            return None
        char = self.text[self.position]
        self.position += 1
        return char

    def peek(self) -> Optional[str]:
        """Return the next character without consuming it."""
        if self.position >= len(self.text):
            return None
        return self.text[self.position]

    def take_segment(self) -> str:
        """Consume up to, but not including, the next separator."""
        end = self.text.find(SEPARATOR, self.position)
        if end == -1:
            end = len(self.text)
        segment = self.text[self.position:end]
        self.position = end
        return segment

    def __repr__(self) -> str:
        return f"PathCursor({self.text!r}, position={self.position})"


def capture_route_parameter(
    pattern: PathCursor,
    path: PathCursor,
) -> Tuple[str, str]:
    """Capture one parameter segment from both cursors.

    Both cursors are left on their next separator (or at the end).

    Returns:
        Tuple of (key from pattern, value from path)
    """
    key = pattern.take_segment()
    value = path.take_segment()
    return key, value


@dataclass(frozen=True)
class PathMatcher:
    """URL path pattern matcher.

    Supports:
    - Exact matches: /users
    - Path parameters: /users/:id

    A parameter captures exactly one segment, also in last position, so
    ``/files/:path`` does not match ``/files/home/user``.

    A parameter also needs a non-empty segment: ``/users/:id`` does not
    match ``/users/``, and ``/:a/b`` does not match ``//b``. Capturing there
    would swallow the separator and bind ``"/b"``, merging two segments
    into one value.

    Usage:
        matcher = PathMatcher("/users/:user_id/friend/:friend_id")
        params = matcher.match("/users/1/friend/2")
        if params is not None:
            params["friend_id"]  # "2"
    """

    pattern: str

    def match(self, path: str) -> Optional[RouteParameters]:
        """Match path against the pattern.

        Returns:
            RouteParameters (possibly empty) if match, None otherwise
        """
        pattern_cursor = PathCursor(self.pattern)
        path_cursor = PathCursor(path)
        params: Dict[str, str] = {}

        while True:
            pattern_char = pattern_cursor.next()
            path_char = path_cursor.next()

            if pattern_char is None and path_char is None:
                break

            # One side ran out first: segment count or length differs
            if pattern_char is None or path_char is None:
                return None

            if pattern_char == PARAM_PREFIX:
                if path_char == SEPARATOR:
                    return None
                key, value = capture_route_parameter(pattern_cursor, path_cursor)
                params[key] = path_char + value
            elif pattern_char != path_char:
                return None

        return RouteParameters(params)

    def matches(self, path: str) -> bool:
        """Check if path matches pattern."""
        return self.match(path) is not None

    @property
    def param_names(self) -> List[str]:
        """Parameter names in order of appearance.

        Scans the pattern the way ``match`` does, so a ``:`` inside a
        segment (``/a:b``) names a parameter too.
        """
        cursor = PathCursor(self.pattern)
        names: List[str] = []

        char = cursor.next()
        while char is not None:
            if char == PARAM_PREFIX:
                names.append(cursor.take_segment())
            char = cursor.next()

        return names

    def __str__(self) -> str:
        return self.pattern


__all__ = [
    "PathMatcher",
    "PathCursor",
    "capture_route_parameter",
]
