"""Route Parameters - Values captured from a matched path.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Dict, Iterator, Optional


class RouteParameters(Mapping):
    """Read-only mapping of parameter name to captured value.

    An empty instance means the path matched a static pattern.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(values or {})

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def get_int(self, name: str, default: Optional[int] = None) -> Optional[int]:
        """Get a parameter converted to int.

        Raises:
            ValueError: If the value is present but not an integer
        """
        if name not in self._values:
            return default
        return int(self._values[name])

    def to_dict(self) -> Dict[str, str]:
        """Convert to a plain dictionary."""
        return dict(self._values)

    def __repr__(self) -> str:
        return f"RouteParameters({self._values!r})"


__all__ = [
    "RouteParameters",
]
