"""Node id factories."""

from __future__ import annotations

import itertools
import uuid
from collections.abc import Callable

IdFactory = Callable[[], str]


def new_node_id() -> str:
    """Return a fresh collision-resistant node id."""
    return uuid.uuid4().hex


def sequential_ids(prefix: str = "n") -> IdFactory:
    """Return a factory yielding ``n0``, ``n1``, ... for reproducible trees."""
    counter = itertools.count()
    return lambda: f"{prefix}{next(counter)}"


__all__ = ["IdFactory", "new_node_id", "sequential_ids"]
