"""Dotted-key views of a nested config tree."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional, Tuple


def iter_flat(
    data: Mapping,
    parent: str = "",
    depth: Optional[int] = None,
) -> Iterator[Tuple[str, Any]]:
    """Walk nested mappings, yielding ``(dotted_key, value)`` pairs.

    Lists and scalars are yielded as leaves. Empty mappings are yielded as
    leaves too, so every stored key shows up. Keys are joined as given, so a
    key that contains a dot, or a non-string key, produces a dotted key that
    does not resolve back to the same value through ``Config.get``.

    Args:
        data: Mapping to walk.
        parent: Key prefix for recursion.
        depth: How many mapping levels to descend below ``data``
            (None for unlimited, 0 keeps nested mappings as leaves).
    """
    if depth is not None and depth < 0:
        return

    for key, value in data.items():
        full_key = f"{parent}.{key}" if parent else str(key)
        if isinstance(value, Mapping) and value and (depth is None or depth > 0):
            next_depth = None if depth is None else depth - 1
            yield from iter_flat(value, full_key, next_depth)
        else:
            yield full_key, value


def flatten(data: Mapping, depth: Optional[int] = None) -> Dict[str, Any]:
    return dict(iter_flat(data, depth=depth))
