"""Helpers for merging external mappings into a config tree."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from types import ModuleType
from typing import Any, Tuple, Type


def unwrap_default(other: Any, accept: Tuple[Type, ...] = (Mapping,)) -> Any:
    """Return the default export wrapped by ``other``, if it carries one.

    A module's ``default`` attribute or a mapping's ``"default"`` entry that
    is an instance of one of ``accept`` is treated as the default
    export. Anything else is returned unchanged.
    """
    if isinstance(other, ModuleType):
        wrapped = getattr(other, "default", None)
        if wrapped and isinstance(wrapped, accept):
            return wrapped
        return other
    if isinstance(other, Mapping):
        wrapped = other.get("default")
        if wrapped and isinstance(wrapped, accept):
            return wrapped
    return other


def merge_into(target: MutableMapping, other: Mapping) -> MutableMapping:
    """Shallow-merge ``other`` into ``target`` in place.

    Keys from ``other`` overwrite same-named keys in ``target``; nested
    values are shared, not copied.

    Returns:
        ``target``, for chaining.
    """
    for key, value in other.items():
        target[key] = value
    return target
