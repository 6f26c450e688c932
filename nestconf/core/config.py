from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .environment import Environment
from .errors import InvalidArgumentError, MissingRequiredValueError, NotMergeableError
from .flatten import flatten
from .merge import merge_into, unwrap_default
from .path import PathSpec, resolve
from .tree import get_path, has_path, is_defined_path, push_path, set_path

logger = logging.getLogger(__name__)

Builder = Callable[["Config"], Any]

_NO_DEFAULT = object()


def _strict_equals(left: Any, right: Any) -> bool:
    if left is right:
        return True
    if isinstance(left, (str, int, float)) and type(left) is type(right):
        return left == right
    return False


@dataclass(eq=False)
class Config:
    """Nested settings addressed by dotted paths.

    Paths are dotted strings (``"server.ssl.on"``) or iterables of them
    (``["server", "ssl.on"]``). Numeric segments index into lists. Reads
    never raise on missing segments; ``None`` is treated as undefined.

    Example::

        config = Config.create(lambda c: c.set("server.port", 4000))
        config.get("server.port")       # 4000
        config.get("server.host", "::") # "::"
    """

    _data: Dict[str, Any] = field(default_factory=dict)
    environment: Environment = field(default_factory=Environment.from_environ)

    @classmethod
    def from_builder(cls, builder: Builder, environment: Optional[Environment] = None) -> "Config":
        """Create an empty config and let ``builder`` populate it."""
        config = cls._new({}, environment)
        builder(config)
        return config

    @classmethod
    def from_existing(cls, other: "Config", environment: Optional[Environment] = None) -> "Config":
        """Create a config sharing ``other``'s data by reference."""
        return cls._new(other._data, environment or other.environment)

    @classmethod
    def from_mapping(cls, mapping: Mapping, environment: Optional[Environment] = None) -> "Config":
        """Adopt ``mapping`` as the root; a dict is used as-is, not copied."""
        data = mapping if isinstance(mapping, dict) else dict(mapping)
        return cls._new(data, environment)

    @classmethod
    def create(
        cls,
        builder: Optional[Builder] = None,
        *,
        existing: Optional["Config"] = None,
        mapping: Optional[Mapping] = None,
        environment: Optional[Environment] = None,
    ) -> "Config":
        """Create a config from at most one of a builder, a config or a mapping."""
        given = [arg for arg in (builder, existing, mapping) if arg is not None]
        if len(given) > 1:
            raise InvalidArgumentError(
                given[1],
                "Config.create() accepts only one of builder, existing or mapping.",
            )
        if builder is not None:
            return cls.from_builder(builder, environment)
        if existing is not None:
            return cls.from_existing(existing, environment)
        if mapping is not None:
            return cls.from_mapping(mapping, environment)
        return cls._new({}, environment)

    @classmethod
    def _new(cls, data: Dict[str, Any], environment: Optional[Environment]) -> "Config":
        if environment is None:
            return cls(data)
        return cls(data, environment)

    def env(self) -> str:
        return self.environment.name

    def is_env(self, name: str) -> bool:
        return self.environment.is_(name)

    def get(self, path: PathSpec, default: Optional[Any] = None) -> Any:
        """Return the value at ``path``, or ``default`` when it is undefined.

        Given ``{"hello": {"world": "v1", "values": ["one"]}}``::

            config.get("hello.world")        # "v1"
            config.get("hello.values.0")     # "one"
            config.get("hello.world.what")   # None
        """
        return get_path(self._data, resolve(path), default)

    def get_or_raise(self, path: PathSpec, default: Any = _NO_DEFAULT) -> Any:
        """Like :meth:`get`, but raise when the value is undefined.

        Passing ``default`` (even ``None``) disables the check.

        Raises:
            MissingRequiredValueError: If the value is undefined and no
                default was passed.
        """
        if default is _NO_DEFAULT:
            result = self.get(path)
            if result is None:
                raise MissingRequiredValueError(path)
            return result
        return self.get(path, default)

    def push(self, path: PathSpec, value: Any) -> Any:
        """Append ``value`` to the list at ``path`` and return ``value``.

        A missing list is created. Raises NotAppendableError when another kind
        of value is stored there.
        """
        return push_path(self._data, resolve(path), value, path)

    def update(self, path: PathSpec, transform: Callable[[Any], Any]) -> Any:
        """Replace the value at ``path`` with ``transform(current)``."""
        return self.set(path, transform(self.get(path)))

    def equals(self, path: PathSpec, value: Any) -> bool:
        return _strict_equals(self.get(path), value)

    def has(self, path: PathSpec) -> bool:
        """Return True when the value at ``path`` is truthy.

        Note: ``0``, ``False`` and ``""`` count as missing here, even when set
        explicitly. Use :meth:`is_defined` to test for presence.
        """
        return has_path(self._data, resolve(path))

    def is_defined(self, path: PathSpec) -> bool:
        return is_defined_path(self._data, resolve(path))

    def set(self, path: PathSpec, value: Any) -> Any:
        """Store ``value`` at ``path``, creating dicts along the way."""
        return set_path(self._data, resolve(path), value)

    def set_if_not_defined(self, path: PathSpec, value: Any) -> Any:
        """Store ``value`` only when nothing is defined at ``path``.

        Returns:
            The new value, or the existing one when it was kept.
        """
        segments = resolve(path)
        existing = get_path(self._data, segments)
        if existing is None:
            return set_path(self._data, segments, value)
        return existing

    def assign(self, other: Any, path: Optional[PathSpec] = None) -> "Config":
        """Shallow-merge a mapping into this config.

        ``other`` may be a mapping, another Config, or a module (or mapping)
        whose ``default`` export is one of those. With ``path``, the mapping
        stored there is merged with ``other``. Either way ``other``'s keys are
        also merged into the top level.

        Raises:
            InvalidArgumentError: If ``other`` is not mapping-shaped.
            NotMergeableError: If the value at ``path`` is not a mapping.
        """
        received = other
        other = unwrap_default(other, (Mapping, Config))
        if isinstance(other, Config):
            other = other._data
        if not isinstance(other, Mapping):
            raise InvalidArgumentError(received)

        if path:
            existing = self.set_if_not_defined(path, {})
            if not isinstance(existing, MutableMapping):
                raise NotMergeableError(path, existing)
            self.set(path, merge_into(existing, other))
            logger.debug("Assigned %d key(s) at %r", len(other), path)

        merge_into(self._data, other)
        logger.debug("Assigned %d key(s) at top level", len(other))
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Return a shallow copy of the root; nested values are shared."""
        return dict(self._data)

    def flatten(self, depth: Optional[int] = None) -> Dict[str, Any]:
        """Return ``{dotted_key: value}`` for every leaf, lists included as leaves.

        ``get(key)`` returns the flattened value for every key whose path is
        made of dot-free string keys; other keys are joined verbatim.
        """
        return flatten(self._data, depth=depth)

    def copy(self) -> "Config":
        """Return an independent config holding a deep copy of the data."""
        return type(self)(copy.deepcopy(self._data), self.environment)

