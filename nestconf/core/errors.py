"""Exception hierarchy for nestconf.

Every error derives from :class:`ConfigError` and from the builtin exception
that matches its kind, so callers may catch either one.
"""

from __future__ import annotations

from typing import Any, Optional


class ConfigError(Exception):
    """Base error for all nestconf failures."""


class InvalidPathError(ConfigError, TypeError):
    """Raised when a path specification is neither a string nor an iterable of strings."""

    def __init__(self, path: Any):
        super().__init__(
            f"Expected a path string or an iterable of strings but got "
            f'"{type(path).__name__}" instead.'
        )
        self.path = path


class MissingRequiredValueError(ConfigError, KeyError):
    """Raised by ``get_or_raise`` when a required value is missing.

    Attributes:
        path: The path that was requested, as the caller passed it.
    """

    def __init__(self, path: Any):
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f'Missing required config value: "{_describe(self.path)}".'


class NotAppendableError(ConfigError, TypeError):
    """Raised when pushing onto a value that is not a list."""

    def __init__(self, path: Any, value: Any):
        self.path = path
        self.value_type = type(value).__name__
        super().__init__(
            f'Value at "{_describe(path)}" is not appendable '
            f'(found "{self.value_type}").'
        )


class InvalidArgumentError(ConfigError, TypeError):
    """Raised when ``assign`` receives something that is not a mapping."""

    def __init__(self, received: Any, message: Optional[str] = None):
        self.received_type = type(received).__name__
        super().__init__(
            message
            or f"Expected assign(other, ...) parameter to be a mapping but got "
            f'"{self.received_type}" instead.'
        )


class NotMergeableError(ConfigError, TypeError):
    """Raised when a scoped ``assign`` targets a value that is not a mapping."""

    def __init__(self, path: Any, value: Any):
        self.path = path
        self.value_type = type(value).__name__
        super().__init__(
            f'Cannot merge into "{_describe(path)}": existing value is a '
            f'"{self.value_type}", not a mapping.'
        )


class PathIndexError(ConfigError, IndexError):
    """Raised when a write would leave a gap in a list."""

    def __init__(self, segment: str, length: int):
        self.segment = segment
        self.length = length
        super().__init__(
            f"List index {segment} is out of range for a list of length {length}."
        )


class ConfigModuleLoadError(ConfigError):
    """Raised when an application config module exists but cannot be executed."""

    def __init__(self, module_path: str, reason: str):
        self.module_path = module_path
        self.reason = reason
        super().__init__(f"Failed to load config module {module_path}: {reason}")


def _describe(path: Any) -> str:
    if isinstance(path, str):
        return path
    try:
        return ".".join(path)
    except TypeError:
        return repr(path)
