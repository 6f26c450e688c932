from .config import Config
from .environment import Environment
from .errors import (
    ConfigError,
    ConfigModuleLoadError,
    InvalidArgumentError,
    InvalidPathError,
    MissingRequiredValueError,
    NotAppendableError,
    NotMergeableError,
    PathIndexError,
)
from .path import resolve

__all__ = [
    "Config",
    "Environment",
    "ConfigError",
    "ConfigModuleLoadError",
    "InvalidArgumentError",
    "InvalidPathError",
    "MissingRequiredValueError",
    "NotAppendableError",
    "NotMergeableError",
    "PathIndexError",
    "resolve",
]
