"""nestconf - Nested application settings.

A single in-memory tree of configuration values addressed by dotted paths,
populated at start-up and read for the rest of the process.
"""

from .core.config import Config
from .core.environment import Environment
from .core.errors import (
    ConfigError,
    InvalidArgumentError,
    MissingRequiredValueError,
    NotAppendableError,
)
from .discovery import find_or_create_app_config

__all__ = [
    "Config",
    "Environment",
    "ConfigError",
    "InvalidArgumentError",
    "MissingRequiredValueError",
    "NotAppendableError",
    "find_or_create_app_config",
]
