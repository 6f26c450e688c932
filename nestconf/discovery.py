"""Locate and load an application's config module."""

from __future__ import annotations

import hashlib
import importlib.util
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import Optional, Union

from .core.config import Config
from .core.errors import ConfigModuleLoadError

logger = logging.getLogger(__name__)

APP_CONFIG_PARTS = ("app", "config")


def _find_config_module(base_dir: Path) -> Optional[Path]:
    """Return ``app/config.py`` or ``app/config/__init__.py`` under ``base_dir``."""
    target = base_dir.joinpath(*APP_CONFIG_PARTS)
    for candidate in (target.with_suffix(".py"), target / "__init__.py"):
        if candidate.is_file():
            return candidate
    return None


def _import_module_from_file(file_path: Path) -> ModuleType:
    """Execute a Python file as a fresh module and return it."""
    digest = hashlib.sha1(str(file_path.resolve()).encode("utf-8")).hexdigest()[:12]
    module_name = f"nestconf_app_config_{digest}"
    kwargs = {}
    if file_path.name == "__init__.py":
        kwargs["submodule_search_locations"] = [str(file_path.parent)]
    spec = importlib.util.spec_from_file_location(module_name, str(file_path), **kwargs)
    if spec is None or spec.loader is None:
        raise ConfigModuleLoadError(str(file_path), "cannot create import spec")

    module = importlib.util.module_from_spec(spec)
    # relative imports inside app/config/ look the parent up here
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        for name in [n for n in sys.modules if n == module_name or n.startswith(module_name + ".")]:
            sys.modules.pop(name, None)
        raise ConfigModuleLoadError(str(file_path), str(exc)) from exc
    return module


def _exported_config(module: ModuleType) -> Optional[Config]:
    for attribute in ("config", "default"):
        value = getattr(module, attribute, None)
        if isinstance(value, Config):
            return value
    return None


def find_or_create_app_config(base_dir: Optional[Union[str, Path]] = None) -> Config:
    """Load the app's Config from ``<base_dir>/app/config``.

    The module should expose a Config as ``config`` or ``default``. When no
    module exists, or it exports no Config, an empty Config is returned.

    Args:
        base_dir: Project directory. Defaults to the current directory.

    Returns:
        The exported Config, or a new empty one.

    Raises:
        ConfigModuleLoadError: If the module exists but fails to execute.
    """
    base = Path.cwd() if base_dir is None else Path(base_dir)
    module_path = _find_config_module(base)
    if module_path is None:
        logger.debug("No app config module under %s, using empty config", base)
        return Config()

    module = _import_module_from_file(module_path)
    config = _exported_config(module)
    if config is None:
        logger.debug("%s exports no Config, using empty config", module_path)
        return Config()
    logger.debug("Loaded app config from %s", module_path)
    return config
