"""Environment name resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

DEFAULT_ENV = "dev"
ENV_VARIABLES: Tuple[str, ...] = ("ENV", "NODE_ENV")


@dataclass(frozen=True)
class Environment:
    """Snapshot of the environment name a Config runs under.

    The name is captured once, so a Config never reads process state after
    construction.

    Attributes:
        name: Environment name (e.g. 'dev', 'production').
    """

    name: str = DEFAULT_ENV

    @staticmethod
    def from_environ(environ: Optional[Mapping[str, str]] = None) -> "Environment":
        """Resolve the environment name from environment variables.

        ``ENV`` wins over ``NODE_ENV``; unset or empty variables fall through
        to ``'dev'``.

        Args:
            environ: Variables to read. Defaults to ``os.environ``.

        Returns:
            Environment snapshot.
        """
        if environ is None:
            environ = os.environ
        for variable in ENV_VARIABLES:
            value = environ.get(variable)
            if value:
                return Environment(value)
        return Environment(DEFAULT_ENV)

    def is_(self, name: str) -> bool:
        return self.name == name
