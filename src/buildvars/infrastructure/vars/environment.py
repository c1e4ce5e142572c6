"""
Environment-variable overrides for vars.

A var ``KEY`` is overridden by the environment variable ``<prefix>KEY``
(``BUILDVARS_VAR_KEY`` with the default prefix). The override wins over
the stored value whenever a configuration is evaluated.
"""

import os
from typing import List, Mapping, Optional

from buildvars.domain.settings import DEFAULT_ENV_PREFIX


def env_var_name(key: str, prefix: str = DEFAULT_ENV_PREFIX) -> str:
    """Derive the environment variable name that overrides ``key``."""
    return f"{prefix}{key}"


class EnvironmentOverrides:
    """Read-only view of the var overrides present in an environment."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None,
                 prefix: str = DEFAULT_ENV_PREFIX):
        self._environ = os.environ if environ is None else environ
        self.prefix = prefix

    def name_for(self, key: str) -> str:
        return env_var_name(key, self.prefix)

    def has(self, key: str) -> bool:
        return self.name_for(key) in self._environ

    def get(self, key: str) -> Optional[str]:
        return self._environ.get(self.name_for(key))

    def keys(self) -> List[str]:
        """Keys overridden by the environment, with the prefix stripped."""
        return [
            name[len(self.prefix):]
            for name in self._environ
            if name.startswith(self.prefix) and len(name) > len(self.prefix)
        ]
