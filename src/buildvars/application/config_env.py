"""
The ``vars`` object handed to configuration files.

A configuration reads its vars through this facade::

    api_key = vars.get("API_KEY")
    rpc_url = vars.get("RPC_URL", "http://localhost:8545")
    if vars.has("ETHERSCAN_KEY"):
        ...

Which store sits behind it is chosen by the caller: the real store when a
configuration is used normally, a DiscoveryStore during setup.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from buildvars.domain.errors import MissingConfigVariable
from buildvars.infrastructure.config_loader import run_config_file
from buildvars.infrastructure.vars.store import VarsStore

logger = logging.getLogger(__name__)


class ConfigVariables:
    """Read-only view of a vars store, with environment overrides applied."""

    def __init__(self, store: VarsStore):
        self._store = store

    def has(self, key: str) -> bool:
        """Whether ``key`` has a value, stored or from the environment."""
        self._store.validate_key(key)
        return self._store.has(key, include_env=True)

    def get(self, key: str, default: Optional[str] = None) -> str:
        """
        Get the value of ``key``.

        Raises:
            MissingConfigVariable: If the var has no value and no default was given
        """
        self._store.validate_key(key)
        value = self._store.get(key, default, include_env=True)
        if value is None:
            raise MissingConfigVariable(key)
        return value

    def __repr__(self) -> str:
        return f"ConfigVariables(store={type(self._store).__name__})"


def load_config(path: Path, store: VarsStore) -> Dict[str, Any]:
    """
    Evaluate a configuration file against ``store``.

    The configuration sees the store only through the ``vars`` global.
    """
    return run_config_file(path, init_globals={"vars": ConfigVariables(store)})
