"""
Discovery store used by ``buildvars setup``.

Stands in for the real store while a configuration is evaluated. Instead of
returning values it records every key the configuration asks for, so the
setup report can tell the operator which vars still have to be set.
No secret ever leaves this store: reads return the caller's default or an
empty placeholder.
"""

import logging
from collections import OrderedDict
from typing import Dict, List, Mapping, Optional, Tuple

from buildvars.domain.models import Requirement, VarRequest
from buildvars.infrastructure.vars.environment import EnvironmentOverrides
from buildvars.infrastructure.vars.store import VariableStore

logger = logging.getLogger(__name__)

PLACEHOLDER_VALUE = ""


class DiscoveryStore:
    """
    Collect-and-report implementation of the VarsStore protocol.

    Classification of each requested key is computed when an accessor is
    called, against the backing store and the environment at that moment.
    """

    def __init__(self, backing: VariableStore,
                 environ: Optional[Mapping[str, str]] = None,
                 env_prefix: Optional[str] = None):
        """
        Initialize the discovery store.

        Args:
            backing: Real store consulted (read-only) for already-set vars
            environ: Environment consulted for overrides (defaults to the backing store's)
            env_prefix: Override prefix (defaults to the backing store's)
        """
        self.backing = backing
        if environ is None and env_prefix is None:
            self.env = backing.env
        else:
            self.env = EnvironmentOverrides(environ, env_prefix or backing.env.prefix)
        self._requests: Dict[str, Requirement] = OrderedDict()

    def _record(self, key: str, requirement: Requirement) -> None:
        previous = self._requests.get(key)
        merged = requirement if previous is None else previous.merge(requirement)
        self._requests[key] = merged
        logger.debug("Discovered %s var %s", merged.value, key)

    # Configuration-facing surface

    def validate_key(self, key: str) -> None:
        self.backing.validate_key(key)

    def has(self, key: str, include_env: bool = False) -> bool:
        """Record ``key`` as optional and report whether it is available."""
        self.validate_key(key)
        self._record(key, Requirement.OPTIONAL)
        return self._is_env_satisfied(key) or self._is_stored(key)

    def get(self, key: str, default: Optional[str] = None,
            include_env: bool = False) -> str:
        """Record ``key``; required without a default, optional with one."""
        self.validate_key(key)
        requirement = Requirement.REQUIRED if default is None else Requirement.OPTIONAL
        self._record(key, requirement)
        return PLACEHOLDER_VALUE if default is None else default

    def set(self, key: str, value: str) -> None:
        logger.debug("Ignoring set of %s during discovery", key)

    def list(self) -> List[str]:
        return self.backing.list()

    def delete(self, key: str) -> bool:
        logger.debug("Ignoring delete of %s during discovery", key)
        return False

    def get_storage_path(self) -> str:
        return self.backing.get_storage_path()

    # Reporting surface

    def requests(self) -> Tuple[VarRequest, ...]:
        """Every distinct key requested so far, in first-request order."""
        return tuple(VarRequest(key, requirement) for key, requirement in self._requests.items())

    def _is_env_satisfied(self, key: str) -> bool:
        return self.env.has(key)

    def _is_stored(self, key: str) -> bool:
        return self.backing.has(key)

    def _select(self, requirement: Requirement, stored: bool) -> List[str]:
        stored_keys = set(self.backing.list())
        return [
            key for key, req in self._requests.items()
            if req is requirement
            and not self._is_env_satisfied(key)
            and (key in stored_keys) == stored
        ]

    def get_required_vars_to_set(self) -> List[str]:
        return self._select(Requirement.REQUIRED, stored=False)

    def get_optional_vars_to_set(self) -> List[str]:
        return self._select(Requirement.OPTIONAL, stored=False)

    def get_required_vars_already_set(self) -> List[str]:
        return self._select(Requirement.REQUIRED, stored=True)

    def get_optional_vars_already_set(self) -> List[str]:
        return self._select(Requirement.OPTIONAL, stored=True)

    def get_env_vars(self) -> List[str]:
        """Derived env var names of requested keys satisfied by the environment."""
        return [self.env.name_for(key) for key in self._requests if self._is_env_satisfied(key)]
