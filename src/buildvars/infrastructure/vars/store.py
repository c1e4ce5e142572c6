"""
Vars store: the capability set shared by the real and the discovery store.

``VariableStore`` is the production implementation backed by the vars
file. Configuration code and the command dispatcher depend only on the
``VarsStore`` protocol, so a ``DiscoveryStore`` can be passed in its place.
"""

import logging
import re
from pathlib import Path
from typing import List, Mapping, Optional, Protocol, runtime_checkable

from buildvars.domain.errors import InvalidEmptyValue, InvalidKeyFormat
from buildvars.domain.models import StoredVar
from buildvars.domain.settings import DEFAULT_ENV_PREFIX
from buildvars.infrastructure.vars.environment import EnvironmentOverrides
from buildvars.infrastructure.vars.repository import VarsFileRepository

logger = logging.getLogger(__name__)

KEY_PATTERN = re.compile(r"[A-Za-z_]+[A-Za-z0-9_]*")


def validate_key(key: str) -> None:
    """Raise InvalidKeyFormat unless ``key`` is a valid identifier."""
    if not isinstance(key, str) or not KEY_PATTERN.fullmatch(key):
        raise InvalidKeyFormat(key)


def validate_value(value: str) -> None:
    """Raise InvalidEmptyValue if ``value`` is blank once whitespace is removed."""
    if value is None or not value.strip():
        raise InvalidEmptyValue()


@runtime_checkable
class VarsStore(Protocol):
    """Operations a configuration or command may perform on vars."""

    def validate_key(self, key: str) -> None: ...

    def has(self, key: str, include_env: bool = False) -> bool: ...

    def get(self, key: str, default: Optional[str] = None,
            include_env: bool = False) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def list(self) -> List[str]: ...

    def delete(self, key: str) -> bool: ...

    def get_storage_path(self) -> str: ...


class VariableStore:
    """
    Production vars store.

    Reads go to the vars file on every call, so two stores pointed at the
    same file always agree. Mutations validate first and persist before
    returning.
    """

    def __init__(self, repository: VarsFileRepository,
                 environ: Optional[Mapping[str, str]] = None,
                 env_prefix: str = DEFAULT_ENV_PREFIX):
        """
        Initialize the store.

        Args:
            repository: Repository for the vars file
            environ: Environment consulted for overrides (defaults to os.environ)
            env_prefix: Prefix of override environment variables
        """
        self.repository = repository
        self.env = EnvironmentOverrides(environ, env_prefix)

    @classmethod
    def at_path(cls, path: Path, environ: Optional[Mapping[str, str]] = None,
                env_prefix: str = DEFAULT_ENV_PREFIX) -> "VariableStore":
        """Build a store for the vars file at ``path``."""
        return cls(VarsFileRepository(path), environ=environ, env_prefix=env_prefix)

    def validate_key(self, key: str) -> None:
        validate_key(key)

    def has(self, key: str, include_env: bool = False) -> bool:
        """Whether ``key`` is stored (or overridden, when include_env is set)."""
        if include_env and self.env.has(key):
            return True
        return key in self.repository.load().vars

    def get(self, key: str, default: Optional[str] = None,
            include_env: bool = False) -> Optional[str]:
        """
        Get the value of ``key``.

        Args:
            key: Var name
            default: Returned when the var is neither overridden nor stored
            include_env: Whether an environment override takes precedence

        Returns:
            The value, ``default`` or None
        """
        if include_env:
            env_value = self.env.get(key)
            if env_value is not None:
                return env_value

        stored = self.repository.load().vars.get(key)
        if stored is not None:
            return stored.get_value()
        return default

    def set(self, key: str, value: str) -> None:
        """
        Store ``value`` under ``key``, replacing any previous value.

        Raises:
            InvalidKeyFormat: If the key is not a valid identifier
            InvalidEmptyValue: If the value is blank
        """
        validate_key(key)
        validate_value(value)

        vars_file = self.repository.load()
        vars_file.vars[key] = StoredVar(value=value)
        self.repository.save(vars_file)
        logger.debug("Stored var %s", key)

    def list(self) -> List[str]:
        """Stored keys, in the order they were first set."""
        return list(self.repository.load().vars)

    def delete(self, key: str) -> bool:
        """
        Remove ``key``.

        Returns:
            True if a value existed and was removed
        """
        vars_file = self.repository.load()
        if key not in vars_file.vars:
            return False

        del vars_file.vars[key]
        self.repository.save(vars_file)
        logger.debug("Deleted var %s", key)
        return True

    def get_storage_path(self) -> str:
        return str(self.repository.path)

    def get_env_overrides(self) -> List[str]:
        """Keys currently overridden by environment variables."""
        return self.env.keys()
