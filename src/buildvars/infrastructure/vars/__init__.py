"""
Vars storage package.

Real and discovery implementations of the vars store, plus the file
repository and environment overrides they share.
"""

from buildvars.infrastructure.vars.discovery import DiscoveryStore
from buildvars.infrastructure.vars.environment import EnvironmentOverrides, env_var_name
from buildvars.infrastructure.vars.repository import VarsFileRepository
from buildvars.infrastructure.vars.store import VariableStore, VarsStore, validate_key

__all__ = [
    "DiscoveryStore",
    "EnvironmentOverrides",
    "VariableStore",
    "VarsFileRepository",
    "VarsStore",
    "env_var_name",
    "validate_key",
]
