"""
Infrastructure layer package.

Contains all I/O:
- Vars file persistence and the store implementations (vars/)
- Configuration file loading
- Logging setup
"""

from buildvars.infrastructure.config_loader import resolve_config_path, run_config_file
from buildvars.infrastructure.logging_config import setup_logging
from buildvars.infrastructure.vars import DiscoveryStore, VariableStore, VarsFileRepository

__all__ = [
    # Config
    "resolve_config_path",
    "run_config_file",
    # Logging
    "setup_logging",
    # Vars
    "DiscoveryStore",
    "VariableStore",
    "VarsFileRepository",
]
