"""
buildvars - per-user configuration variables for build configuration files.

Values such as API keys and RPC URLs are kept outside source control, in a
single file per user. A configuration reads them through the ``vars``
object; ``buildvars setup`` evaluates the configuration in discovery mode
to list the ones still missing.

Usage:
    # CLI
    buildvars set API_KEY
    buildvars setup

    # Programmatic
    from buildvars import Container, load_config

    container = Container()
    namespace = load_config(path, container.store)
"""

__version__ = "0.3.0"

from buildvars.application import ConfigVariables, ConfigurationProbe, Container, load_config
from buildvars.infrastructure.vars import DiscoveryStore, VariableStore

__all__ = [
    "ConfigVariables",
    "ConfigurationProbe",
    "Container",
    "DiscoveryStore",
    "VariableStore",
    "load_config",
    "__version__",
]
