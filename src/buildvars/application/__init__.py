"""
Application layer package.

Use cases built on the domain and infrastructure layers: the ``vars``
facade seen by configurations, the setup probe and the DI container.
"""

from buildvars.application.config_env import ConfigVariables, load_config
from buildvars.application.container import Container
from buildvars.application.probe import ConfigurationProbe, SetupReport

__all__ = [
    "ConfigVariables",
    "ConfigurationProbe",
    "Container",
    "SetupReport",
    "load_config",
]
