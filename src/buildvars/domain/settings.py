"""
Runtime settings for buildvars.

Settings come from the process environment with reasonable defaults, so
the tool works without any configuration of its own:

1. ``BUILDVARS_CONFIG_DIR`` (explicit store directory)
2. ``XDG_CONFIG_HOME``/buildvars
3. ``~/.config/buildvars``
"""

import logging
import os
import re
from pathlib import Path
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

APP_NAME = "buildvars"
CONFIG_DIR_ENV = "BUILDVARS_CONFIG_DIR"
DEFAULT_ENV_PREFIX = "BUILDVARS_VAR_"
DEFAULT_CONFIG_FILE_NAMES = ["buildvars.config.py"]

_ENV_NAME_PATTERN = re.compile(r"^[A-Z_][A-Z0-9_]*$")


def default_config_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Resolve the per-user directory that holds the vars file."""
    env = os.environ if environ is None else environ

    explicit = env.get(CONFIG_DIR_ENV)
    if explicit:
        return Path(explicit).expanduser()

    xdg = env.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg).expanduser() / APP_NAME

    return Path.home() / ".config" / APP_NAME


class VarsSettings(BaseModel):
    """
    Settings controlling where vars live and how they are looked up.

    Attributes are immutable for the lifetime of a command invocation.
    """

    config_dir: Path = Field(
        default_factory=default_config_dir,
        description="Directory holding the vars file"
    )

    vars_file_name: str = Field(
        default="vars.json",
        description="File name of the vars store inside config_dir"
    )

    env_prefix: str = Field(
        default=DEFAULT_ENV_PREFIX,
        description="Prefix of the environment variables that override stored vars"
    )

    config_file_names: List[str] = Field(
        default_factory=lambda: list(DEFAULT_CONFIG_FILE_NAMES),
        description="Configuration file names searched for by setup"
    )

    set_command: str = Field(
        default=f"{APP_NAME} set",
        description="Command prefix shown to operators in the setup report"
    )

    @field_validator("env_prefix")
    @classmethod
    def validate_env_prefix(cls, v: str) -> str:
        """The prefix must be usable as the start of an env var name."""
        if not _ENV_NAME_PATTERN.match(v):
            raise ValueError(f"Invalid environment variable prefix '{v}'")
        return v

    @field_validator("config_file_names")
    @classmethod
    def validate_config_file_names(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("At least one configuration file name is required")
        return v

    @property
    def vars_file_path(self) -> Path:
        """Absolute path of the vars file."""
        return (self.config_dir / self.vars_file_name).absolute()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "VarsSettings":
        """Build settings from an environment mapping (defaults to os.environ)."""
        settings = cls(config_dir=default_config_dir(environ))
        logger.debug("Vars file location: %s", settings.vars_file_path)
        return settings
