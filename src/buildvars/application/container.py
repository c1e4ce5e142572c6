"""
Dependency injection container for the application.

Builds settings, the vars repository and the real store lazily, so a
command that never touches the store (``--help``) never creates the file.
"""

import logging
from typing import Mapping, Optional

from buildvars.domain.settings import VarsSettings
from buildvars.infrastructure.vars.repository import VarsFileRepository
from buildvars.infrastructure.vars.store import VariableStore

logger = logging.getLogger(__name__)


class Container:
    """
    Dependency injection container.

    Manages the creation and lifecycle of the store and its collaborators.
    """

    def __init__(self, settings: Optional[VarsSettings] = None,
                 environ: Optional[Mapping[str, str]] = None):
        """
        Initialize the container.

        Args:
            settings: Settings override (defaults to settings read from the environment)
            environ: Environment used for settings and overrides (defaults to os.environ)
        """
        self.environ = environ
        self.settings = settings or VarsSettings.from_env(environ)

        self._repository: Optional[VarsFileRepository] = None
        self._store: Optional[VariableStore] = None

    @property
    def repository(self) -> VarsFileRepository:
        """Get the vars file repository."""
        if self._repository is None:
            self._repository = VarsFileRepository(self.settings.vars_file_path)
        return self._repository

    @property
    def store(self) -> VariableStore:
        """Get the production vars store."""
        if self._store is None:
            self._store = VariableStore(
                self.repository,
                environ=self.environ,
                env_prefix=self.settings.env_prefix,
            )
            logger.debug("Vars store ready at %s", self._store.get_storage_path())
        return self._store
