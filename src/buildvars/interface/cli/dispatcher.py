"""
Vars command dispatcher.

Maps a task name to one of the vars operations and returns the process
exit code. Expected misses (unknown key, nothing to delete) are reported
as warnings with exit code 1; fatal errors are raised and left for the
process boundary.
"""

import logging
from typing import Any, Callable, Dict, Optional

from buildvars.application.probe import ConfigurationProbe
from buildvars.domain.errors import UnrecognizedTask
from buildvars.infrastructure.vars.store import VarsStore
from buildvars.interface.cli.formatters import VarsFormatter
from buildvars.interface.cli.prompt import prompt_for_value

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1


class VarsCommandDispatcher:
    """
    Runs one vars task against the store it was given.

    The store is injected, so the same dispatcher drives the real store or
    any other VarsStore implementation.
    """

    TASKS = ("set", "get", "list", "delete", "path", "setup")

    def __init__(self, store: VarsStore, formatter: VarsFormatter,
                 probe: Optional[ConfigurationProbe] = None,
                 prompt: Callable[[], str] = prompt_for_value):
        """
        Initialize the dispatcher.

        Args:
            store: Store the operations act on
            formatter: Output for results and messages
            probe: Configuration probe used by the setup task
            prompt: Reads a value interactively when set is called without one
        """
        self.store = store
        self.formatter = formatter
        self.probe = probe
        self.prompt = prompt

    def dispatch(self, task: str, **arguments: Any) -> int:
        """
        Run ``task`` with its parsed arguments.

        Raises:
            UnrecognizedTask: If ``task`` is not a vars task
        """
        handlers: Dict[str, Callable[..., int]] = {
            "set": self.set,
            "get": self.get,
            "list": self.list,
            "delete": self.delete,
            "path": self.path,
            "setup": self.setup,
        }
        handler = handlers.get(task)
        if handler is None:
            raise UnrecognizedTask(task)

        logger.debug("Running vars task %s", task)
        return handler(**arguments)

    def set(self, key: str, value: Optional[str] = None) -> int:
        self.store.validate_key(key)

        if value is None:
            value = self.prompt()

        self.store.set(key, value)
        self.formatter.stored(self.store.get_storage_path())
        return EXIT_OK

    def get(self, key: str) -> int:
        value = self.store.get(key)

        if value is not None:
            self.formatter.value(value)
            return EXIT_OK

        self.formatter.missing_key(key)
        return EXIT_NOT_FOUND

    def list(self) -> int:
        keys = self.store.list()

        if keys:
            self.formatter.keys(keys)
            self.formatter.listed(self.store.get_storage_path())
        else:
            self.formatter.nothing_stored()

        return EXIT_OK

    def delete(self, key: str) -> int:
        if self.store.delete(key):
            self.formatter.deleted(self.store.get_storage_path())
            return EXIT_OK

        self.formatter.missing_key(key)
        return EXIT_NOT_FOUND

    def path(self) -> int:
        self.formatter.path(self.store.get_storage_path())
        return EXIT_OK

    def setup(self, config_path: Optional[str] = None) -> int:
        if self.probe is None:
            raise RuntimeError("The setup task needs a configuration probe")

        self.probe.run(config_path)
        return EXIT_OK
