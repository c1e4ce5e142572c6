"""
Configuration probe for ``buildvars setup``.

Evaluates the user's configuration against a DiscoveryStore and turns the
collected requests into a SetupReport. The configuration's own build logic
never sees a real secret: the discovery store only hands out defaults and
placeholders.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Protocol, Sequence, Tuple

from buildvars.application.config_env import load_config
from buildvars.domain.settings import VarsSettings
from buildvars.infrastructure.config_loader import resolve_config_path
from buildvars.infrastructure.vars.discovery import DiscoveryStore
from buildvars.infrastructure.vars.store import VariableStore, VarsStore

logger = logging.getLogger(__name__)

ConfigEvaluator = Callable[[Path, VarsStore], Any]


@dataclass(frozen=True)
class SetupReport:
    """Outcome of one discovery pass, split into disjoint groups of keys."""

    required_to_set: Tuple[str, ...] = ()
    optional_to_set: Tuple[str, ...] = ()
    required_already_set: Tuple[str, ...] = ()
    optional_already_set: Tuple[str, ...] = ()
    env_vars: Tuple[str, ...] = ()

    @classmethod
    def from_store(cls, store: DiscoveryStore) -> "SetupReport":
        return cls(
            required_to_set=tuple(store.get_required_vars_to_set()),
            optional_to_set=tuple(store.get_optional_vars_to_set()),
            required_already_set=tuple(store.get_required_vars_already_set()),
            optional_already_set=tuple(store.get_optional_vars_already_set()),
            env_vars=tuple(store.get_env_vars()),
        )

    @property
    def nothing_to_set(self) -> bool:
        return not self.required_to_set and not self.optional_to_set

    @property
    def has_already_set(self) -> bool:
        return bool(self.required_already_set or self.optional_already_set or self.env_vars)


class SetupRenderer(Protocol):
    """Output side of the probe."""

    def configuration_error(self, config_path: Path, error: BaseException) -> None: ...

    def setup_report(self, report: SetupReport, set_command: str) -> None: ...


class ConfigurationProbe:
    """
    Runs a configuration in discovery mode and reports the vars it needs.

    The discovery store is created per run and passed to the evaluator
    explicitly, so probes never affect other users of the real store.
    """

    def __init__(self, store: VariableStore, settings: VarsSettings,
                 renderer: SetupRenderer,
                 evaluate: Optional[ConfigEvaluator] = None):
        """
        Initialize the probe.

        Args:
            store: Real store, consulted read-only for already-set vars
            settings: Settings providing config file names and the set command
            renderer: Output for the report and configuration errors
            evaluate: Callback evaluating a configuration file against a store
        """
        self.store = store
        self.settings = settings
        self.renderer = renderer
        self.evaluate = evaluate or load_config

    def discover(self, config_path: Path) -> DiscoveryStore:
        """Evaluate the configuration and return the populated discovery store."""
        discovery = DiscoveryStore(self.store)
        logger.debug("Evaluating %s in discovery mode", config_path)

        try:
            self.evaluate(config_path, discovery)
        except Exception as e:
            logger.debug("Configuration evaluation failed: %r", e)
            self.renderer.configuration_error(config_path, e)
            raise

        logger.debug("Discovered %d distinct vars", len(discovery.requests()))
        return discovery

    def run(self, config_path: Optional[str] = None,
            cwd: Optional[Path] = None) -> SetupReport:
        """
        Resolve, evaluate and report on a configuration file.

        Raises:
            ConfigurationEvaluationFailure: If no configuration file can be found
            Exception: Whatever the configuration itself raised, unchanged
        """
        resolved = resolve_config_path(config_path, self.settings.config_file_names, cwd=cwd)
        discovery = self.discover(resolved)

        report = SetupReport.from_store(discovery)
        self.renderer.setup_report(report, self.settings.set_command)
        return report


def format_set_commands(keys: Sequence[str], set_command: str) -> list:
    """Commands an operator should run to set ``keys``."""
    return [f"{set_command} {key}" for key in keys]
