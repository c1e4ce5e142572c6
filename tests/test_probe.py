"""
Tests for the setup probe and its report rendering.
"""

from unittest.mock import Mock

import pytest

from buildvars.application.probe import ConfigurationProbe, SetupReport, format_set_commands
from buildvars.domain.errors import ConfigurationEvaluationFailure
from buildvars.infrastructure.vars.discovery import DiscoveryStore

A_AND_B_CONFIG = 'a = vars.get("A")\nb = vars.get("B", "x")\n'


class ConfigError(Exception):
    """Raised by test configurations."""


class TestConfigurationProbe:
    """Test cases for ConfigurationProbe."""

    @pytest.fixture
    def probe(self, store, settings, formatter):
        return ConfigurationProbe(store, settings, formatter)

    def test_report_for_unset_vars(self, probe, write_config):
        """Required and optional vars to set are reported."""
        path = write_config(A_AND_B_CONFIG)

        report = probe.run(str(path))

        assert report == SetupReport(required_to_set=("A",), optional_to_set=("B",))

    def test_report_with_stored_and_env_vars(self, probe, store, environ, write_config):
        """Stored and env-satisfied vars are reported as already set."""
        store.set("A", "secret")
        environ["BUILDVARS_VAR_B"] = "x"
        path = write_config(A_AND_B_CONFIG)

        report = probe.run(str(path))

        assert report.nothing_to_set
        assert report.required_already_set == ("A",)
        assert report.env_vars == ("BUILDVARS_VAR_B",)

    def test_searches_for_config_from_cwd(self, probe, write_config):
        """Without a path the configuration is found from cwd."""
        path = write_config(A_AND_B_CONFIG)

        report = probe.run(None, cwd=path.parent)

        assert report.required_to_set == ("A",)

    def test_missing_config_is_fatal(self, probe, tmp_path, formatter):
        """No configuration file means no evaluation and no report."""
        with pytest.raises(ConfigurationEvaluationFailure):
            probe.run(None, cwd=tmp_path)
        assert formatter.stdout == ""

    def test_configuration_error_is_reraised(self, store, settings, formatter, write_config):
        """The original error propagates after a hint; no report is printed."""
        error = ConfigError("broken")
        evaluate = Mock(side_effect=error)
        probe = ConfigurationProbe(store, settings, formatter, evaluate=evaluate)
        path = write_config("")

        with pytest.raises(ConfigError) as exc_info:
            probe.run(str(path))

        assert exc_info.value is error
        assert "There is an error in your buildvars configuration file" in formatter.stderr
        assert formatter.stdout == ""

    def test_evaluator_receives_discovery_store(self, store, settings, formatter, write_config):
        """The evaluator is handed a fresh DiscoveryStore, never the real store."""
        seen = []

        def evaluate(path, active_store):
            seen.append(active_store)
            active_store.get("FROM_CALLBACK")

        probe = ConfigurationProbe(store, settings, formatter, evaluate=evaluate)
        path = write_config("")

        first = probe.run(str(path))
        second = probe.run(str(path))

        assert isinstance(seen[0], DiscoveryStore)
        assert seen[0] is not seen[1]
        assert seen[0].backing is store
        assert first == second == SetupReport(required_to_set=("FROM_CALLBACK",))

    def test_real_store_untouched(self, probe, store, write_config):
        """Setup leaves the real store as it was."""
        path = write_config('vars.get("A")\n')
        store.set("EXISTING", "1")

        probe.run(str(path))

        assert store.list() == ["EXISTING"]


class TestSetupReportRendering:
    """Test cases for the rendered setup report."""

    def test_nothing_to_setup(self, formatter):
        """An empty report prints only the success message."""
        formatter.setup_report(SetupReport(), "buildvars set")

        assert formatter.stdout_lines() == ["There are no key-value pairs to setup"]

    def test_nothing_to_setup_with_already_set(self, formatter):
        """The already-set section is printed even when nothing is missing."""
        report = SetupReport(required_already_set=("A",), env_vars=("BUILDVARS_VAR_B",))
        formatter.setup_report(report, "buildvars set")

        assert formatter.stdout_lines() == [
            "There are no key-value pairs to setup",
            "<already set variables>",
            "<mandatory>",
            "A",
            "<environment variables with values>",
            "BUILDVARS_VAR_B",
        ]

    def test_full_report(self, formatter):
        """Missing vars come first, each with the command that sets it."""
        report = SetupReport(
            required_to_set=("A", "C"),
            optional_to_set=("B",),
            required_already_set=("D",),
            optional_already_set=("E",),
        )
        formatter.setup_report(report, "buildvars set")

        assert formatter.stdout_lines() == [
            "The following key-value pairs need to be setup:",
            "<mandatory variables>",
            "buildvars set A",
            "buildvars set C",
            "<optional variables>",
            "buildvars set B",
            "<already set variables>",
            "<mandatory>",
            "D",
            "<optional>",
            "E",
        ]

    def test_only_optional_missing(self, formatter):
        """The mandatory block is omitted when no required var is missing."""
        formatter.setup_report(SetupReport(optional_to_set=("B",)), "buildvars set")

        assert formatter.stdout_lines() == [
            "The following key-value pairs need to be setup:",
            "<optional variables>",
            "buildvars set B",
        ]

    def test_format_set_commands(self):
        """Each key is appended to the set command."""
        assert format_set_commands(["A", "B"], "tool set") == ["tool set A", "tool set B"]
