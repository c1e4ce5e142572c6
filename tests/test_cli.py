"""
End-to-end tests of the typer command line.

The CLI state is injected through ``obj`` so each run uses a temporary
store and in-memory consoles.
"""

import pytest
from typer.testing import CliRunner

from buildvars.interface.cli.orchestrator import CliState, app

runner = CliRunner()


class TestCli:
    """Test cases for the buildvars command line."""

    @pytest.fixture(autouse=True)
    def keep_test_logging(self, monkeypatch):
        """Leave pytest's logging handlers in place."""
        monkeypatch.setattr("buildvars.interface.cli.orchestrator.setup_logging", lambda *args: None)

    @pytest.fixture
    def state(self, container, formatter):
        return CliState(container=container, formatter=formatter)

    def invoke(self, state, *args, **kwargs):
        return runner.invoke(app, list(args), obj=state, **kwargs)

    def test_set_get_roundtrip(self, state, formatter):
        """A value set from the command line is printed back by get."""
        assert self.invoke(state, "set", "API_KEY", "abc:smile:[b]").exit_code == 0
        result = self.invoke(state, "get", "API_KEY")

        assert result.exit_code == 0
        assert formatter.stdout == "abc:smile:[b]\n"

    def test_set_prompts_for_hidden_value(self, state, store):
        """set without a value reads it from the prompt."""
        result = self.invoke(state, "set", "API_KEY", input="typed-secret\n")

        assert result.exit_code == 0
        assert store.get("API_KEY") == "typed-secret"
        assert "typed-secret" not in result.output

    def test_set_blank_prompted_value(self, state, store, formatter):
        """A whitespace-only prompted value fails with a non-zero exit."""
        result = self.invoke(state, "set", "API_KEY", input="   \n")

        assert result.exit_code == 1
        assert "empty value" in formatter.stderr
        assert store.list() == []

    def test_set_invalid_key(self, state, formatter):
        """Invalid keys are reported and exit non-zero."""
        result = self.invoke(state, "set", "NOT-VALID", "value")

        assert result.exit_code == 1
        assert "Invalid key 'NOT-VALID'" in formatter.stderr

    def test_get_missing(self, state):
        """get on an unknown key exits with 1."""
        assert self.invoke(state, "get", "MISSING").exit_code == 1

    def test_list_and_delete(self, state, store, formatter):
        """list shows stored keys; delete removes them."""
        store.set("A", "1")

        assert self.invoke(state, "list").exit_code == 0
        assert formatter.stdout_lines() == ["A"]

        assert self.invoke(state, "delete", "A").exit_code == 0
        assert self.invoke(state, "delete", "A").exit_code == 1

    def test_path(self, state, store, formatter):
        """path prints the storage location."""
        assert self.invoke(state, "path").exit_code == 0
        assert formatter.stdout.strip() == store.get_storage_path()

    def test_unknown_command(self, state):
        """Unknown subcommands are rejected by the argument parser."""
        result = self.invoke(state, "rename")

        assert result.exit_code != 0

    def test_setup_with_config_option(self, state, formatter, write_config):
        """setup evaluates the file named by --config."""
        path = write_config('key = vars.get("DEPLOYER_KEY")\nurl = vars.get("RPC_URL", "http://localhost")\n')

        result = self.invoke(state, "--config", str(path), "setup")

        assert result.exit_code == 0
        assert "buildvars set DEPLOYER_KEY" in formatter.stdout
        assert "buildvars set RPC_URL" in formatter.stdout

    def test_setup_missing_config(self, state, tmp_path, formatter):
        """A --config path that does not exist is reported."""
        result = self.invoke(state, "--config", str(tmp_path / "missing.py"), "setup")

        assert result.exit_code == 1
        assert "not found" in formatter.stderr

    def test_setup_broken_config(self, state, formatter, write_config):
        """A configuration error escapes with its original type."""
        path = write_config("raise ValueError('bad network')\n")

        result = self.invoke(state, "--config", str(path), "setup")

        assert result.exit_code != 0
        assert isinstance(result.exception, ValueError)
        assert str(result.exception) == "bad network"
        assert formatter.stdout == ""
        assert "There is an error in your buildvars configuration file" in formatter.stderr
