"""
CLI Orchestrator - Main Entry Point

Wires the typer command line to the vars command dispatcher. typer parses
the task name and its arguments; the dispatcher does the work and returns
the exit code.
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from buildvars.application.container import Container
from buildvars.application.probe import ConfigurationProbe
from buildvars.domain.errors import VarsError
from buildvars.infrastructure.logging_config import setup_logging
from buildvars.interface.cli.dispatcher import VarsCommandDispatcher
from buildvars.interface.cli.formatters import VarsFormatter

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="buildvars",
    help="🔒 Manage the configuration variables used by your build configuration",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
    pretty_exceptions_show_locals=False,
)


class CliState:
    """Per-invocation state shared by the commands through the typer context."""

    def __init__(self, config_path: Optional[str] = None,
                 container: Optional[Container] = None,
                 formatter: Optional[VarsFormatter] = None):
        self.config_path = config_path
        self._container = container
        self.formatter = formatter or VarsFormatter()

    @property
    def container(self) -> Container:
        if self._container is None:
            self._container = Container()
        return self._container

    def dispatcher(self) -> VarsCommandDispatcher:
        container = self.container
        probe = ConfigurationProbe(container.store, container.settings, self.formatter)
        return VarsCommandDispatcher(container.store, self.formatter, probe=probe)


def _run(ctx: typer.Context, task: str, **arguments) -> None:
    """Dispatch ``task`` and turn its status into the process exit code."""
    state: CliState = ctx.obj
    try:
        code = state.dispatcher().dispatch(task, **arguments)
    except VarsError as e:
        logger.debug("Task %s failed: %s", task, e.kind)
        state.formatter.error(e.message)
        raise typer.Exit(1) from e

    if code:
        raise typer.Exit(code)


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write logs to file"),
    config: Optional[str] = typer.Option(
        None, "--config", help="Configuration file used by setup (searched for by default)"
    ),
):
    """
    🔒 buildvars - configuration variables kept out of source control

    Values are stored per user, outside the project. An environment
    variable named [bold]BUILDVARS_VAR_<KEY>[/bold] overrides a stored value.
    """
    setup_logging(logging.DEBUG if verbose else logging.WARNING,
                  str(log_file) if log_file else None)

    if ctx.obj is None:
        ctx.obj = CliState(config_path=config)
    elif config is not None:
        ctx.obj.config_path = config


@app.command("set")
def set_var(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="The key of the variable"),
    value: Optional[str] = typer.Argument(
        None, help="The value; prompted for (hidden) when omitted"
    ),
):
    """Set the value of a variable."""
    _run(ctx, "set", key=key, value=value)


@app.command("get")
def get_var(ctx: typer.Context, key: str = typer.Argument(..., help="The key of the variable")):
    """Print the value of a variable."""
    _run(ctx, "get", key=key)


@app.command("list")
def list_vars(ctx: typer.Context):
    """List the keys of all stored variables."""
    _run(ctx, "list")


@app.command("delete")
def delete_var(ctx: typer.Context, key: str = typer.Argument(..., help="The key of the variable")):
    """Delete a variable."""
    _run(ctx, "delete", key=key)


@app.command("path")
def show_path(ctx: typer.Context):
    """Print the path of the file where variables are stored."""
    _run(ctx, "path")


@app.command("setup")
def setup_vars(ctx: typer.Context):
    """
    List the variables the configuration needs.

    Evaluates the configuration without giving it any stored value and
    prints the [bold]set[/bold] command for every variable still missing.
    """
    state: CliState = ctx.obj
    _run(ctx, "setup", config_path=state.config_path)
