"""
Interactive prompt for var values.

Used by ``buildvars set KEY`` when no value is given on the command line.
Input is hidden so the secret never appears on screen or in scrollback.
"""

import typer

from buildvars.domain.errors import InvalidEmptyValue


def prompt_for_value() -> str:
    """
    Read a value from the terminal.

    Raises:
        InvalidEmptyValue: If the value is blank once whitespace is removed
        click.exceptions.Abort: If the operator cancels the prompt
    """
    value = typer.prompt("Enter value", hide_input=True, err=True)
    if not value.strip():
        raise InvalidEmptyValue()
    return value
