"""
CLI main entry point.

Process boundary of buildvars: typer exits with the task's status code,
and exceptions raised by a user's configuration reach the interpreter
with their original type.
"""


def main() -> int:
    """
    Main entry point for the buildvars CLI.

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    # Import here to avoid circular imports
    from .orchestrator import app
    app()
    return 0
