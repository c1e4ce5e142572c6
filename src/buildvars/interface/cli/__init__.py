"""
CLI package for buildvars.

Contains the command-line interface components.
"""

from .cli import main

__all__ = ["main"]
