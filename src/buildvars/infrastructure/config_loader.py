"""
Configuration file loader.

Locates the user's ``buildvars.config.py`` and executes it as a Python
module. What the configuration can see is decided by the caller through
the globals it passes in; this module has no knowledge of vars stores.
"""

import logging
import runpy
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from buildvars.domain.errors import ConfigurationEvaluationFailure

logger = logging.getLogger(__name__)


def find_config_file(start: Path, file_names: Iterable[str]) -> Optional[Path]:
    """
    Search ``start`` and each of its parents for a configuration file.

    Args:
        start: Directory to start from
        file_names: Candidate file names, in order of preference

    Returns:
        Path of the first match, or None
    """
    names = list(file_names)
    for directory in (start, *start.parents):
        for name in names:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None


def resolve_config_path(config_path: Optional[str], file_names: Iterable[str],
                        cwd: Optional[Path] = None) -> Path:
    """
    Resolve the configuration file to evaluate.

    Args:
        config_path: Explicit path from the command line, if any
        file_names: Names searched for when no path is given
        cwd: Directory relative paths and the search start from

    Returns:
        Absolute path of an existing configuration file

    Raises:
        ConfigurationEvaluationFailure: If no configuration file can be found
    """
    base = (cwd or Path.cwd()).absolute()

    if config_path is not None:
        resolved = (base / Path(config_path).expanduser()).absolute()
        if not resolved.is_file():
            raise ConfigurationEvaluationFailure(
                f"Configuration file '{config_path}' not found.", path=str(resolved)
            )
        return resolved

    found = find_config_file(base, file_names)
    if found is None:
        names = ", ".join(file_names)
        raise ConfigurationEvaluationFailure(
            f"You are not inside a buildvars project: no {names} found in {base} or its parents."
        )

    logger.debug("Found configuration file: %s", found)
    return found


def run_config_file(path: Path, init_globals: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Execute a configuration file as a module.

    The file's directory is on sys.path while it runs, so sibling
    modules can be imported. Exceptions raised by the configuration
    propagate unchanged.

    Args:
        path: Configuration file to execute
        init_globals: Names made available to the configuration

    Returns:
        The module namespace after execution
    """
    logger.info("Evaluating configuration: %s", path)
    try:
        source = Path(path).read_bytes()
    except OSError as e:
        raise ConfigurationEvaluationFailure(
            f"Cannot read configuration file '{path}': {e}", path=str(path)
        ) from e

    if not source.strip():
        logger.warning("Configuration file is empty: %s", path)

    config_dir = str(Path(path).resolve().parent)
    sys.path.insert(0, config_dir)
    try:
        return runpy.run_path(str(path), init_globals=init_globals, run_name="buildvars_config")
    finally:
        try:
            sys.path.remove(config_dir)
        except ValueError:
            logger.debug("Configuration removed %s from sys.path", config_dir)
