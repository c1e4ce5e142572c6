"""
Vars file repository.

This module provides the infrastructure layer for vars persistence.
It handles file I/O and document validation; it knows nothing about
key rules or environment overrides.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from buildvars.domain.errors import CorruptedVarsFile
from buildvars.domain.models import VarsFile

logger = logging.getLogger(__name__)


class VarsFileRepository:
    """
    Repository for the single JSON file holding all stored vars.

    The file is created (with an empty document) on first use. Every save
    replaces the file atomically, so an interrupted write leaves the
    previous document intact.
    """

    FILE_MODE = 0o600

    def __init__(self, path: Path):
        """
        Initialize the vars repository.

        Args:
            path: Location of the vars file
        """
        self.path = Path(path).absolute()
        self._ensure_vars_file()

    def _ensure_vars_file(self) -> None:
        """Ensure the vars file and its directory exist."""
        if self.path.exists():
            return

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.save(VarsFile())
        logger.info("Created vars file: %s", self.path)

    def load(self) -> VarsFile:
        """
        Load the vars document.

        Returns:
            Parsed VarsFile model

        Raises:
            CorruptedVarsFile: If the file is not valid JSON or not a vars document
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.warning("Vars file disappeared, starting empty: %s", self.path)
            return VarsFile()
        except json.JSONDecodeError as e:
            logger.error("Failed to parse vars file %s: %s", self.path, e)
            raise CorruptedVarsFile(str(self.path), f"invalid JSON ({e.msg})") from e

        try:
            return VarsFile.model_validate(data)
        except ValidationError as e:
            logger.error("Invalid vars document in %s: %s", self.path, e)
            raise CorruptedVarsFile(str(self.path), "unexpected document structure") from e

    def save(self, vars_file: VarsFile) -> None:
        """
        Persist the vars document, replacing the previous one atomically.

        Args:
            vars_file: Document to write
        """
        content = json.dumps(vars_file.to_document(), indent=2, ensure_ascii=False)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            try:
                os.chmod(tmp_name, self.FILE_MODE)
            except OSError as e:
                logger.debug("Could not restrict permissions of %s: %s", tmp_name, e)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug("Saved vars file: %s (%d entries)", self.path, len(vars_file.vars))
