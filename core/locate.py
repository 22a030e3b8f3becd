"""Locate the nearest package.json by walking up the directory tree."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"


def find_manifest(start_dir: str | os.PathLike) -> Path | None:
    """Find the closest package.json at or above ``start_dir``.

    Args:
        start_dir: Directory to start searching from. Pass ``Path.cwd()``
            to search from the process working directory.

    Returns:
        Absolute path to the closest package.json, or None if there is
        none up to and including the filesystem root
    """
    directory = Path(os.path.abspath(start_dir))

    while True:
        candidate = directory / MANIFEST_FILENAME
        if candidate.is_file():
            logger.debug("Found manifest at %s", candidate)
            return candidate

        parent = directory.parent
        if parent == directory:
            logger.debug("No %s found above %s", MANIFEST_FILENAME, start_dir)
            return None
        directory = parent
