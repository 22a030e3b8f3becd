"""Node.js package.json parsing."""

import json
import logging
from pathlib import Path

from .errors import MalformedManifestError
from .models import DEPENDENCIES, DEV_DEPENDENCIES, Manifest, ManifestEntry

logger = logging.getLogger(__name__)


class PackageJsonParser:
    """Parser for package.json files."""

    groups = (DEPENDENCIES, DEV_DEPENDENCIES)

    def __init__(self, path: Path | None = None):
        self.path = path

    def _load(self, content: str) -> dict:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise MalformedManifestError(f"Invalid JSON: {e}", self.path) from e

        if not isinstance(data, dict):
            raise MalformedManifestError(
                f"Expected a JSON object, got {type(data).__name__}", self.path
            )
        return data

    def _parse_group(self, data: dict, group: str) -> list[ManifestEntry]:
        """Read one dependency field; absent or null means no entries."""
        declared = data.get(group)
        if declared is None:
            return []
        if not isinstance(declared, dict):
            raise MalformedManifestError(
                f'"{group}" must be an object, got {type(declared).__name__}', self.path
            )

        return [
            ManifestEntry(
                name=name,
                spec=spec if isinstance(spec, str) else None,
                group=group,
            )
            for name, spec in declared.items()
        ]

    def parse(self, content: str) -> Manifest:
        """Parse package.json content into Manifest."""
        data = self._load(content)
        entries: list[ManifestEntry] = []

        for group in self.groups:
            entries.extend(self._parse_group(data, group))

        logger.debug("Parsed %d entries from %s", len(entries), self.path or "<string>")
        return Manifest(ecosystem="node", raw=content, entries=entries, path=self.path)


def parse_package_json(content: str, path: Path | None = None) -> Manifest:
    """Parse package.json content into Manifest.

    Args:
        content: The package.json file content
        path: Where the content was read from, used in error messages

    Returns:
        Parsed Manifest object

    Raises:
        MalformedManifestError: If the content is not a valid manifest
    """
    parser = PackageJsonParser(path)
    return parser.parse(content)


def read_manifest(path: Path) -> Manifest:
    """Read and parse a package.json file."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedManifestError(f"Invalid UTF-8: {e}", path) from e
    return parse_package_json(content, path)
