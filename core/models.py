"""Core data models for npmdeps."""

from dataclasses import dataclass, field
from pathlib import Path

DEPENDENCIES = "dependencies"
DEV_DEPENDENCIES = "devDependencies"


@dataclass
class ManifestEntry:
    """A single dependency entry in a package.json file."""

    name: str
    spec: str | None = None
    group: str = DEPENDENCIES  # dependencies, devDependencies


@dataclass
class Manifest:
    """A parsed package.json manifest."""

    ecosystem: str  # always node
    raw: str
    entries: list[ManifestEntry]
    path: Path | None = None

    def names(self, group: str) -> set[str]:
        """Return the package names declared in ``group``."""
        return {entry.name for entry in self.entries if entry.group == group}


@dataclass
class CheckOptions:
    """Which manifest fields a dependency check searches."""

    dependencies: bool = False
    dev_dependencies: bool = False

    def groups(self) -> list[str]:
        selected = []
        if self.dependencies:
            selected.append(DEPENDENCIES)
        if self.dev_dependencies:
            selected.append(DEV_DEPENDENCIES)
        return selected


@dataclass
class CheckReport:
    """Outcome of a dependency check against one manifest."""

    manifest_path: Path
    status: dict[str, bool] = field(default_factory=dict)

    @property
    def missing(self) -> list[str]:
        return [name for name, present in self.status.items() if not present]
