"""Check whether packages are declared in a project's package.json."""

import os
from pathlib import Path

from .errors import ManifestNotFoundError
from .locate import find_manifest
from .models import CheckOptions, CheckReport
from .parse_node import read_manifest


def check_report(
    packages: list[str], options: CheckOptions, start_dir: str | os.PathLike
) -> CheckReport:
    """Check packages against the closest manifest and keep its location.

    Raises:
        ManifestNotFoundError: If no package.json exists up to the root
        MalformedManifestError: If the package.json cannot be parsed
    """
    manifest_path = find_manifest(start_dir)
    if manifest_path is None:
        raise ManifestNotFoundError(Path(os.path.abspath(start_dir)))

    manifest = read_manifest(manifest_path)

    declared: set[str] = set()
    for group in options.groups():
        declared |= manifest.names(group)

    status = {package: package in declared for package in packages}
    return CheckReport(manifest_path=manifest_path, status=status)


def check(
    packages: list[str], options: CheckOptions, start_dir: str | os.PathLike
) -> dict[str, bool]:
    """Check whether packages are included in a project's package.json.

    Args:
        packages: Package names to look up
        options: Which dependency fields to search
        start_dir: Directory to start the manifest search from

    Returns:
        Mapping of each requested name to whether it is declared
    """
    return check_report(packages, options, start_dir).status


def check_deps(packages: list[str], start_dir: str | os.PathLike) -> dict[str, bool]:
    """Check packages against the manifest's dependencies."""
    return check(packages, CheckOptions(dependencies=True), start_dir)


def check_dev_deps(packages: list[str], start_dir: str | os.PathLike) -> dict[str, bool]:
    """Check packages against the manifest's devDependencies."""
    return check(packages, CheckOptions(dev_dependencies=True), start_dir)
