"""Exceptions raised by npmdeps."""

from pathlib import Path


class NpmDepsError(Exception):
    """Base class for npmdeps errors."""


class ManifestNotFoundError(NpmDepsError):
    """No package.json between the start directory and the filesystem root."""

    def __init__(self, start_dir: Path):
        self.start_dir = start_dir
        super().__init__(f"Could not find a package.json file from {start_dir}")


class MalformedManifestError(NpmDepsError, ValueError):
    """package.json is not valid JSON or has an unexpected shape."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class InstallError(NpmDepsError):
    """The package manager failed or could not be started."""

    def __init__(self, message: str, command: list[str], returncode: int | None = None):
        self.command = command
        self.returncode = returncode
        super().__init__(message)
