"""Install packages with npm and record them as devDependencies."""

import logging
import os
import subprocess

from .errors import InstallError

logger = logging.getLogger(__name__)


def build_install_command(packages: str | list[str], npm: str = "npm") -> list[str]:
    """Build the argument vector for a save-dev install.

    A single string is one package name; it is not split on whitespace.
    """
    if isinstance(packages, str):
        packages = [packages]
    else:
        packages = list(packages)

    if not packages:
        raise ValueError("No packages given to install")

    return [npm, "install", "--save-dev", *packages]


def install_sync_save_dev(
    packages: str | list[str],
    npm: str = "npm",
    cwd: str | os.PathLike | None = None,
) -> None:
    """Install packages synchronously and save them to devDependencies.

    The package manager inherits this process's standard streams and the
    call blocks until it exits.

    Args:
        packages: Package name or names to install
        npm: Package manager executable
        cwd: Directory to run the install in, defaults to the current one

    Raises:
        InstallError: If the install exits non-zero or cannot be started
    """
    command = build_install_command(packages, npm)
    logger.debug("Running %s", " ".join(command))

    try:
        subprocess.run(command, cwd=cwd, check=True)
    except subprocess.CalledProcessError as e:
        raise InstallError(
            f"{command[0]} install exited with status {e.returncode}",
            command,
            e.returncode,
        ) from e
    except OSError as e:
        raise InstallError(f"Could not run {command[0]}: {e}", command) from e
