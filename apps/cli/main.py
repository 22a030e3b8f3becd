"""CLI application for npmdeps."""

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from core.errors import NpmDepsError
from core.install import install_sync_save_dev
from core.models import CheckOptions, CheckReport
from core.npm_util import check_report

console = Console()


def format_table_output(report: CheckReport) -> str:
    """Format one line per package with a presence mark."""
    lines = [f"Manifest: {escape(str(report.manifest_path))}"]
    for name, present in report.status.items():
        mark = "[green]✓[/green]" if present else "[red]✗[/red]"
        lines.append(f"{mark} {escape(name)}")
    return "\n".join(lines)


def format_json_output(report: CheckReport) -> str:
    """Format JSON output."""
    return json.dumps(
        {"manifest": str(report.manifest_path), "packages": report.status},
        indent=2,
    )


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


app = typer.Typer(
    name="npmdeps",
    help="npmdeps - Check and install dependencies declared in package.json",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """npmdeps - Check and install dependencies declared in package.json."""
    configure_logging(verbose)


@app.command()
def check(
    packages: list[str] = typer.Argument(help="Package names to look up"),
    dev: bool = typer.Option(False, "--dev", "-D", help="Search devDependencies"),
    all_groups: bool = typer.Option(
        False, "--all", help="Search both dependencies and devDependencies"
    ),
    cwd: Path | None = typer.Option(
        None, "--cwd", envvar="NPMDEPS_CWD", help="Directory to start the package.json search from"
    ),
    format_type: str = typer.Option("table", "--format", help="Output format: table or json"),
) -> None:
    """Report whether packages are declared in the nearest package.json."""
    if all_groups:
        options = CheckOptions(dependencies=True, dev_dependencies=True)
    elif dev:
        options = CheckOptions(dev_dependencies=True)
    else:
        options = CheckOptions(dependencies=True)

    try:
        report = check_report(packages, options, cwd or Path.cwd())
    except NpmDepsError as e:
        console.print(f"Error: {escape(str(e))}", style="red")
        raise typer.Exit(1)

    if format_type == "json":
        console.print_json(format_json_output(report))
    else:
        console.print(format_table_output(report), soft_wrap=True)

    if report.missing:
        raise typer.Exit(2)  # Some packages not declared


@app.command()
def install(
    packages: list[str] = typer.Argument(help="Package names to install"),
    npm: str = typer.Option("npm", "--npm", envvar="NPMDEPS_NPM", help="Package manager executable"),
    cwd: Path | None = typer.Option(
        None, "--cwd", envvar="NPMDEPS_CWD", help="Directory to run the install in"
    ),
) -> None:
    """Install packages and save them to devDependencies."""
    try:
        install_sync_save_dev(packages, npm=npm, cwd=cwd)
    except NpmDepsError as e:
        console.print(f"Error: {escape(str(e))}", style="red")
        raise typer.Exit(1)

    console.print(f"Installed {escape(', '.join(packages))}")


@app.command()
def ensure(
    packages: list[str] = typer.Argument(help="Package names that must be devDependencies"),
    npm: str = typer.Option("npm", "--npm", envvar="NPMDEPS_NPM", help="Package manager executable"),
    cwd: Path | None = typer.Option(
        None, "--cwd", envvar="NPMDEPS_CWD", help="Directory to start the package.json search from"
    ),
) -> None:
    """Install whichever packages are missing from devDependencies."""
    try:
        report = check_report(packages, CheckOptions(dev_dependencies=True), cwd or Path.cwd())

        if not report.missing:
            console.print("All packages already installed")
            return

        # Install next to the manifest so npm updates the same package.json
        install_sync_save_dev(report.missing, npm=npm, cwd=report.manifest_path.parent)
    except NpmDepsError as e:
        console.print(f"Error: {escape(str(e))}", style="red")
        raise typer.Exit(1)

    console.print(f"Installed {escape(', '.join(report.missing))}")


if __name__ == "__main__":
    app()
