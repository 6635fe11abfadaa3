"""Main CLI entry point for the web interface guidelines installer."""

import logging
from typing import Annotated, Dict, List, Tuple

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .install import (
    AmpInstaller,
    AntigravityInstaller,
    ClaudeCodeInstaller,
    CursorInstaller,
    GeminiCLIInstaller,
    OpenCodeInstaller,
    WindsurfInstaller,
)
from .install.base import BaseInstaller
from .install.utils import (
    DEFAULT_TIMEOUT,
    GUIDELINES_URL,
    INSTALL_NAME,
    GuidelinesSource,
    InstallerError,
    show_installation_summary,
    show_no_tools_detected,
)

app = typer.Typer(
    name="web-interface-guidelines",
    help="Install Vercel's Web Interface Guidelines for your coding agents",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)

# Installation order; output follows it.
INSTALLERS = [
    ("amp", AmpInstaller),
    ("claude-code", ClaudeCodeInstaller),
    ("cursor", CursorInstaller),
    ("opencode", OpenCodeInstaller),
    ("windsurf", WindsurfInstaller),
    ("antigravity", AntigravityInstaller),
    ("gemini", GeminiCLIInstaller),
]


def build_installers(dry_run: bool = False) -> List[BaseInstaller]:
    """Instantiate every supported installer in installation order."""
    return [installer_class(dry_run=dry_run) for _, installer_class in INSTALLERS]


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        from web_interface_guidelines import __version__

        console.print(f"web-interface-guidelines version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send debug diagnostics to stderr when verbose."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def run(
    installers: List[BaseInstaller],
    source: GuidelinesSource,
    keep_going: bool = False,
) -> bool:
    """Install the guidelines for every detected application.

    Parameters
    ----------
    installers : List[BaseInstaller]
        Installers in the order they should run.
    source : GuidelinesSource
        Shared document; fetched at most once.
    keep_going : bool
        Record per-application failures and continue instead of raising.

    Returns
    -------
    bool
        True if at least one application was installed and none failed.

    Raises
    ------
    InstallerError
        On the first fetch or write failure, unless ``keep_going`` is set.
    """
    console.print("▲ Installing Vercel's Web Interface Guidelines…")
    console.print("")

    results: Dict[str, Tuple[bool, str]] = {}
    installed = 0

    for installer in installers:
        if not installer.is_detected():
            logger.debug("%s not detected, skipping", installer.app_name)
            continue

        try:
            success, message = installer.install(source)
        except InstallerError as e:
            if not keep_going:
                raise
            console.print(f"[red]✗[/red] {installer.label}: {escape(str(e))}", soft_wrap=True)
            success, message = False, str(e)

        results[installer.app_name] = (success, message)
        if success:
            installed += 1

    console.print("")

    if not results:
        show_no_tools_detected()
        return False

    if keep_going:
        show_installation_summary(results)
        if installed < len(results):
            return False

    console.print(f"Done! Run /{INSTALL_NAME} <file> to review.")
    return True


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    url: Annotated[
        str,
        typer.Option(
            "--url",
            envvar="WEB_INTERFACE_GUIDELINES_URL",
            help="Location of the guidelines command file",
        ),
    ] = GUIDELINES_URL,
    timeout: Annotated[
        float,
        typer.Option(
            "--timeout",
            envvar="WEB_INTERFACE_GUIDELINES_TIMEOUT",
            help="Download timeout in seconds",
        ),
    ] = DEFAULT_TIMEOUT,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Preview changes without applying"),
    ] = False,
    keep_going: Annotated[
        bool,
        typer.Option(
            "--keep-going",
            help="Continue with the remaining applications when one fails",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
):
    """Install the guidelines for every detected coding agent."""
    configure_logging(verbose)
    if ctx.invoked_subcommand is not None:
        return

    source = GuidelinesSource(url=url, timeout=timeout)
    try:
        success = run(build_installers(dry_run=dry_run), source, keep_going=keep_going)
    except InstallerError as e:
        console.print(f"[red]Installation failed: {escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    if not success:
        raise typer.Exit(1)


@app.command("status")
def status():
    """Show which applications are detected and have the guidelines."""
    table = Table(title="Web Interface Guidelines Installation Status", show_header=True)
    table.add_column("Application", style="cyan", no_wrap=True)
    table.add_column("Status", style="bold", no_wrap=True)
    table.add_column("Path", overflow="fold")
    table.add_column("Details", no_wrap=True)

    for installer in build_installers():
        try:
            state, details = installer.describe()
            table.add_row(
                installer.app_name, state, escape(str(installer.get_target_path())), details
            )
        except InstallerError as e:
            table.add_row(installer.app_name, "[red]✗[/red]", "Error", f"[red]{escape(str(e))}[/red]")

    console.print(table)
    console.print(
        "\n[dim]Legend: ✓ Installed | ○ Detected | − Not detected | ✗ Error[/dim]"
    )


if __name__ == "__main__":
    app()
