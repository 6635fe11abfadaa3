"""Base installer class for the guidelines command file."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Tuple

from rich.console import Console
from rich.markup import escape

from .utils import GuidelinesSource, INSTALL_NAME, get_app_display_name, write_text_atomic

console = Console()
logger = logging.getLogger(__name__)


class BaseInstaller(ABC):
    """Base class for guideline installers.

    Each subclass describes one host application: how to detect it, where
    its command file lives and how the shared document is converted for it.
    """

    #: Text shown after the check mark once installed.
    label: str = ""
    #: Append-style targets add to a shared file and must not do so twice.
    append_only: bool = False

    def __init__(self, app_key: str, install_name: str = INSTALL_NAME, dry_run: bool = False):
        """Initialize the installer.

        Parameters
        ----------
        app_key : str
            Application identifier (e.g., 'claude-code').
        install_name : str
            Base name of the installed command, without extension.
        dry_run : bool
            Report what would be written without fetching or writing.
        """
        self.app_key = app_key
        self.app_name = get_app_display_name(app_key)
        self.install_name = install_name
        self.dry_run = dry_run

    @abstractmethod
    def is_detected(self) -> bool:
        """Return True if the host application appears to be installed."""

    @abstractmethod
    def get_target_path(self) -> Path:
        """Get the file the guidelines are written to.

        Returns
        -------
        Path
            Destination file for this application.
        """

    def render(self, content: str) -> str:
        """Convert the fetched document into the file content to write.

        The default is an identity copy.
        """
        return content

    def is_installed(self) -> bool:
        """Return True if the guidelines are already present at the target."""
        return self.get_target_path().is_file()

    def install(self, source: GuidelinesSource) -> Tuple[bool, str]:
        """Install the guidelines for this application.

        Parameters
        ----------
        source : GuidelinesSource
            Provides the fetched document; only consulted when a write is
            actually needed.

        Returns
        -------
        Tuple[bool, str]
            Success status and message.

        Raises
        ------
        InstallerError
            If the document cannot be fetched or the target cannot be written.
        """
        target = self.get_target_path()
        logger.debug("Installing for %s into %s", self.app_name, target)

        if self.append_only and self.is_installed():
            console.print(f"[green]✓[/green] {self.app_name} [dim](already installed)[/dim]")
            return True, "Already installed"

        if self.dry_run:
            console.print(
                f"[yellow]DRY RUN[/yellow] {self.label}: would write {escape(str(target))}",
                soft_wrap=True,
            )
            return True, "Dry run completed"

        write_text_atomic(target, self.render(source.get()))
        console.print(f"[green]✓[/green] {self.label}")
        return True, "Installation successful"

    def describe(self) -> Tuple[str, str]:
        """Return a (status, details) pair for the status table."""
        if self.is_installed():
            return "[green]✓[/green]", "Installed"
        if not self.is_detected():
            return "[dim]−[/dim]", "Not detected"
        return "[yellow]○[/yellow]", "Detected, not installed"
