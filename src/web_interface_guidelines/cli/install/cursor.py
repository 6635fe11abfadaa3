"""Cursor installer for the guidelines."""

from pathlib import Path

from .base import BaseInstaller
from .utils import any_dir_exists, expand_path


class CursorInstaller(BaseInstaller):
    """Installer for Cursor IDE (1.6+, which added custom commands)."""

    label = "Cursor Command"

    def __init__(self, **kwargs):
        """Initialize Cursor installer."""
        super().__init__(app_key="cursor", **kwargs)

    def is_detected(self) -> bool:
        return any_dir_exists(["~/.cursor"])

    def get_target_path(self) -> Path:
        """Get the global Cursor command path.

        Returns
        -------
        Path
            Markdown command under ~/.cursor/commands.
        """
        return expand_path(f"~/.cursor/commands/{self.install_name}.md")
