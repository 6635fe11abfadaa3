"""Gemini CLI installer for the guidelines."""

import logging
from pathlib import Path
from typing import Tuple

import toml

from .base import BaseInstaller
from .markdown import to_gemini_toml
from .utils import any_dir_exists, command_exists, expand_path

logger = logging.getLogger(__name__)


class GeminiCLIInstaller(BaseInstaller):
    """Installer for Gemini CLI, which uses TOML command files."""

    label = "Gemini CLI Command"

    def __init__(self, **kwargs):
        """Initialize Gemini CLI installer."""
        super().__init__(app_key="gemini", **kwargs)

    def is_detected(self) -> bool:
        return command_exists("gemini") or any_dir_exists(["~/.gemini"])

    def get_target_path(self) -> Path:
        """Get the Gemini CLI command path.

        Returns
        -------
        Path
            TOML command under ~/.gemini/commands.
        """
        return expand_path(f"~/.gemini/commands/{self.install_name}.toml")

    def render(self, content: str) -> str:
        return to_gemini_toml(content)

    def describe(self) -> Tuple[str, str]:
        """Report the command as invalid if Gemini CLI could not parse it."""
        status, details = super().describe()
        if details != "Installed":
            return status, details

        path = self.get_target_path()
        try:
            with open(path, "r", encoding="utf-8") as f:
                command = toml.load(f)
        except (toml.TomlDecodeError, OSError) as e:
            logger.debug("Could not parse %s: %s", path, e)
            return "[red]✗[/red]", f"Invalid TOML: {str(e)[:30]}"

        if "prompt" not in command:
            return "[yellow]○[/yellow]", "Missing prompt"
        return status, details
