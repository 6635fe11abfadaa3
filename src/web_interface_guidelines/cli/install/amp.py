"""Amp Code installer for the guidelines."""

from pathlib import Path

from .base import BaseInstaller
from .utils import any_dir_exists, expand_path


class AmpInstaller(BaseInstaller):
    """Installer for Amp Code."""

    label = "Amp Code Skill"

    def __init__(self, **kwargs):
        """Initialize Amp Code installer."""
        super().__init__(app_key="amp", **kwargs)

    def is_detected(self) -> bool:
        return any_dir_exists(["~/.amp"])

    def get_target_path(self) -> Path:
        """Get the Amp Code command file path.

        Returns
        -------
        Path
            Markdown command under ~/.config/amp/commands.
        """
        # Amp keeps its data in ~/.amp but reads commands from ~/.config/amp
        return expand_path(f"~/.config/amp/commands/{self.install_name}.md")
