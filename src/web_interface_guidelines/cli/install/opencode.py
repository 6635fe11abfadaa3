"""OpenCode installer for the guidelines."""

from pathlib import Path

from .base import BaseInstaller
from .utils import any_dir_exists, command_exists, expand_path


class OpenCodeInstaller(BaseInstaller):
    """Installer for OpenCode."""

    label = "OpenCode Commands"

    def __init__(self, **kwargs):
        """Initialize OpenCode installer."""
        super().__init__(app_key="opencode", **kwargs)

    def is_detected(self) -> bool:
        return command_exists("opencode") or any_dir_exists(["~/.config/opencode"])

    def get_target_path(self) -> Path:
        return expand_path(f"~/.config/opencode/commands/{self.install_name}.md")
