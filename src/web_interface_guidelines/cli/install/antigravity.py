"""Antigravity installer for the guidelines."""

from pathlib import Path

from .base import BaseInstaller
from .markdown import to_antigravity_skill
from .utils import any_dir_exists, command_exists, expand_path


class AntigravityInstaller(BaseInstaller):
    """Installer for Antigravity, which loads skills from global_skills."""

    label = "Antigravity Skill"

    def __init__(self, **kwargs):
        """Initialize Antigravity installer."""
        super().__init__(app_key="antigravity", **kwargs)

    def is_detected(self) -> bool:
        return command_exists("agy") or any_dir_exists(["~/.gemini/antigravity"])

    def get_target_path(self) -> Path:
        """Get the Antigravity skill path.

        Returns
        -------
        Path
            SKILL.md inside a directory named after the skill.
        """
        return expand_path(
            f"~/.gemini/antigravity/global_skills/{self.install_name}/SKILL.md"
        )

    def render(self, content: str) -> str:
        return to_antigravity_skill(content, self.install_name)
