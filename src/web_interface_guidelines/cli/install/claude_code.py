"""Claude Code installer for the guidelines."""

from pathlib import Path

from .base import BaseInstaller
from .utils import any_dir_exists, expand_path


class ClaudeCodeInstaller(BaseInstaller):
    """Installer for Claude Code CLI."""

    label = "Claude Code Skill"

    def __init__(self, **kwargs):
        """Initialize Claude Code installer."""
        super().__init__(app_key="claude-code", **kwargs)

    def is_detected(self) -> bool:
        return any_dir_exists(["~/.claude"])

    def get_target_path(self) -> Path:
        """Get the Claude Code slash command path.

        Returns
        -------
        Path
            Markdown command under ~/.claude/commands.
        """
        return expand_path(f"~/.claude/commands/{self.install_name}.md")
