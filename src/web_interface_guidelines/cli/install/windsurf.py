"""Windsurf installer for the guidelines."""

from pathlib import Path

from .base import BaseInstaller
from .utils import any_dir_exists, expand_path, read_text

MARKER = "# Web Interface Guidelines"


class WindsurfInstaller(BaseInstaller):
    """Installer for Windsurf.

    Windsurf has no per-command files; the guidelines are appended to the
    global rules memory, guarded by ``MARKER`` so they are only added once.
    The document opens with the same heading, so an installed file holds
    the marker text twice.
    """

    label = "Windsurf Command"
    append_only = True

    def __init__(self, **kwargs):
        """Initialize Windsurf installer."""
        super().__init__(app_key="windsurf", **kwargs)

    def is_detected(self) -> bool:
        return any_dir_exists(["~/.codeium", "~/Library/Application Support/Windsurf"])

    def get_target_path(self) -> Path:
        """Get the Windsurf global rules path.

        Returns
        -------
        Path
            Path to global_rules.md, shared with the user's own rules.
        """
        return expand_path("~/.codeium/windsurf/memories/global_rules.md")

    def is_installed(self) -> bool:
        existing = read_text(self.get_target_path())
        return existing is not None and MARKER in existing

    def render(self, content: str) -> str:
        """Append the marker and the guidelines to the existing rules."""
        existing = read_text(self.get_target_path())
        parts = []
        if existing is not None:
            parts.append(existing + "\n")
        parts.append(f"{MARKER}\n\n")
        parts.append(content)
        return "".join(parts)
