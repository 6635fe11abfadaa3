"""Installers for the coding-agent applications that accept the guidelines."""

from .amp import AmpInstaller
from .antigravity import AntigravityInstaller
from .claude_code import ClaudeCodeInstaller
from .cursor import CursorInstaller
from .gemini_cli import GeminiCLIInstaller
from .opencode import OpenCodeInstaller
from .windsurf import WindsurfInstaller

__all__ = [
    "AmpInstaller",
    "ClaudeCodeInstaller",
    "CursorInstaller",
    "OpenCodeInstaller",
    "WindsurfInstaller",
    "AntigravityInstaller",
    "GeminiCLIInstaller",
]
