"""Shared utilities for the guideline installers."""

import logging
import os
import shutil
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

import requests
from rich.console import Console
from rich.table import Table

console = Console()
logger = logging.getLogger(__name__)

REPO_URL = "https://raw.githubusercontent.com/vercel-labs/web-interface-guidelines/main"
COMMAND_FILE = "command.md"
GUIDELINES_URL = f"{REPO_URL}/{COMMAND_FILE}"
INSTALL_NAME = "web-interface-guidelines"
DEFAULT_TIMEOUT = 30.0


class InstallerError(Exception):
    """Raised when fetching or writing the guidelines fails."""


def expand_path(path: str) -> Path:
    """Expand user home directory and environment variables in path.

    Parameters
    ----------
    path : str
        Path string that may contain ~ or environment variables.

    Returns
    -------
    Path
        Resolved absolute path.
    """
    path = os.path.expanduser(path)
    path = os.path.expandvars(path)
    return Path(path).resolve()


def command_exists(command: str) -> bool:
    """Check if a command exists in PATH."""
    return shutil.which(command) is not None


def any_dir_exists(paths: Iterable[str]) -> bool:
    """Return True if any of the given (unexpanded) paths is a directory."""
    return any(expand_path(p).is_dir() for p in paths)


def fetch_guidelines(url: str = GUIDELINES_URL, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Download the guidelines document.

    Parameters
    ----------
    url : str
        Location of the Markdown command file.
    timeout : float
        Request timeout in seconds.

    Returns
    -------
    str
        The document decoded as UTF-8.

    Raises
    ------
    InstallerError
        If the request fails, returns a non-2xx status or the body is not
        valid UTF-8.
    """
    logger.debug("Fetching %s (timeout=%s)", url, timeout)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise InstallerError(f"Failed to download guidelines: {e}") from e

    try:
        content = response.content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InstallerError(f"Guidelines at {url} are not valid UTF-8: {e}") from e
    logger.debug("Fetched %d bytes from %s", len(response.content), url)
    return content


class GuidelinesSource:
    """The shared guidelines document, fetched on first use and then reused."""

    def __init__(self, url: str = GUIDELINES_URL, timeout: float = DEFAULT_TIMEOUT):
        self.url = url
        self.timeout = timeout
        self._content: Optional[str] = None

    def get(self) -> str:
        if self._content is None:
            self._content = fetch_guidelines(self.url, self.timeout)
        return self._content


def write_text_atomic(path: Path, content: str) -> None:
    """Write text to path atomically, creating parent directories.

    The content goes to a temporary file next to the destination which is
    then renamed over it, so the destination is never left half-written.

    Raises
    ------
    InstallerError
        If the directory cannot be created or the file cannot be written.
    """
    temp_path = path.with_name(f".{path.name}.tmp_{os.getpid()}")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the content byte-for-byte on every platform
        with open(temp_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        temp_path.replace(path)
    except OSError as e:
        if temp_path.exists():
            temp_path.unlink()
        raise InstallerError(f"Error writing {path}: {e}") from e
    logger.debug("Wrote %d characters to %s", len(content), path)


def read_text(path: Path) -> Optional[str]:
    """Read a UTF-8 text file, or return None if it does not exist."""
    if not path.exists():
        return None
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except OSError as e:
        raise InstallerError(f"Error reading {path}: {e}") from e


APP_DISPLAY_NAMES = {
    "amp": "Amp Code",
    "claude-code": "Claude Code",
    "cursor": "Cursor",
    "opencode": "OpenCode",
    "windsurf": "Windsurf",
    "antigravity": "Antigravity",
    "gemini": "Gemini CLI",
}

APP_INSTALL_URLS = {
    "amp": "https://ampcode.com",
    "antigravity": "https://antigravity.google",
    "claude-code": "https://claude.ai/code",
    "cursor": "https://cursor.com",
    "gemini": "https://github.com/google-gemini/gemini-cli",
    "opencode": "https://opencode.ai",
    "windsurf": "https://codeium.com/windsurf",
}


def get_app_display_name(app_key: str) -> str:
    """Get the display name for an application.

    Parameters
    ----------
    app_key : str
        Application key (e.g., 'claude-code').

    Returns
    -------
    str
        Display name for the application.
    """
    return APP_DISPLAY_NAMES.get(app_key, app_key)


def show_no_tools_detected() -> None:
    """Tell the user which applications are supported and where to get them."""
    console.print("No supported tools detected.")
    console.print("")
    console.print("Install one of these first:")
    for app_key, url in APP_INSTALL_URLS.items():
        console.print(f"  • {get_app_display_name(app_key)}: {url}", soft_wrap=True)
    console.print("")
    console.print("For Codex CLI, add the guidelines to your project's AGENTS.md.")


def show_installation_summary(installations: Dict[str, Tuple[bool, str]]) -> None:
    """Show a summary table of installation results.

    Parameters
    ----------
    installations : Dict[str, Tuple[bool, str]]
        Dictionary mapping app names to (success, message) tuples.
    """
    table = Table(title="Installation Summary", show_header=True)
    table.add_column("Application", style="cyan")
    table.add_column("Status", style="bold")
    table.add_column("Details")

    for app_name, (success, message) in installations.items():
        status = "[green]✓[/green]" if success else "[red]✗[/red]"
        style = "green" if success else "red"
        table.add_row(app_name, status, f"[{style}]{message}[/{style}]")

    console.print("")
    console.print(table)
