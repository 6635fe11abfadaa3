"""Web Interface Guidelines - installer for coding-agent command files."""

try:
    from importlib.metadata import version as _get_version

    __version__ = _get_version("web-interface-guidelines")
except Exception:  # pragma: no cover - fallback path
    __version__ = "0.0.0"

__all__ = ["__version__"]
