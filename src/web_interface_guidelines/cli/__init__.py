"""Command-line interface for the guidelines installer."""

from .main import app

__all__ = ["app"]
