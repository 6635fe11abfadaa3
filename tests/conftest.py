"""Pytest configuration for web-interface-guidelines tests."""

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add src directory to path for all tests
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))


SAMPLE_COMMAND = r"""---
description: Review UI code for Web Interface Guidelines compliance
argument-hint: <file-or-pattern>
---

# Web Interface Guidelines

Review these files for compliance: $ARGUMENTS

- Match numbers with `\d+`, paths with `C:\Users`
- Honor `prefers-reduced-motion`
"""


# =============================================================================
# Fixtures for Test Isolation
# =============================================================================


@pytest.fixture
def home(tmp_path, monkeypatch) -> Path:
    """Point HOME at an empty directory and empty PATH of executables.

    Every installer resolves ``~`` through HOME and looks up executables
    through PATH, so nothing on the real machine is detected or touched.
    """
    home_dir = (tmp_path / "home").resolve()
    home_dir.mkdir()
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("PATH", str(bin_dir))
    return home_dir


@pytest.fixture
def add_executable(tmp_path):
    """Create a fake executable on the isolated PATH."""

    def _add(name: str) -> Path:
        exe = tmp_path / "bin" / name
        exe.write_text("#!/bin/sh\n")
        exe.chmod(0o755)
        return exe

    return _add


@pytest.fixture
def sample_command() -> str:
    return SAMPLE_COMMAND


@pytest.fixture
def mock_fetch():
    """Serve SAMPLE_COMMAND instead of downloading it."""
    with patch(
        "web_interface_guidelines.cli.install.utils.fetch_guidelines",
        return_value=SAMPLE_COMMAND,
    ) as mock:
        yield mock


# =============================================================================
# Test Configuration
# =============================================================================


def _add_markers(config) -> None:
    """Register project markers consistently."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


def pytest_configure(config):  # type: ignore[override]
    """Add markers for this project."""
    _add_markers(config)
