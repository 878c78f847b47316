"""Pytest configuration and shared fixtures for all tests."""

# Add project root to path
import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from smartdi.di import Container, reset_container


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Give every test a fresh process-wide container and no SMARTDI_ overrides."""
    for key in list(os.environ):
        if key.startswith("SMARTDI_"):
            monkeypatch.delenv(key)
    reset_container()
    yield
    reset_container()


@pytest.fixture
def container():
    """An isolated container with its own registry."""
    return Container()


@pytest.fixture
def strict_container():
    """An isolated container that type-checks exact-name hits."""
    return Container(strict_names=True)
