"""
Pytest configuration and fixtures for Dragonfleet tests.
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Keep registry logging out of test output
os.environ.setdefault("DRAGONFLEET_QUIET", "true")

from dragonfleet.core.registry import FleetRegistry  # noqa: E402


@pytest.fixture
def registry():
    """A fresh, empty registry."""
    return FleetRegistry()


@pytest.fixture
def mars_with_rockets(registry):
    """Registry with mission Mars and rockets R1, R2 assigned to it."""
    registry.add_mission("Mars")
    registry.add_rocket("R1")
    registry.add_rocket("R2")
    registry.assign_rockets_to_mission("Mars", {"R1", "R2"})
    return registry


@pytest.fixture
def manifest_file(tmp_path):
    """Write a manifest file and return its path."""

    def _write(content: str, name: str = "fleet.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
