"""Pytest configuration and shared fixtures for soil calculator tests."""

from __future__ import annotations

import itertools
import json
from pathlib import Path
from typing import Any, Callable

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def sequential_ids() -> Callable[[str], str]:
    """Entry id factory producing predictable ids (``<bed>-1``, ``<bed>-2``...)."""
    counter = itertools.count(1)
    return lambda bed_id: f"{bed_id}-{next(counter)}"


@pytest.fixture
def sample_plan_data() -> dict[str, Any]:
    """A plan mixing catalog, rectangular and circular beds.

    Totals: 2 x 32 (classic-large) + 6 (half of 4x3x1) + 12.57 = 82.57 ft³.
    """
    return {
        "schema_version": "1.0",
        "display_unit": "cubic_feet",
        "bag_size": 1.5,
        "price": {"per_unit": 35.0, "unit": "cubic_yards"},
        "beds": [
            {"catalog_id": "classic-large", "quantity": 2},
            {
                "shape": "rectangular",
                "name": "Herb bed",
                "length": 48,
                "width": 36,
                "height": 12,
                "length_width_unit": "inches",
                "height_unit": "inches",
                "fill_factor": 0.5,
            },
            {"shape": "circular", "diameter": 4, "height": 1},
        ],
    }


@pytest.fixture
def plan_file(tmp_path: Path, sample_plan_data: dict[str, Any]) -> Path:
    """The sample plan written to a temporary JSON file."""
    path = tmp_path / "garden.json"
    path.write_text(json.dumps(sample_plan_data), encoding="utf-8")
    return path
