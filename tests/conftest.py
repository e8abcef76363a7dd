from __future__ import annotations

import json
import random
import sys
from pathlib import Path

import pytest

# Ensure "src" is on sys.path for imports in tests
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from pokertrainer.data.chart_loader import load_chart_set  # noqa: E402
from pokertrainer.dynamic.advisor import GTOAdvisor  # noqa: E402
from pokertrainer.dynamic.generator import ScenarioGenerator  # noqa: E402


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def generator(rng: random.Random) -> ScenarioGenerator:
    return ScenarioGenerator(rng=rng)


@pytest.fixture
def advisor() -> GTOAdvisor:
    return GTOAdvisor(load_chart_set())


@pytest.fixture
def chart_file(tmp_path: Path):
    """Write a chart payload to a temporary JSON file and return its path."""

    def _write(payload: object, name: str = "charts.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
