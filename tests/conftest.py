import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make the package importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tilemap.viewport import ViewState, compute_view_state  # noqa: E402


@pytest.fixture
def centered_view() -> ViewState:
    """800x600 viewport looking at (0, 0) on zoom level 2."""

    return compute_view_state(0.0, 0.0, 2.0, 800, 600)


@pytest.fixture
def new_york_view() -> ViewState:
    return compute_view_state(40.7128, -74.0060, 10.0, 1024, 768)
