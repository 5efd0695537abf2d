import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make the package importable without installing it.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Qt tests run headless.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from mapcam.geometry import GeoPoint, ViewportSize  # noqa: E402
from mapcam.simulated import SimulatedMapView  # noqa: E402


@pytest.fixture
def map_view() -> SimulatedMapView:
    """A laid-out phone-sized view centred on New York."""

    return SimulatedMapView(center=GeoPoint(40.7128, -74.0060), size=ViewportSize(390, 844))
