"""Default configuration values for mapcam."""

from __future__ import annotations

import math
from typing import Final

# ---------------------------------------------------------------------------
# Pixel-space projection
# ---------------------------------------------------------------------------

# All pixel-space coordinates are expressed at this zoom level.  At zoom 21 the
# whole world is ``2 ** 21`` tiles across, which keeps street-level positions
# representable with plenty of sub-pixel precision in a float64.
REFERENCE_ZOOM: Final[int] = 21
TILE_SIZE: Final[int] = 256

# Half the world width at the reference zoom, i.e. the pixel-space position of
# longitude 0 / latitude 0.
MERCATOR_OFFSET: Final[float] = float(2 ** (REFERENCE_ZOOM + 8 - 1))
MERCATOR_RADIUS: Final[float] = MERCATOR_OFFSET / math.pi
MERCATOR_LAT_BOUND: Final[float] = 85.05112878

# ---------------------------------------------------------------------------
# Camera defaults
# ---------------------------------------------------------------------------

DEFAULT_MIN_ZOOM: Final[float] = 0.0
DEFAULT_MAX_ZOOM: Final[float] = 21.0
DEFAULT_ANIMATED: Final[bool] = True

# ``span_for_zoom`` subtracts this before converting a zoom into degrees so the
# square span lines up with the viewport-aware span at mid zoom levels.
SPAN_ZOOM_OFFSET: Final[float] = 0.66

# Zooming in from below ``ZOOM_IN_SNAP_FLOOR`` first jumps to the floor, and
# zooming out to a level that rounds to ``ZOOM_OUT_SNAP_CEILING`` or less drops
# straight to zero.  There is no useful native rendering between 0 and 2.
ZOOM_IN_SNAP_FLOOR: Final[float] = 2.0
ZOOM_OUT_SNAP_CEILING: Final[float] = 2.0
