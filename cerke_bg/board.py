# Board renderer
#
# Each pixel is mapped to board coordinates (one square = 1.0, image centre =
# origin) and run through a fixed list of region / line tests. Later tests
# overwrite earlier ones, so the order below is the drawing order:
#   cloth -> orange squares -> cross band -> grid -> corner ticks -> diagonals
#
import logging
import math

import numpy as np
from PIL import Image

from .config import DEFAULT_GEOMETRY, DEFAULT_PALETTE
from .errors import require_positive_real
from .parallel import map_row_bands

logger = logging.getLogger(__name__)


def board_size(square_size, geometry=DEFAULT_GEOMETRY):
    """Pixel (width, height) of a board whose squares are ``square_size`` px."""
    square_size = require_positive_real("square_size", square_size)
    return (math.ceil(square_size * geometry.width),
            math.ceil(square_size * geometry.height))


def board_coordinates(width, height, square_size, rows=None):
    """Board coordinates (cx, cy) of pixel centres, as two (rows, width) grids.

    Pixel centres are used so that pixel (x, y) and pixel
    (width-1-x, height-1-y) land on exactly opposite coordinates.
    """
    square_size = require_positive_real("square_size", square_size)
    start, stop = rows if rows is not None else (0, height)
    xs = (np.arange(width) + 0.5 - width / 2.0) / square_size
    ys = (np.arange(start, stop) + 0.5 - height / 2.0) / square_size
    cx, cy = np.meshgrid(xs, ys)
    return cx, cy


def _within(v, lo, hi):
    return (lo <= v) & (v <= hi)


def _paint_band(cx, cy, palette, geometry):
    ax, ay = np.abs(cx), np.abs(cy)
    w = geometry.line_width
    half = w / 2.0
    extent = geometry.grid_extent

    band = np.empty(cx.shape + (3,), dtype=np.uint8)
    band[:] = palette.base

    # Squares
    band[(ax <= 1.5) & (ay <= 1.5)] = palette.accent_a
    band[_within(ax, 1.5, 2.5) & _within(ay, 1.5, 2.5)] = palette.accent_a

    cross = ((ax <= 2.5) & (ay <= 0.5)) | ((ay <= 2.5) & (ax <= 0.5))
    centre = (ax <= 0.5) & (ay <= 0.5)
    band[cross & ~centre] = palette.accent_c
    band[centre] = palette.accent_b

    # Grid lines, each clipped to the playing area on the other axis
    lines = np.zeros(cx.shape, dtype=bool)
    for loc in geometry.gridlines:
        lines |= (np.abs(loc - cx) <= half) & (ay <= extent + half)
        lines |= (np.abs(loc - cy) <= half) & (ax <= extent + half)
    band[lines] = palette.line

    # Short ticks just inside the cross arms
    ticks = (np.abs(2.5 - 2 * w - ax) <= half) & _within(ay, 0.25, 0.5 - 1.5 * w)
    ticks |= (np.abs(2.5 - 2 * w - ay) <= half) & _within(ax, 0.25, 0.5 - 1.5 * w)
    ticks |= (np.abs(0.5 - 2 * w - ay) <= half) & _within(ax, 2.25, 2.5 - 1.5 * w)
    ticks |= (np.abs(0.5 - 2 * w - ax) <= half) & _within(ay, 2.25, 2.5 - 1.5 * w)
    band[ticks] = palette.line

    # Diagonals across the orange area; the centre cell stays clear
    reach = w / math.sqrt(2.0)
    diag = ((np.abs(cx + cy) <= reach) | (np.abs(cx - cy) <= reach)) & (ax <= 2.5)
    band[diag & ~centre] = palette.line

    return band


def render_board(square_size, palette=DEFAULT_PALETTE, geometry=DEFAULT_GEOMETRY, workers=1):
    """Draw the board with squares of ``square_size`` pixels.

    Output depends on ``square_size`` alone; ``workers`` only changes how
    many threads fill the rows.
    """
    width, height = board_size(square_size, geometry)
    square_size = float(square_size)
    logger.debug("board %dx%d px at %.3f px/square", width, height, square_size)

    def fill(start, stop):
        cx, cy = board_coordinates(width, height, square_size, rows=(start, stop))
        return _paint_band(cx, cy, palette, geometry)

    pixels = map_row_bands(height, workers, fill)
    return Image.fromarray(pixels)
