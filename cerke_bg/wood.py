# Wood texture
#
# Concentric rings around the (jittered) image centre. The radial distance is
# pushed in and out by turbulence so the rings twist like grain, then turned
# into brightness with a sharpened |sin|:
#
#   d = hypot(x - w/2 + ox, y - h/2 + oy) + strength * turbulence(x, y) / 256
#   b = amplitude * |sin(wavenumber * d * pi + phase)| ** exponent
#   rgb = base + (b, b, 0)
#
# The lattice, the centre offset (ox, oy) and the phase are drawn once per
# call, so every call gives a new but self-consistent ring pattern.
#
import logging
import math
from dataclasses import dataclass

import numpy as np
from PIL import Image

from .config import DEFAULT_WOOD
from .errors import InvalidDimensionError, require_positive_int
from .noise import NoiseLattice
from .parallel import map_row_bands
from .turbulence import octave_count, turbulence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RingPerturbation:
    offset_x: float
    offset_y: float
    phase: float

    @classmethod
    def draw(cls, rng, offset_stddev):
        offset_x = float(rng.normal(0.0, offset_stddev))
        offset_y = float(rng.normal(0.0, offset_stddev))
        phase = float(rng.uniform(0.0, math.pi))
        return cls(offset_x, offset_y, phase)


def _check_stddev(offset_stddev):
    try:
        offset_stddev = float(offset_stddev)
    except (TypeError, ValueError):
        raise InvalidDimensionError(f"offset_stddev must be a real number, got {offset_stddev!r}") from None
    if not math.isfinite(offset_stddev) or offset_stddev < 0:
        raise InvalidDimensionError(f"offset_stddev must be non-negative and finite, got {offset_stddev}")
    return offset_stddev


def wood_brightness(lattice, perturbation, params=DEFAULT_WOOD, rows=None):
    """Ring brightness for every pixel of ``rows`` (default: all rows)."""
    width, height = lattice.width, lattice.height
    start, stop = rows if rows is not None else (0, height)

    x, y = np.meshgrid(np.arange(width, dtype=np.float64),
                       np.arange(start, stop, dtype=np.float64))
    dx = x - width / 2.0 + perturbation.offset_x
    dy = y - height / 2.0 + perturbation.offset_y
    dist = np.hypot(dx, dy)
    dist = dist + params.turbulence_strength * turbulence(lattice, x, y, params.turbulence_size) / 256.0

    wave = np.abs(np.sin(params.wavenumber * dist * math.pi + perturbation.phase))
    return params.amplitude * wave ** params.exponent


def _to_pixels(brightness, base_color):
    # integer brightness, then saturate each channel instead of wrapping
    b = np.floor(brightness)
    r, g, blue = base_color
    rgb = np.empty(brightness.shape + (3,), dtype=np.float64)
    rgb[..., 0] = r + b
    rgb[..., 1] = g + b
    rgb[..., 2] = blue
    return np.clip(rgb, 0, 255).astype(np.uint8)


def render_wood(width, height, offset_stddev=0.0, rng=None, params=DEFAULT_WOOD, workers=1):
    """Synthesize a width x height wood-ring texture.

    Args:
        width, height: output size in pixels (positive integers).
        offset_stddev: spread of the random ring-centre offset, in pixels.
            0 keeps the rings centred on the image.
        rng: numpy Generator supplying all randomness. Pass a seeded one for
            reproducible output; defaults to a fresh ``default_rng()``.
        params: ring tuning constants.
        workers: threads used to fill rows; does not change the result.

    Returns:
        PIL RGB image of size (width, height).
    """
    width = require_positive_int("width", width)
    height = require_positive_int("height", height)
    offset_stddev = _check_stddev(offset_stddev)
    octaves = octave_count(params.turbulence_size)
    if rng is None:
        rng = np.random.default_rng()

    # lattice first, then the per-call offsets and phase
    lattice = NoiseLattice.generate(width, height, rng)
    perturbation = RingPerturbation.draw(rng, offset_stddev)
    logger.debug(
        "wood %dx%d: offset=(%.3f, %.3f) phase=%.4f octaves=%d",
        width, height, perturbation.offset_x, perturbation.offset_y,
        perturbation.phase, octaves,
    )

    def fill(start, stop):
        brightness = wood_brightness(lattice, perturbation, params, rows=(start, stop))
        return _to_pixels(brightness, params.base_color)

    pixels = map_row_bands(height, workers, fill)
    return Image.fromarray(pixels)
