"""Value-noise lattice.

A width x height grid of independent uniform samples stored flat
(index ``y * width + x``). All reads wrap around both axes, so the lattice
behaves like a torus and anything sampled from it tiles seamlessly.
"""

import logging

import numpy as np

from .errors import require_positive_int

logger = logging.getLogger(__name__)


class NoiseLattice:
    def __init__(self, width, height, data):
        self.width = require_positive_int("width", width)
        self.height = require_positive_int("height", height)

        data = np.array(data, dtype=np.float64).ravel()
        if data.size != self.width * self.height:
            raise ValueError(
                f"lattice data has {data.size} samples, expected "
                f"{self.width}x{self.height}={self.width * self.height}"
            )
        data.flags.writeable = False
        self._data = data

    @classmethod
    def generate(cls, width, height, rng):
        """Fill a new lattice with ``rng.random()`` samples in [0, 1)."""
        width = require_positive_int("width", width)
        height = require_positive_int("height", height)
        logger.debug("sampling %dx%d noise lattice", width, height)
        return cls(width, height, rng.random(width * height))

    @property
    def data(self):
        return self._data

    def at(self, ix, iy):
        """Sample at integer lattice indices, wrapping out-of-range ones."""
        ix = np.mod(ix, self.width)
        iy = np.mod(iy, self.height)
        return self._data[iy * self.width + ix]

    def smooth(self, x, y):
        """Bilinear sample at real coordinates.

        Blends the cell at ``floor(x), floor(y)`` with its left and upper
        neighbours, using the fractional parts as weights.
        """
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        fx_floor = np.floor(x)
        fy_floor = np.floor(y)
        fx = x - fx_floor
        fy = y - fy_floor

        x1 = fx_floor.astype(np.int64) % self.width
        y1 = fy_floor.astype(np.int64) % self.height
        x2 = (x1 - 1) % self.width
        y2 = (y1 - 1) % self.height

        value = fx * fy * self.at(x1, y1)
        value = value + (1.0 - fx) * fy * self.at(x2, y1)
        value = value + fx * (1.0 - fy) * self.at(x1, y2)
        value = value + (1.0 - fx) * (1.0 - fy) * self.at(x2, y2)
        return value

    def __repr__(self):
        return f"NoiseLattice({self.width}x{self.height})"
