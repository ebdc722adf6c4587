"""
Fixed palettes and tuning constants for both synthesizers.

Board numbers come from measuring a physical board: one square is the unit
length, the playing area spans 9 squares and the cloth around it gives the
half width / half height below.
"""

from dataclasses import dataclass
from typing import Tuple

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class BoardPalette:
    base: RGB = (193, 193, 193)       # cloth
    accent_a: RGB = (204, 136, 82)    # orange squares
    accent_b: RGB = (32, 72, 38)      # centre cell
    accent_c: RGB = (98, 133, 177)    # cross arms
    line: RGB = (10, 10, 10)


@dataclass(frozen=True)
class BoardGeometry:
    half_width: float = 6.376
    half_height: float = 9.642
    line_width: float = 0.04
    grid_extent: float = 4.5

    @property
    def width(self) -> float:
        return self.half_width * 2.0

    @property
    def height(self) -> float:
        return self.half_height * 2.0

    @property
    def gridlines(self) -> Tuple[float, ...]:
        # -4.5, -3.5, ..., 4.5
        n = int(self.grid_extent * 2) + 1
        return tuple(-self.grid_extent + i for i in range(n))


@dataclass(frozen=True)
class WoodParams:
    """Ring compositor tuning.

    wavenumber is in rings per pixel, turbulence_strength controls how far
    the noise twists the rings and turbulence_size is the first (coarsest)
    octave size in pixels.
    """
    wavenumber: float = 0.0811
    turbulence_strength: float = 14.6
    turbulence_size: float = 32.0
    amplitude: float = 88.0
    exponent: float = 0.4
    base_color: RGB = (120, 70, 70)


DEFAULT_PALETTE = BoardPalette()
DEFAULT_GEOMETRY = BoardGeometry()
DEFAULT_WOOD = WoodParams()
