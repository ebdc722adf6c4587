"""Procedural board and wood-grain image synthesis."""

from .board import board_coordinates, board_size, render_board
from .config import (
    DEFAULT_GEOMETRY,
    DEFAULT_PALETTE,
    DEFAULT_WOOD,
    BoardGeometry,
    BoardPalette,
    WoodParams,
)
from .errors import DegenerateTurbulenceError, InvalidDimensionError, SynthesisError
from .noise import NoiseLattice
from .turbulence import octave_count, turbulence
from .wood import RingPerturbation, render_wood, wood_brightness

__all__ = [
    "render_board",
    "board_size",
    "board_coordinates",
    "render_wood",
    "wood_brightness",
    "RingPerturbation",
    "NoiseLattice",
    "turbulence",
    "octave_count",
    "BoardPalette",
    "BoardGeometry",
    "WoodParams",
    "DEFAULT_PALETTE",
    "DEFAULT_GEOMETRY",
    "DEFAULT_WOOD",
    "SynthesisError",
    "InvalidDimensionError",
    "DegenerateTurbulenceError",
]
