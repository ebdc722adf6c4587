"""Multi-octave turbulence over a NoiseLattice.

Octaves start at ``initial_size`` and halve until the size drops below one.
Each octave is weighted by its own size, and the sum is normalised so the
result stays within [0, 256).
"""

import math
import numbers

from .errors import DegenerateTurbulenceError


def _check_initial_size(initial_size):
    if isinstance(initial_size, bool) or not isinstance(initial_size, numbers.Real):
        raise DegenerateTurbulenceError(
            f"initial turbulence size must be a real number, got {initial_size!r}"
        )
    if not math.isfinite(initial_size) or initial_size < 1.0:
        raise DegenerateTurbulenceError(
            f"initial turbulence size must be a finite number >= 1, got {initial_size}"
        )
    return float(initial_size)


def octave_count(initial_size):
    """Number of octaves summed for a given initial size."""
    initial_size = _check_initial_size(initial_size)
    return int(math.floor(math.log2(initial_size))) + 1


def turbulence(lattice, x, y, initial_size):
    """Turbulence at (x, y); accepts scalars or numpy arrays of coordinates."""
    initial_size = _check_initial_size(initial_size)

    value = 0.0
    size = initial_size
    while size >= 1.0:
        value = value + lattice.smooth(x / size, y / size) * size
        size /= 2.0

    return 128.0 * value / initial_size
