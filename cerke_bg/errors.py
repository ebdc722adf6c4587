"""Errors raised when a synthesis call is given parameters it cannot honour.

Every check runs before any pixel buffer is allocated, so a rejected call
never returns an empty or partially drawn image.
"""

import math
import numbers


class SynthesisError(ValueError):
    """Base class for invalid synthesis parameters."""


class InvalidDimensionError(SynthesisError):
    """A width, height or scale is zero, negative or not a finite number."""


class DegenerateTurbulenceError(SynthesisError):
    """Turbulence was asked for with an initial octave size below one pixel."""


def require_positive_int(name, value):
    # bool is an Integral, but True is not a size
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidDimensionError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidDimensionError(f"{name} must be positive, got {value}")
    return int(value)


def require_positive_real(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidDimensionError(f"{name} must be a real number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidDimensionError(f"{name} must be positive and finite, got {value}")
    return float(value)
