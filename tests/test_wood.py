"""Wood ring compositor: colours, determinism, saturation, validation.

Run:
    pytest tests/test_wood.py -v
"""

import math

import numpy as np
import pytest

from cerke_bg import (
    DEFAULT_WOOD,
    DegenerateTurbulenceError,
    InvalidDimensionError,
    NoiseLattice,
    RingPerturbation,
    WoodParams,
    render_wood,
    wood_brightness,
)


def _wood(seed, width=80, height=80, offset_stddev=0.0, **kwargs):
    return np.asarray(render_wood(width, height, offset_stddev,
                                  rng=np.random.default_rng(seed), **kwargs))


def test_size_and_mode():
    img = render_wood(80, 60, 0.0, rng=np.random.default_rng(0))
    assert img.size == (80, 60)
    assert img.mode == "RGB"


def test_centre_pixel():
    arr = _wood(3)
    r, g, b = (int(c) for c in arr[40, 40])
    assert b == 70
    assert r - g == 50
    assert 120 <= r <= 120 + 88


def test_channel_layout():
    arr = _wood(11).astype(int)
    assert (arr[..., 2] == 70).all()
    assert (arr[..., 0] - arr[..., 1] == 50).all()
    assert arr[..., 0].min() >= 120
    assert arr[..., 0].max() <= 208


def test_same_seed_same_image():
    np.testing.assert_array_equal(_wood(42), _wood(42))
    np.testing.assert_array_equal(_wood(42, offset_stddev=5.0), _wood(42, offset_stddev=5.0))


def test_independent_draws_differ():
    assert not np.array_equal(_wood(1), _wood(2))
    a = render_wood(32, 32)
    b = render_wood(32, 32)
    assert not np.array_equal(np.asarray(a), np.asarray(b))


def test_matches_brightness_field():
    # lattice first, then offsets and phase, from the same generator
    rng = np.random.default_rng(9)
    lattice = NoiseLattice.generate(40, 30, rng)
    perturbation = RingPerturbation.draw(rng, 2.0)
    brightness = np.floor(wood_brightness(lattice, perturbation))

    arr = _wood(9, width=40, height=30, offset_stddev=2.0).astype(int)
    np.testing.assert_array_equal(arr[..., 0], 120 + brightness)
    np.testing.assert_array_equal(arr[..., 1], 70 + brightness)


def test_zero_stddev_centres_rings():
    perturbation = RingPerturbation.draw(np.random.default_rng(0), 0.0)
    assert perturbation.offset_x == 0.0
    assert perturbation.offset_y == 0.0
    assert 0.0 <= perturbation.phase < math.pi


def test_overflow_saturates():
    loud = WoodParams(amplitude=1000.0, turbulence_strength=500.0)
    arr = _wood(5, params=loud).astype(int)

    rng = np.random.default_rng(5)
    lattice = NoiseLattice.generate(80, 80, rng)
    perturbation = RingPerturbation.draw(rng, 0.0)
    b = np.floor(wood_brightness(lattice, perturbation, loud))

    np.testing.assert_array_equal(arr[..., 0], np.clip(120 + b, 0, 255))
    np.testing.assert_array_equal(arr[..., 1], np.clip(70 + b, 0, 255))
    assert (b > 255).any()


def test_base_colour_saturates():
    arr = _wood(5, params=WoodParams(base_color=(-40, 300, 999))).astype(int)
    assert arr.min() >= 0
    assert arr.max() <= 255
    assert (arr[..., 1] == 255).all()
    assert (arr[..., 2] == 255).all()


def test_workers_do_not_change_output():
    np.testing.assert_array_equal(_wood(8, height=37), _wood(8, height=37, workers=4))


def test_defaults():
    assert DEFAULT_WOOD.wavenumber == 0.0811
    assert DEFAULT_WOOD.turbulence_strength == 14.6
    assert DEFAULT_WOOD.turbulence_size == 32.0


@pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-4, 10), (10.5, 10), (True, 10)])
def test_rejects_bad_dimensions(width, height):
    with pytest.raises(InvalidDimensionError):
        render_wood(width, height)


@pytest.mark.parametrize("stddev", [-1.0, float("nan"), float("inf"), "wide"])
def test_rejects_bad_stddev(stddev):
    with pytest.raises(InvalidDimensionError):
        render_wood(10, 10, stddev)


def test_rejects_degenerate_turbulence():
    with pytest.raises(DegenerateTurbulenceError):
        render_wood(10, 10, params=WoodParams(turbulence_size=0.5))
