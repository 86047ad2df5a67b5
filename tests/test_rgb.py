from __future__ import annotations

import copy
import dataclasses

import numpy as np
import pytest

from relative_luminance.compute import relative_luminance
from relative_luminance.rgb import Rgb
from relative_luminance.weights import F32, F64


def test_new_matches_constructor_and_defaults_to_f64() -> None:
    a = Rgb.new(0.1, 0.2, 0.3)
    b = Rgb(0.1, 0.2, 0.3)
    assert a == b
    assert a.value is F64


def test_no_validation_or_conversion() -> None:
    rgb = Rgb(-1, 300, "x", F32)
    assert (rgb.r, rgb.g, rgb.b) == (-1, 300, "x")


def test_relative_luminance_delegates_to_weighted_sum() -> None:
    half = np.float32(0.5)
    rgb = Rgb(half, np.float32(0.25), np.float32(1.0), F32)
    expected = relative_luminance(half, np.float32(0.25), np.float32(1.0), F32)
    assert rgb.relative_luminance().tobytes() == expected.tobytes()


def test_green_is_light_and_blue_is_dark() -> None:
    one, zero = np.float32(1.0), np.float32(0.0)
    assert Rgb(zero, zero, zero, F32).relative_luminance() == 0.0
    assert Rgb(one, one, one, F32).relative_luminance() == 1.0
    assert Rgb(zero, one, zero, F32).relative_luminance() > 0.5
    assert Rgb(zero, zero, one, F32).relative_luminance() < 0.5


def test_immutable_value_semantics() -> None:
    rgb = Rgb(0.5, 0.5, 0.5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rgb.r = 1.0  # type: ignore[misc]
    dup = rgb.luminance_rgb()
    assert dup == rgb and dup is not rgb
    assert copy.copy(rgb) == rgb
    assert hash(Rgb(0.5, 0.5, 0.5)) == hash(rgb)
