"""Per-pixel relative luminance for numpy arrays."""

from __future__ import annotations

import numpy as np

from .compute import relative_luminance
from .weights import F32, LuminanceValue


def _check_channels(pixels: np.ndarray) -> None:
    if pixels.ndim == 0 or pixels.shape[-1] != 3:
        raise ValueError(f"pixels must have shape (..., 3), got {pixels.shape}")


def normalize_u8(pixels: np.ndarray, value: LuminanceValue = F32) -> np.ndarray:
    """Scale 8-bit RGB channels to [0.0, 1.0].

    Args:
        pixels: array of shape (..., 3) with values in [0, 255].
        value: numeric family; its channel type must be a numpy dtype.
    """
    px = np.asarray(pixels, dtype=value.channel)
    _check_channels(px)
    return px / value.channel(255.0)


def image_luminance(pixels: np.ndarray, value: LuminanceValue = F32) -> np.ndarray:
    """Relative luminance of every pixel.

    Args:
        pixels: array of shape (..., 3) holding normalized R, G, B.
        value: numeric family; its channel and weighted types must be numpy
            dtypes.

    Returns:
        Array of shape (...) with dtype `value.weighted`. Each element equals
        the scalar `relative_luminance` of that pixel.
    """
    px = np.asarray(pixels, dtype=value.channel)
    _check_channels(px)
    y = relative_luminance(px[..., 0], px[..., 1], px[..., 2], value)
    return np.asarray(y, dtype=value.weighted)
