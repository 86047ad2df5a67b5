"""BT.709 weighted sum."""

from __future__ import annotations

from typing import Any

from .weights import F64, LuminanceValue


def relative_luminance(r: Any, g: Any, b: Any, value: LuminanceValue = F64) -> Any:
    """Relative luminance of linear-light channels.

    Evaluated as `(r * R) + (g * G) + (b * B)` in exactly that order so float
    results are reproducible to the last bit. Inputs are neither validated nor
    converted; NaN and infinity propagate per the channel type. Numpy arrays
    are accepted and computed element-wise.
    """
    return (r * value.red_weight) + (g * value.green_weight) + (b * value.blue_weight)
