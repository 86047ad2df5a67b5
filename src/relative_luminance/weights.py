"""Numeric families for relative luminance.

A `LuminanceValue` ties a numeric family to the three ITU-R BT.709 channel
weights. The weights are built from their decimal text by the family's own
weight constructor, so binary floats round them once at their precision and
exact types (Fraction, Decimal) keep the standard values exactly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Tuple

import numpy as np

BT709_WEIGHTS: Tuple[str, str, str] = ("0.2126", "0.7152", "0.0722")


@dataclass(frozen=True)
class LuminanceValue:
    """Numeric family used to compute relative luminance.

    Args:
        channel: type of one RGB channel value.
        weight: type of the channel multipliers; called with the decimal text
            of each BT.709 weight.
        weighted: type of `channel * weight`; must support `+` with itself.
            Array helpers use it as the output dtype.
        name: label used in reprs and logs.

    The contract `channel * weight -> weighted` and
    `weighted + weighted -> weighted` is not checked at runtime.
    """

    channel: Callable[..., Any]
    weight: Callable[[str], Any]
    weighted: Callable[..., Any]
    name: str = ""
    red_weight: Any = field(init=False, repr=False)
    green_weight: Any = field(init=False, repr=False)
    blue_weight: Any = field(init=False, repr=False)

    def __post_init__(self) -> None:
        red, green, blue = (self.weight(w) for w in BT709_WEIGHTS)
        object.__setattr__(self, "red_weight", red)
        object.__setattr__(self, "green_weight", green)
        object.__setattr__(self, "blue_weight", blue)

    @property
    def weights(self) -> Tuple[Any, Any, Any]:
        """(red, green, blue) weights."""
        return self.red_weight, self.green_weight, self.blue_weight


F32 = LuminanceValue(np.float32, np.float32, np.float32, name="f32")
F64 = LuminanceValue(np.float64, np.float64, np.float64, name="f64")
