"""RGB channel container."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .compute import relative_luminance
from .weights import F64, LuminanceValue


@dataclass(frozen=True)
class Rgb:
    """Three channel values under a numeric family.

    Channels are expected in [0.0, 1.0] for the float families but are not
    checked.
    """

    r: Any
    g: Any
    b: Any
    value: LuminanceValue = F64

    @classmethod
    def new(cls, r: Any, g: Any, b: Any, value: LuminanceValue = F64) -> "Rgb":
        return cls(r, g, b, value)

    def luminance_rgb(self) -> "Rgb":
        # Already normalized
        return replace(self)

    def relative_luminance(self) -> Any:
        return relative_luminance(self.r, self.g, self.b, self.value)
