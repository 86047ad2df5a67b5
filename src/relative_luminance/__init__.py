"""Relative luminance (ITU-R BT.709) for any color representation.

Luminance above 0.5 can be considered light; below, dark.
"""

from .compute import relative_luminance
from .luminance import Luminance, color_luminance
from .rgb import Rgb
from .weights import BT709_WEIGHTS, F32, F64, LuminanceValue

__all__ = [
    "BT709_WEIGHTS",
    "F32",
    "F64",
    "Luminance",
    "LuminanceValue",
    "Rgb",
    "color_luminance",
    "relative_luminance",
]

__version__ = "0.1.0"
