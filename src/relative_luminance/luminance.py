"""Relative luminance for arbitrary color types.

A color type takes part by implementing a single method, `luminance_rgb`,
which returns its channels as an `Rgb` under the numeric family of its
choice. `relative_luminance` is derived from it:

    class Rgb8(Luminance):
        def __init__(self, r: int, g: int, b: int) -> None:
            self.r, self.g, self.b = r, g, b

        def luminance_rgb(self) -> Rgb:
            scale = np.float32(255.0)
            return Rgb(np.float32(self.r) / scale, np.float32(self.g) / scale,
                       np.float32(self.b) / scale, F32)

    Rgb8(255, 255, 255).relative_luminance()  # 1.0

Subclassing is optional: `color_luminance` accepts any object with a
`luminance_rgb` method.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .rgb import Rgb


def color_luminance(color: Any) -> Any:
    """Relative luminance of any color exposing `luminance_rgb()`.

    Plain `Rgb` values skip the normalization step; the result is identical.
    Subclasses may override `luminance_rgb` and always take the general path.
    """
    if type(color) is Rgb:
        return color.relative_luminance()
    return color.luminance_rgb().relative_luminance()


class Luminance(ABC):
    """Base class for color types with a relative luminance."""

    @abstractmethod
    def luminance_rgb(self) -> Rgb:
        """Channels of this color in the convention of the chosen family."""

    def relative_luminance(self) -> Any:
        return color_luminance(self)


Luminance.register(Rgb)
