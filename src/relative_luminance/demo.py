"""Terminal demo: pick black or white text for colored backgrounds.

Compares HSL lightness against relative luminance as the light/dark test.
Pure blue, for instance, has an HSL lightness of 0.5 but looks dark.

Run with: `uv run task demo`
"""

from __future__ import annotations

import colorsys
import logging
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np

from .luminance import Luminance, color_luminance
from .rgb import Rgb
from .weights import F32

logger = logging.getLogger(__name__)

RESET = "\033[0m"


@dataclass(frozen=True)
class Rgb8(Luminance):
    """RGB channels in [0, 255]."""

    r: int
    g: int
    b: int

    def luminance_rgb(self) -> Rgb:
        scale = np.float32(255.0)
        return Rgb(
            np.float32(self.r) / scale,
            np.float32(self.g) / scale,
            np.float32(self.b) / scale,
            F32,
        )


BLACK = Rgb8(0, 0, 0)
WHITE = Rgb8(255, 255, 255)

DEFAULT_COLORS: tuple[tuple[str, Rgb8], ...] = (
    ("black", BLACK),
    ("red", Rgb8(255, 0, 0)),
    ("green", Rgb8(0, 255, 0)),
    ("blue", Rgb8(0, 0, 255)),
    ("yellow", Rgb8(255, 255, 0)),
    ("magenta", Rgb8(255, 0, 255)),
    ("cyan", Rgb8(0, 255, 255)),
    ("white", WHITE),
)


@dataclass
class DemoConfig:
    threshold: float = 0.5  # above -> black text
    label_width: int = 10
    colors: tuple[tuple[str, Rgb8], ...] = DEFAULT_COLORS


def hsl_lightness(color: Rgb8) -> float:
    """HSL lightness in [0, 1]."""
    _, lightness, _ = colorsys.rgb_to_hls(color.r / 255.0, color.g / 255.0, color.b / 255.0)
    return lightness


def text_color(
    background: Luminance,
    threshold: float = 0.5,
    measure: Callable[[Any], Any] = color_luminance,
) -> Rgb8:
    """Black text on light backgrounds, white text on dark ones."""
    return BLACK if measure(background) > threshold else WHITE


def render_label(label: str, fg: Rgb8, bg: Rgb8, width: int = 10) -> str:
    """Centered label with 24-bit ANSI foreground and background colors."""
    return (
        f"\033[38;2;{fg.r};{fg.g};{fg.b}m"
        f"\033[48;2;{bg.r};{bg.g};{bg.b}m"
        f"{label:^{width}}{RESET}"
    )


def _print_section(
    cfg: DemoConfig,
    title: str,
    measure: Callable[[Rgb8], Any],
    unit: str,
) -> None:
    print(title)
    for label, bg in cfg.colors:
        level = measure(bg)
        fg = text_color(bg, cfg.threshold, measure)
        print(f"{render_label(label, fg, bg, cfg.label_width)} ({level!s} {unit})")


def main(cfg: DemoConfig | None = None) -> None:
    """Print each demo color with the text color chosen by both rules."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    cfg = cfg or DemoConfig()
    logger.info("Rendering %d colors, threshold %.2f", len(cfg.colors), cfg.threshold)

    print(
        f"In this example we use black text at >{cfg.threshold} brightness "
        f"and white text at <={cfg.threshold}"
    )
    _print_section(cfg, "Using the lightness from HSL:", hsl_lightness, "lightness")
    _print_section(cfg, "Using relative luminance:", color_luminance, "relative luminance")


if __name__ == "__main__":
    main()
