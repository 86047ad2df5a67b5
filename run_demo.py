"""Local runner for the contrast demo with src/ layout.

Usage: uv run python run_demo.py
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    # Put src/ first so `import relative_luminance` works without installing
    sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
    from relative_luminance.demo import main as demo_main

    demo_main()


if __name__ == "__main__":
    main()
