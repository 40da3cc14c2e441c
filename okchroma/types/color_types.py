from __future__ import annotations
from typing import Literal, NamedTuple, Tuple

Triplet = Tuple[float, float, float]
ColorSpace = Literal["linear", "oklab", "display"]
COLOR_SPACES = ("linear", "oklab", "display")


class DisplayColor(NamedTuple):
    """8-bit color as handed to a display host (Pillow accepts these directly)."""
    r: int
    g: int
    b: int
    a: int = 255
