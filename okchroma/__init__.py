"""
okchroma - OkLab Palettes and Color Conversions
===============================================

Pick visually distinct, evenly perceived colors without hand tuning.

Key Features
------------
- Linear RGB ↔ OkLab conversion (scalar and vectorized)
- 8-bit quantization with an explicit overflow policy (clamp by default)
- Immutable LinearColor / PerceptualColor value types with explicit conversions
- Palette generation along a single OkLab hue ray at constant lightness

Quick Start
-----------
>>> import math
>>> from okchroma import Palette
>>>
>>> palette = Palette(5, luminance=0.6, max_chroma=0.3, hue_angle=0.0)
>>> [round(c.b, 2) for c in palette]
[0.0, 0.06, 0.12, 0.18, 0.24]
>>> palette.update(count=8, hue_angle=math.pi / 2)
>>> colors = palette.to_display()

Modules
-------
- colors: LinearColor and PerceptualColor value types
- conversions: OkLab math, quantization and the convert/np_convert API
- palette: Palette generator
"""

from .colors import ColorBase, LinearColor, PerceptualColor, OkLab
from .palette import Palette, PaletteParameters, generate_samples
from .conversions import (
    linear_to_oklab,
    oklab_to_linear,
    np_linear_to_oklab,
    np_oklab_to_linear,
    to_byte_channel,
    from_byte_channel,
    to_display_color,
    from_display_color,
    np_to_byte_channels,
    np_from_byte_channels,
    convert,
    np_convert,
)
from .types import DisplayColor, ColorSpace, BYTE_MAX, DEFAULT_BOUND_TYPE

from boundednumbers import BoundType

__version__ = "1.0.0"

__all__ = [
    # Color classes
    "ColorBase",
    "LinearColor",
    "PerceptualColor",
    "OkLab",
    "DisplayColor",

    # Palettes
    "Palette",
    "PaletteParameters",
    "generate_samples",

    # Conversions
    "linear_to_oklab",
    "oklab_to_linear",
    "np_linear_to_oklab",
    "np_oklab_to_linear",
    "to_byte_channel",
    "from_byte_channel",
    "to_display_color",
    "from_display_color",
    "np_to_byte_channels",
    "np_from_byte_channels",
    "convert",
    "np_convert",

    # Types and policies
    "ColorSpace",
    "BoundType",
    "BYTE_MAX",
    "DEFAULT_BOUND_TYPE",

    # Version
    "__version__",
]
