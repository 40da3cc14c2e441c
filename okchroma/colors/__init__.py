"""
okchroma Color Classes
======================

Immutable value types for the two continuous color spaces.

    - LinearColor: linear RGB, channels nominally in [0, 1]
    - PerceptualColor (alias OkLab): OkLab lightness and opponent axes

Both are frozen after initialization, compare and hash by value, and unpack
like tuples. Converting between them, or to an 8-bit DisplayColor, is always
an explicit method call:

>>> from okchroma.colors import LinearColor
>>> lab = LinearColor(1.0, 0.0, 0.0).to_perceptual()
>>> lab.to_display()
DisplayColor(r=255, g=0, b=0, a=255)
>>> LinearColor.from_bytes(255, 128, 0)
LinearColor(r=1.0, g=0.5019607843137255, b=0.0)

Passing a color of one space to the other space's constructor raises
TypeError; there are no implicit conversions.
"""

from .color_base import ColorBase
from .linear import LinearColor
from .oklab import PerceptualColor, OkLab

__all__ = ['ColorBase', 'LinearColor', 'PerceptualColor', 'OkLab']
