"""
okchroma Color Conversions
==========================

Conversions between linear RGB, the OkLab perceptual space and 8-bit display
colors, with scalar and vectorized (numpy) implementations.

Conversion Functions
-------------------

Linear RGB ↔ OkLab:
    linear_to_oklab(r, g, b)
        Scalar linear RGB to OkLab
    oklab_to_linear(L, a, b)
        Scalar OkLab to linear RGB
    np_linear_to_oklab(rgb), np_oklab_to_linear(lab)
        Vectorized over arrays whose last axis is 3

Linear RGB ↔ 8-bit:
    to_byte_channel(value, bound_type=BoundType.CLAMP)
        Quantize one channel
    from_byte_channel(value)
        Dequantize one channel
    to_display_color(rgb, bound_type=BoundType.CLAMP, alpha=255)
        Quantize a linear triplet into a DisplayColor
    from_display_color(color)
        Dequantize a DisplayColor (or 3/4-tuple) into a linear triplet
    np_to_byte_channels(values), np_from_byte_channels(values)
        Vectorized quantization

High-Level API
-------------
    convert(color, from_space, to_space, bound_type=BoundType.CLAMP)
    np_convert(color, from_space, to_space, bound_type=BoundType.CLAMP)

Overflow Policy
--------------
Quantization takes a ``boundednumbers.BoundType``:
    - CLAMP (default): saturate at 0 / 255
    - BOUNCE: reflect back into range
    - CYCLIC, MODULO: truncate and wrap modulo 256, like an unchecked byte cast
    - IGNORE: out-of-range channels raise ValueError

Examples
--------
>>> from okchroma.conversions import linear_to_oklab, oklab_to_linear
>>> L, a, b = linear_to_oklab(1.0, 0.0, 0.0)
>>> r, g, b = oklab_to_linear(L, a, b)
>>>
>>> from okchroma.conversions import convert
>>> convert((0.7, 0.1, 0.05), "oklab", "display")
DisplayColor(r=..., g=..., b=..., a=255)
"""

# Linear RGB ↔ OkLab
from .oklab import (
    linear_to_oklab,
    oklab_to_linear,
    np_linear_to_oklab,
    np_oklab_to_linear,
    LINEAR_TO_LMS,
    LMS_TO_OKLAB,
    OKLAB_TO_LMS,
    LMS_TO_LINEAR,
)

# Linear RGB ↔ 8-bit
from .quantize import (
    to_byte_channel,
    from_byte_channel,
    to_display_color,
    from_display_color,
    np_to_byte_channels,
    np_from_byte_channels,
)

# High-level API
from .wrapper import convert, np_convert

# Types
from ..types.color_types import ColorSpace, DisplayColor

__all__ = [
    # Linear RGB ↔ OkLab
    'linear_to_oklab',
    'oklab_to_linear',
    'np_linear_to_oklab',
    'np_oklab_to_linear',
    'LINEAR_TO_LMS',
    'LMS_TO_OKLAB',
    'OKLAB_TO_LMS',
    'LMS_TO_LINEAR',

    # Linear RGB ↔ 8-bit
    'to_byte_channel',
    'from_byte_channel',
    'to_display_color',
    'from_display_color',
    'np_to_byte_channels',
    'np_from_byte_channels',

    # High-level API
    'convert',
    'np_convert',

    # Types
    'ColorSpace',
    'DisplayColor',
]
