from __future__ import annotations
import math
from typing import Sequence
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, boundtype_to_function
from boundednumbers.np_functions import bound_type_to_np_function

from ..types.channel_format import BYTE_MAX, DEFAULT_BOUND_TYPE, SUPPORTED_BOUND_TYPES
from ..types.color_types import DisplayColor, Triplet

# Wrapping policies reproduce an unchecked integer cast: truncate toward zero, keep the low 8 bits
WRAPPING_BOUND_TYPES = (BoundType.CYCLIC, BoundType.MODULO)


def _check_bound_type(bound_type: BoundType) -> None:
    if bound_type not in SUPPORTED_BOUND_TYPES:
        raise ValueError(f"Unsupported bound type: {bound_type!r}")


def _check_alpha(alpha) -> None:
    if isinstance(alpha, bool) or not isinstance(alpha, (int, np.integer)):
        raise TypeError(f"Alpha must be an integer, got {type(alpha).__name__}")
    if not 0 <= alpha <= BYTE_MAX:
        raise ValueError(f"Alpha {alpha!r} is outside [0, {BYTE_MAX}]")


def to_byte_channel(value: float, bound_type: BoundType = DEFAULT_BOUND_TYPE) -> int:
    """
    Quantize a normalized channel to an 8-bit integer.

    Args:
        value: channel value, nominally in [0, 1]
        bound_type: what to do when ``value * 255`` leaves [0, 255]
            - CLAMP: saturate at 0 / 255
            - BOUNCE: reflect back into range
            - CYCLIC, MODULO: truncate and wrap modulo 256
            - IGNORE: reject with ValueError

    Returns:
        int in [0, 255]
    """
    _check_bound_type(bound_type)
    scaled = value * BYTE_MAX
    if not math.isfinite(scaled):
        raise ValueError(f"Cannot quantize channel value {value!r}: not finite once scaled")

    if bound_type in WRAPPING_BOUND_TYPES:
        return int(boundtype_to_function[BoundType.MODULO](int(scaled), 0, BYTE_MAX))

    if bound_type is BoundType.IGNORE and not 0 <= scaled <= BYTE_MAX:
        raise ValueError(f"Channel value {value!r} is outside [0, 1]")

    bounded = boundtype_to_function[bound_type](scaled, 0, BYTE_MAX)
    return int(round(bounded))


def from_byte_channel(value: int) -> float:
    """Dequantize an 8-bit channel to [0, 1]."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"Byte channel must be an integer, got {type(value).__name__}")
    if not 0 <= value <= BYTE_MAX:
        raise ValueError(f"Byte channel {value!r} is outside [0, {BYTE_MAX}]")
    return int(value) / float(BYTE_MAX)


def to_display_color(
    rgb: Triplet,
    bound_type: BoundType = DEFAULT_BOUND_TYPE,
    alpha: int = BYTE_MAX,
) -> DisplayColor:
    """Quantize each linear channel independently; alpha is passed through."""
    r, g, b = rgb
    _check_alpha(alpha)
    return DisplayColor(
        to_byte_channel(r, bound_type),
        to_byte_channel(g, bound_type),
        to_byte_channel(b, bound_type),
        int(alpha),
    )


def from_display_color(color: Sequence[int]) -> Triplet:
    """Dequantize the RGB channels of a display color; alpha is ignored."""
    if len(color) not in (3, 4):
        raise ValueError(f"Display color needs 3 or 4 channels, got {len(color)}")
    r, g, b = color[0], color[1], color[2]
    return from_byte_channel(r), from_byte_channel(g), from_byte_channel(b)


def np_to_byte_channels(values: NDArray, bound_type: BoundType = DEFAULT_BOUND_TYPE) -> NDArray:
    """Vectorized: quantize normalized channels to a uint8 array of the same shape."""
    _check_bound_type(bound_type)
    values = np.asarray(values, dtype=np.float64)
    with np.errstate(over="ignore"):
        scaled = values * BYTE_MAX
    if not np.all(np.isfinite(scaled)):
        raise ValueError("Cannot quantize channel values that are not finite once scaled")

    if bound_type in WRAPPING_BOUND_TYPES:
        # wrap in float so huge integral values never overflow an int64
        wrapped = bound_type_to_np_function[BoundType.MODULO](np.trunc(scaled), 0, BYTE_MAX)
        return wrapped.astype(np.uint8)

    if bound_type is BoundType.IGNORE and np.any((scaled < 0) | (scaled > BYTE_MAX)):
        raise ValueError("Channel values outside [0, 1]")

    bounded = bound_type_to_np_function[bound_type](scaled, 0, BYTE_MAX)
    return np.rint(bounded).astype(np.uint8)


def np_from_byte_channels(values: NDArray) -> NDArray:
    """Vectorized: dequantize 8-bit channels to float64 in [0, 1]."""
    values = np.asarray(values)
    if not np.issubdtype(values.dtype, np.integer):
        raise TypeError(f"Byte channels must have an integer dtype, got {values.dtype}")
    if np.any((values < 0) | (values > BYTE_MAX)):
        raise ValueError(f"Byte channels must lie in [0, {BYTE_MAX}]")
    return values.astype(np.float64) / BYTE_MAX
