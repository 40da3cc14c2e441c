import numpy as np
from typing import Callable, Dict, Sequence, Union
from boundednumbers import BoundType

from .oklab import linear_to_oklab, oklab_to_linear, np_linear_to_oklab, np_oklab_to_linear
from .quantize import (
    to_display_color, from_display_color,
    np_to_byte_channels, np_from_byte_channels,
)
from ..types.channel_format import DEFAULT_BOUND_TYPE
from ..types.color_types import COLOR_SPACES, ColorSpace, DisplayColor, Triplet

# Every path goes through linear RGB
TO_LINEAR: Dict[str, Callable[[Sequence[float]], Triplet]] = {
    "linear": lambda c: (float(c[0]), float(c[1]), float(c[2])),
    "oklab": lambda c: oklab_to_linear(c[0], c[1], c[2]),
    "display": from_display_color,
}

NP_TO_LINEAR: Dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "linear": lambda arr: np.asarray(arr, dtype=np.float64),
    "oklab": np_oklab_to_linear,
    "display": lambda arr: np_from_byte_channels(np.asarray(arr)[..., :3]),
}


def _check_space(space: str) -> str:
    space = space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown color space: {space!r}; expected one of {COLOR_SPACES}")
    return space


def convert(
    color: Sequence[float],
    from_space: ColorSpace,
    to_space: ColorSpace,
    bound_type: BoundType = DEFAULT_BOUND_TYPE,
) -> Union[Triplet, DisplayColor]:
    """
    Convert a single color between linear RGB, OkLab and 8-bit display values.

    Args:
        color: 3 channels (4 allowed for display input; alpha is carried over)
        from_space: "linear", "oklab" or "display"
        to_space: "linear", "oklab" or "display"
        bound_type: overflow policy used when quantizing to display

    Returns:
        float triplet, or a DisplayColor when ``to_space == "display"``
    """
    fs, ts = _check_space(from_space), _check_space(to_space)
    expected = (3, 4) if fs == "display" else (3,)
    if len(color) not in expected:
        raise ValueError(f"{fs} color expects {expected[-1]} channels, got {len(color)}")

    linear = TO_LINEAR[fs](color)

    if ts == "linear":
        return linear
    if ts == "oklab":
        return linear_to_oklab(*linear)

    alpha = color[3] if fs == "display" and len(color) == 4 else 255
    return to_display_color(linear, bound_type, alpha=alpha)


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
    bound_type: BoundType = DEFAULT_BOUND_TYPE,
) -> np.ndarray:
    """
    Vectorized ``convert`` over arrays whose last axis holds the channels.

    Display arrays come back as uint8 with 3 channels; a 4th input channel is dropped.
    """
    fs, ts = _check_space(from_space), _check_space(to_space)
    color = np.asarray(color)
    if color.shape[-1] not in ((3, 4) if fs == "display" else (3,)):
        raise ValueError(f"{fs} array has unexpected shape {color.shape}")

    linear = NP_TO_LINEAR[fs](color)

    if ts == "linear":
        return linear
    if ts == "oklab":
        return np_linear_to_oklab(linear)
    return np_to_byte_channels(linear, bound_type)
