from .color_types import DisplayColor, ColorSpace, COLOR_SPACES, Triplet
from .channel_format import BYTE_MAX, DEFAULT_BOUND_TYPE

__all__ = [
    "DisplayColor",
    "ColorSpace",
    "COLOR_SPACES",
    "Triplet",
    "BYTE_MAX",
    "DEFAULT_BOUND_TYPE",
]
