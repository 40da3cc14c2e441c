from __future__ import annotations
from typing import ClassVar, Sequence, Tuple, TYPE_CHECKING
from boundednumbers import BoundType

from ..conversions import linear_to_oklab, from_byte_channel, to_display_color, from_display_color
from ..types.channel_format import DEFAULT_BOUND_TYPE
from ..types.color_types import DisplayColor
from .color_base import ColorBase

if TYPE_CHECKING:
    from .oklab import PerceptualColor


class LinearColor(ColorBase):
    """
    Linear (gamma-free) RGB with channels nominally in [0, 1].

    Channels are stored as given; out-of-range values are kept so that
    out-of-gamut conversions stay lossless until quantization.
    """
    space: ClassVar[str] = "linear"
    channel_names: ClassVar[Tuple[str, str, str]] = ("r", "g", "b")

    def __init__(self, r: float, g: float, b: float) -> None:
        super().__init__(r, g, b)

    @property
    def r(self) -> float:
        return self._value[0]

    @property
    def g(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_bytes(cls, r: int, g: int, b: int) -> LinearColor:
        """Build from 8-bit channels, each mapped to ``value / 255``."""
        return cls(from_byte_channel(r), from_byte_channel(g), from_byte_channel(b))

    @classmethod
    def from_display(cls, color: Sequence[int]) -> LinearColor:
        """Build from a DisplayColor or any (r, g, b[, a]) byte tuple; alpha is dropped."""
        return cls(*from_display_color(color))

    @classmethod
    def from_perceptual(cls, color: PerceptualColor) -> LinearColor:
        from .oklab import PerceptualColor  # local import to avoid cycles
        if not isinstance(color, PerceptualColor):
            raise TypeError(f"Expected PerceptualColor, got {type(color).__name__}")
        return color.to_linear()

    # ------------------ CONVERSIONS ------------------
    def to_perceptual(self) -> PerceptualColor:
        from .oklab import PerceptualColor  # local import to avoid cycles
        return PerceptualColor(*linear_to_oklab(*self._value))

    def to_display(self, bound_type: BoundType = DEFAULT_BOUND_TYPE, alpha: int = 255) -> DisplayColor:
        return to_display_color(self._value, bound_type, alpha=alpha)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return f"RGB [R={self.r}, G={self.g}, B={self.b}]"
