from __future__ import annotations
import math
from typing import ClassVar, Sequence, Tuple
from boundednumbers import BoundType

from ..conversions import oklab_to_linear
from ..types.channel_format import DEFAULT_BOUND_TYPE
from ..types.color_types import DisplayColor
from .color_base import ColorBase
from .linear import LinearColor


class PerceptualColor(ColorBase):
    """
    A color in the OkLab perceptual space.

    ``L`` is lightness (0 black, ~1 white); ``a`` and ``b`` are unbounded
    opponent axes. Nothing is range-checked: values outside the RGB gamut
    convert to linear colors with channels outside [0, 1].
    """
    space: ClassVar[str] = "oklab"
    channel_names: ClassVar[Tuple[str, str, str]] = ("L", "a", "b")

    def __init__(self, L: float, a: float, b: float) -> None:
        super().__init__(L, a, b)

    @property
    def L(self) -> float:
        return self._value[0]

    @property
    def a(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    @property
    def chroma(self) -> float:
        """Distance from the achromatic axis."""
        return math.hypot(self._value[1], self._value[2])

    @property
    def hue(self) -> float:
        """Angle of (a, b) in radians, measured from +b toward +a."""
        return math.atan2(self._value[1], self._value[2])

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_linear(cls, color: LinearColor) -> PerceptualColor:
        if not isinstance(color, LinearColor):
            raise TypeError(f"Expected LinearColor, got {type(color).__name__}")
        return color.to_perceptual()

    @classmethod
    def from_display(cls, color: Sequence[int]) -> PerceptualColor:
        return LinearColor.from_display(color).to_perceptual()

    # ------------------ CONVERSIONS ------------------
    def to_linear(self) -> LinearColor:
        return LinearColor(*oklab_to_linear(*self._value))

    def to_display(self, bound_type: BoundType = DEFAULT_BOUND_TYPE, alpha: int = 255) -> DisplayColor:
        return self.to_linear().to_display(bound_type, alpha=alpha)

    def __str__(self) -> str:
        return f"Lab [L={self.L}, a={self.a}, b={self.b}]"


OkLab = PerceptualColor
