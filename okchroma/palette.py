"""
Palette generation along a single OkLab hue ray.

A palette holds ``count`` OkLab samples at constant lightness. Sample ``i``
has chroma ``max_chroma * i / count`` and points in the direction
``(sin(hue_angle), cos(hue_angle))`` of the (a, b) plane, so sample 0 is
always the gray at the given lightness and the last sample stops one step
short of ``max_chroma``.

Writing any generation parameter rebuilds every sample. Use ``update`` to
change several parameters with a single rebuild.

Not thread-safe: share a palette across threads only behind a caller-held lock.
"""
from __future__ import annotations
import math
import warnings
from typing import Iterator, List, NamedTuple, Optional, Tuple
import numpy as np
from boundednumbers import BoundType

from .colors import LinearColor, PerceptualColor
from .conversions import np_oklab_to_linear, np_to_byte_channels
from .types.channel_format import DEFAULT_BOUND_TYPE
from .types.color_types import DisplayColor

# Round-off allowed before a sample counts as out of gamut
GAMUT_TOLERANCE = 1e-6


class PaletteParameters(NamedTuple):
    count: int
    luminance: float
    max_chroma: float
    hue_angle: float


def generate_samples(count: int, luminance: float, max_chroma: float, hue_angle: float) -> List[PerceptualColor]:
    """Sample ``count`` colors from gray toward ``max_chroma`` along one hue ray."""
    a_bias = math.sin(hue_angle)
    b_bias = math.cos(hue_angle)
    samples = []
    for i in range(count):
        chroma = max_chroma * (i / count)
        samples.append(PerceptualColor(luminance, chroma * a_bias, chroma * b_bias))
    return samples


def _validate_count(count) -> int:
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
        raise TypeError(f"count must be an integer, got {type(count).__name__}")
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return int(count)


def _validate_real(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    return float(value)


class Palette:
    """
    Ordered OkLab samples rebuilt from four generation parameters.

    Args:
        count: number of samples (>= 0)
        luminance: OkLab lightness shared by every sample
        max_chroma: chroma the arc approaches (never reached)
        hue_angle: direction of the ray in radians, measured from +b toward +a

    Samples can be overwritten one at a time with ``palette[i] = color``; the
    edit survives until the next parameter write or ``regenerate()``.
    """

    __slots__ = ('_count', '_luminance', '_max_chroma', '_hue_angle', '_samples')

    def __init__(self, count: int, luminance: float, max_chroma: float, hue_angle: float) -> None:
        self._count = _validate_count(count)
        self._luminance = _validate_real("luminance", luminance)
        self._max_chroma = _validate_real("max_chroma", max_chroma)
        self._hue_angle = _validate_real("hue_angle", hue_angle)
        self._samples: List[PerceptualColor] = []
        self.regenerate()

    # ------------------ GENERATION ------------------
    def regenerate(self) -> None:
        """Rebuild every sample from the current parameters, dropping manual edits."""
        self._samples = generate_samples(self._count, self._luminance, self._max_chroma, self._hue_angle)

    def update(
        self,
        count: Optional[int] = None,
        luminance: Optional[float] = None,
        max_chroma: Optional[float] = None,
        hue_angle: Optional[float] = None,
    ) -> None:
        """Set any subset of parameters, then rebuild once."""
        # validate everything before touching state
        new_count = self._count if count is None else _validate_count(count)
        new_luminance = self._luminance if luminance is None else _validate_real("luminance", luminance)
        new_max_chroma = self._max_chroma if max_chroma is None else _validate_real("max_chroma", max_chroma)
        new_hue_angle = self._hue_angle if hue_angle is None else _validate_real("hue_angle", hue_angle)

        self._count = new_count
        self._luminance = new_luminance
        self._max_chroma = new_max_chroma
        self._hue_angle = new_hue_angle
        self.regenerate()

    @property
    def parameters(self) -> PaletteParameters:
        return PaletteParameters(self._count, self._luminance, self._max_chroma, self._hue_angle)

    @property
    def count(self) -> int:
        return self._count

    @count.setter
    def count(self, value: int) -> None:
        self.update(count=value)

    @property
    def luminance(self) -> float:
        return self._luminance

    @luminance.setter
    def luminance(self, value: float) -> None:
        self.update(luminance=value)

    @property
    def max_chroma(self) -> float:
        return self._max_chroma

    @max_chroma.setter
    def max_chroma(self, value: float) -> None:
        self.update(max_chroma=value)

    @property
    def hue_angle(self) -> float:
        return self._hue_angle

    @hue_angle.setter
    def hue_angle(self, value: float) -> None:
        self.update(hue_angle=value)

    # ------------------ SAMPLE ACCESS ------------------
    def _check_index(self, i) -> int:
        if isinstance(i, bool) or not isinstance(i, (int, np.integer)):
            raise TypeError(f"Palette indices must be integers, got {type(i).__name__}")
        if not 0 <= i < len(self._samples):
            raise IndexError(f"Palette index {i} out of range [0, {len(self._samples)})")
        return int(i)

    def get(self, i: int) -> PerceptualColor:
        return self._samples[self._check_index(i)]

    def set(self, i: int, color: PerceptualColor) -> None:
        """Replace one sample; parameters and other samples are left as they are."""
        index = self._check_index(i)
        if not isinstance(color, PerceptualColor):
            raise TypeError(f"Palette samples must be PerceptualColor, got {type(color).__name__}")
        self._samples[index] = color

    __getitem__ = get
    __setitem__ = set

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[PerceptualColor]:
        # snapshot so that edits during iteration are not observed
        return iter(tuple(self._samples))

    @property
    def samples(self) -> Tuple[PerceptualColor, ...]:
        return tuple(self._samples)

    # ------------------ BATCH CONVERSIONS ------------------
    def to_array(self) -> np.ndarray:
        """OkLab samples as a float64 array of shape (len(self), 3)."""
        return np.array([c.value for c in self._samples], dtype=np.float64).reshape(-1, 3)

    def to_linear(self) -> List[LinearColor]:
        return [LinearColor(*row) for row in np_oklab_to_linear(self.to_array()).tolist()]

    def to_display(self, bound_type: BoundType = DEFAULT_BOUND_TYPE) -> List[DisplayColor]:
        linear = np_oklab_to_linear(self.to_array())
        out_of_range = np.any((linear < -GAMUT_TOLERANCE) | (linear > 1.0 + GAMUT_TOLERANCE), axis=-1)
        # the reject policy raises below instead of bounding
        if bound_type is not BoundType.IGNORE and np.any(out_of_range):
            warnings.warn(
                f"{int(np.count_nonzero(out_of_range))} of {len(self._samples)} palette samples fall "
                f"outside the displayable range and were bounded with {bound_type.name}"
            )
        return [DisplayColor(*row) for row in np_to_byte_channels(linear, bound_type).tolist()]

    # ------------------ DUNDER ------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self.parameters == other.parameters and self._samples == other._samples

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Palette(count={self._count}, luminance={self._luminance!r}, "
            f"max_chroma={self._max_chroma!r}, hue_angle={self._hue_angle!r})"
        )
