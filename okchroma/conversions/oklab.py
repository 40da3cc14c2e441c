import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple
# No dependencies besides numpy

# Linear RGB -> cone response (LMS)
LINEAR_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

# Cube-rooted LMS -> OkLab
LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

# Exact inverses of the two matrices above
OKLAB_TO_LMS = np.linalg.inv(LMS_TO_OKLAB)
LMS_TO_LINEAR = np.linalg.inv(LINEAR_TO_LMS)


def linear_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert linear RGB to OkLab.

    Input:
        r, g, b   nominally in [0, 1], not clamped

    Output:
        L   lightness, 0 for black and ~1 for white
        a   green/red opponent axis
        b   blue/yellow opponent axis

    Negative channels go through a signed cube root, so out-of-gamut input
    still produces finite output.
    """
    lms = LINEAR_TO_LMS @ np.array((r, g, b), dtype=np.float64)
    lab = LMS_TO_OKLAB @ np.cbrt(lms)
    return float(lab[0]), float(lab[1]), float(lab[2])


def oklab_to_linear(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """
    Convert OkLab to linear RGB.

    The result is not clamped; colors outside the RGB gamut come back with
    channels below 0 or above 1.
    """
    lms_ = OKLAB_TO_LMS @ np.array((L, a, b), dtype=np.float64)
    lms = lms_ * lms_ * lms_
    rgb = LMS_TO_LINEAR @ lms
    return float(rgb[0]), float(rgb[1]), float(rgb[2])


def np_linear_to_oklab(rgb: NDArray) -> NDArray:
    """Vectorized: linear RGB (..., 3) to OkLab (..., 3)."""
    rgb = np.asarray(rgb, dtype=np.float64)
    if rgb.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {rgb.shape}")
    lms = rgb @ LINEAR_TO_LMS.T
    return np.cbrt(lms) @ LMS_TO_OKLAB.T


def np_oklab_to_linear(lab: NDArray) -> NDArray:
    """Vectorized: OkLab (..., 3) to linear RGB (..., 3)."""
    lab = np.asarray(lab, dtype=np.float64)
    if lab.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {lab.shape}")
    lms_ = lab @ OKLAB_TO_LMS.T
    return (lms_ * lms_ * lms_) @ LMS_TO_LINEAR.T
