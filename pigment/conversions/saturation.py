import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from .numbers import clamp01, np_clamp01


def oversaturation(value: float) -> float:
    """Amount by which a linear channel exceeds 1.0."""
    return max(value - 1.0, 0.0)


def redistribute_oversaturation(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Move over-bright energy into the other channels, then clamp.

    Each channel gives up everything above 1.0 and receives half of the
    excess of each of the other two. A receiving channel that overflows in
    turn is clamped; its new excess is not passed on.
    """
    over_r = oversaturation(r)
    over_g = oversaturation(g)
    over_b = oversaturation(b)

    return (
        clamp01(r - over_r + 0.5 * (over_g + over_b)),
        clamp01(g - over_g + 0.5 * (over_r + over_b)),
        clamp01(b - over_b + 0.5 * (over_r + over_g)),
    )

def np_redistribute_oversaturation(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized oversaturation redistribution.

    Returns:
        rgb: array of shape (..., 3)
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    over_r = np.maximum(r - 1.0, 0.0)
    over_g = np.maximum(g - 1.0, 0.0)
    over_b = np.maximum(b - 1.0, 0.0)

    return np.stack([
        np_clamp01(r - over_r + 0.5 * (over_g + over_b)),
        np_clamp01(g - over_g + 0.5 * (over_r + over_b)),
        np_clamp01(b - over_b + 0.5 * (over_r + over_g)),
    ], axis=-1)
