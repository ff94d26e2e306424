import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from .numbers import clamp01, np_clamp01, wrap_hue, np_wrap_hue


def rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB to HSV.

    Input:
        r, g, b: clamped to [0, 1]

    Output:
        h in [0, 360), 0 for achromatic colors
        s in [0, 1], 0 for black
        v in [0, 1]
    """
    r = clamp01(r)
    g = clamp01(g)
    b = clamp01(b)

    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin

    if delta == 0:
        h = 0.0
    elif cmax == r:
        # b a hair above g lands on 360.0 after rounding
        h = wrap_hue(60.0 * (((g - b) / delta) % 6))
    elif cmax == g:
        h = 60.0 * ((b - r) / delta + 2)
    else:
        h = 60.0 * ((r - g) / delta + 4)

    s = delta / cmax if cmax > 0 else 0.0
    return h, s, cmax

def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized RGB to HSV.

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np_clamp01(r)
    g = np_clamp01(g)
    b = np_clamp01(b)
    r, g, b = np.broadcast_arrays(r, g, b)

    cmax = np.maximum.reduce([r, g, b])
    cmin = np.minimum.reduce([r, g, b])
    delta = cmax - cmin

    # achromatic and black entries divide by zero; np.select / np.where mask them
    with np.errstate(divide="ignore", invalid="ignore"):
        h = np.select(
            [delta == 0, cmax == r, cmax == g],
            [
                0.0,
                60.0 * np.mod((g - b) / delta, 6),
                60.0 * ((b - r) / delta + 2),
            ],
            default=60.0 * ((r - g) / delta + 4),
        )
        s = np.where(cmax > 0, delta / cmax, 0.0)

    return np.stack([np_wrap_hue(h), s, cmax], axis=-1)
