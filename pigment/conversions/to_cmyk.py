import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from .numbers import clamp01, np_clamp01


def rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    """
    Convert emissive RGB to reflective CMYK.

    Key takes as much of the darkness as possible; the remaining chroma is
    expressed relative to the brightest channel. Pure black has no chroma, so
    cyan, magenta and yellow are 0 when key is 1.
    """
    r = clamp01(r)
    g = clamp01(g)
    b = clamp01(b)

    brightness = max(r, g, b)
    k = 1.0 - brightness
    if k < 1.0:
        return (
            1.0 - r / brightness,
            1.0 - g / brightness,
            1.0 - b / brightness,
            k,
        )
    return 0.0, 0.0, 0.0, k

def np_rgb_to_cmyk(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized RGB to CMYK.

    Returns:
        cmyk: array of shape (..., 4)
    """
    r = np_clamp01(r)
    g = np_clamp01(g)
    b = np_clamp01(b)
    r, g, b = np.broadcast_arrays(r, g, b)

    brightness = np.maximum.reduce([r, g, b])
    k = 1.0 - brightness
    chromatic = k < 1.0
    # black pixels divide by zero; their result is masked away below
    with np.errstate(divide="ignore", invalid="ignore"):
        c = np.where(chromatic, 1.0 - r / brightness, 0.0)
        m = np.where(chromatic, 1.0 - g / brightness, 0.0)
        y = np.where(chromatic, 1.0 - b / brightness, 0.0)

    return np.stack([c, m, y, k], axis=-1)
