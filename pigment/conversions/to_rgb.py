import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from .numbers import clamp01, np_clamp01, wrap_hue, np_wrap_hue


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> Tuple[float, float, float]:
    """
    Convert reflective CMYK absorption to emissive RGB.

    Each primary absorbs its complementary channel, then key darkens all
    three uniformly. Inputs are clamped to [0, 1].
    """
    darkness = 1.0 - clamp01(k)
    return (
        (1.0 - clamp01(c)) * darkness,
        (1.0 - clamp01(m)) * darkness,
        (1.0 - clamp01(y)) * darkness,
    )

def np_cmyk_to_rgb(c: NDArray, m: NDArray, y: NDArray, k: NDArray) -> NDArray:
    """
    Vectorized CMYK to RGB.

    Returns:
        rgb: array of shape (..., 3)
    """
    darkness = 1.0 - np_clamp01(k)
    return np.stack([
        (1.0 - np_clamp01(c)) * darkness,
        (1.0 - np_clamp01(m)) * darkness,
        (1.0 - np_clamp01(y)) * darkness,
    ], axis=-1)


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV to RGB.

    Input:
        h: hue in degrees, any real value (wrapped into [0, 360))
        s, v: clamped to [0, 1]

    Output:
        r, g, b in [0, 1]
    """
    h = wrap_hue(h)
    s = clamp01(s)
    v = clamp01(v)

    c = s * v
    x = c * (1 - abs((h / 60.0) % 2 - 1))
    m = v - c

    sector = int(h // 60) % 6
    if sector == 0:
        r, g, b = c, x, 0.0
    elif sector == 1:
        r, g, b = x, c, 0.0
    elif sector == 2:
        r, g, b = 0.0, c, x
    elif sector == 3:
        r, g, b = 0.0, x, c
    elif sector == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return r + m, g + m, b + m

def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV to RGB.

    Args:
        h, s, v: array-like or scalar, broadcast together

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np_wrap_hue(h)
    s = np_clamp01(s)
    v = np_clamp01(v)
    h, s, v = np.broadcast_arrays(h, s, v)

    c = s * v
    x = c * (1 - np.abs(np.mod(h / 60.0, 2) - 1))
    m = v - c
    zero = np.zeros_like(c)

    sector = np.mod(np.floor(h / 60.0).astype(int), 6)
    conditions = [sector == i for i in range(6)]

    r = np.select(conditions, [c, x, zero, zero, x, c])
    g = np.select(conditions, [x, c, c, x, zero, zero])
    b = np.select(conditions, [zero, zero, x, c, c, x])

    return np.stack([r + m, g + m, b + m], axis=-1)
