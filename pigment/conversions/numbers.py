import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import clamp01, cyclic_wrap_float
from boundednumbers.np_functions import clamp01 as _np_clamp01

from ..types.format_type import HUE_360


def np_clamp01(value: NDArray) -> NDArray:
    """Vectorized: clamp values to ``[0, 1]``."""
    return _np_clamp01(np.asarray(value, dtype=float))


def wrap_hue(hue: float) -> float:
    """Wrap a hue in degrees into ``[0, 360)``."""
    h = float(cyclic_wrap_float(hue, 0.0, HUE_360))
    # tiny negatives round up to exactly 360.0
    return 0.0 if h >= HUE_360 else h

def np_wrap_hue(hue: NDArray) -> NDArray:
    """Vectorized: wrap hues in degrees into ``[0, 360)``."""
    h = cyclic_wrap_float(np.asarray(hue, dtype=float), 0.0, HUE_360)
    return np.where(h >= HUE_360, 0.0, h)


__all__ = ["clamp01", "np_clamp01", "wrap_hue", "np_wrap_hue"]
