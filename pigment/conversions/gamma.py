import math
from typing import Callable, Union
import numpy as np
from numpy import ndarray as NDArray

DECODING_GAMMA = 2.2
ENCODING_GAMMA = 1 / DECODING_GAMMA

GammaFunction = Callable[[Union[float, NDArray]], Union[float, NDArray]]


def gamma(value: float, factor: float) -> float:
    """
    Apply the power-law transfer ``value ** factor``.

    Stored colors are linear so that arithmetic on them stays simple, but
    displays respond non-linearly, so light has to be re-encoded before it is
    shown. Displays are usually calibrated to 2.2, the factor that takes a
    screen value to linear light; going the other way, the usual case here,
    uses 1/2.2 (about 0.45).

    Negative values carry no light and are pinned to 0, so a fractional
    factor never yields a complex result.
    """
    if value < 0.0:
        value = 0.0
    return value ** factor

def np_gamma(value: NDArray, factor: float) -> NDArray:
    """Vectorized: apply ``value ** factor`` with negatives pinned to 0."""
    value = np.asarray(value, dtype=float)
    return np.power(np.maximum(value, 0.0), factor)


def create_gamma_function(factor: float) -> GammaFunction:
    """
    Create a gamma function for a fixed factor.

    The function accepts floats or numpy arrays and exposes the factor it was
    built with as ``fn.factor``.

    Raises:
        ValueError: if factor is not a finite positive number
    """
    factor = float(factor)
    if not math.isfinite(factor) or factor <= 0.0:
        raise ValueError(f"gamma factor must be a finite positive number, got {factor}")

    def gamma_function(value):
        if isinstance(value, NDArray):
            return np_gamma(value, factor)
        return gamma(value, factor)

    gamma_function.factor = factor  # type: ignore[attr-defined]
    gamma_function.__name__ = f"gamma_{factor:g}"
    return gamma_function
