from __future__ import annotations
from typing import Union
from numpy import ndarray

ChannelValue = Union[float, ndarray]  # float for single colors, ndarray for batches
