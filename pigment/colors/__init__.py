"""
Pigment Color Records
=====================

Immutable records for the color representations a conversion pipeline passes
around. Each record holds either single float channels or, for batch work,
numpy arrays of a common shape.

Usage
-----
>>> from pigment.colors import EmissiveColor, HsvColor
>>> light = EmissiveColor(red=2.0, green=0.5, blue=0.0)
>>> light.red
2.0
>>> dimmer = light.replace(red=1.0)
>>>
>>> import numpy as np
>>> batch = EmissiveColor.from_array(np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]))
>>> batch.shape
(2,)
"""

from .color_base import ColorRecord
from .emissive import EmissiveColor, RgbColor
from .reflective import ReflectiveColor
from .hsv import HsvColor

__all__ = [
    "ColorRecord",
    "EmissiveColor",
    "RgbColor",
    "ReflectiveColor",
    "HsvColor",
]
