"""
Pigment Color Spaces
====================

Color spaces pair an ``encode`` and a ``decode`` conversion between two
color representations, and compose with ``chain`` and ``reverse``.

>>> from pigment.color_spaces import SimpleCmykColorSpace, ScreenColorSpace, chain
>>> from pigment.colors import ReflectiveColor
>>> print_to_screen = chain(SimpleCmykColorSpace(), ScreenColorSpace())
>>> print_to_screen.encode(ReflectiveColor(cyan=1, magenta=0, yellow=0, key=0))
EmissiveColor(red=0.0, green=1.0, blue=1.0)
"""

from .base import ColorSpace, ChainedColorSpace, ReversedColorSpace, chain, reverse
from .screen import ScreenColorSpace
from .saturating import SaturatingColorSpace
from .cmyk import SimpleCmykColorSpace
from .hsv import HsvColorSpace
from .defaults import default_color_space, default_cmyk_color_space

__all__ = [
    "ColorSpace",
    "ChainedColorSpace",
    "ReversedColorSpace",
    "chain",
    "reverse",
    "ScreenColorSpace",
    "SaturatingColorSpace",
    "SimpleCmykColorSpace",
    "HsvColorSpace",
    "default_color_space",
    "default_cmyk_color_space",
]
