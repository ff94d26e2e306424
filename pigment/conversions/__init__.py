"""
Pigment Conversions
===================

Numeric conversions between color representations, each in a scalar form
working on plain floats and a vectorized ``np_`` form working on numpy arrays.

Gamma:
    gamma(value, factor), np_gamma(value, factor)
    create_gamma_function(factor)
    DECODING_GAMMA (2.2), ENCODING_GAMMA (1/2.2)

Oversaturation:
    redistribute_oversaturation(r, g, b)
    np_redistribute_oversaturation(r, g, b)

CMYK ↔ RGB:
    cmyk_to_rgb(c, m, y, k), np_cmyk_to_rgb(c, m, y, k)
    rgb_to_cmyk(r, g, b), np_rgb_to_cmyk(r, g, b)

HSV ↔ RGB:
    hsv_to_rgb(h, s, v), np_hsv_to_rgb(h, s, v)
    rgb_to_hsv(r, g, b), np_rgb_to_hsv(r, g, b)

Output:
    scale(color, output_type)
    to_display(color, color_space=None, output_type=FormatType.INT)

Examples
--------
>>> from pigment.conversions import hsv_to_rgb, rgb_to_hsv
>>> hsv_to_rgb(120.0, 1.0, 1.0)
(0.0, 1.0, 0.0)
>>> rgb_to_hsv(0.0, 0.0, 1.0)
(240.0, 1.0, 1.0)
"""

from .numbers import clamp01, np_clamp01, wrap_hue, np_wrap_hue
from .gamma import (
    DECODING_GAMMA,
    ENCODING_GAMMA,
    GammaFunction,
    gamma,
    np_gamma,
    create_gamma_function,
)
from .saturation import (
    oversaturation,
    redistribute_oversaturation,
    np_redistribute_oversaturation,
)
from .to_rgb import cmyk_to_rgb, np_cmyk_to_rgb, hsv_to_rgb, np_hsv_to_rgb
from .to_cmyk import rgb_to_cmyk, np_rgb_to_cmyk
from .to_hsv import rgb_to_hsv, np_rgb_to_hsv
from .wrapper import scale, to_display

from ..types.format_type import FormatType

__all__ = [
    'clamp01',
    'np_clamp01',
    'wrap_hue',
    'np_wrap_hue',

    'DECODING_GAMMA',
    'ENCODING_GAMMA',
    'GammaFunction',
    'gamma',
    'np_gamma',
    'create_gamma_function',

    'oversaturation',
    'redistribute_oversaturation',
    'np_redistribute_oversaturation',

    'cmyk_to_rgb',
    'np_cmyk_to_rgb',
    'rgb_to_cmyk',
    'np_rgb_to_cmyk',

    'hsv_to_rgb',
    'np_hsv_to_rgb',
    'rgb_to_hsv',
    'np_rgb_to_hsv',

    'scale',
    'to_display',

    'FormatType',
]
