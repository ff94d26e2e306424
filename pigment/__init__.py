"""
Pigment - Color Space Conversions for Rendering Pipelines
=========================================================

Converts colors between the representations used along a rendering
pipeline: linear emissive light, reflective CMYK material color,
hue/saturation/value, and gamma-encoded screen output.

Key Features
------------
- Immutable color records (EmissiveColor, ReflectiveColor, HsvColor)
- Single colors or numpy batches through the same API
- Color spaces with paired encode/decode conversions
- Gamma correction and oversaturation handling for display output
- Composition of color spaces with chain() and reverse()
- Out-of-range input is clamped or wrapped, never rejected

Quick Start
-----------
>>> from pigment import EmissiveColor, default_color_space, to_display
>>>
>>> light = EmissiveColor(red=2.0, green=0.0, blue=0.0)
>>> default_color_space.encode(light)       # over-bright red spreads to white-ish
>>> to_display(light)                       # (255, 186, 186)

Modules
-------
- colors: immutable color records
- conversions: scalar and vectorized conversion functions
- color_spaces: encode/decode color spaces, chain, reverse and default pipelines
"""

from .colors import ColorRecord, EmissiveColor, RgbColor, ReflectiveColor, HsvColor
from .conversions import (
    DECODING_GAMMA,
    ENCODING_GAMMA,
    GammaFunction,
    gamma,
    create_gamma_function,
    clamp01,
    scale,
    to_display,
)
from .color_spaces import (
    ColorSpace,
    ChainedColorSpace,
    ReversedColorSpace,
    chain,
    reverse,
    ScreenColorSpace,
    SaturatingColorSpace,
    SimpleCmykColorSpace,
    HsvColorSpace,
    default_color_space,
    default_cmyk_color_space,
)
from .types.format_type import FormatType

__all__ = [
    # records
    "ColorRecord",
    "EmissiveColor",
    "RgbColor",
    "ReflectiveColor",
    "HsvColor",
    # gamma and helpers
    "DECODING_GAMMA",
    "ENCODING_GAMMA",
    "GammaFunction",
    "gamma",
    "create_gamma_function",
    "clamp01",
    # color spaces
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
    # output
    "FormatType",
    "scale",
    "to_display",
]
