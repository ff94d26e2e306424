from .base import chain
from .saturating import SaturatingColorSpace
from .screen import ScreenColorSpace
from .cmyk import SimpleCmykColorSpace

# linear light → screen values, spreading over-bright channels before clamping
default_color_space = chain(SaturatingColorSpace(), ScreenColorSpace())

# reflective color → screen values
default_cmyk_color_space = chain(SimpleCmykColorSpace(), default_color_space)
