from typing import ClassVar, Tuple
from .color_base import ColorRecord


class HsvColor(ColorRecord):
    # hue in degrees, cyclic; saturation and value nominally 0-1
    __slots__ = ('hue', 'saturation', 'value')

    channels: ClassVar[Tuple[str, ...]] = ('hue', 'saturation', 'value')

    hue: float
    saturation: float
    value: float
