from typing import ClassVar, Tuple
from .color_base import ColorRecord


class EmissiveColor(ColorRecord):
    """
    Light emitted by a source, as a linear red/green/blue triplet.

    (0, 0, 0) is black and (1, 1, 1) the brightest a screen pixel can show.
    Values above 1 are valid and describe over-bright light; no channel is
    bounded here, conversions deal with the range explicitly.
    """
    __slots__ = ('red', 'green', 'blue')

    channels: ClassVar[Tuple[str, ...]] = ('red', 'green', 'blue')

    red: float
    green: float
    blue: float


RgbColor = EmissiveColor
