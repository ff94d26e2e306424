from typing import ClassVar, Tuple
from .color_base import ColorRecord


class ReflectiveColor(ColorRecord):
    """
    Color of a physical surface, as the portion of light it absorbs.

    cyan, magenta and yellow absorb red, green and blue light respectively;
    key absorbs light in general. Values are nominally 0-1, and conversions
    clamp anything outside that range.
    """
    __slots__ = ('cyan', 'magenta', 'yellow', 'key')

    channels: ClassVar[Tuple[str, ...]] = ('cyan', 'magenta', 'yellow', 'key')

    cyan: float
    magenta: float
    yellow: float
    key: float
