from ..colors.emissive import EmissiveColor
from ..conversions.saturation import (
    redistribute_oversaturation,
    np_redistribute_oversaturation,
)


class SaturatingColorSpace:
    """
    Spreads over-bright light into the other channels before clamping.

    A channel above 1.0 gives up its excess, half to each of the other two
    channels, so an over-bright red turns whiter rather than staying flat
    red once a screen clamps it. If a receiving channel overflows as a result,
    that excess is clamped away and not passed on again.

    The redistribution throws information away, so ``decode`` cannot undo it
    and returns its input unchanged.
    """
    __slots__ = ()

    def encode(self, color: EmissiveColor) -> EmissiveColor:
        if color.is_array:
            return EmissiveColor.from_array(
                np_redistribute_oversaturation(color.red, color.green, color.blue)
            )
        return EmissiveColor(*redistribute_oversaturation(color.red, color.green, color.blue))

    def decode(self, color: EmissiveColor) -> EmissiveColor:
        return color

    def __repr__(self) -> str:
        return "SaturatingColorSpace()"
