from ..colors.emissive import EmissiveColor
from ..colors.hsv import HsvColor
from ..conversions.to_rgb import hsv_to_rgb, np_hsv_to_rgb
from ..conversions.to_hsv import rgb_to_hsv, np_rgb_to_hsv


class HsvColorSpace:
    """
    Converts between hue/saturation/value and emissive RGB.

    Hue wraps modulo 360; saturation, value and the RGB channels are clamped
    to [0, 1]. Achromatic colors (saturation or value 0) lose their hue and
    decode with hue 0.
    """
    __slots__ = ()

    def encode(self, color: HsvColor) -> EmissiveColor:
        if color.is_array:
            return EmissiveColor.from_array(
                np_hsv_to_rgb(color.hue, color.saturation, color.value)
            )
        return EmissiveColor(*hsv_to_rgb(color.hue, color.saturation, color.value))

    def decode(self, color: EmissiveColor) -> HsvColor:
        if color.is_array:
            return HsvColor.from_array(np_rgb_to_hsv(color.red, color.green, color.blue))
        return HsvColor(*rgb_to_hsv(color.red, color.green, color.blue))

    def __repr__(self) -> str:
        return "HsvColorSpace()"
