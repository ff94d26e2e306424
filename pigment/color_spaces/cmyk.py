from ..colors.emissive import EmissiveColor
from ..colors.reflective import ReflectiveColor
from ..conversions.to_rgb import cmyk_to_rgb, np_cmyk_to_rgb
from ..conversions.to_cmyk import rgb_to_cmyk, np_rgb_to_cmyk


class SimpleCmykColorSpace:
    """
    Converts between reflective CMYK and emissive RGB.

    Key is modelled as a uniform darkening applied after each primary has
    absorbed its share of light. Decoding puts as much darkness as possible
    into key. Black decodes with zero chroma, since any chroma at key 1
    encodes to the same black.
    """
    __slots__ = ()

    def encode(self, color: ReflectiveColor) -> EmissiveColor:
        if color.is_array:
            return EmissiveColor.from_array(
                np_cmyk_to_rgb(color.cyan, color.magenta, color.yellow, color.key)
            )
        return EmissiveColor(*cmyk_to_rgb(color.cyan, color.magenta, color.yellow, color.key))

    def decode(self, color: EmissiveColor) -> ReflectiveColor:
        if color.is_array:
            return ReflectiveColor.from_array(np_rgb_to_cmyk(color.red, color.green, color.blue))
        return ReflectiveColor(*rgb_to_cmyk(color.red, color.green, color.blue))

    def __repr__(self) -> str:
        return "SimpleCmykColorSpace()"
