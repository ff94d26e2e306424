"""Basic Pigment usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from pigment import (
    EmissiveColor,
    ReflectiveColor,
    HsvColor,
    HsvColorSpace,
    ScreenColorSpace,
    default_color_space,
    default_cmyk_color_space,
    chain,
    reverse,
    to_display,
    FormatType,
)


def demonstrate_screen_output() -> None:
    # Over-bright light: plain clamping versus redistribution first.
    sunlight = EmissiveColor(red=2.0, green=0.9, blue=0.4)
    print("Screen only:        ", ScreenColorSpace().encode(sunlight))
    print("Saturating + screen:", default_color_space.encode(sunlight))
    print("As 8-bit:           ", to_display(sunlight))


def demonstrate_pipelines() -> None:
    ink = ReflectiveColor(cyan=0.1, magenta=0.7, yellow=0.9, key=0.1)
    print("Ink on screen:", to_display(ink, default_cmyk_color_space, FormatType.PERCENTAGE))

    # HSV straight to the screen, and an RGB → HSV view of the same space.
    hsv_to_screen = chain(HsvColorSpace(), default_color_space)
    print("HSV 200° on screen:", hsv_to_screen.encode(HsvColor(200.0, 0.6, 0.9)))
    print("Orange as HSV:", reverse(HsvColorSpace()).encode(EmissiveColor(1.0, 0.5, 0.0)))


def demonstrate_batches() -> None:
    # A whole hue wheel in one call.
    hues = np.linspace(0.0, 360.0, 12, endpoint=False)
    wheel = HsvColorSpace().encode(HsvColor(hues, 1.0, 1.0))
    print("Hue wheel (8-bit):")
    print(to_display(wheel, ScreenColorSpace()))


if __name__ == "__main__":
    demonstrate_screen_output()
    demonstrate_pipelines()
    demonstrate_batches()
