from __future__ import annotations
import warnings
from numbers import Real
from typing import Callable, Union

from ..colors.emissive import EmissiveColor
from ..conversions.gamma import (
    DECODING_GAMMA,
    ENCODING_GAMMA,
    GammaFunction,
    create_gamma_function,
)
from ..conversions.numbers import clamp01, np_clamp01
from ..utils.default import value_or_default

GammaSpec = Union[GammaFunction, float]


def _resolve_gamma(gamma: GammaSpec, name: str) -> GammaFunction:
    if isinstance(gamma, Real) and not isinstance(gamma, bool):
        return create_gamma_function(float(gamma))
    if callable(gamma):
        return gamma
    raise TypeError(f"{name} must be a gamma function or a numeric factor, got {type(gamma).__name__}")


class ScreenColorSpace:
    """
    Converts linear light to and from the values sent to a screen.

    Encoding applies gamma correction, then clamps each channel to [0, 1].
    The clamping makes no attempt to preserve hue: a red value of 2 looks
    exactly like a red value of 1. Use SaturatingColorSpace first to spread
    over-bright light into the other channels.

    Args:
        encode_gamma: gamma function or factor for linear → screen,
            defaults to 1/2.2
        decode_gamma: gamma function or factor for screen → linear,
            defaults to 2.2
    """
    __slots__ = ("encode_gamma", "decode_gamma")

    encode_gamma: GammaFunction
    decode_gamma: GammaFunction

    def __init__(
        self,
        encode_gamma: GammaSpec | None = None,
        decode_gamma: GammaSpec | None = None,
    ) -> None:
        if (
            isinstance(encode_gamma, Real)
            and isinstance(decode_gamma, Real)
            and abs(float(encode_gamma) * float(decode_gamma) - 1.0) > 1e-6
        ):
            warnings.warn(
                f"encode gamma {encode_gamma} and decode gamma {decode_gamma} are not reciprocal; "
                "decoding an encoded color will not return the original",
                UserWarning,
                stacklevel=2,
            )

        object.__setattr__(self, "encode_gamma", _resolve_gamma(
            value_or_default(encode_gamma, ENCODING_GAMMA), "encode_gamma"))
        object.__setattr__(self, "decode_gamma", _resolve_gamma(
            value_or_default(decode_gamma, DECODING_GAMMA), "decode_gamma"))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    @staticmethod
    def _apply(color: EmissiveColor, fn: Callable) -> EmissiveColor:
        clamp = np_clamp01 if color.is_array else clamp01
        return EmissiveColor(
            red=clamp(fn(color.red)),
            green=clamp(fn(color.green)),
            blue=clamp(fn(color.blue)),
        )

    def encode(self, color: EmissiveColor) -> EmissiveColor:
        return self._apply(color, self.encode_gamma)

    def decode(self, color: EmissiveColor) -> EmissiveColor:
        return self._apply(color, self.decode_gamma)

    def __repr__(self) -> str:
        return "ScreenColorSpace()"
