from __future__ import annotations
from typing import Generic, Protocol, TypeVar, runtime_checkable

S = TypeVar("S")
D = TypeVar("D")
I = TypeVar("I")


@runtime_checkable
class ColorSpace(Protocol[S, D]):
    """
    A mapping between a source and a destination color representation.

    ``encode`` turns a source color into a destination color and ``decode``
    goes back. For most spaces ``decode(encode(x))`` returns ``x`` within
    floating point tolerance; lossy spaces say where they break this.

    Any object with these two methods is a color space; there is nothing to
    inherit.
    """

    def encode(self, color: S) -> D: ...

    def decode(self, color: D) -> S: ...


def _check_color_space(value: object, name: str) -> None:
    if not isinstance(value, ColorSpace):
        raise TypeError(f"{name} must provide encode() and decode(), got {type(value).__name__}")


class ChainedColorSpace(Generic[S, I, D]):
    """Two color spaces applied one after the other through a shared representation."""
    __slots__ = ("first", "second")

    first: ColorSpace[S, I]
    second: ColorSpace[I, D]

    def __init__(self, first: ColorSpace[S, I], second: ColorSpace[I, D]) -> None:
        object.__setattr__(self, "first", first)
        object.__setattr__(self, "second", second)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    def encode(self, color: S) -> D:
        return self.second.encode(self.first.encode(color))

    def decode(self, color: D) -> S:
        return self.first.decode(self.second.decode(color))

    def __repr__(self) -> str:
        return f"chain({self.first!r}, {self.second!r})"


class ReversedColorSpace(Generic[S, D]):
    """A color space with its encode and decode roles swapped."""
    __slots__ = ("inner",)

    inner: ColorSpace[D, S]

    def __init__(self, inner: ColorSpace[D, S]) -> None:
        object.__setattr__(self, "inner", inner)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    def encode(self, color: S) -> D:
        return self.inner.decode(color)

    def decode(self, color: D) -> S:
        return self.inner.encode(color)

    def __repr__(self) -> str:
        return f"reverse({self.inner!r})"


def chain(first: ColorSpace, second: ColorSpace, *rest: ColorSpace) -> ColorSpace:
    """
    Compose color spaces left to right.

    ``chain(a, b).encode(x) == b.encode(a.encode(x))`` and decoding runs the
    other way. Extra arguments fold from the left, so ``chain(a, b, c)`` is
    ``chain(chain(a, b), c)``; composition is associative either way.

    Raises:
        TypeError: if an argument is not a color space
    """
    spaces = (first, second) + rest
    for index, space in enumerate(spaces):
        _check_color_space(space, f"chain() argument {index + 1}")

    result: ColorSpace = ChainedColorSpace(first, second)
    for space in rest:
        result = ChainedColorSpace(result, space)
    return result


def reverse(color_space: ColorSpace) -> ColorSpace:
    """
    Swap the encode and decode roles of a color space.

    Reversing a reversed space hands back the original.

    Raises:
        TypeError: if the argument is not a color space
    """
    if isinstance(color_space, ReversedColorSpace):
        return color_space.inner
    _check_color_space(color_space, "reverse() argument")
    return ReversedColorSpace(color_space)
