from __future__ import annotations
from typing import TYPE_CHECKING, Any, Tuple, Union
import numpy as np

from ..types.format_type import FormatType, max_channel
from ..colors.emissive import EmissiveColor
from .numbers import np_clamp01

if TYPE_CHECKING:
    from ..color_spaces.base import ColorSpace


def _format_type(output_type: FormatType | str) -> FormatType:
    try:
        return FormatType(output_type)
    except ValueError:
        raise ValueError(f"Unknown format type: {output_type!r}") from None


def scale(
    color: EmissiveColor,
    output_type: FormatType | str = FormatType.INT,
) -> Union[Tuple[float, ...], Tuple[int, ...], np.ndarray]:
    """
    Scale a display-encoded color to the range of an output format.

    Channels are clamped to [0, 1] and multiplied by the format maximum
    (255, 1.0 or 100). INT output is rounded.

    Returns:
        tuple for a single color, array of shape (..., 3) for a batch
    """
    fmt = _format_type(output_type)
    scaled = np_clamp01(color.to_array()) * max_channel[fmt]
    if fmt == FormatType.INT:
        scaled = np.round(scaled).astype(int)

    if not color.is_array:
        return tuple(v.item() for v in scaled)
    return scaled


def to_display(
    color: Any,
    color_space: ColorSpace | None = None,
    output_type: FormatType | str = FormatType.INT,
):
    """
    Encode linear light for display and scale it to an output format.

    Args:
        color: source color of color_space (single or batched), linear
            emissive light for the default pipeline
        color_space: emissive-to-emissive space used to encode,
            defaults to the saturating screen pipeline
        output_type: FormatType or its string value
    """
    if color_space is None:
        from ..color_spaces.defaults import default_color_space
        color_space = default_color_space
    return scale(color_space.encode(color), output_type)
