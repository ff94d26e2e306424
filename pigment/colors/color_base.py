from __future__ import annotations
from typing import Any, ClassVar, Dict, Iterator, Mapping, Tuple, Self
from numpy import ndarray
import numpy as np

from ..types.color_types import ChannelValue


class ColorRecord:
    """
    Immutable record of named color channels.

    Channels hold floats for a single color, or float arrays of a common
    shape for a batch of colors. Conversions never mutate a record; they build
    a new one.
    """
    __slots__ = ()  # subclasses declare their channels as slots → no __dict__

    channels: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        if len(args) > len(self.channels):
            raise TypeError(
                f"{self.__class__.__name__} takes {len(self.channels)} channels, got {len(args)}"
            )
        values: Dict[str, Any] = dict(zip(self.channels, args))
        for name, value in kwargs.items():
            if name not in self.channels:
                raise TypeError(f"{self.__class__.__name__} has no channel {name!r}")
            if name in values:
                raise TypeError(f"{self.__class__.__name__} got multiple values for {name!r}")
            values[name] = value
        missing = [name for name in self.channels if name not in values]
        if missing:
            raise TypeError(f"{self.__class__.__name__} missing channels: {', '.join(missing)}")

        raw = [values[name] for name in self.channels]
        if any(isinstance(v, (ndarray, list, tuple)) for v in raw):
            arrays = np.broadcast_arrays(*(np.asarray(v, dtype=float) for v in raw))
            # broadcast_arrays returns read-only views; copy so the record owns its data
            coerced = [np.array(a, dtype=float) for a in arrays]
            for a in coerced:
                a.flags.writeable = False
        else:
            coerced = [float(v) for v in raw]

        for name, value in zip(self.channels, coerced):
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Self:
        return cls(**dict(mapping))

    @classmethod
    def from_array(cls, arr: Any) -> Self:
        """
        Build a batched record from an array whose last axis holds the channels.

        Args:
            arr: array-like of shape (..., len(channels))

        Returns:
            Record whose channels are arrays of shape arr.shape[:-1]
        """
        arr = np.asarray(arr, dtype=float)
        if arr.ndim == 0 or arr.shape[-1] != len(cls.channels):
            raise ValueError(
                f"{cls.__name__} expects last dimension to be {len(cls.channels)}, "
                f"got shape {arr.shape}"
            )
        return cls(*(arr[..., i] for i in range(len(cls.channels))))

    # ------------------ READ-ONLY VIEWS ------------------
    @property
    def is_array(self) -> bool:
        """Check if this record holds a batch of colors."""
        return isinstance(getattr(self, self.channels[0]), ndarray)

    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Return the batch shape, or None for a single color."""
        first = getattr(self, self.channels[0])
        if isinstance(first, ndarray):
            return first.shape
        return None

    def as_tuple(self) -> Tuple[ChannelValue, ...]:
        return tuple(getattr(self, name) for name in self.channels)

    def as_dict(self) -> Dict[str, ChannelValue]:
        return {name: getattr(self, name) for name in self.channels}

    def to_array(self) -> ndarray:
        """Stack channels on the last axis: shape (..., len(channels))."""
        return np.stack([np.asarray(v, dtype=float) for v in self.as_tuple()], axis=-1)

    def replace(self, **changes: Any) -> Self:
        """Return a new record with the given channels replaced."""
        values = self.as_dict()
        values.update(changes)
        return self.__class__(**values)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[ChannelValue]:
        return iter(self.as_tuple())

    def __len__(self) -> int:
        return len(self.channels)

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return all(
            np.array_equal(a, b) for a, b in zip(self.as_tuple(), other.as_tuple())  # type: ignore[attr-defined]
        )

    def __hash__(self) -> int:
        if self.is_array:
            raise TypeError(f"unhashable type: batched {self.__class__.__name__}")
        return hash((self.__class__, self.as_tuple()))

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.channels)
        return f"{self.__class__.__name__}({body})"
