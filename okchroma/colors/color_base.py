from __future__ import annotations
from numbers import Real
from typing import ClassVar, Iterator, Tuple
from ..types.color_types import Triplet


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    space: ClassVar[str]
    channel_names: ClassVar[Tuple[str, str, str]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, c0: float, c1: float, c2: float) -> None:
        channels = (c0, c1, c2)
        for name, v in zip(self.channel_names, channels):
            # Cross-space construction must go through an explicit conversion
            if isinstance(v, ColorBase):
                raise TypeError(
                    f"{self.__class__.__name__} cannot be built from a {v.__class__.__name__}; "
                    f"use an explicit conversion method"
                )
            if isinstance(v, bool) or not isinstance(v, Real):
                raise TypeError(f"{self.__class__.__name__}.{name} must be a real number, got {type(v).__name__}")

        self._value = tuple(float(v) for v in channels)

        # freeze instance: no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Triplet:
        return self._value  # type: ignore[return-value]

    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return 3

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((self.space, self._value))

    def __repr__(self) -> str:
        channels = ", ".join(f"{n}={v!r}" for n, v in zip(self.channel_names, self._value))
        return f"{self.__class__.__name__}({channels})"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (self.__class__, self._value)
