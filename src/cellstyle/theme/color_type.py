"""Where a single color channel takes its color from.

A :class:`ColorType` is one of exactly three sources:

* :class:`FixedColor` - a direct color, independent of the palette;
* :class:`PaletteRef` - a role looked up in the active palette;
* :class:`InheritParent` - whatever color the enclosing context already uses.

The set is closed: code consuming a ``ColorType`` handles these three
subclasses and nothing else.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .color import BaseColor, Color
from .palette import Palette, PaletteColor

_SOURCE_NAMES = ("FixedColor", "PaletteRef", "InheritParent")


class ColorType:
    """Base class of the three color sources. Not instantiated directly."""

    __slots__ = ()

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in _SOURCE_NAMES:
            raise TypeError(
                f"ColorType is closed to {', '.join(_SOURCE_NAMES)}; cannot subclass it as {cls.__name__}"
            )

    def resolve(self, palette: Palette, previous: Color) -> Color:
        """Reduce this source to a concrete color."""
        raise NotImplementedError

    @staticmethod
    def default() -> "ColorType":
        return INHERIT_PARENT

    @staticmethod
    def merge(a: "ColorType", b: "ColorType") -> "ColorType":
        """Merge the color type ``b`` over ``a``.

        Returns ``b`` unless ``b`` is :class:`InheritParent`, in which case
        ``a`` is returned. Folding a sequence with this keeps the rightmost
        non-inheriting value.
        """

        if isinstance(b, InheritParent):
            return a
        return b

    @staticmethod
    def from_value(value: "ColorTypeLike") -> "ColorType":
        if isinstance(value, ColorType):
            if type(value) is ColorType:
                raise TypeError("A bare ColorType is not a color source")
            return value
        if isinstance(value, Color):
            return FixedColor(value)
        if isinstance(value, PaletteColor):
            return PaletteRef(value)
        if isinstance(value, BaseColor):
            return FixedColor(Color.dark(value))
        raise TypeError(f"Cannot use {value!r} as a color source")


@dataclass(frozen=True)
class FixedColor(ColorType):
    """Uses a direct color, independent of the current palette."""

    color: Color

    def resolve(self, palette: Palette, previous: Color) -> Color:
        return self.color


@dataclass(frozen=True)
class PaletteRef(ColorType):
    """Uses a color from the application palette."""

    role: PaletteColor

    def resolve(self, palette: Palette, previous: Color) -> Color:
        return self.role.resolve(palette)


@dataclass(frozen=True)
class InheritParent(ColorType):
    """Re-uses the color from the parent."""

    def resolve(self, palette: Palette, previous: Color) -> Color:
        return previous


INHERIT_PARENT = InheritParent()

ColorTypeLike = Union[ColorType, Color, PaletteColor, BaseColor]

__all__ = [
    "ColorType",
    "FixedColor",
    "PaletteRef",
    "InheritParent",
    "INHERIT_PARENT",
    "ColorTypeLike",
]
