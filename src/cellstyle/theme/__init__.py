"""Color model of the theming system: palettes, color sources and styles."""
from __future__ import annotations

from .color import TERMINAL_DEFAULT, BaseColor, Color, ColorKind, ColorPair
from .color_style import PRESETS, ColorStyle, ColorStyleLike
from .color_type import (
    INHERIT_PARENT,
    ColorType,
    ColorTypeLike,
    FixedColor,
    InheritParent,
    PaletteRef,
)
from .context import DrawContext
from .palette import DEFAULT_PALETTE, Palette, PaletteColor

__all__ = [
    "BaseColor",
    "Color",
    "ColorKind",
    "ColorPair",
    "TERMINAL_DEFAULT",
    "Palette",
    "PaletteColor",
    "DEFAULT_PALETTE",
    "ColorType",
    "ColorTypeLike",
    "FixedColor",
    "PaletteRef",
    "InheritParent",
    "INHERIT_PARENT",
    "ColorStyle",
    "ColorStyleLike",
    "PRESETS",
    "DrawContext",
]
