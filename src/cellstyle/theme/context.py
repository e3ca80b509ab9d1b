"""Palette + current color pair at one point of a draw traversal."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from .color import ColorPair
from .color_style import ColorStyle, ColorStyleLike
from .palette import Palette


@dataclass(frozen=True)
class DrawContext:
    """Immutable drawing state handed from a parent element to its children.

    ``current`` is the pair already in effect; children layer their styles on
    top of it with :meth:`with_style`. The palette is a fixed snapshot for the
    lifetime of the context.
    """

    palette: Palette = field(default_factory=Palette.default)
    current: ColorPair = field(default_factory=ColorPair.terminal_default)

    @classmethod
    def root(cls, palette: Optional[Palette] = None) -> "DrawContext":
        if palette is None:
            palette = Palette.default()
        return cls(palette, ColorPair.terminal_default())

    def resolve(self, *styles: ColorStyleLike) -> ColorPair:
        effective = ColorStyle.merge_all(styles)
        return effective.resolve(self.palette, self.current)

    def with_style(self, *styles: ColorStyleLike) -> "DrawContext":
        return replace(self, current=self.resolve(*styles))

    def with_palette(self, palette: Palette) -> "DrawContext":
        return replace(self, palette=palette)
