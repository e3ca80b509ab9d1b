"""Requested cell styles and their reduction to a :class:`ColorPair`."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Tuple, Union

from .color import TERMINAL_DEFAULT, BaseColor, Color, ColorPair
from .color_type import INHERIT_PARENT, ColorType, ColorTypeLike
from .palette import Palette, PaletteColor


@dataclass(frozen=True)
class ColorStyle:
    """Possible color style for a cell.

    Represents a color pair role to use when printing something. The current
    theme assigns each role a front and back color. The default style
    inherits both colors from the parent.

    ``front`` and ``back`` accept anything :meth:`ColorType.from_value`
    understands and are stored as :class:`ColorType` values.
    """

    front: ColorType = INHERIT_PARENT
    back: ColorType = INHERIT_PARENT

    def __post_init__(self) -> None:
        object.__setattr__(self, "front", ColorType.from_value(self.front))
        object.__setattr__(self, "back", ColorType.from_value(self.back))

    @classmethod
    def new(cls, front: ColorTypeLike, back: ColorTypeLike) -> "ColorStyle":
        return cls(front, back)

    @classmethod
    def front_only(cls, front: ColorTypeLike) -> "ColorStyle":
        """Uses the given color as front, inherits the parent background color."""
        return cls(front, INHERIT_PARENT)

    @classmethod
    def back_only(cls, back: ColorTypeLike) -> "ColorStyle":
        """Uses the given color as background, inherits the parent front color."""
        return cls(INHERIT_PARENT, back)

    def invert(self) -> "ColorStyle":
        """Return a style with the front and back colors swapped."""
        return ColorStyle(self.back, self.front)

    @classmethod
    def inherit_parent(cls) -> "ColorStyle":
        return cls(INHERIT_PARENT, INHERIT_PARENT)

    # -- presets -------------------------------------------------------------

    @classmethod
    def terminal_default(cls) -> "ColorStyle":
        """Style set by the terminal before the program started."""
        return cls(TERMINAL_DEFAULT, TERMINAL_DEFAULT)

    @classmethod
    def background(cls) -> "ColorStyle":
        """Application background, where no view is present."""
        return cls(PaletteColor.BACKGROUND, PaletteColor.BACKGROUND)

    @classmethod
    def shadow(cls) -> "ColorStyle":
        """Color used by view shadows. Only background matters."""
        return cls(PaletteColor.SHADOW, PaletteColor.SHADOW)

    @classmethod
    def primary(cls) -> "ColorStyle":
        """Main text with default background."""
        return cls(PaletteColor.PRIMARY, PaletteColor.VIEW)

    @classmethod
    def secondary(cls) -> "ColorStyle":
        return cls(PaletteColor.SECONDARY, PaletteColor.VIEW)

    @classmethod
    def tertiary(cls) -> "ColorStyle":
        return cls(PaletteColor.TERTIARY, PaletteColor.VIEW)

    @classmethod
    def title_primary(cls) -> "ColorStyle":
        """Title text color with default background."""
        return cls(PaletteColor.TITLE_PRIMARY, PaletteColor.VIEW)

    @classmethod
    def title_secondary(cls) -> "ColorStyle":
        """Alternative color for a title."""
        return cls(PaletteColor.TITLE_SECONDARY, PaletteColor.VIEW)

    @classmethod
    def highlight(cls) -> "ColorStyle":
        """Alternate text with highlight background."""
        return cls(PaletteColor.HIGHLIGHT_TEXT, PaletteColor.HIGHLIGHT)

    @classmethod
    def highlight_inactive(cls) -> "ColorStyle":
        """Highlight color for views that are not in focus."""
        return cls(PaletteColor.HIGHLIGHT_TEXT, PaletteColor.HIGHLIGHT_INACTIVE)

    @classmethod
    def preset(cls, name: str) -> "ColorStyle":
        try:
            builder = _PRESET_BUILDERS[name]
        except KeyError:
            raise KeyError(f"Unknown color style preset: {name!r}") from None
        return builder()

    # -- combination ---------------------------------------------------------

    @staticmethod
    def merge(a: "ColorStyle", b: "ColorStyle") -> "ColorStyle":
        """Merge the style ``b`` over style ``a``, channel by channel."""
        return ColorStyle(
            ColorType.merge(a.front, b.front),
            ColorType.merge(a.back, b.back),
        )

    @classmethod
    def merge_all(cls, styles: Iterable["ColorStyleLike"]) -> "ColorStyle":
        """Fold ``styles`` left to right; later styles win unless they inherit."""
        result = cls.inherit_parent()
        for style in styles:
            result = cls.merge(result, cls.from_value(style))
        return result

    def resolve(self, palette: Palette, previous: ColorPair) -> ColorPair:
        """Return the color pair that this style represents."""
        return ColorPair(
            self.front.resolve(palette, previous.front),
            self.back.resolve(palette, previous.back),
        )

    # -- conversions ---------------------------------------------------------

    @classmethod
    def from_value(cls, value: "ColorStyleLike") -> "ColorStyle":
        """Build a style from a color-ish value.

        Single colors, base colors, palette roles and color types set the
        front color only; a ``(front, back)`` tuple sets both.
        """

        if isinstance(value, ColorStyle):
            return value
        if isinstance(value, tuple):
            if len(value) != 2:
                raise TypeError(f"Expected a (front, back) pair, got {value!r}")
            return cls(value[0], value[1])
        if isinstance(value, (ColorType, Color, PaletteColor, BaseColor)):
            return cls.front_only(value)
        raise TypeError(f"Cannot build a color style from {value!r}")


ColorStyleLike = Union[ColorStyle, ColorTypeLike, Tuple[ColorTypeLike, ColorTypeLike]]

_PRESET_BUILDERS: Dict[str, Callable[[], ColorStyle]] = {
    "terminal_default": ColorStyle.terminal_default,
    "background": ColorStyle.background,
    "shadow": ColorStyle.shadow,
    "primary": ColorStyle.primary,
    "secondary": ColorStyle.secondary,
    "tertiary": ColorStyle.tertiary,
    "title_primary": ColorStyle.title_primary,
    "title_secondary": ColorStyle.title_secondary,
    "highlight": ColorStyle.highlight,
    "highlight_inactive": ColorStyle.highlight_inactive,
}

PRESETS: Tuple[str, ...] = tuple(_PRESET_BUILDERS)
