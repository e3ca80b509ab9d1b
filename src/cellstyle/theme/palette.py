"""Palette roles and the role -> color table of a theme."""
from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

from .color import BaseColor, Color

LOG = logging.getLogger(__name__)


class PaletteColor(Enum):
    """Symbolic color roles; a role is a key into a :class:`Palette`."""

    BACKGROUND = "background"
    SHADOW = "shadow"
    VIEW = "view"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    TITLE_PRIMARY = "title_primary"
    TITLE_SECONDARY = "title_secondary"
    HIGHLIGHT = "highlight"
    HIGHLIGHT_INACTIVE = "highlight_inactive"
    HIGHLIGHT_TEXT = "highlight_text"

    @classmethod
    def from_name(cls, name: str) -> "PaletteColor":
        """Look a role up by name; ``TitlePrimary``, ``title-primary`` and
        ``title_primary`` all resolve to the same role."""

        key = name.strip().replace("-", "_")
        if key.isupper() or key.islower() or "_" in key:
            candidate = key.lower()
        else:
            # CamelCase -> snake_case
            candidate = "".join(
                f"_{ch.lower()}" if ch.isupper() and i else ch.lower()
                for i, ch in enumerate(key)
            )
        try:
            return cls(candidate)
        except ValueError:
            raise KeyError(f"Unknown palette role: {name!r}") from None

    def resolve(self, palette: "Palette") -> Color:
        return palette[self]


_DEFAULT_COLORS = {
    PaletteColor.BACKGROUND: Color.dark(BaseColor.BLUE),
    PaletteColor.SHADOW: Color.dark(BaseColor.BLACK),
    PaletteColor.VIEW: Color.dark(BaseColor.WHITE),
    PaletteColor.PRIMARY: Color.dark(BaseColor.BLACK),
    PaletteColor.SECONDARY: Color.dark(BaseColor.BLUE),
    PaletteColor.TERTIARY: Color.light(BaseColor.WHITE),
    PaletteColor.TITLE_PRIMARY: Color.dark(BaseColor.RED),
    PaletteColor.TITLE_SECONDARY: Color.dark(BaseColor.YELLOW),
    PaletteColor.HIGHLIGHT: Color.dark(BaseColor.RED),
    PaletteColor.HIGHLIGHT_INACTIVE: Color.dark(BaseColor.BLUE),
    PaletteColor.HIGHLIGHT_TEXT: Color.dark(BaseColor.WHITE),
}


class Palette:
    """Read-only mapping from every :class:`PaletteColor` to a :class:`Color`.

    Roles missing from ``colors`` take their value from the default palette,
    so lookups never fail. Instances are immutable; :meth:`with_color`
    returns a modified copy.
    """

    __slots__ = ("_colors",)

    def __init__(self, colors: Optional[Mapping[PaletteColor, Color]] = None) -> None:
        given = dict(colors or {})
        for role, color in given.items():
            if not isinstance(role, PaletteColor):
                raise TypeError(f"Palette keys must be PaletteColor, got {role!r}")
            if not isinstance(color, Color):
                raise TypeError(f"Palette values must be Color, got {color!r}")
        missing = [role for role in PaletteColor if role not in given]
        if given and missing:
            LOG.debug(
                "palette: filling %d role(s) from defaults: %s",
                len(missing),
                ", ".join(role.value for role in missing),
            )
        merged = {role: given.get(role, _DEFAULT_COLORS[role]) for role in PaletteColor}
        object.__setattr__(self, "_colors", MappingProxyType(merged))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Palette is immutable")

    @classmethod
    def default(cls) -> "Palette":
        return DEFAULT_PALETTE

    @classmethod
    def from_mapping(cls, colors: Mapping[PaletteColor, Color]) -> "Palette":
        return cls(colors)

    def lookup(self, role: PaletteColor) -> Color:
        return self._colors[role]

    __getitem__ = lookup

    def with_color(self, role: PaletteColor, color: Color) -> "Palette":
        colors = dict(self._colors)
        colors[role] = color
        return Palette(colors)

    def as_mapping(self) -> Mapping[PaletteColor, Color]:
        return self._colors

    def __iter__(self) -> Iterator[Tuple[PaletteColor, Color]]:
        return iter(self._colors.items())

    def __len__(self) -> int:
        return len(self._colors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return dict(self._colors) == dict(other._colors)

    def __hash__(self) -> int:
        return hash(tuple(self._colors.items()))

    def __reduce__(self):
        return (Palette, (dict(self._colors),))

    # Immutable: copies can share the same instance.
    def __copy__(self) -> "Palette":
        return self

    def __deepcopy__(self, memo: dict) -> "Palette":
        return self

    def __repr__(self) -> str:
        body = ", ".join(f"{role.value}={color.describe()}" for role, color in self)
        return f"Palette({body})"


DEFAULT_PALETTE = Palette(_DEFAULT_COLORS)
