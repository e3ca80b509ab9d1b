"""Concrete, displayable terminal colors."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

LOG = logging.getLogger(__name__)

Rgb = Tuple[int, int, int]


class BaseColor(IntEnum):
    """The eight base colors every terminal understands."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7

    @classmethod
    def from_index(cls, n: int) -> "BaseColor":
        return cls(n % 8)


class ColorKind(Enum):
    TERMINAL_DEFAULT = "terminal_default"
    DARK = "dark"
    LIGHT = "light"
    RGB = "rgb"
    RGB_LOW_RES = "rgb_low_res"


_BASE_NAMES = {b.name.lower(): b for b in BaseColor}


def _check_components(rgb: Rgb, maximum: int) -> None:
    if len(rgb) != 3:
        raise ValueError(f"Expected 3 color components, got {rgb!r}")
    for value in rgb:
        if not isinstance(value, int) or not 0 <= value <= maximum:
            raise ValueError(f"Color component out of range 0..{maximum}: {value!r}")


@dataclass(frozen=True)
class Color:
    """A concrete color.

    Build instances through the class methods (:meth:`dark`, :meth:`rgb`,
    ...) rather than the raw constructor; ``__post_init__`` rejects field
    combinations that do not match ``kind``.
    """

    kind: ColorKind
    base: Optional[BaseColor] = None
    components: Optional[Rgb] = None

    def __post_init__(self) -> None:
        if self.kind in (ColorKind.DARK, ColorKind.LIGHT):
            if not isinstance(self.base, BaseColor) or self.components is not None:
                raise ValueError(f"{self.kind.value} color needs exactly a base color")
        elif self.kind is ColorKind.RGB:
            if self.base is not None or self.components is None:
                raise ValueError("rgb color needs exactly three components")
            _check_components(self.components, 255)
        elif self.kind is ColorKind.RGB_LOW_RES:
            if self.base is not None or self.components is None:
                raise ValueError("rgb_low_res color needs exactly three components")
            _check_components(self.components, 5)
        elif self.base is not None or self.components is not None:
            raise ValueError("terminal default color takes no arguments")

    @classmethod
    def terminal_default(cls) -> "Color":
        return TERMINAL_DEFAULT

    @classmethod
    def dark(cls, base: BaseColor) -> "Color":
        return cls(ColorKind.DARK, base=BaseColor(base))

    @classmethod
    def light(cls, base: BaseColor) -> "Color":
        return cls(ColorKind.LIGHT, base=BaseColor(base))

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        return cls(ColorKind.RGB, components=(r, g, b))

    @classmethod
    def rgb_low_res(cls, r: int, g: int, b: int) -> "Color":
        """Color from the 6x6x6 cube; each component is in ``0..5``."""
        return cls(ColorKind.RGB_LOW_RES, components=(r, g, b))

    @classmethod
    def from_256colors(cls, n: int) -> "Color":
        """Map an xterm 256-color index to a :class:`Color`.

        ``0..7`` are dark base colors, ``8..15`` light ones, ``16..231`` the
        color cube and ``232..255`` a 24-step grayscale ramp.
        """

        if not 0 <= n <= 255:
            raise ValueError(f"256-color index out of range: {n!r}")
        if n < 8:
            return cls.dark(BaseColor.from_index(n))
        if n < 16:
            return cls.light(BaseColor.from_index(n))
        if n < 232:
            n -= 16
            return cls.rgb_low_res(n // 36, (n // 6) % 6, n % 6)
        value = 8 + 10 * (n - 232)
        return cls.rgb(value, value, value)

    @classmethod
    def parse(cls, text: str) -> Optional["Color"]:
        """Parse a color description; return ``None`` if it is not one.

        Accepted forms: ``default``, ``red``, ``dark red``, ``light red``,
        ``#ff0000``, ``#f00`` and ``x050`` (color cube, digits 0..5).
        """

        token = " ".join(text.strip().lower().split())
        if token == "default":
            return TERMINAL_DEFAULT
        if token in _BASE_NAMES:
            return cls.dark(_BASE_NAMES[token])
        prefix, _, rest = token.partition(" ")
        if rest in _BASE_NAMES:
            if prefix == "dark":
                return cls.dark(_BASE_NAMES[rest])
            if prefix == "light":
                return cls.light(_BASE_NAMES[rest])
        if token.startswith("#"):
            digits = token[1:]
            try:
                if len(digits) == 6:
                    return cls.rgb(*(int(digits[i : i + 2], 16) for i in (0, 2, 4)))
                if len(digits) == 3:
                    return cls.rgb(*(int(d, 16) * 17 for d in digits))
            except ValueError:
                pass
        elif token.startswith("x") and len(token) == 4:
            digits = token[1:]
            if all(d in "012345" for d in digits):
                return cls.rgb_low_res(*(int(d) for d in digits))
        LOG.debug("Unrecognised color description %r", text)
        return None

    def describe(self) -> str:
        """Return a short name that :meth:`parse` maps back to this color."""

        if self.kind is ColorKind.TERMINAL_DEFAULT:
            return "default"
        if self.kind is ColorKind.DARK:
            return self.base.name.lower()
        if self.kind is ColorKind.LIGHT:
            return f"light {self.base.name.lower()}"
        r, g, b = self.components
        if self.kind is ColorKind.RGB:
            return f"#{r:02x}{g:02x}{b:02x}"
        return f"x{r}{g}{b}"


TERMINAL_DEFAULT = Color(ColorKind.TERMINAL_DEFAULT)


@dataclass(frozen=True)
class ColorPair:
    """A resolved front/back pair, ready for the terminal backend."""

    front: Color
    back: Color

    @classmethod
    def terminal_default(cls) -> "ColorPair":
        return cls(TERMINAL_DEFAULT, TERMINAL_DEFAULT)

    @classmethod
    def from_256colors(cls, front: int, back: int) -> "ColorPair":
        return cls(Color.from_256colors(front), Color.from_256colors(back))

    def invert(self) -> "ColorPair":
        return ColorPair(self.back, self.front)
