"""ANSI SGR encoding for resolved color pairs."""
from __future__ import annotations

from typing import Optional

from .. import env
from .color import Color, ColorKind, ColorPair

RESET = "\x1b[0m"


def _low_res_index(color: Color) -> int:
    r, g, b = color.components
    return 16 + 36 * r + 6 * g + b


def _sgr_params(color: Color, *, background: bool) -> str:
    kind = color.kind
    if kind is ColorKind.TERMINAL_DEFAULT:
        return "49" if background else "39"
    if kind is ColorKind.DARK:
        return str((40 if background else 30) + int(color.base))
    if kind is ColorKind.LIGHT:
        return str((100 if background else 90) + int(color.base))
    lead = "48" if background else "38"
    if kind is ColorKind.RGB:
        r, g, b = color.components
        return f"{lead};2;{r};{g};{b}"
    return f"{lead};5;{_low_res_index(color)}"


def front_params(color: Color) -> str:
    return _sgr_params(color, background=False)


def back_params(color: Color) -> str:
    return _sgr_params(color, background=True)


def sgr(pair: ColorPair) -> str:
    """Return the escape sequence selecting ``pair`` on the terminal."""
    return f"\x1b[{front_params(pair.front)};{back_params(pair.back)}m"


def colorize(text: str, pair: ColorPair, *, enabled: Optional[bool] = None) -> str:
    # ``enabled=None`` defers to the CELLSTYLE_ANSI setting.
    if enabled is None:
        enabled = env.ansi_enabled()
    if not enabled:
        return text
    return f"{sgr(pair)}{text}{RESET}"


def tagged(text: str, pair: ColorPair) -> str:
    """Debug form of :func:`colorize` with readable tags instead of escapes."""
    return f"<{pair.front.describe()}/{pair.back.describe()}>{text}</>"
