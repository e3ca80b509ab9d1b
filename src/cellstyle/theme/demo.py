"""Tiny demo printing every preset style resolved against a palette."""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence, Tuple

from . import ansi
from .color import Color
from .color_style import PRESETS, ColorStyle
from .context import DrawContext
from .palette import Palette, PaletteColor

LOG = logging.getLogger(__name__)

SAMPLE_TEXT = " The quick brown fox "


def parse_override(raw: str) -> Tuple[PaletteColor, Color]:
    """Parse ``ROLE=COLOR`` (e.g. ``highlight=light blue``)."""

    role_name, sep, color_text = raw.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected ROLE=COLOR, got {raw!r}")
    try:
        role = PaletteColor.from_name(role_name)
    except KeyError:
        raise argparse.ArgumentTypeError(f"unknown palette role: {role_name!r}") from None
    color = Color.parse(color_text)
    if color is None:
        raise argparse.ArgumentTypeError(f"invalid color: {color_text!r}")
    return role, color


def build_palette(overrides: Sequence[Tuple[PaletteColor, Color]]) -> Palette:
    palette = Palette.default()
    for role, color in overrides:
        LOG.debug("demo: overriding %s with %s", role.value, color.describe())
        palette = palette.with_color(role, color)
    return palette


def render_lines(palette: Palette, *, use_ansi: Optional[bool] = None, tags: bool = False) -> List[str]:
    """Return one line per preset, drawn on top of the application background."""

    screen = DrawContext.root(palette).with_style(ColorStyle.background())
    width = max(len(name) for name in PRESETS)
    lines: List[str] = []
    for name in PRESETS:
        pair = screen.resolve(ColorStyle.preset(name))
        if tags:
            sample = ansi.tagged(SAMPLE_TEXT, pair)
        else:
            sample = ansi.colorize(SAMPLE_TEXT, pair, enabled=use_ansi)
        lines.append(f"{name:<{width}}  {sample}")
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cellstyle",
        description="Show every preset color style resolved against a palette.",
    )
    parser.add_argument(
        "--palette-override",
        metavar="ROLE=COLOR",
        action="append",
        default=[],
        type=parse_override,
        help="replace one palette role, e.g. highlight='light blue' (repeatable)",
    )
    parser.add_argument("--no-ansi", action="store_true", help="print plain text")
    parser.add_argument("--tags", action="store_true", help="print <front/back> tags instead of escapes")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    palette = build_palette(args.palette_override)
    use_ansi = False if args.no_ansi else None
    for line in render_lines(palette, use_ansi=use_ansi, tags=args.tags):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
