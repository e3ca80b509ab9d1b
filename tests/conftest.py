from __future__ import annotations

import pytest

from cellstyle.theme import BaseColor, Color, ColorPair, Palette, PaletteColor


@pytest.fixture
def palette() -> Palette:
    return Palette(
        {
            PaletteColor.VIEW: Color.dark(BaseColor.BLACK),
            PaletteColor.HIGHLIGHT: Color.dark(BaseColor.BLUE),
            PaletteColor.HIGHLIGHT_TEXT: Color.dark(BaseColor.WHITE),
        }
    )


@pytest.fixture
def previous() -> ColorPair:
    return ColorPair(Color.rgb(10, 20, 30), Color.light(BaseColor.MAGENTA))
