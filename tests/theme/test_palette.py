from __future__ import annotations

import copy
import dataclasses
import logging
import pickle

import pytest

from cellstyle.theme import (
    DEFAULT_PALETTE,
    BaseColor,
    Color,
    ColorStyle,
    DrawContext,
    Palette,
    PaletteColor,
)

RED = Color.dark(BaseColor.RED)


def test_default_palette_covers_every_role():
    palette = Palette.default()
    assert palette is DEFAULT_PALETTE
    assert len(palette) == len(PaletteColor)
    assert [role for role, _ in palette] == list(PaletteColor)


def test_default_palette_colors():
    palette = Palette.default()
    assert palette[PaletteColor.BACKGROUND] == Color.dark(BaseColor.BLUE)
    assert palette[PaletteColor.VIEW] == Color.dark(BaseColor.WHITE)
    assert palette[PaletteColor.PRIMARY] == Color.dark(BaseColor.BLACK)
    assert palette[PaletteColor.TERTIARY] == Color.light(BaseColor.WHITE)
    assert palette[PaletteColor.HIGHLIGHT] == Color.dark(BaseColor.RED)


def test_partial_mapping_is_filled_from_defaults(caplog):
    with caplog.at_level(logging.DEBUG, logger="cellstyle.theme.palette"):
        palette = Palette.from_mapping({PaletteColor.VIEW: RED})
    assert palette.lookup(PaletteColor.VIEW) == RED
    assert palette.lookup(PaletteColor.SHADOW) == DEFAULT_PALETTE[PaletteColor.SHADOW]
    assert len(palette) == len(PaletteColor)
    assert "filling 10 role(s)" in caplog.text


def test_with_color_returns_a_copy():
    palette = Palette.default()
    changed = palette.with_color(PaletteColor.PRIMARY, RED)
    assert changed[PaletteColor.PRIMARY] == RED
    assert palette[PaletteColor.PRIMARY] == Color.dark(BaseColor.BLACK)
    assert changed != palette
    assert palette.with_color(PaletteColor.PRIMARY, palette[PaletteColor.PRIMARY]) == palette


def test_palette_is_read_only():
    palette = Palette.default()
    with pytest.raises(AttributeError):
        palette._colors = {}
    with pytest.raises(TypeError):
        palette.as_mapping()[PaletteColor.VIEW] = RED


@pytest.mark.parametrize(
    "mapping",
    [
        {"view": RED},
        {PaletteColor.VIEW: "red"},
    ],
)
def test_palette_rejects_wrong_types(mapping):
    with pytest.raises(TypeError):
        Palette(mapping)


def test_palettes_are_hashable():
    assert hash(Palette()) == hash(Palette.default())


@pytest.mark.parametrize(
    "name,role",
    [
        ("view", PaletteColor.VIEW),
        ("TitlePrimary", PaletteColor.TITLE_PRIMARY),
        ("title-secondary", PaletteColor.TITLE_SECONDARY),
        ("HIGHLIGHT_TEXT", PaletteColor.HIGHLIGHT_TEXT),
        ("HighlightInactive", PaletteColor.HIGHLIGHT_INACTIVE),
    ],
)
def test_role_from_name(name, role):
    assert PaletteColor.from_name(name) is role


def test_unknown_role_name_raises_key_error():
    with pytest.raises(KeyError):
        PaletteColor.from_name("accent")


def test_role_resolve_uses_palette():
    palette = Palette({PaletteColor.SHADOW: RED})
    assert PaletteColor.SHADOW.resolve(palette) == RED


def test_palette_copies_share_the_instance():
    palette = Palette.default().with_color(PaletteColor.VIEW, RED)
    assert copy.copy(palette) is palette
    assert copy.deepcopy(palette) is palette


def test_palette_pickle_round_trip():
    palette = Palette({PaletteColor.HIGHLIGHT: Color.rgb(1, 2, 3)})
    restored = pickle.loads(pickle.dumps(palette))
    assert restored == palette
    assert restored[PaletteColor.HIGHLIGHT] == Color.rgb(1, 2, 3)
    with pytest.raises(TypeError):
        restored.as_mapping()[PaletteColor.VIEW] = RED


def test_draw_context_converts_to_dict():
    ctx = DrawContext.root().with_style(ColorStyle.primary())
    data = dataclasses.asdict(ctx)
    assert data["palette"] is ctx.palette
    assert data["current"]["back"] == dataclasses.asdict(Color.dark(BaseColor.WHITE))
