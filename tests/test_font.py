import pygame
import pytest

from tilebatch.font import find_char, push_font_ch, push_font_str
from tilebatch.sprites import Image, SpriteSheet
from tilebatch.vectors import FVec2, IVec2


@pytest.fixture
def font_sheet():
    surface = pygame.Surface((128, 56), pygame.SRCALPHA, 32)
    return SpriteSheet(Image.from_surface(surface), 8, 8, 3.0)


def test_find_char_known_positions():
    assert find_char("a") == IVec2(0, 0)
    assert find_char("q") == IVec2(0, 1)
    assert find_char(" ") == IVec2(10, 3)


def test_unknown_character_maps_to_question_mark():
    assert find_char("~") == find_char("?")
    assert find_char("\t") == find_char("?")


def test_every_glyph_position_is_unique():
    chars = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ 0123456789!@#$%^&*()_+=,./<>?;':\"[]"
    positions = {find_char(c) for c in chars}
    assert len(positions) == len(chars)


def test_push_font_ch(font_sheet):
    batch = []
    push_font_ch(batch, font_sheet, "Z", FVec2(4.0, 5.0))
    assert len(batch) == 1
    sprite = batch[0]
    assert sprite.src_idx == find_char("Z")
    assert sprite.dst_px == FVec2(4.0, 5.0)
    assert sprite.rotation == 0.0
    assert sprite.sheet is font_sheet


def test_push_font_str_advances_and_wraps(font_sheet):
    batch = []
    push_font_str(batch, font_sheet, "ab\nc", FVec2(10.0, 20.0))
    assert [s.src_idx for s in batch] == [find_char("a"), find_char("b"), find_char("c")]
    assert batch[0].dst_px == FVec2(10.0, 20.0)
    assert batch[1].dst_px == FVec2(19.0, 20.0)
    assert batch[2].dst_px == FVec2(10.0, 28.0)


def test_push_font_str_appends_to_existing_batch(font_sheet):
    batch = []
    push_font_ch(batch, font_sheet, "x", FVec2())
    push_font_str(batch, font_sheet, "\n\n", FVec2())
    push_font_str(batch, font_sheet, "hello", FVec2())
    assert len(batch) == 1 + len("hello")