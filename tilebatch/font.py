"""Bitmap font: text to sprites from a font sheet."""

from __future__ import annotations

from .sprites import Sprite, SpriteSheet
from .vectors import FVec2, IVec2

_FONT_ROWS = (
    "abcdefghijklmnop",
    "qrstuvwxyz",
    "ABCDEFGHIJKLMNOP",
    "QRSTUVWXYZ ",
    "0123456789",
    "!@#$%^&*()_+=",
    ",./<>?;':\"[]",
)

_GLYPHS: dict[str, IVec2] = {}
for _row, _line in enumerate(_FONT_ROWS):
    for _col, _ch in enumerate(_line):
        _GLYPHS.setdefault(_ch, IVec2(_col, _row))

_FALLBACK = _GLYPHS["?"]

LINE_ADVANCE = 8.0
CHAR_ADVANCE = 9.0


def find_char(ch: str) -> IVec2:
    """Grid position of ``ch`` in the font sheet; unknown characters map to '?'."""
    return _GLYPHS.get(ch, _FALLBACK)


def push_font_ch(batch: list[Sprite], sheet: SpriteSheet, ch: str, pos: FVec2) -> None:
    """Append the sprite for one character at ``pos``."""
    batch.append(Sprite(src_idx=find_char(ch), dst_px=pos, sheet=sheet))


def push_font_str(batch: list[Sprite], sheet: SpriteSheet, text: str, pos: FVec2) -> None:
    """Append sprites for ``text``; a newline returns to the starting column."""
    start_x = pos.x
    x, y = pos.x, pos.y
    for ch in text:
        if ch == "\n":
            y += LINE_ADVANCE
            x = start_x
        else:
            push_font_ch(batch, sheet, ch, FVec2(x, y))
            x += CHAR_ADVANCE