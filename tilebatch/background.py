"""Decorative tiled border around the screen."""

from __future__ import annotations

from .sprites import Sprite, SpriteSheet
from .vectors import FVec2, IVec2


def push_background(
    batch: list[Sprite], sheet: SpriteSheet, screen_size: tuple[int, int]
) -> None:
    """Append a one-tile ring of background tiles, inset one tile from the edges."""
    screen_width, screen_height = screen_size
    tiles_x = int(screen_width / (sheet.scale * sheet.sprite_width))
    tiles_y = int(screen_height / (sheet.scale * sheet.sprite_height))
    last_x, last_y = tiles_x - 2, tiles_y - 2

    for x in range(1, tiles_x - 1):
        for y in range(1, tiles_y - 1):
            if x not in (1, last_x) and y not in (1, last_y):
                continue
            batch.append(
                Sprite(
                    src_idx=IVec2(1 + x % 2 + y % 2, 0),
                    dst_px=FVec2(x * sheet.sprite_width, y * sheet.sprite_height),
                    sheet=sheet,
                )
            )