"""Rooms of tiles grouped into levels, and the sprites that draw them."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from .diagnostics import ensure
from .font import push_font_str
from .sprites import Sprite, SpriteSheet
from .vectors import FVec2, IVec2

MAX_LEVELS = 5
MAX_ROOMS = 5
MAX_ROOM_WIDTH = 16
MAX_ROOM_HEIGHT = 16

_MESSAGE_LIMIT = 31

_DIAMOND = (
    (0, 1, 1, 1, 1, 1, 0),
    (1, 1, 0, 0, 0, 1, 1),
    (1, 0, 1, 0, 1, 0, 1),
    (1, 0, 0, 1, 0, 0, 1),
    (1, 0, 1, 0, 1, 0, 1),
    (1, 1, 0, 0, 0, 1, 1),
    (0, 1, 1, 1, 1, 1, 0),
)


@dataclass(eq=False)
class Room:
    """A rectangle of tiles placed on the tile grid at (x, y).

    Each tile value is a position in the tile sheet read as a flat array.
    """

    id: int
    x: int
    y: int
    w: int
    h: int
    tiles: tuple[tuple[int, ...], ...]
    tile_sheet: Optional[SpriteSheet] = None

    def __post_init__(self) -> None:
        ensure(0 <= self.w <= MAX_ROOM_WIDTH, f"room width {self.w} out of range")
        ensure(0 <= self.h <= MAX_ROOM_HEIGHT, f"room height {self.h} out of range")
        ensure(len(self.tiles) >= self.h, "room has fewer tile rows than its height")
        ensure(
            all(len(row) >= self.w for row in self.tiles[: self.h]),
            "room has a tile row shorter than its width",
        )
        self.tiles = tuple(tuple(row) for row in self.tiles)


@dataclass(eq=False)
class Level:
    """A named collection of rooms."""

    id: int
    name: str
    rooms: list[Room] = field(default_factory=list)

    def __post_init__(self) -> None:
        ensure(len(self.rooms) <= MAX_ROOMS, f"a level holds at most {MAX_ROOMS} rooms")

    @property
    def room_count(self) -> int:
        return len(self.rooms)


def build_levels() -> list[Level]:
    """Fresh copies of every level, indexed by level id."""
    template_room = Room(id=0, x=5, y=5, w=7, h=7, tiles=_DIAMOND)
    room_one = Room(id=0, x=12, y=5, w=7, h=7, tiles=_DIAMOND)
    return [
        Level(id=0, name="level template", rooms=[template_room]),
        Level(id=1, name="level one", rooms=[room_one]),
    ]


def push_level(
    batch: list[Sprite],
    level: Level,
    font_sheet: SpriteSheet,
    rng: random.Random,
    screen_height: int,
) -> None:
    """Append the level caption and every room tile to ``batch``.

    Each tile gets a random rotation of 0, 90, 180 or 270 degrees from ``rng``.
    """
    ensure(level.name, "must build the levels first")

    lines_to_fit_font = int(screen_height / (font_sheet.scale * font_sheet.sprite_height))
    message = f"{level.name} <id={level.id}> (rooms={level.room_count})"[:_MESSAGE_LIMIT]
    push_font_str(
        batch,
        font_sheet,
        message,
        FVec2(
            1.0 * font_sheet.sprite_width,
            float((lines_to_fit_font - 2) * font_sheet.sprite_height),
        ),
    )

    for room in level.rooms:
        sheet = room.tile_sheet
        ensure(sheet is not None, f"room {room.id} of level {level.id} has no tile sheet")
        columns = sheet.columns
        ensure(columns > 0, "tile sheet is narrower than one sprite")
        for r_x in range(room.w):
            for r_y in range(room.h):
                src_y, src_x = divmod(room.tiles[r_y][r_x], columns)
                batch.append(
                    Sprite(
                        src_idx=IVec2(src_x, src_y),
                        dst_px=FVec2(
                            float((room.x + r_x) * sheet.sprite_width),
                            float((room.y + r_y) * sheet.sprite_height),
                        ),
                        sheet=sheet,
                        rotation=rng.randrange(4) * 90.0,
                    )
                )