"""Game state: renderer, sprite sheets and loaded levels."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Optional, Union

from .diagnostics import GameError, ensure
from .level import MAX_LEVELS, Level, build_levels
from .render import Renderer
from .sprites import SpriteSheet

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720


class GameState:
    """Everything the main loop needs: window, sheets and levels."""

    def __init__(
        self,
        resource_dir: Union[str, Path] = "res",
        renderer: Optional[Renderer] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.resource_dir = Path(resource_dir)
        self.quit = False
        self.rng = rng if rng is not None else random.Random()
        self.current_level = 0
        self.levels: list[Level] = []
        self.renderer = renderer if renderer is not None else Renderer(SCREEN_WIDTH, SCREEN_HEIGHT)
        try:
            self.font_sheet = SpriteSheet.load(str(self.resource_dir / "font.png"), 8, 8, 3.0)
            self.bg_sheet = SpriteSheet.load(str(self.resource_dir / "bg.png"), 8, 8, 4.0)
            self._all_levels = build_levels()
            self.set_current_level(0)
        except GameError:
            self.renderer.close()
            raise

    def __enter__(self) -> GameState:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def loaded_levels(self) -> int:
        return len(self.levels)

    @property
    def level(self) -> Level:
        """The level currently being played."""
        ensure(
            self.current_level < MAX_LEVELS and self.current_level < len(self.levels),
            "no current level",
        )
        return self.levels[self.current_level]

    def set_current_level(self, level_id: int) -> None:
        """Switch to a level, loading its tile sheets the first time."""
        ensure(
            level_id < MAX_LEVELS and level_id <= self.loaded_levels,
            f"level {level_id} cannot be selected",
        )
        if not 0 <= level_id < len(self._all_levels):
            raise GameError("invalid level number")
        level = self._all_levels[level_id]

        if level_id < self.loaded_levels:
            self.current_level = level_id
            return

        for room in level.rooms:
            room.tile_sheet = SpriteSheet.load(str(self.resource_dir / "bg.png"), 8, 8, 4.0)
        self.current_level = self.loaded_levels
        self.levels.append(level)

    def close(self) -> None:
        """Release the renderer and drop loaded level sheets."""
        for level in self.levels:
            for room in level.rooms:
                room.tile_sheet = None
        self.renderer.close()