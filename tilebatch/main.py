"""Main loop: draws the background, the current level and sample text."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Optional, Sequence

import pygame

from .background import push_background
from .diagnostics import GameError
from .font import push_font_ch, push_font_str
from .level import push_level
from .sprites import Sprite
from .state import SCREEN_HEIGHT, SCREEN_WIDTH, GameState
from .timing import time_s
from .vectors import FVec2

_SAMPLE_TEXT = (
    "abcdefghijklmnopqrstuvwxyz"
    "\nABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "\n0123456789"
    "\n!@#$%^&*()_+="
    "\n,./<>?;':\"[]"
)

_FRAME_RATE = 60


def _build_frame(state: GameState, t: float) -> list[Sprite]:
    batch: list[Sprite] = []
    push_background(batch, state.bg_sheet, (SCREEN_WIDTH, SCREEN_HEIGHT))
    push_level(batch, state.level, state.font_sheet, state.rng, SCREEN_HEIGHT)
    a_pos = FVec2(t, t)
    b_pos = FVec2(t, a_pos.y + 8.0)
    push_font_ch(batch, state.font_sheet, "A", a_pos)
    push_font_str(batch, state.font_sheet, _SAMPLE_TEXT, b_pos)
    return batch


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Draw a tiled level with a bitmap font.")
    parser.add_argument("--resources", default="res", help="directory holding font.png and bg.png")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game loop until the window is closed or the frame limit is reached."""
    args = _parse_args(argv)
    try:
        with GameState(args.resources) as state:
            clock = pygame.time.Clock()
            frames = 0
            while not state.quit:
                if args.frames is not None and frames >= args.frames:
                    break
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        state.quit = True

                t = 10.0 + math.cos(time_s()) * 10.0
                batch = _build_frame(state, t)

                state.renderer.begin()
                state.renderer.draw_batch(batch, True)
                state.renderer.end()

                frames += 1
                clock.tick(_FRAME_RATE)
    except GameError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())