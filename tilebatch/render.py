"""Drawing batches of sprites to a window or an off-screen surface."""

from __future__ import annotations

from typing import Optional

import pygame

from .diagnostics import GameError, ensure
from .sprites import Sprite


def source_rect(sprite: Sprite) -> pygame.Rect:
    """Area of the sprite's sheet that holds its image."""
    ensure(sprite.sheet is not None, "src sprite sheet cannot be null for a sprite")
    sw, sh = sprite.sheet.sprite_width, sprite.sheet.sprite_height
    return pygame.Rect(sprite.src_idx.x * sw, sprite.src_idx.y * sh, sw, sh)


def destination_rect(sprite: Sprite) -> pygame.Rect:
    """Area of the target the sprite covers once scaled."""
    ensure(sprite.sheet is not None, "src sprite sheet cannot be null for a sprite")
    sheet = sprite.sheet
    scale = sheet.scale
    return pygame.Rect(
        int(sprite.dst_px.x * scale),
        int(sprite.dst_px.y * scale),
        int(sheet.sprite_width * scale),
        int(sheet.sprite_height * scale),
    )


class Renderer:
    """Draws sprite batches; opens a window unless given a surface to draw on."""

    def __init__(
        self,
        width: int,
        height: int,
        title: str = "window name",
        surface: Optional[pygame.Surface] = None,
    ) -> None:
        self.closed = False
        self._owns_display = surface is None
        if surface is None:
            try:
                pygame.display.init()
                surface = pygame.display.set_mode((width, height))
                pygame.display.set_caption(title)
            except pygame.error as exc:
                raise GameError(f"failed to create window: {exc}") from exc
        self.surface = surface

    def __enter__(self) -> Renderer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def begin(self) -> None:
        """Clear the target to opaque black."""
        ensure(not self.closed, "renderer is closed")
        self.surface.fill((0, 0, 0, 255))

    def end(self) -> None:
        """Present the frame."""
        ensure(not self.closed, "renderer is closed")
        if self._owns_display:
            pygame.display.flip()

    def draw_batch(self, batch: list[Sprite], clear_after_render: bool = True) -> None:
        """Draw every sprite in order, then empty the batch if asked."""
        ensure(batch is not None, "batch must not be None")
        ensure(not self.closed, "renderer is closed")
        for sprite in batch:
            self._draw(sprite)
        if clear_after_render:
            batch.clear()

    def _draw(self, sprite: Sprite) -> None:
        src = source_rect(sprite)
        dst = destination_rect(sprite)
        sheet_surface = sprite.sheet.image.surface
        src = src.clip(sheet_surface.get_rect())
        if src.width == 0 or src.height == 0 or dst.width <= 0 or dst.height <= 0:
            return
        piece = pygame.transform.scale(sheet_surface.subsurface(src), dst.size)
        if sprite.rotation % 360:
            piece = pygame.transform.rotate(piece, -sprite.rotation)
            self.surface.blit(piece, piece.get_rect(center=dst.center))
        else:
            self.surface.blit(piece, dst.topleft)

    def close(self) -> None:
        """Release the window, if this renderer opened one."""
        if self.closed:
            return
        self.closed = True
        if self._owns_display:
            pygame.display.quit()