"""Images, sprite sheets and the sprites drawn from them."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from .diagnostics import GameError
from .vectors import FVec2, IVec2


def _rgba_bytes(surface: pygame.Surface) -> bytes:
    if hasattr(pygame.image, "tobytes"):
        return pygame.image.tobytes(surface, "RGBA")
    return pygame.image.tostring(surface, "RGBA")


@dataclass(eq=False)
class Image:
    """Decoded image: RGBA pixel bytes plus a drawable surface."""

    pixels: bytes
    width: int
    height: int
    channels: int
    surface: pygame.Surface

    @classmethod
    def from_surface(cls, surface: pygame.Surface) -> Image:
        """Wrap an existing surface."""
        width, height = surface.get_size()
        return cls(
            pixels=_rgba_bytes(surface),
            width=width,
            height=height,
            channels=surface.get_bytesize(),
            surface=surface,
        )

    @classmethod
    def load(cls, path: str) -> Image:
        """Load an image file; raises GameError if it cannot be read."""
        try:
            surface = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise GameError(f"failed to load image from {path}: {exc}") from exc
        return cls.from_surface(surface)


@dataclass(eq=False)
class SpriteSheet:
    """An image cut into equal-sized sprites, drawn at a fixed scale."""

    image: Image
    sprite_width: int
    sprite_height: int
    scale: float

    @classmethod
    def load(
        cls, path: str, sprite_width: int, sprite_height: int, scale: float
    ) -> SpriteSheet:
        """Load a sheet from an image file."""
        return cls(Image.load(path), sprite_width, sprite_height, scale)

    @property
    def columns(self) -> int:
        """Number of sprites in one row of the sheet."""
        return self.image.width // self.sprite_width

    @property
    def rows(self) -> int:
        """Number of sprite rows in the sheet."""
        return self.image.height // self.sprite_height


@dataclass
class Sprite:
    """One sprite of a sheet placed in the game window."""

    src_idx: IVec2
    dst_px: FVec2
    sheet: SpriteSheet
    rotation: float = field(default=0.0)