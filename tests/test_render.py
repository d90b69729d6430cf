import pygame
import pytest

from tilebatch.diagnostics import GameError
from tilebatch.render import Renderer, destination_rect, source_rect
from tilebatch.sprites import Image, Sprite, SpriteSheet
from tilebatch.vectors import FVec2, IVec2

RED = (255, 0, 0)
BLUE = (0, 0, 255)


def _sheet(surface, scale=1.0):
    return SpriteSheet(Image.from_surface(surface), 8, 8, scale)


def _solid(color, size=(8, 8)):
    surface = pygame.Surface(size, pygame.SRCALPHA)
    surface.fill(color + (255,))
    return surface


def _top_row_red():
    surface = _solid(BLUE)
    pygame.draw.line(surface, RED + (255,), (0, 0), (7, 0))
    return surface


def _rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_source_rect():
    sheet = _sheet(_solid(RED, (32, 32)))
    sprite = Sprite(src_idx=IVec2(2, 3), dst_px=FVec2(0, 0), sheet=sheet)
    assert source_rect(sprite) == pygame.Rect(16, 24, 8, 8)


def test_destination_rect_scales():
    sheet = _sheet(_solid(RED), scale=3.0)
    sprite = Sprite(src_idx=IVec2(0, 0), dst_px=FVec2(10, 20), sheet=sheet)
    assert destination_rect(sprite) == pygame.Rect(30, 60, 24, 24)


def test_rect_without_sheet_raises():
    sprite = Sprite(src_idx=IVec2(0, 0), dst_px=FVec2(0, 0), sheet=None)
    with pytest.raises(GameError):
        destination_rect(sprite)


def test_begin_clears_to_black():
    target = pygame.Surface((16, 16))
    target.fill(RED)
    renderer = Renderer(16, 16, surface=target)
    renderer.begin()
    assert _rgb(target, (5, 5)) == (0, 0, 0)


def test_draw_batch_scaled_sprite():
    target = pygame.Surface((32, 32))
    renderer = Renderer(32, 32, surface=target)
    renderer.begin()
    sheet = _sheet(_solid(RED), scale=2.0)
    renderer.draw_batch([Sprite(IVec2(0, 0), FVec2(0, 0), sheet)])
    assert _rgb(target, (0, 0)) == RED
    assert _rgb(target, (15, 15)) == RED
    assert _rgb(target, (16, 16)) == (0, 0, 0)


def test_draw_batch_clears_batch():
    renderer = Renderer(8, 8, surface=pygame.Surface((8, 8)))
    batch = [Sprite(IVec2(0, 0), FVec2(0, 0), _sheet(_solid(RED)))]
    renderer.draw_batch(batch, True)
    assert batch == []


def test_draw_batch_keeps_batch():
    renderer = Renderer(8, 8, surface=pygame.Surface((8, 8)))
    batch = [Sprite(IVec2(0, 0), FVec2(0, 0), _sheet(_solid(RED)))]
    renderer.draw_batch(batch, False)
    assert len(batch) == 1


def test_rotation_90_is_clockwise():
    target = pygame.Surface((8, 8))
    renderer = Renderer(8, 8, surface=target)
    sprite = Sprite(IVec2(0, 0), FVec2(0, 0), _sheet(_top_row_red()), rotation=90.0)
    renderer.draw_batch([sprite])
    assert _rgb(target, (7, 4)) == RED
    assert _rgb(target, (0, 4)) == BLUE


def test_rotation_180_flips():
    target = pygame.Surface((8, 8))
    renderer = Renderer(8, 8, surface=target)
    sprite = Sprite(IVec2(0, 0), FVec2(0, 0), _sheet(_top_row_red()), rotation=180.0)
    renderer.draw_batch([sprite])
    assert _rgb(target, (4, 7)) == RED
    assert _rgb(target, (4, 0)) == BLUE


def test_closed_renderer_refuses_to_draw():
    renderer = Renderer(8, 8, surface=pygame.Surface((8, 8)))
    renderer.close()
    assert renderer.closed is True
    with pytest.raises(GameError):
        renderer.begin()


def test_context_manager_closes():
    with Renderer(8, 8, surface=pygame.Surface((8, 8))) as renderer:
        renderer.begin()
    assert renderer.closed is True