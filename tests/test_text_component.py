from pathlib import Path

import pygame
import pytest

from minidig.gameobject import GameObject
from minidig.renderer import Renderer
from minidig.resources import Font
from minidig.scene import SceneManager
from minidig.text_component import TextComponent

DEFAULT_FONT = Path(pygame.__file__).parent / pygame.font.get_default_font()
BLACK = (0, 0, 0)


@pytest.fixture
def font():
    return Font(DEFAULT_FONT, 12)


@pytest.fixture
def renderer():
    surface = pygame.Surface((120, 30))
    surface.fill(BLACK)
    r = Renderer(scene_manager=SceneManager())
    r.init(surface)
    return r


def _lit_pixels(surface):
    width, height = surface.get_size()
    return sum(
        1
        for x in range(width)
        for y in range(height)
        if tuple(surface.get_at((x, y))[:3]) != BLACK
    )


def test_texture_created_on_update(font, renderer):
    comp = GameObject().add_component(TextComponent, "Score: 0", font, renderer=renderer)
    assert comp.texture is None
    comp.update()
    width, height = comp.texture.size()
    assert width > 0
    assert height > 0


def test_update_without_change_keeps_texture(font, renderer):
    comp = GameObject().add_component(TextComponent, "abc", font, renderer=renderer)
    comp.update()
    first = comp.texture
    comp.update()
    assert comp.texture is first


def test_set_text_rerenders(font, renderer):
    comp = GameObject().add_component(TextComponent, "a", font, renderer=renderer)
    comp.update()
    short = comp.texture
    comp.set_text("a much longer line")
    assert comp.text == "a much longer line"
    assert comp.texture is short
    comp.update()
    assert comp.texture is not short
    assert comp.texture.size()[0] > short.size()[0]


def test_render_before_update_draws_nothing(font, renderer):
    go = GameObject()
    go.add_component(TextComponent, "hidden", font, renderer=renderer)
    go.render()
    assert _lit_pixels(renderer.window) == 0


def test_render_draws_text(font, renderer):
    go = GameObject()
    comp = go.add_component(TextComponent, "Hello", font, renderer=renderer)
    comp.update()
    go.render()
    assert _lit_pixels(renderer.window) > 0


def test_render_at_offset_leaves_origin_clear(font, renderer):
    go = GameObject()
    comp = go.add_component(TextComponent, "Hi", font, renderer=renderer)
    comp.update()
    go.set_position(60, 10)
    go.render()
    assert _lit_pixels(renderer.window.subsurface(pygame.Rect(0, 0, 60, 30))) == 0
    assert _lit_pixels(renderer.window) > 0