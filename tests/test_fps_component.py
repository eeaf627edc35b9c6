from pathlib import Path

import pygame
import pytest

from minidig.fps_component import FPSComponent
from minidig.gameobject import GameObject
from minidig.resources import Font
from minidig.text_component import TextComponent
from minidig.timing import FrameClock

DEFAULT_FONT = Path(pygame.__file__).parent / pygame.font.get_default_font()


@pytest.fixture
def clock():
    return FrameClock(now=lambda: 0.0)


def test_fps_starts_at_zero(clock):
    comp = GameObject().add_component(FPSComponent, clock=clock)
    assert comp.fps == 0.0


def test_fps_from_delta_time(clock):
    clock.delta_time = 16
    comp = GameObject().add_component(FPSComponent, clock=clock)
    comp.update()
    assert comp.fps * 16 == pytest.approx(1000.0)


def test_fps_follows_clock_changes(clock):
    comp = GameObject().add_component(FPSComponent, clock=clock)
    clock.delta_time = 10
    comp.update()
    fast = comp.fps
    clock.delta_time = 40
    comp.update()
    assert comp.fps < fast
    assert comp.fps * 40 == pytest.approx(1000.0)


def test_zero_delta_gives_infinity(clock):
    comp = GameObject().add_component(FPSComponent, clock=clock)
    comp.update()
    assert comp.fps == float("inf")


def test_writes_to_text_component(clock):
    go = GameObject()
    text = go.add_component(TextComponent, "here", Font(DEFAULT_FONT, 12))
    comp = go.add_component(FPSComponent, text, clock=clock)
    clock.delta_time = 16
    comp.update()
    assert float(text.text) == pytest.approx(comp.fps)
    assert text.text.split(".")[1] == "500000"


def test_text_component_can_be_attached_later(clock):
    go = GameObject()
    text = go.add_component(TextComponent, "here", Font(DEFAULT_FONT, 12))
    comp = go.add_component(FPSComponent, clock=clock)
    comp.update()
    assert text.text == "here"
    comp.text_component = text
    comp.update()
    assert text.text == "inf"