import math

import numpy as np
import pygame
import pytest

from matrixplay.core.config import AppConfig
from matrixplay.rendering.renderer import DotRenderer, Renderer
from matrixplay.rendering.shapes import DotShape, star_points
from matrixplay.ui.settings import SettingsMenu

RED = (255, 0, 0)
BLACK = (0, 0, 0)


@pytest.fixture
def surface():
    return pygame.Surface((60, 40))


def test_star_is_drawn_larger():
    assert DotShape.STAR.size == 8
    assert DotShape.CIRCLE.size == DotShape.SQUARE.size == 5


def test_star_points_alternate_between_radii():
    points = star_points((10.0, 10.0), 8)

    assert len(points) == 10
    radii = [math.hypot(x - 10.0, y - 10.0) for x, y in points]
    assert radii[0::2] == pytest.approx([4.0] * 5)
    assert radii[1::2] == pytest.approx([2.0] * 5)
    assert points[0] == pytest.approx((14.0, 10.0))


@pytest.mark.parametrize("shape", list(DotShape))
def test_each_shape_paints_at_dot_position(surface, shape):
    renderer = DotRenderer(screen=surface)

    renderer.draw(np.array([[20.0, 20.0]]), shape, RED)

    assert surface.get_at((20, 20))[:3] == RED
    assert surface.get_at((40, 10))[:3] == BLACK


def test_draw_clears_previous_frame(surface):
    renderer = DotRenderer(screen=surface)
    renderer.draw(np.array([[20.0, 20.0]]), DotShape.SQUARE, RED)

    renderer.draw(np.array([[40.0, 20.0]]), DotShape.SQUARE, RED)

    assert surface.get_at((20, 20))[:3] == BLACK
    assert surface.get_at((40, 20))[:3] == RED


def test_empty_positions_only_fill_background(surface):
    renderer = DotRenderer(screen=surface, background_color=(10, 20, 30))

    renderer.draw(np.empty((0, 2)), DotShape.CIRCLE, RED)

    assert surface.get_at((5, 5))[:3] == (10, 20, 30)


def test_renderer_draws_menu_toggle_over_dots():
    screen = pygame.Surface((300, 200))
    menu = SettingsMenu(DotShape.CIRCLE, RED, [RED], surface_size=screen.get_size())
    renderer = Renderer(config=AppConfig(), screen=screen, menu=menu)

    renderer.draw(np.empty((0, 2)), menu.shape, menu.color)

    toggle = menu.toggle_rect()
    # arrow shaft runs through the toggle centre
    assert screen.get_at(toggle.center)[:3] == (255, 255, 255)
