import pygame
import pytest

from matrixplay.rendering.shapes import DotShape
from matrixplay.ui.settings import PANEL_WIDTH, SettingsMenu

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


@pytest.fixture
def menu():
    return SettingsMenu(DotShape.CIRCLE, RED, [RED, GREEN, BLUE], surface_size=(800, 600))


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k, mod=0, unicode="", scancode=0)


def click(pos, event_type=pygame.MOUSEBUTTONDOWN):
    return pygame.event.Event(event_type, pos=pos, button=1)


def test_number_keys_select_shapes(menu):
    assert menu.handle_event(key(pygame.K_3)) is True
    assert menu.shape is DotShape.STAR
    menu.handle_event(key(pygame.K_2))
    assert menu.shape is DotShape.SQUARE
    menu.handle_event(key(pygame.K_1))
    assert menu.shape is DotShape.CIRCLE


def test_colour_key_cycles_palette(menu):
    menu.handle_event(key(pygame.K_c))
    assert menu.color == GREEN
    menu.handle_event(key(pygame.K_c))
    menu.handle_event(key(pygame.K_c))
    assert menu.color == RED


def test_hue_rotation_moves_around_the_wheel(menu):
    for _ in range(12):
        menu.handle_event(key(pygame.K_RIGHTBRACKET))

    r, g, b = menu.color
    assert r < 10 and b < 10 and g > 245

    for _ in range(12):
        menu.handle_event(key(pygame.K_LEFTBRACKET))
    r, g, b = menu.color
    assert r > 245 and g < 10 and b < 10


def test_unrelated_keys_pass_through(menu):
    assert menu.handle_event(key(pygame.K_a)) is False


def test_tab_toggles_panel(menu):
    menu.handle_event(key(pygame.K_TAB))
    assert menu.visible
    menu.handle_event(key(pygame.K_TAB))
    assert not menu.visible


def test_clicking_toggle_opens_panel_and_moves_button(menu):
    closed = menu.toggle_rect()

    assert menu.handle_event(click(closed.center)) is True
    assert menu.visible
    assert menu.toggle_rect().left > PANEL_WIDTH


def test_clicks_on_open_panel_are_consumed(menu):
    menu.visible = True
    star_rect = menu.shape_rects()[DotShape.STAR]

    assert menu.handle_event(click(star_rect.center)) is True
    assert menu.shape is DotShape.STAR

    motion = pygame.event.Event(pygame.MOUSEMOTION, pos=(400, 300), rel=(0, 0), buttons=(1, 0, 0))
    assert menu.handle_event(motion) is True
    assert menu.handle_event(click((400, 300), pygame.MOUSEBUTTONUP)) is True
    assert menu.handle_event(motion) is False


def test_swatch_click_cycles_colour(menu):
    menu.visible = True

    menu.handle_event(click(menu.swatch_rect().center))

    assert menu.color == GREEN


def test_clicks_on_grid_fall_through(menu):
    assert menu.handle_event(click((500, 300))) is False

    menu.visible = True
    assert menu.handle_event(click((500, 300))) is False


def test_draw_open_panel(menu):
    surface = pygame.Surface((800, 600))
    menu.visible = True

    menu.draw(surface)

    assert surface.get_at(menu.swatch_rect().center)[:3] == RED


def finger(event_type, finger_id, pos, surface_size=(800, 600)):
    width, height = surface_size
    return pygame.event.Event(
        event_type, touch_id=0, finger_id=finger_id, x=pos[0] / width, y=pos[1] / height, dx=0.0, dy=0.0
    )


def test_finger_on_toggle_is_captured_until_lifted(menu):
    target = menu.toggle_rect().center

    assert menu.handle_event(finger(pygame.FINGERDOWN, 3, target)) is True
    assert menu.visible
    assert menu.handle_event(finger(pygame.FINGERMOTION, 3, (400, 300))) is True
    assert menu.handle_event(finger(pygame.FINGERDOWN, 4, (400, 300))) is False
    assert menu.handle_event(finger(pygame.FINGERUP, 3, (400, 300))) is True
    assert menu.handle_event(finger(pygame.FINGERMOTION, 3, (400, 300))) is False


def test_finger_selects_shape_on_open_panel(menu):
    menu.visible = True

    assert menu.handle_event(finger(pygame.FINGERDOWN, 0, menu.shape_rects()[DotShape.SQUARE].center)) is True
    assert menu.shape is DotShape.SQUARE


def test_finger_on_grid_falls_through(menu):
    assert menu.handle_event(finger(pygame.FINGERDOWN, 0, (500, 300))) is False


def test_mirrored_mouse_click_does_not_toggle_twice(menu):
    target = menu.toggle_rect().center
    menu.handle_event(finger(pygame.FINGERDOWN, 0, target))

    mirrored = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=target, button=1, touch=True)

    assert menu.handle_event(mirrored) is False
    assert menu.visible
