#!/usr/bin/env python3
"""
Slide-out settings menu for dot colour and shape
Drawn over the dot grid; swallows the clicks that land on it
"""

import logging
from typing import Dict, Optional, Sequence, Tuple

import pygame

from matrixplay.rendering.shapes import DotShape

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

PANEL_WIDTH = 200
TOGGLE_SIZE = 30
TOGGLE_MARGIN = 16
HUE_STEP = 10.0
PANEL_COLOR = (128, 128, 128, 204)
TEXT_COLOR = (255, 255, 255)
HIGHLIGHT_COLOR = (90, 90, 90)

SHAPE_KEYS = {
    pygame.K_1: DotShape.CIRCLE,
    pygame.K_2: DotShape.SQUARE,
    pygame.K_3: DotShape.STAR,
}


class SettingsMenu:
    """Holds the user-facing dot shape and colour, and the panel that edits them"""

    def __init__(self, shape: DotShape, color: Color, palette: Sequence[Color], surface_size: Tuple[int, int]):
        """
        Initialize the menu

        Args:
            shape: Initially selected dot shape
            color: Initial dot colour
            palette: Colours cycled through with the C key
            surface_size: (width, height) of the surface the menu is drawn on
        """
        self.shape = shape
        self.color = color
        self.palette = list(palette)
        self.visible = False
        self.surface_size = surface_size
        self._palette_index = self.palette.index(color) if color in self.palette else -1
        self._captured = False
        self._finger_id: Optional[int] = None
        self._fonts: Dict[int, pygame.font.Font] = {}

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def toggle(self):
        self.visible = not self.visible
        logger.debug("Settings menu %s", "shown" if self.visible else "hidden")

    def select_shape(self, shape: DotShape):
        if shape is not self.shape:
            logger.info("Dot shape set to %s", shape.value)
        self.shape = shape

    def next_color(self):
        self._palette_index = (self._palette_index + 1) % len(self.palette)
        self.color = self.palette[self._palette_index]
        logger.info("Dot colour set to %s", self.color)

    def rotate_hue(self, degrees: float):
        """Shift the current colour around the hue wheel, keeping saturation and value"""
        color = pygame.Color(*self.color)
        hue, saturation, value, alpha = color.hsva
        color.hsva = ((hue + degrees) % 360, saturation, value, alpha)
        self.color = (color.r, color.g, color.b)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def panel_rect(self) -> pygame.Rect:
        return pygame.Rect(0, 0, PANEL_WIDTH, self.surface_size[1])

    def toggle_rect(self) -> pygame.Rect:
        left = (PANEL_WIDTH if self.visible else 0) + TOGGLE_MARGIN
        top = self.surface_size[1] // 2 - TOGGLE_SIZE // 2
        return pygame.Rect(left, top, TOGGLE_SIZE, TOGGLE_SIZE)

    def swatch_rect(self) -> pygame.Rect:
        return pygame.Rect(20, 60, PANEL_WIDTH - 40, 30)

    def shape_rects(self) -> Dict[DotShape, pygame.Rect]:
        shapes = list(DotShape)
        width = (PANEL_WIDTH - 40) // len(shapes)
        return {
            shape: pygame.Rect(20 + index * width, 160, width, 32)
            for index, shape in enumerate(shapes)
        }

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Apply an event to the menu

        Returns:
            True if the menu consumed the event and nothing else should see it
        """
        if event.type == pygame.KEYDOWN:
            return self._handle_key(event.key)

        if event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
            return self._handle_finger(event)

        # SDL mirrors touches as mouse events; the finger events above already cover them
        if getattr(event, "touch", False):
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self._handle_click(event.pos)

        if event.type == pygame.MOUSEMOTION and self._captured:
            return True

        if event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self._captured:
            self._captured = False
            return True

        return False

    def _handle_finger(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.FINGERDOWN:
            if self._finger_id is not None:
                return False
            width, height = self.surface_size
            if not self._handle_click((int(event.x * width), int(event.y * height))):
                return False
            self._captured = False
            self._finger_id = event.finger_id
            return True

        if event.finger_id != self._finger_id:
            return False
        if event.type == pygame.FINGERUP:
            self._finger_id = None
        return True

    def _handle_key(self, key: int) -> bool:
        if key == pygame.K_TAB:
            self.toggle()
        elif key in SHAPE_KEYS:
            self.select_shape(SHAPE_KEYS[key])
        elif key == pygame.K_c:
            self.next_color()
        elif key == pygame.K_LEFTBRACKET:
            self.rotate_hue(-HUE_STEP)
        elif key == pygame.K_RIGHTBRACKET:
            self.rotate_hue(HUE_STEP)
        else:
            return False
        return True

    def _handle_click(self, position: Tuple[int, int]) -> bool:
        if self.toggle_rect().collidepoint(position):
            self.toggle()
            self._captured = True
            return True

        if not self.visible or not self.panel_rect().collidepoint(position):
            return False

        if self.swatch_rect().collidepoint(position):
            self.next_color()
        for shape, rect in self.shape_rects().items():
            if rect.collidepoint(position):
                self.select_shape(shape)
        self._captured = True
        return True

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------
    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def draw(self, surface: pygame.Surface):
        if self.visible:
            self._draw_panel(surface)
        self._draw_toggle(surface)

    def _draw_panel(self, surface: pygame.Surface):
        panel = pygame.Surface(self.panel_rect().size, pygame.SRCALPHA)
        pygame.draw.rect(panel, PANEL_COLOR, panel.get_rect(), border_radius=10)
        surface.blit(panel, (0, 0))

        heading = self._font(26)
        surface.blit(heading.render("Select Dot Color", True, TEXT_COLOR), (20, 30))
        pygame.draw.rect(surface, self.color, self.swatch_rect(), border_radius=6)
        surface.blit(heading.render("Select Dot Shape", True, TEXT_COLOR), (20, 130))

        label_font = self._font(22)
        for shape, rect in self.shape_rects().items():
            if shape is self.shape:
                pygame.draw.rect(surface, HIGHLIGHT_COLOR, rect, border_radius=8)
            text = label_font.render(shape.label, True, TEXT_COLOR)
            surface.blit(text, text.get_rect(center=rect.center))

        hint = self._font(18)
        for row, line in enumerate(("Tab: menu  1/2/3: shape", "C: colour  [ ]: hue")):
            surface.blit(hint.render(line, True, TEXT_COLOR), (20, 220 + row * 20))

    def _draw_toggle(self, surface: pygame.Surface):
        rect = self.toggle_rect()
        pygame.draw.circle(surface, TEXT_COLOR, rect.center, TOGGLE_SIZE // 2, width=2)
        cx, cy = rect.center
        # Arrow points the way the panel will move
        direction = -1 if self.visible else 1
        tip = (cx + direction * 7, cy)
        pygame.draw.line(surface, TEXT_COLOR, (cx - direction * 7, cy), tip, 2)
        pygame.draw.line(surface, TEXT_COLOR, tip, (cx, cy - 6), 2)
        pygame.draw.line(surface, TEXT_COLOR, tip, (cx, cy + 6), 2)
