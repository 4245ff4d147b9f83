"""Layered renderer for the dot grid and the settings overlay."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pygame

from matrixplay.core.config import AppConfig
from matrixplay.rendering.shapes import DotShape, star_points
from matrixplay.ui.settings import SettingsMenu

Color = Tuple[int, int, int]


@dataclass
class DotRenderer:
    screen: pygame.Surface
    background_color: Color = (0, 0, 0)

    def draw(self, positions: np.ndarray, shape: DotShape, color: Color) -> None:
        self.screen.fill(self.background_color)
        size = shape.size
        half = size / 2
        if shape is DotShape.CIRCLE:
            for x, y in positions:
                pygame.draw.circle(self.screen, color, (x, y), half)
        elif shape is DotShape.SQUARE:
            for x, y in positions:
                pygame.draw.rect(self.screen, color, pygame.Rect(round(x - half), round(y - half), size, size))
        else:
            for x, y in positions:
                pygame.draw.polygon(self.screen, color, star_points((x, y), size))


@dataclass
class Renderer:
    config: AppConfig
    screen: pygame.Surface
    menu: Optional[SettingsMenu] = None

    def __post_init__(self) -> None:
        self.dots = DotRenderer(screen=self.screen, background_color=self.config.window.background_color)

    def set_screen(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.dots.screen = screen

    def draw(self, positions: np.ndarray, shape: DotShape, color: Color) -> None:
        self.dots.draw(positions, shape, color)
        if self.menu is not None:
            self.menu.draw(self.screen)
