"""Top-level application orchestration."""
from __future__ import annotations

import logging
from dataclasses import dataclass

import pygame

from matrixplay.core.config import AppConfig
from matrixplay.physics.simulation import DotSimulation
from matrixplay.rendering.renderer import Renderer
from matrixplay.ui.settings import SettingsMenu
from matrixplay.utils.clock import FrameClock, FrameScheduler

logger = logging.getLogger(__name__)

TICK_INTERVAL = 0.016  # seconds per physics tick


@dataclass
class MatrixPlayApp:
    app_config: AppConfig

    def __post_init__(self) -> None:
        pygame.init()
        window = self.app_config.window
        pygame.display.set_caption(window.title)

        flags = pygame.FULLSCREEN if window.fullscreen else pygame.RESIZABLE
        self.screen = pygame.display.set_mode(window.size, flags)

        self.clock = FrameClock(target_fps=window.target_fps)
        self.simulation = DotSimulation(spacing=self.app_config.grid.spacing, params=self.app_config.physics)
        self.menu = SettingsMenu(
            shape=self.app_config.render.shape,
            color=self.app_config.render.color,
            palette=self.app_config.render.palette,
            surface_size=self.screen.get_size(),
        )
        self.renderer = Renderer(config=self.app_config, screen=self.screen, menu=self.menu)
        self.scheduler = FrameScheduler(interval=TICK_INTERVAL, callback=self.simulation.tick)
        self.running = False

        self._fps_samples = []
        self._fps_log_last_time = 0.0
        self.resize(*self.screen.get_size())

    def resize(self, width: int, height: int) -> None:
        self.simulation.resize(width, height)
        self.menu.surface_size = (width, height)

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.type == pygame.WINDOWSIZECHANGED:
                self.screen = pygame.display.get_surface()
                self.renderer.set_screen(self.screen)
                self.resize(event.x, event.y)
            elif not self.menu.handle_event(event):
                self.simulation.pointer.handle_event(event)

    def draw(self) -> None:
        self.renderer.draw(self.simulation.positions(), self.menu.shape, self.menu.color)
        pygame.display.flip()

    def run(self) -> None:
        logger.info("Starting MatrixPlay with %d dots", len(self.simulation))
        self.running = True
        try:
            with self.scheduler:
                while self.running:
                    self.handle_events()
                    self.scheduler.pump()
                    self.draw()
                    self.clock.tick()
                    self._log_fps(pygame.time.get_ticks() / 1000.0)
        finally:
            self.cleanup()

    def _log_fps(self, current_time: float) -> None:
        interval = self.app_config.logging.fps_log_interval
        if interval <= 0:
            return
        self._fps_samples.append(self.clock.get_fps())
        if current_time - self._fps_log_last_time < interval:
            return
        avg_fps = sum(self._fps_samples) / len(self._fps_samples)
        logger.info(
            "FPS: %.1f (min %.1f) | dots: %d | ticks: %d | skipped: %d",
            avg_fps, min(self._fps_samples), len(self.simulation),
            self.simulation.tick_count, self.scheduler.skipped,
        )
        self._fps_samples = []
        self._fps_log_last_time = current_time

    def cleanup(self) -> None:
        logger.info("Cleaning up...")
        self.scheduler.stop()
        pygame.quit()
