"""Single-pointer tracking for mouse drags and touch."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

logger = logging.getLogger(__name__)

# Kept for hosts that still pass a far-away coordinate instead of an inactive state
SENTINEL_POSITION: Tuple[float, float] = (-1000.0, -1000.0)


@dataclass(frozen=True)
class PointerState:
    active: bool = False
    position: Tuple[float, float] = SENTINEL_POSITION


INACTIVE = PointerState()


class PointerTracker:
    """Follows one pointer: the left mouse button while held, or the first finger down."""

    def __init__(self, surface_size: Tuple[int, int] = (0, 0)) -> None:
        self.state = INACTIVE
        self.surface_size = surface_size
        self._finger_id: Optional[int] = None

    def current_pointer_position(self) -> Tuple[float, float]:
        return self.state.position if self.state.active else SENTINEL_POSITION

    def on_pointer_move(self, position: Tuple[float, float]) -> None:
        if not self.state.active:
            logger.debug("Pointer down at (%.1f, %.1f)", position[0], position[1])
        self.state = PointerState(active=True, position=(float(position[0]), float(position[1])))

    def on_pointer_end(self) -> None:
        if self.state.active:
            logger.debug("Pointer released")
        self.state = INACTIVE
        self._finger_id = None

    def handle_event(self, event: pygame.event.Event) -> None:
        if getattr(event, "touch", False):
            # mouse events mirrored from a touch; the finger events carry it
            return
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.on_pointer_move(event.pos)
        elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
            self.on_pointer_move(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.on_pointer_end()
        elif event.type == pygame.FINGERDOWN:
            if self._finger_id is None:
                self._finger_id = event.finger_id
                self.on_pointer_move(self._finger_position(event))
        elif event.type == pygame.FINGERMOTION:
            if event.finger_id == self._finger_id:
                self.on_pointer_move(self._finger_position(event))
        elif event.type == pygame.FINGERUP:
            if event.finger_id == self._finger_id:
                self.on_pointer_end()
        elif event.type == pygame.WINDOWLEAVE:
            self.on_pointer_end()

    def _finger_position(self, event: pygame.event.Event) -> Tuple[float, float]:
        width, height = self.surface_size
        return event.x * width, event.y * height
