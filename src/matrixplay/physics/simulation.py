"""State container driving the dot field one tick at a time."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

import numpy as np

from matrixplay.input.pointer import PointerTracker
from matrixplay.physics.dots import (
    DEFAULT_PARAMS,
    DEFAULT_SPACING,
    DotField,
    PhysicsParams,
    initialize_dots,
    step_dots,
)

logger = logging.getLogger(__name__)

TickListener = Callable[[DotField], None]


class DotSimulation:
    """
    Owns the current dot field and the pointer that disturbs it.

    Hosts call ``on_pointer_move``/``on_pointer_end`` from their input layer and
    ``tick`` from their frame scheduler. Listeners only ever receive complete
    post-tick fields.
    """

    def __init__(
        self,
        spacing: float = DEFAULT_SPACING,
        params: PhysicsParams = DEFAULT_PARAMS,
        pointer: Optional[PointerTracker] = None,
    ) -> None:
        self.spacing = spacing
        self.params = params
        self.pointer = pointer or PointerTracker()
        self.field = initialize_dots(0, 0, spacing)
        self.tick_count = 0
        self._listeners: List[TickListener] = []

    def __len__(self) -> int:
        return len(self.field)

    def resize(self, width: float, height: float) -> DotField:
        """Discard every dot and lay out a fresh grid for the new viewport."""
        self.pointer.surface_size = (int(width), int(height))
        self.field = initialize_dots(width, height, self.spacing)
        logger.info(
            "Initialized %d dots (%d rows x %d columns) for %gx%g viewport",
            len(self.field), self.field.rows, self.field.columns, width, height,
        )
        return self.field

    def on_pointer_move(self, position: Tuple[float, float]) -> None:
        self.pointer.on_pointer_move(position)

    def on_pointer_end(self) -> None:
        self.pointer.on_pointer_end()

    def tick(self) -> DotField:
        self.field = step_dots(self.field, self.pointer.state, self.params)
        self.tick_count += 1
        for listener in list(self._listeners):
            listener(self.field)
        return self.field

    def add_listener(self, listener: TickListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: TickListener) -> None:
        self._listeners.remove(listener)

    def positions(self) -> np.ndarray:
        snapshot = self.field.positions.view()
        snapshot.setflags(write=False)
        return snapshot
