"""Dot shapes and their outlines."""
from __future__ import annotations

import math
from enum import Enum
from typing import List, Tuple


class DotShape(str, Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    STAR = "star"

    @property
    def size(self) -> int:
        """Footprint in pixels; stars are drawn larger so their points stay visible."""
        return 8 if self is DotShape.STAR else 5

    @property
    def label(self) -> str:
        return self.value.capitalize()


def star_points(center: Tuple[float, float], size: float, points: int = 5) -> List[Tuple[float, float]]:
    """
    Generate vertices for a star centred on ``center``.
    Outer vertices sit at size/2, inner ones at size/4, starting at angle 0.
    Returns list of (x, y) tuples
    """
    cx, cy = center
    radius = size / 2
    inner_radius = radius / 2
    vertices = []
    for i in range(points * 2):
        angle = i * math.pi / points
        r = radius if i % 2 == 0 else inner_radius
        vertices.append((cx + math.cos(angle) * r, cy + math.sin(angle) * r))
    return vertices
