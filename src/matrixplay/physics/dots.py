"""Dot grid construction and the per-tick spring/repulsion step.

Every dot lives in one row of a dense ``DotField``. Row ``i`` is the dot's
identity for the lifetime of the grid, so the renderer and the step refer to
the same dot across frames without per-dot objects.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from matrixplay.input.pointer import PointerState

Vec2 = Tuple[float, float]
PointerLike = Union[None, PointerState, Sequence[float]]

DEFAULT_SPACING = 20.0


@dataclass(frozen=True)
class PhysicsParams:
    influence_radius: float = 50.0
    inertia: float = 0.4
    damping: float = 0.9
    restoring_pull: float = 0.03
    restoring_threshold: float = 1.0  # squared distance
    push_strength: float = 20.0


DEFAULT_PARAMS = PhysicsParams()


@dataclass(frozen=True, eq=False)
class DotField:
    """Positions, origins and velocities of every dot, one row per dot."""
    positions: np.ndarray
    origins: np.ndarray
    velocities: np.ndarray
    rows: int = 0
    columns: int = 0

    def __post_init__(self) -> None:
        self.origins.setflags(write=False)

    def __len__(self) -> int:
        return self.positions.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        return self.rows, self.columns

    @classmethod
    def from_dots(
        cls,
        positions: Sequence[Vec2],
        origins: Optional[Sequence[Vec2]] = None,
        velocities: Optional[Sequence[Vec2]] = None,
    ) -> "DotField":
        """Build a field from explicit per-dot values (mostly for tests and tools)."""
        pos = np.array(positions, dtype=np.float64, copy=True).reshape(-1, 2)
        org = pos.copy() if origins is None else np.array(origins, dtype=np.float64, copy=True).reshape(-1, 2)
        vel = np.zeros_like(pos) if velocities is None else np.array(velocities, dtype=np.float64, copy=True).reshape(-1, 2)
        if not (pos.shape == org.shape == vel.shape):
            raise ValueError(
                f"Mismatched dot arrays: positions {pos.shape}, origins {org.shape}, velocities {vel.shape}"
            )
        return cls(positions=pos, origins=org, velocities=vel)

    def select(self, index: int) -> "DotField":
        """Return a one-dot field holding a copy of row ``index``."""
        return DotField(
            positions=self.positions[index:index + 1].copy(),
            origins=self.origins[index:index + 1].copy(),
            velocities=self.velocities[index:index + 1].copy(),
        )


def initialize_dots(width: float, height: float, spacing: float = DEFAULT_SPACING) -> DotField:
    """
    Lay out a row-major lattice of resting dots covering the viewport.

    Args:
        width: Viewport width
        height: Viewport height
        spacing: Distance between neighbouring dots

    Returns:
        A field of ``floor(height / spacing) * floor(width / spacing)`` dots.
        Viewports smaller than one spacing produce an empty field.
    """
    if spacing <= 0:
        raise ValueError(f"Dot spacing must be positive, got {spacing}")

    rows = max(int(height // spacing), 0)
    columns = max(int(width // spacing), 0)

    index = np.arange(rows * columns)
    origins = np.empty((rows * columns, 2), dtype=np.float64)
    if columns:
        origins[:, 0] = (index % columns) * spacing
        origins[:, 1] = (index // columns) * spacing

    return DotField(
        positions=origins.copy(),
        origins=origins,
        velocities=np.zeros_like(origins),
        rows=rows,
        columns=columns,
    )


def _resolve_pointer(pointer: PointerLike) -> Optional[np.ndarray]:
    if pointer is None:
        return None
    if isinstance(pointer, PointerState):
        if not pointer.active:
            return None
        pointer = pointer.position
    return np.asarray(pointer, dtype=np.float64).reshape(2)


def step_dots(field: DotField, pointer: PointerLike, params: PhysicsParams = DEFAULT_PARAMS) -> DotField:
    """Advance every dot by one tick and return the new field.

    The input field is left untouched. Each row depends only on its own
    previous state and the pointer, so rows can be computed in any order.
    ``atan2(0, 0)`` is 0: a pointer sitting exactly on a dot pushes it along -x.
    """
    positions = field.positions.copy()
    velocities = field.velocities.copy()

    target_pointer = _resolve_pointer(pointer)
    if target_pointer is not None and len(field):
        radius = params.influence_radius
        delta = target_pointer - positions
        dist_sq = delta[:, 0] ** 2 + delta[:, 1] ** 2
        inside = dist_sq < radius * radius
        if inside.any():
            force = (radius - np.sqrt(dist_sq[inside])) / radius
            angle = np.arctan2(delta[inside, 1], delta[inside, 0])
            push = force * params.push_strength
            # target - position reduces to the push offset itself
            offset = np.column_stack((-np.cos(angle) * push, -np.sin(angle) * push))
            velocities[inside] += offset * params.inertia

    velocities *= params.damping
    positions += velocities

    drift = field.origins - positions
    drift_sq = drift[:, 0] ** 2 + drift[:, 1] ** 2
    drifting = drift_sq > params.restoring_threshold
    positions[drifting] += drift[drifting] * params.restoring_pull

    return DotField(
        positions=positions,
        origins=field.origins,
        velocities=velocities,
        rows=field.rows,
        columns=field.columns,
    )
