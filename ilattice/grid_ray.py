"""Walk a ray through the pixels or voxels it crosses (Amanatides and Woo).

Time is measured in units of the direction vector: a ray at time ``t`` is at
``start + t * direction``. Arithmetic on times is done in single precision,
so that ties between axes are broken the same way for every caller.
"""

from __future__ import annotations

import struct
from typing import Any, Iterable, Iterator, Tuple, Union

from ilattice.vector import Vector

_F32 = struct.Struct("<f")


def _f32(value: float) -> float:
    """Round ``value`` to the nearest single-precision float."""
    try:
        return _F32.unpack(_F32.pack(value))[0]
    except OverflowError:
        return float("inf") if value > 0 else float("-inf")


def _float_vector(value: Union[Vector, Iterable[float]]) -> Vector:
    vector = value if isinstance(value, Vector) else Vector(*value)
    return vector.to_float().map(_f32)


class GridRayIter:
    """Traversal state shared by the 2D and 3D ray iterators."""

    __slots__ = ("_point", "_entrance_time", "_step", "_t_delta", "_t_max")

    def __init__(self, start: Any, direction: Any) -> None:
        start = _float_vector(start)
        direction = _float_vector(direction)
        if start.dim != direction.dim:
            raise ValueError(
                f"dimension mismatch: start has {start.dim}, direction has {direction.dim}"
            )
        point = start.to_int()
        vel_signs = direction.signum()
        step = vel_signs.to_int()

        # A positive direction reaches the next cell's boundary; a negative
        # one reaches the current cell's own lower boundary.
        next_bounds = (point + step.max(Vector.zero(step.dim))).to_float()
        delta_to_next_bounds = (next_bounds - start).map(_f32)

        self._point: Vector = point
        self._entrance_time: float = 0.0
        self._step: Vector = step
        self._t_delta: Vector = (vel_signs / direction).map(_f32)
        self._t_max: Vector = (delta_to_next_bounds / direction).map(_f32)

    @property
    def dim(self) -> int:
        """Number of dimensions of the ray."""
        return self._point.dim

    @property
    def entrance_time(self) -> float:
        """The time at which the ray entered the current cell."""
        return self._entrance_time

    @property
    def current_grid_point(self) -> Vector:
        """The integer coordinates of the current cell."""
        return self._point

    def _advance(self, axis: int) -> None:
        self._entrance_time = self._t_max[axis]
        self._point = self._point.with_component(
            axis, self._point[axis] + self._step[axis]
        )
        self._t_max = self._t_max.with_component(
            axis, _f32(self._t_max[axis] + self._t_delta[axis])
        )

    def step2(self) -> None:
        """Move to the next pixel along a 2D ray."""
        if self.dim != 2:
            raise ValueError("step2 needs a 2-dimensional ray")
        t = self._t_max
        self._advance(0 if t.x < t.y else 1)

    def step3(self) -> None:
        """Move to the next voxel along a 3D ray."""
        if self.dim != 3:
            raise ValueError("step3 needs a 3-dimensional ray")
        t = self._t_max
        if t.x < t.y:
            axis = 0 if t.x < t.z else 2
        else:
            axis = 1 if t.y < t.z else 2
        self._advance(axis)


class _DimensionalRayIter:
    _DIM = 0

    def __init__(self, start: Any, direction: Any) -> None:
        self.ray = GridRayIter(start, direction)
        if self.ray.dim != self._DIM:
            raise ValueError(f"{type(self).__name__} needs {self._DIM}-dimensional vectors")

    def _step(self) -> None:
        raise NotImplementedError

    def __iter__(self) -> Iterator[Tuple[float, Vector]]:
        return self

    def __next__(self) -> Tuple[float, Vector]:
        point = self.ray.current_grid_point
        time = self.ray.entrance_time
        self._step()
        return time, point


class GridRayIter2(_DimensionalRayIter):
    """Endless iterator of ``(entrance_time, pixel)`` for every pixel a 2D ray crosses."""

    _DIM = 2

    def __init__(self, start: Any, direction: Any) -> None:
        super().__init__(start, direction)

    def _step(self) -> None:
        self.ray.step2()

    def __iter__(self) -> Iterator[Tuple[float, Vector]]:
        return self

    def __next__(self) -> Tuple[float, Vector]:
        return super().__next__()


class GridRayIter3(_DimensionalRayIter):
    """Endless iterator of ``(entrance_time, voxel)`` for every voxel a 3D ray crosses."""

    _DIM = 3

    def __init__(self, start: Any, direction: Any) -> None:
        super().__init__(start, direction)

    def _step(self) -> None:
        self.ray.step3()

    def __iter__(self) -> Iterator[Tuple[float, Vector]]:
        return self

    def __next__(self) -> Tuple[float, Vector]:
        return super().__next__()