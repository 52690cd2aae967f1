"""Axis-aligned bounding boxes over 2- and 3-dimensional vectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterable, Iterator, List, Optional, Tuple

from ilattice.lattice import LatticeOrd
from ilattice.vector import Number, Vector, range_length, range_max

_U64_LIMIT = 1 << 64

_SPLIT2_LUT: Tuple[Tuple[int, ...], ...] = (
    (0, 1, 2, 3),
    (2, 1, 4, 3),
    (0, 3, 2, 5),
    (2, 3, 4, 5),
    (0, 1, 2, 3),
    (2, 1, 4, 3),
    (0, 3, 2, 5),
    (2, 3, 4, 5),
)

_SPLIT3_LUT: Tuple[Tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4, 5),
    (3, 1, 2, 6, 4, 5),
    (0, 4, 2, 3, 7, 5),
    (3, 4, 2, 6, 7, 5),
    (0, 1, 5, 3, 4, 8),
    (3, 1, 5, 6, 4, 8),
    (0, 4, 5, 3, 7, 8),
    (3, 4, 5, 6, 7, 8),
)


@dataclass(frozen=True)
class Aabb:
    """An axis-aligned box: the closed interval ``[min, max]`` in every dimension.

    For integer vectors the box is the set of lattice points it contains, so
    a box whose minimum equals its maximum holds one point.
    """

    min: Any
    max: Any

    EDGES2: ClassVar[Tuple[Tuple[int, int], ...]] = (
        (0b00, 0b01),
        (0b00, 0b10),
        (0b01, 0b11),
        (0b10, 0b11),
    )
    EDGES3: ClassVar[Tuple[Tuple[int, int], ...]] = (
        (0b000, 0b001),
        (0b000, 0b010),
        (0b000, 0b100),
        (0b001, 0b011),
        (0b001, 0b101),
        (0b010, 0b011),
        (0b010, 0b110),
        (0b100, 0b101),
        (0b100, 0b110),
        (0b110, 0b111),
        (0b101, 0b111),
        (0b011, 0b111),
    )

    def __post_init__(self) -> None:
        lo, hi = self.min, self.max
        if isinstance(lo, Vector) and isinstance(hi, Vector):
            if lo.dim != hi.dim:
                raise ValueError(f"dimension mismatch: {lo.dim} and {hi.dim}")
            if lo.is_integer != hi.is_integer:
                raise TypeError("min and max must both be integer or both be float vectors")

    # Construction

    @classmethod
    def from_min_and_shape(cls, min: Vector, shape: Vector) -> "Aabb":
        """The box with minimum ``min`` and the given shape."""
        return cls(min, min.zip_map(shape, range_max))

    @classmethod
    def from_corners(cls, p1: Vector, p2: Vector) -> "Aabb":
        """The unique box having both ``p1`` and ``p2`` as corners."""
        return cls(p1.min(p2), p1.max(p2))

    @classmethod
    def bound_points(cls, points: Iterable[Vector]) -> "Aabb":
        """The smallest box containing every point; raises on an empty input."""
        iterator = iter(points)
        try:
            first = next(iterator)
        except StopIteration:
            raise ValueError("cannot find bounding box of an empty set of points") from None
        lo = hi = first
        for v in iterator:
            lo = lo.min(v)
            hi = hi.max(v)
        return cls(lo, hi)

    def map_components(self, f: Callable[[Any], Any]) -> "Aabb":
        """Apply ``f`` to both the minimum and the maximum."""
        return Aabb(f(self.min), f(self.max))

    def translate_to_min(self, new_min: Vector) -> "Aabb":
        """The same shape moved so that its minimum is ``new_min``."""
        return Aabb.from_min_and_shape(new_min, self.shape())

    def with_shape(self, new_shape: Vector) -> "Aabb":
        """The same minimum with a new shape."""
        return Aabb.from_min_and_shape(self.min, new_shape)

    # Measures

    def _one(self) -> Number:
        return 1 if self.min.is_integer else 1.0

    def shape(self) -> Vector:
        """Non-negative length of each dimension (point count for integers)."""
        zero = Vector.zero(self.min.dim, self.min.is_integer)
        return self.min.zip_map(self.max, range_length).max(zero)

    def volume(self) -> Number:
        """Non-negative volume; the number of points for integer boxes."""
        return self.shape().fold(self._one(), lambda c, out: c * out)

    def is_empty(self) -> bool:
        """Whether the volume is zero."""
        return self.volume() <= 0

    def contains(self, p: Vector) -> bool:
        """Whether ``p`` lies inside the box."""
        point = LatticeOrd(p)
        return LatticeOrd(self.min) <= point and point <= LatticeOrd(self.max)

    def padded(self, pad_amount: Number) -> "Aabb":
        """The box grown by ``pad_amount`` on every side."""
        return Aabb(self.min - pad_amount, self.max + pad_amount)

    def check_positive_shape(self) -> Optional["Aabb"]:
        """``self`` if every dimension has positive length, otherwise ``None``."""
        return self if self.shape().is_positive() else None

    # Set operations

    def intersection(self, other: "Aabb") -> "Aabb":
        """The box of points in both ``self`` and ``other``."""
        return Aabb(self.min.max(other.min), self.max.min(other.max))

    def bound_union(self, other: "Aabb") -> "Aabb":
        """The smallest box containing both boxes."""
        return Aabb(self.min.min(other.min), self.max.max(other.max))

    def clamp(self, v: Vector) -> Vector:
        """``v`` forced inside the box."""
        return v.max(self.min).min(self.max)

    def is_subset_of(self, other: "Aabb") -> bool:
        """Whether the intersection with ``other`` equals ``self``."""
        return self.intersection(other) == self

    # Corners and splits

    def _require_dim(self, dim: int, name: str) -> None:
        if self.min.dim != dim:
            raise ValueError(f"{name} needs a {dim}-dimensional box")

    def corners2(self) -> List[Vector]:
        """The 4 corners of a 2D box, indexed as ``0bYX``."""
        self._require_dim(2, "corners2")
        lo, hi = self.min, self.max
        return [
            Vector(lo.x, lo.y),
            Vector(hi.x, lo.y),
            Vector(lo.x, hi.y),
            Vector(hi.x, hi.y),
        ]

    def corners3(self) -> List[Vector]:
        """The 8 corners of a 3D box, indexed as ``0bZYX``."""
        self._require_dim(3, "corners3")
        lo, hi = self.min, self.max
        return [
            Vector(x, y, z)
            for z in (lo.z, hi.z)
            for y in (lo.y, hi.y)
            for x in (lo.x, hi.x)
        ]

    def split2(self, split: Vector) -> List["Aabb"]:
        """Split a 2D box at ``split`` into 4 quadrants."""
        self._require_dim(2, "split2")
        lo, hi = self.min, self.max
        return [
            Aabb(lo, split),
            Aabb(Vector(split.x, lo.y), Vector(hi.x, split.y)),
            Aabb(Vector(lo.x, split.y), Vector(split.x, hi.y)),
            Aabb(split, hi),
        ]

    def split3(self, split: Vector) -> List["Aabb"]:
        """Split a 3D box at ``split`` into 8 octants."""
        self._require_dim(3, "split3")
        lo, hi = self.min, self.max
        return [
            Aabb(lo, split),
            Aabb(Vector(split.x, lo.y, lo.z), Vector(hi.x, split.y, split.z)),
            Aabb(Vector(lo.x, split.y, lo.z), Vector(split.x, hi.y, split.z)),
            Aabb(Vector(split.x, split.y, lo.z), Vector(hi.x, hi.y, split.z)),
            Aabb(Vector(lo.x, lo.y, split.z), Vector(split.x, split.y, hi.z)),
            Aabb(Vector(split.x, lo.y, split.z), Vector(hi.x, split.y, hi.z)),
            Aabb(Vector(lo.x, split.y, split.z), Vector(split.x, hi.y, hi.z)),
            Aabb(split, hi),
        ]

    def split2_single(self, split: Vector, quadrant: int) -> "Aabb":
        """One quadrant of :meth:`split2`; ``quadrant`` ranges over 0..7."""
        self._require_dim(2, "split2_single")
        if not 0 <= quadrant < len(_SPLIT2_LUT):
            raise IndexError(f"quadrant {quadrant} out of range")
        coords = (*self.min, *split, *self.max)
        mx, my, lx, ly = (coords[i] for i in _SPLIT2_LUT[quadrant])
        return Aabb(Vector(mx, my), Vector(lx, ly))

    def split3_single(self, split: Vector, octant: int) -> "Aabb":
        """One octant of :meth:`split3`; ``octant`` ranges over 0..7."""
        self._require_dim(3, "split3_single")
        if not 0 <= octant < len(_SPLIT3_LUT):
            raise IndexError(f"octant {octant} out of range")
        coords = (*self.min, *split, *self.max)
        mx, my, mz, lx, ly, lz = (coords[i] for i in _SPLIT3_LUT[octant])
        return Aabb(Vector(mx, my, mz), Vector(lx, ly, lz))

    def surface_area3(self) -> Number:
        """Surface area of a 3D box."""
        self._require_dim(3, "surface_area3")
        s = self.shape()
        two = self._one() + self._one()
        return two * (s.x * s.y + s.y * s.z + s.z * s.x)

    # Integer boxes

    def _require_integer(self, name: str) -> None:
        if not self.min.is_integer:
            raise TypeError(f"{name} needs an integer box")

    def checked_num_points(self) -> Optional[int]:
        """The number of points, or ``None`` if it does not fit in 64 unsigned bits."""
        self._require_integer("checked_num_points")
        volume = self.volume()
        return volume if 0 <= volume < _U64_LIMIT else None

    def num_points(self) -> int:
        """The number of points; raises if it does not fit in 64 unsigned bits."""
        count = self.checked_num_points()
        if count is None:
            raise OverflowError(f"failed to convert {self.volume()} to u64")
        return count

    def iter2(self) -> Iterator[Vector]:
        """Every point of a 2D integer box, x varying fastest."""
        self._require_integer("iter2")
        self._require_dim(2, "iter2")
        lo, hi = self.min, self.max
        for y in range(lo.y, hi.y + 1):
            for x in range(lo.x, hi.x + 1):
                yield Vector(x, y)

    def iter3(self) -> Iterator[Vector]:
        """Every point of a 3D integer box, x fastest, then y, then z."""
        self._require_integer("iter3")
        self._require_dim(3, "iter3")
        lo, hi = self.min, self.max
        for z in range(lo.z, hi.z + 1):
            for y in range(lo.y, hi.y + 1):
                for x in range(lo.x, hi.x + 1):
                    yield Vector(x, y, z)

    # Float boxes

    def center(self) -> Vector:
        """The midpoint ``(min + max) / 2`` of a float box."""
        if self.min.is_integer:
            raise TypeError("center needs a float box")
        return (self.min + self.max) / 2.0

    def containing_integer_aabb(self) -> "Aabb":
        """The integer box containing this float box."""
        if self.min.is_integer:
            raise TypeError("containing_integer_aabb needs a float box")
        return Aabb(self.min.floor().to_int(), self.max.floor().to_int())

    # Operators applied to both corners

    def __add__(self, rhs: Any) -> "Aabb":
        return Aabb(self.min + rhs, self.max + rhs)

    def __sub__(self, rhs: Any) -> "Aabb":
        return Aabb(self.min - rhs, self.max - rhs)

    def __mul__(self, rhs: Any) -> "Aabb":
        return Aabb(self.min * rhs, self.max * rhs)

    def __truediv__(self, rhs: Any) -> "Aabb":
        return Aabb(self.min / rhs, self.max / rhs)

    def __lshift__(self, rhs: Any) -> "Aabb":
        return Aabb(self.min << rhs, self.max << rhs)

    def __rshift__(self, rhs: Any) -> "Aabb":
        return Aabb(self.min >> rhs, self.max >> rhs)