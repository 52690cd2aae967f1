"""Partial ordering of vectors that agrees with the component-wise lattice order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ilattice.vector import Vector


@dataclass(frozen=True)
class LatticeOrd:
    """A vector compared component-wise.

    ``a < b`` holds only when every component of ``a`` is less than the
    matching component of ``b``; the other comparisons work the same way.
    Two vectors may therefore be neither smaller, greater nor equal.
    """

    vector: Vector

    def __post_init__(self) -> None:
        if not isinstance(self.vector, Vector):
            raise TypeError(f"expected a Vector, got {self.vector!r}")

    def _pairs(self, other: "LatticeOrd"):
        if not isinstance(other, LatticeOrd):
            raise TypeError(f"expected a LatticeOrd, got {other!r}")
        if self.vector.dim != other.vector.dim:
            raise ValueError(
                f"dimension mismatch: {self.vector.dim} and {other.vector.dim}"
            )
        if self.vector.is_integer != other.vector.is_integer:
            raise TypeError("cannot compare integer and float vectors")
        return zip(self.vector, other.vector)

    def __lt__(self, other: "LatticeOrd") -> bool:
        return all(a < b for a, b in self._pairs(other))

    def __le__(self, other: "LatticeOrd") -> bool:
        return all(a <= b for a, b in self._pairs(other))

    def __gt__(self, other: "LatticeOrd") -> bool:
        return all(a > b for a, b in self._pairs(other))

    def __ge__(self, other: "LatticeOrd") -> bool:
        return all(a >= b for a, b in self._pairs(other))

    def partial_cmp(self, other: "LatticeOrd") -> Optional[int]:
        """``-1`` if less, ``1`` if greater, ``0`` if equal, else ``None``.

        Float vectors are never reported equal: equal float vectors give
        ``None``, as do incomparable ones.
        """
        if self < other:
            return -1
        if self > other:
            return 1
        if self.vector.is_integer and all(a == b for a, b in self._pairs(other)):
            return 0
        return None


def with_lattice_ord(vector: Vector) -> LatticeOrd:
    """Wrap ``vector`` so that comparisons follow the lattice order."""
    return LatticeOrd(vector)