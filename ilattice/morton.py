"""Morton codes (Z-order curve) for 2- and 3-dimensional integer points.

Bits are interleaved as ``...zyxzyx``: the x coordinate occupies the lowest
bit of each group, then y, then z.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from ilattice.vector import Vector

_SUPPORTED_BITS = (8, 16, 32)


def _check_bits(bits: int) -> None:
    if bits not in _SUPPORTED_BITS:
        raise ValueError(f"bits must be one of {_SUPPORTED_BITS}, got {bits}")


def translate(value: int, bits: int) -> int:
    """Map a signed ``bits``-wide integer onto unsigned, preserving order."""
    _check_bits(bits)
    low = -(1 << (bits - 1))
    if not low <= value < -low:
        raise ValueError(f"{value} does not fit in a signed {bits}-bit integer")
    return value - low


def untranslate(value: int, bits: int) -> int:
    """Inverse of :func:`translate`."""
    _check_bits(bits)
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{value} does not fit in an unsigned {bits}-bit integer")
    return value - (1 << (bits - 1))


def _to_unsigned(point: Iterable[int], dim: int, bits: int, signed: bool) -> Sequence[int]:
    _check_bits(bits)
    coords = tuple(point)
    if len(coords) != dim:
        raise ValueError(f"expected {dim} coordinates, got {len(coords)}")
    for c in coords:
        if not isinstance(c, int) or isinstance(c, bool):
            raise TypeError(f"coordinate must be an int, got {c!r}")
    if signed:
        return tuple(translate(c, bits) for c in coords)
    for c in coords:
        if not 0 <= c < (1 << bits):
            raise ValueError(f"{c} does not fit in an unsigned {bits}-bit integer")
    return coords


def _interleave(coords: Sequence[int], bits: int) -> int:
    dim = len(coords)
    code = 0
    for bit in range(bits):
        for axis, c in enumerate(coords):
            code |= ((c >> bit) & 1) << (bit * dim + axis)
    return code


def _deinterleave(code: int, dim: int, bits: int, signed: bool) -> Vector:
    _check_bits(bits)
    if not isinstance(code, int) or isinstance(code, bool):
        raise TypeError(f"code must be an int, got {code!r}")
    if not 0 <= code < (1 << (bits * dim)):
        raise ValueError(f"{code} is not a {dim}-dimensional {bits}-bit Morton code")
    coords = [0] * dim
    for bit in range(bits):
        for axis in range(dim):
            coords[axis] |= ((code >> (bit * dim + axis)) & 1) << bit
    if signed:
        coords = [untranslate(c, bits) for c in coords]
    return Vector(*coords)


def encode2(point: Iterable[int], bits: int = 32, signed: bool = False) -> int:
    """Morton code of a 2D point whose coordinates are ``bits`` wide."""
    return _interleave(_to_unsigned(point, 2, bits, signed), bits)


def decode2(code: int, bits: int = 32, signed: bool = False) -> Vector:
    """The 2D point with the given Morton code."""
    return _deinterleave(code, 2, bits, signed)


def encode3(point: Iterable[int], bits: int = 32, signed: bool = False) -> int:
    """Morton code of a 3D point whose coordinates are ``bits`` wide."""
    return _interleave(_to_unsigned(point, 3, bits, signed), bits)


def decode3(code: int, bits: int = 32, signed: bool = False) -> Vector:
    """The 3D point with the given Morton code."""
    return _deinterleave(code, 3, bits, signed)