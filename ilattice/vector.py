"""Small 2- and 3-dimensional vectors over integers or real numbers."""

from __future__ import annotations

import math
import operator
from functools import reduce
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple, TypeVar, Union

Number = Union[int, float]
T = TypeVar("T")

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_U32_MASK = 0xFFFF_FFFF
_U32_BITS = 32
_AXES = {"x": 0, "y": 1, "z": 2}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def range_max(min_value: Number, length: Number) -> Number:
    """Maximum of a range with the given minimum and length.

    Integers count points, so the maximum is ``min + length - 1``; real
    numbers measure distance, so it is ``min + length``.
    """
    if _is_int(min_value) and _is_int(length):
        return min_value + length - 1
    return min_value + length


def range_length(min_value: Number, max_value: Number) -> Number:
    """Length of the range ``[min_value, max_value]``; the inverse of :func:`range_max`."""
    if _is_int(min_value) and _is_int(max_value):
        return 1 + max_value - min_value
    return max_value - min_value


def is_power_of_two(value: int) -> bool:
    """Whether ``value``, reinterpreted as a 32-bit unsigned integer, is a power of two."""
    bits = value & _U32_MASK
    return bits != 0 and bits & (bits - 1) == 0


def trailing_zeros(value: int) -> int:
    """Number of trailing zero bits of ``value`` as a 32-bit integer."""
    bits = value & _U32_MASK
    if bits == 0:
        return _U32_BITS
    return (bits & -bits).bit_length() - 1


def _float_min(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a < b else b


def _float_max(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a > b else b


def _int_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _int_rem(a: int, b: int) -> int:
    return a - b * _int_div(a, b)


def _float_div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _float_rem(a: float, b: float) -> float:
    if b == 0.0 or math.isinf(a) or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.fmod(a, b)


def _float_signum(value: float) -> float:
    if math.isnan(value):
        return math.nan
    return math.copysign(1.0, value)


def _int_signum(value: int) -> int:
    return (value > 0) - (value < 0)


def _saturating_i32(value: float) -> int:
    if math.isnan(value):
        return 0
    if value >= _I32_MAX:
        return _I32_MAX
    if value <= _I32_MIN:
        return _I32_MIN
    return math.trunc(value)


def _round_with(f: Callable[[float], int], value: float) -> float:
    if math.isinf(value) or math.isnan(value):
        return value
    return float(f(value))


class Vector:
    """An immutable vector of 2 or 3 components.

    A vector is an integer vector when every component given to it is an
    ``int``; otherwise all components are stored as ``float``. Arithmetic is
    component-wise and accepts another vector of the same kind and dimension,
    or a scalar that is broadcast to every component. Integer division and
    remainder truncate toward zero; float division by zero follows IEEE rules.
    """

    __slots__ = ("_components", "_integer")

    def __init__(self, *args: Any) -> None:
        if len(args) == 1 and not _is_number(args[0]):
            args = tuple(args[0])
        if len(args) not in (2, 3):
            raise ValueError(f"a vector has 2 or 3 components, got {len(args)}")
        for component in args:
            if not _is_number(component):
                raise TypeError(f"vector component must be a number, got {component!r}")
        integer = all(_is_int(c) for c in args)
        self._integer = integer
        self._components: Tuple[Number, ...] = (
            tuple(args) if integer else tuple(float(c) for c in args)
        )

    @classmethod
    def _new(cls, components: Iterable[Number], integer: bool) -> "Vector":
        vector = cls.__new__(cls)
        vector._integer = integer
        vector._components = tuple(components)
        return vector

    @classmethod
    def splat(cls, value: Number, dim: int) -> "Vector":
        """A vector of ``dim`` components all equal to ``value``."""
        return cls(*([value] * dim))

    @classmethod
    def zero(cls, dim: int, integer: bool = True) -> "Vector":
        """The zero vector."""
        return cls.splat(0 if integer else 0.0, dim)

    @classmethod
    def ones(cls, dim: int, integer: bool = True) -> "Vector":
        """The vector of all ones."""
        return cls.splat(1 if integer else 1.0, dim)

    @property
    def is_integer(self) -> bool:
        """Whether the components are integers."""
        return self._integer

    @property
    def dim(self) -> int:
        """Number of components."""
        return len(self._components)

    @property
    def x(self) -> Number:
        return self._components[0]

    @property
    def y(self) -> Number:
        return self._components[1]

    @property
    def z(self) -> Number:
        if self.dim < 3:
            raise AttributeError("a 2-dimensional vector has no z component")
        return self._components[2]

    def with_component(self, axis: Union[int, str], value: Number) -> "Vector":
        """A copy with the component on ``axis`` (index or ``"x"``/``"y"``/``"z"``) replaced."""
        index = _AXES[axis] if isinstance(axis, str) else axis
        if not 0 <= index < self.dim:
            raise IndexError(f"axis {axis!r} out of range for a {self.dim}-dimensional vector")
        components = list(self._components)
        components[index] = self._coerce(value)
        return self._new(components, self._integer)

    def _coerce(self, value: Any) -> Number:
        if not _is_number(value):
            raise TypeError(f"vector component must be a number, got {value!r}")
        if self._integer:
            if not _is_int(value):
                raise TypeError(f"integer vector component must be an int, got {value!r}")
            return value
        return float(value)

    def map(self, f: Callable[[Number], Number]) -> "Vector":
        """Apply ``f`` to every component, keeping the vector's kind."""
        return self._new((self._coerce(f(c)) for c in self._components), self._integer)

    def zip_map(self, other: "Vector", f: Callable[[Number, Number], Number]) -> "Vector":
        """Apply ``f`` to pairs of matching components of ``self`` and ``other``."""
        others = self._vector_operand(other)
        return self._new(
            (self._coerce(f(a, b)) for a, b in zip(self._components, others)),
            self._integer,
        )

    def fold(self, init: T, f: Callable[[Number, T], T]) -> T:
        """Fold ``f(component, accumulator)`` over the components, x first."""
        out = init
        for component in self._components:
            out = f(component, out)
        return out

    def _pick(self) -> Tuple[Callable[[Any, Any], Any], Callable[[Any, Any], Any]]:
        if self._integer:
            return min, max
        return _float_min, _float_max

    def min(self, other: "Vector") -> "Vector":
        """Component-wise minimum."""
        return self.zip_map(other, self._pick()[0])

    def max(self, other: "Vector") -> "Vector":
        """Component-wise maximum."""
        return self.zip_map(other, self._pick()[1])

    def min_element(self) -> Number:
        """The least component."""
        return reduce(self._pick()[0], self._components)

    def max_element(self) -> Number:
        """The greatest component."""
        return reduce(self._pick()[1], self._components)

    def is_positive(self) -> bool:
        """Whether every component is strictly greater than zero."""
        return all(c > 0 for c in self._components)

    def signum(self) -> "Vector":
        """Sign of each component; for floats, zero keeps its sign as ``±1.0``."""
        return self.map(_int_signum if self._integer else _float_signum)

    def abs(self) -> "Vector":
        """Absolute value of each component."""
        return self.map(abs)

    def floor(self) -> "Vector":
        """Round each float component down."""
        self._require_float("floor")
        return self.map(lambda c: _round_with(math.floor, c))

    def ceil(self) -> "Vector":
        """Round each float component up."""
        self._require_float("ceil")
        return self.map(lambda c: _round_with(math.ceil, c))

    def to_int(self) -> "Vector":
        """Integer vector; floats truncate toward zero and saturate to 32 bits, NaN becomes 0."""
        if self._integer:
            return self
        return self._new((_saturating_i32(c) for c in self._components), True)

    def to_float(self) -> "Vector":
        """Float vector with the same component values."""
        if not self._integer:
            return self
        return self._new((float(c) for c in self._components), False)

    def all_dimensions_are_powers_of_two(self) -> bool:
        """Whether every integer component is a power of two."""
        self._require_integer("all_dimensions_are_powers_of_two")
        return self.fold(True, lambda c, out: out and is_power_of_two(c))

    def _require_float(self, name: str) -> None:
        if self._integer:
            raise TypeError(f"{name} needs a float vector")

    def _require_integer(self, name: str) -> None:
        if not self._integer:
            raise TypeError(f"{name} needs an integer vector")

    def _vector_operand(self, other: "Vector") -> Tuple[Number, ...]:
        if not isinstance(other, Vector):
            raise TypeError(f"expected a Vector, got {other!r}")
        if other.dim != self.dim:
            raise ValueError(f"dimension mismatch: {self.dim} and {other.dim}")
        if other._integer != self._integer:
            raise TypeError("cannot combine integer and float vectors")
        return other._components

    def _operand(self, other: Any) -> Optional[Tuple[Number, ...]]:
        if isinstance(other, Vector):
            return self._vector_operand(other)
        if _is_number(other):
            return (self._coerce(other),) * self.dim
        return None

    def _apply(self, other: Any, op: Callable[[Any, Any], Any], reflected: bool = False) -> Any:
        others = self._operand(other)
        if others is None:
            return NotImplemented
        pairs = zip(others, self._components) if reflected else zip(self._components, others)
        return self._new((op(a, b) for a, b in pairs), self._integer)

    def _div_op(self) -> Callable[[Any, Any], Any]:
        return _int_div if self._integer else _float_div

    def _rem_op(self) -> Callable[[Any, Any], Any]:
        return _int_rem if self._integer else _float_rem

    def __add__(self, other: Any) -> "Vector":
        return self._apply(other, operator.add)

    def __radd__(self, other: Any) -> "Vector":
        return self._apply(other, operator.add, reflected=True)

    def __sub__(self, other: Any) -> "Vector":
        return self._apply(other, operator.sub)

    def __rsub__(self, other: Any) -> "Vector":
        return self._apply(other, operator.sub, reflected=True)

    def __mul__(self, other: Any) -> "Vector":
        return self._apply(other, operator.mul)

    def __rmul__(self, other: Any) -> "Vector":
        return self._apply(other, operator.mul, reflected=True)

    def __truediv__(self, other: Any) -> "Vector":
        return self._apply(other, self._div_op())

    def __rtruediv__(self, other: Any) -> "Vector":
        return self._apply(other, self._div_op(), reflected=True)

    def __mod__(self, other: Any) -> "Vector":
        return self._apply(other, self._rem_op())

    def __rmod__(self, other: Any) -> "Vector":
        return self._apply(other, self._rem_op(), reflected=True)

    def __neg__(self) -> "Vector":
        return self.map(operator.neg)

    def _bitwise(self, other: Any, op: Callable[[int, int], int], reflected: bool = False) -> Any:
        self._require_integer("bitwise operations")
        return self._apply(other, op, reflected)

    def __and__(self, other: Any) -> "Vector":
        return self._bitwise(other, operator.and_)

    def __rand__(self, other: Any) -> "Vector":
        return self._bitwise(other, operator.and_, reflected=True)

    def __or__(self, other: Any) -> "Vector":
        return self._bitwise(other, operator.or_)

    def __ror__(self, other: Any) -> "Vector":
        return self._bitwise(other, operator.or_, reflected=True)

    def __xor__(self, other: Any) -> "Vector":
        return self._bitwise(other, operator.xor)

    def __rxor__(self, other: Any) -> "Vector":
        return self._bitwise(other, operator.xor, reflected=True)

    def __invert__(self) -> "Vector":
        self._require_integer("bitwise operations")
        return self.map(operator.invert)

    def __lshift__(self, other: Any) -> "Vector":
        return self._bitwise(other, operator.lshift)

    def __rshift__(self, other: Any) -> "Vector":
        return self._bitwise(other, operator.rshift)

    def __iter__(self) -> Iterator[Number]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __getitem__(self, index: int) -> Number:
        return self._components[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._integer == other._integer and self._components == other._components

    def __hash__(self) -> int:
        return hash((self._integer, self._components))

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(c) for c in self._components)})"