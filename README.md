# ilattice

Math on 2- and 3-dimensional integer lattices (regular grids). The same
vectors and boxes also work with real-valued components.

## What is in the package

- `ilattice.vector`
  - `Vector` is an immutable vector with 2 or 3 components. If every component is
    an `int` it is an integer vector. Otherwise every component is stored as a `float`.
  - Arithmetic works component by component. The other operand can be a vector of the
    same kind and dimension, or a scalar that is applied to every component.
  - Operators: `+ - * / %`, unary `-`, and for integer vectors `& | ^ ~ << >>`.
    Integer `/` and `%` truncate toward zero.
  - Properties: `x`, `y`, `z`, `dim` and `is_integer`.
  - Methods: `map`, `zip_map`, `fold`, `min`, `max`, `min_element`, `max_element`,
    `is_positive`, `signum`, `abs`, `floor`, `ceil` and `with_component`.
  - Conversions: `to_int`, which truncates and saturates to 32 bits and turns NaN
    into 0, and `to_float`.
  - Constructors: `Vector.splat`, `Vector.zero` and `Vector.ones`.
  - Helper functions: `range_max`, `range_length`, `is_power_of_two` and `trailing_zeros`.
- `ilattice.lattice`
  - `LatticeOrd` and `with_lattice_ord` compare vectors component by component.
    `a < b` holds only when every component of `a` is smaller than the matching
    component of `b`.
  - `partial_cmp` returns `-1`, `0`, `1` or `None`. It returns `None` when two vectors
    cannot be ordered. It also returns `None` for two equal float vectors.
- `ilattice.aabb`
  - `Aabb` is an axis-aligned box made of a minimum point and a maximum point.
  - For integer vectors the box is the closed range `[min, max]`, so its shape on each
    axis is `1 + max - min`. For float vectors the shape is `max - min`.
  - Building boxes: `from_min_and_shape`, `from_corners`, `bound_points`,
    `translate_to_min`, `with_shape`, `padded`, `map_components`.
  - Measuring: `shape`, `volume`, `is_empty`, `contains`, `check_positive_shape`.
  - Combining: `intersection`, `bound_union`, `clamp`, `is_subset_of`.
  - Corners and splits: `corners2`, `corners3`, `split2`, `split3`, `split2_single`,
    `split3_single`, and `surface_area3` for 3D boxes.
  - Integer boxes only: `num_points`, `checked_num_points`, `iter2` and `iter3`.
  - Float boxes only: `center` and `containing_integer_aabb`.
  - The operators `+ - * / << >>` apply to both corners of a box.
  - `Aabb.EDGES2` and `Aabb.EDGES3` list the box edges as pairs of corner indices.
- `ilattice.morton`
  - `encode2`, `decode2`, `encode3` and `decode3` convert points to and from Morton
    (Z-order) codes.
  - Bits are interleaved as `...zyxzyx`, so x sits in the lowest bit.
  - Coordinates are 8, 16 or 32 bits wide, signed or unsigned.
  - `translate` and `untranslate` map signed integers onto unsigned ones in a way that
    keeps their order.
- `ilattice.grid_ray`
  - `GridRayIter2` and `GridRayIter3` are endless iterators. They yield
    `(entrance_time, cell)` for every pixel or voxel a ray passes through, using the
    Amanatides–Woo algorithm.
  - Each iterator keeps its traversal state in its `ray` attribute. That attribute is a
    `GridRayIter` with `entrance_time`, `current_grid_point`, `step2` and `step3`.
  - Times are computed in single precision.

## Installation

```
pip install ilattice
```

## Examples

Boxes on the integer lattice:

```python
from ilattice.vector import Vector
from ilattice.aabb import Aabb

box = Aabb.from_min_and_shape(Vector(1, 2), Vector(2, 2))
print(list(box.iter2()))
# [Vector(1, 2), Vector(2, 2), Vector(1, 3), Vector(2, 3)]

a = Aabb(Vector(0, 0), Vector(3, 3))
b = Aabb(Vector(2, 2), Vector(4, 4))
print(a.intersection(b))          # Aabb(min=Vector(2, 2), max=Vector(3, 3))
print(a.clamp(Vector(-4, 20)))    # Vector(0, 3)
```

Morton codes:

```python
from ilattice.morton import encode3, decode3
from ilattice.vector import Vector

code = encode3((1, 0, 0), bits=32, signed=False)   # 0b001
assert decode3(code, bits=32, signed=False) == Vector(1, 0, 0)
```

Casting a ray through voxels:

```python
from itertools import islice
from ilattice.vector import Vector
from ilattice.grid_ray import GridRayIter3

ray = GridRayIter3(Vector(0.5, 0.5, 0.5), Vector(1.0, -2.0, 3.0))
for time, voxel in islice(ray, 5):
    print(time, voxel)
```

The ray iterators never stop on their own, so take only as many steps as you need.

## What the package does not do

This is a library only. It has no command-line tool.

Box iteration runs in a single thread. There is no parallel iterator.

The package has no serialization format of its own for vectors or boxes.

## Running the tests

```
pip install -e ".[test]"
pytest
```