import pytest
from hypothesis import given
from hypothesis import strategies as st

from ilattice.aabb import Aabb
from ilattice.vector import Vector


def test_splits_are_consistent():
    e = Aabb(Vector(0.0, 1.0), Vector(3.0, 4.0))
    split_at = Vector(2.0, 3.0)
    assert e.split2(split_at) == [e.split2_single(split_at, q) for q in range(4)]

    e = Aabb(Vector(0.0, 1.0, 2.0), Vector(6.0, 7.0, 8.0))
    split_at = Vector(3.0, 4.0, 5.0)
    assert e.split3(split_at) == [e.split3_single(split_at, o) for o in range(8)]


def test_intersection_overlapping():
    e1 = Aabb(Vector(0, 0), Vector(3, 3))
    e2 = Aabb(Vector(2, 2), Vector(4, 4))
    assert e1.intersection(e2) == Aabb(Vector(2, 2), Vector(3, 3))
    assert not e1.intersection(e2).is_empty()


def test_intersection_disjoint_is_empty():
    e1 = Aabb(Vector(0, 0), Vector(1, 1))
    e2 = Aabb(Vector(3, 3), Vector(4, 4))
    assert e1.intersection(e2).shape() == Vector(0, 0)
    assert e1.intersection(e2).is_empty()


def test_clamp():
    e = Aabb(Vector(-1, 5), Vector(2, 10))
    assert e.clamp(Vector(0, 8)) == Vector(0, 8)
    assert e.clamp(Vector(-4, 20)) == Vector(-1, 10)


def test_iter2():
    e = Aabb.from_min_and_shape(Vector(1, 2), Vector(2, 2))
    assert list(e.iter2()) == [Vector(1, 2), Vector(2, 2), Vector(1, 3), Vector(2, 3)]


def test_iter3():
    e = Aabb.from_min_and_shape(Vector(1, 2, 3), Vector(2, 2, 2))
    assert list(e.iter3()) == [
        Vector(1, 2, 3),
        Vector(2, 2, 3),
        Vector(1, 3, 3),
        Vector(2, 3, 3),
        Vector(1, 2, 4),
        Vector(2, 2, 4),
        Vector(1, 3, 4),
        Vector(2, 3, 4),
    ]


def test_integer_shape_volume_and_num_points():
    e = Aabb(Vector(0, 0, 0), Vector(1, 2, 3))
    assert e.shape() == Vector(2, 3, 4)
    assert e.volume() == 24
    assert e.num_points() == 24
    assert e.checked_num_points() == 24


def test_float_shape_and_volume():
    e = Aabb(Vector(0.0, 1.0), Vector(2.0, 4.0))
    assert e.shape() == Vector(2.0, 3.0)
    assert e.volume() == 6.0


def test_from_min_and_shape_integer_and_float():
    assert Aabb.from_min_and_shape(Vector(1, 1), Vector(3, 2)).max == Vector(3, 2)
    assert Aabb.from_min_and_shape(Vector(1.0, 1.0), Vector(3.0, 2.0)).max == Vector(4.0, 3.0)


def test_translate_to_min_and_with_shape():
    e = Aabb(Vector(0, 0), Vector(2, 3))
    assert e.translate_to_min(Vector(10, 10)) == Aabb(Vector(10, 10), Vector(12, 13))
    assert e.with_shape(Vector(1, 1)) == Aabb(Vector(0, 0), Vector(0, 0))


def test_contains():
    e = Aabb(Vector(0, 0), Vector(2, 2))
    assert e.contains(Vector(0, 2))
    assert e.contains(Vector(1, 1))
    assert not e.contains(Vector(3, 1))
    assert not e.contains(Vector(-1, 0))


def test_padded():
    e = Aabb(Vector(0, 0), Vector(2, 2))
    assert e.padded(1) == Aabb(Vector(-1, -1), Vector(3, 3))


def test_check_positive_shape():
    good = Aabb(Vector(0, 0), Vector(1, 1))
    assert good.check_positive_shape() is good
    assert Aabb(Vector(2, 0), Vector(1, 1)).check_positive_shape() is None


def test_bound_union_and_from_corners():
    a = Aabb(Vector(0, 0), Vector(1, 1))
    b = Aabb(Vector(3, -2), Vector(4, 0))
    assert a.bound_union(b) == Aabb(Vector(0, -2), Vector(4, 1))
    assert Aabb.from_corners(Vector(3, 0), Vector(1, 5)) == Aabb(Vector(1, 0), Vector(3, 5))


def test_bound_points():
    points = [Vector(1, 5), Vector(-2, 3), Vector(4, 0)]
    assert Aabb.bound_points(points) == Aabb(Vector(-2, 0), Vector(4, 5))


def test_bound_points_empty_raises():
    with pytest.raises(ValueError):
        Aabb.bound_points([])


def test_is_subset_of():
    inner = Aabb(Vector(1, 1), Vector(2, 2))
    outer = Aabb(Vector(0, 0), Vector(3, 3))
    assert inner.is_subset_of(outer)
    assert not outer.is_subset_of(inner)


def test_corners2():
    e = Aabb(Vector(0, 1), Vector(2, 3))
    assert e.corners2() == [Vector(0, 1), Vector(2, 1), Vector(0, 3), Vector(2, 3)]


def test_corners3_and_edges():
    e = Aabb(Vector(0, 0, 0), Vector(1, 1, 1))
    corners = e.corners3()
    assert corners[0] == Vector(0, 0, 0)
    assert corners[0b101] == Vector(1, 0, 1)
    assert corners[7] == Vector(1, 1, 1)
    for a, b in Aabb.EDGES3:
        diff = corners[b] - corners[a]
        assert sorted(diff) == [0, 0, 1]


def test_split_single_out_of_range():
    e = Aabb(Vector(0, 0), Vector(4, 4))
    with pytest.raises(IndexError):
        e.split2_single(Vector(2, 2), 8)


def test_surface_area3():
    e = Aabb(Vector(0.0, 0.0, 0.0), Vector(1.0, 2.0, 3.0))
    assert e.surface_area3() == 22.0


def test_center():
    assert Aabb(Vector(0.0, 0.0), Vector(2.0, 4.0)).center() == Vector(1.0, 2.0)


def test_center_rejects_integer_box():
    with pytest.raises(TypeError):
        Aabb(Vector(0, 0), Vector(2, 4)).center()


def test_containing_integer_aabb():
    e = Aabb(Vector(-0.5, 1.5), Vector(2.5, 3.0))
    assert e.containing_integer_aabb() == Aabb(Vector(-1, 1), Vector(2, 3))


def test_num_points_rejects_float_box():
    with pytest.raises(TypeError):
        Aabb(Vector(0.0, 0.0), Vector(1.0, 1.0)).num_points()


def test_operators():
    e = Aabb(Vector(1, 2), Vector(3, 4))
    assert e + Vector(1, 1) == Aabb(Vector(2, 3), Vector(4, 5))
    assert e - 1 == Aabb(Vector(0, 1), Vector(2, 3))
    assert e * 2 == Aabb(Vector(2, 4), Vector(6, 8))
    assert e / 2 == Aabb(Vector(0, 1), Vector(1, 2))
    assert e << 1 == Aabb(Vector(2, 4), Vector(6, 8))
    assert e >> 1 == Aabb(Vector(0, 1), Vector(1, 2))


def test_map_components():
    e = Aabb(Vector(1, 2), Vector(3, 4))
    assert e.map_components(lambda v: v.to_float()) == Aabb(Vector(1.0, 2.0), Vector(3.0, 4.0))


def test_mismatched_dimensions_rejected():
    with pytest.raises(ValueError):
        Aabb(Vector(0, 0), Vector(1, 1, 1))


_coord = st.integers(min_value=-5, max_value=5)
_vec2 = st.builds(Vector, _coord, _coord)


@given(_vec2, _vec2, _vec2, _vec2)
def test_intersection_is_subset_of_both(a, b, c, d):
    first = Aabb.from_corners(a, b)
    second = Aabb.from_corners(c, d)
    inter = first.intersection(second)
    assert inter.is_subset_of(first)
    assert inter.is_subset_of(second)


@given(_vec2, _vec2)
def test_iter_count_matches_num_points(lo, hi):
    e = Aabb(lo, hi)
    points = list(e.iter2())
    assert len(points) == e.num_points()
    assert all(e.contains(p) for p in points)