from unblock.bounds import Bounds, get_bounds


def test_get_bounds_start_is_position():
    b = get_bounds((1.0, 2.0), (3.0, 4.0))
    assert b.start == (1.0, 2.0)


def test_get_bounds_end_is_position_plus_size():
    b = get_bounds((1.0, 2.0), (3.0, 4.0))
    assert b.end == (4.0, 6.0)


def test_zero_size_bounds_collapse_to_point():
    b = get_bounds((5.0, 7.0), (0.0, 0.0))
    assert b.start == b.end


def test_contains_point_edges_are_inclusive():
    b = get_bounds((0.0, 0.0), (10.0, 10.0))
    assert b.contains_point(b.start)
    assert b.contains_point(b.end)


def test_contains_point_inside():
    b = get_bounds((0.0, 0.0), (10.0, 10.0))
    assert b.contains_point((5.0, 5.0))


def test_contains_point_outside():
    b = get_bounds((0.0, 0.0), (10.0, 10.0))
    assert not b.contains_point((b.end[0] + 1.0, 5.0))
    assert not b.contains_point((5.0, b.start[1] - 1.0))


def test_collides_with_overlapping_boxes():
    a = get_bounds((0.0, 0.0), (10.0, 10.0))
    b = get_bounds((5.0, 5.0), (10.0, 10.0))
    assert a.collides_with(b)
    assert b.collides_with(a)


def test_contains_box_nested():
    outer = get_bounds((0.0, 0.0), (100.0, 100.0))
    inner = get_bounds((10.0, 10.0), (20.0, 20.0))
    assert outer.contains_box(inner)


def test_bounds_equality():
    assert Bounds(start=(0.0, 0.0), end=(2.0, 2.0)) == get_bounds((0.0, 0.0), (2.0, 2.0))