import itertools

from tabocr.geometry import Rect, area_of


def _sample_rects():
    return [
        Rect(0, 0, 10, 10),
        Rect(5, 5, 15, 15),
        Rect(1, 1, 9, 9),
        Rect(10, 0, 20, 10),
        Rect(-5, -5, 3, 4),
        Rect(2, 8, 30, 12),
        Rect(0, 0, 100, 2),
    ]


def test_dimensions_use_absolute_difference():
    r = Rect(10, 20, 4, 2)
    assert r.width() == 6
    assert r.height() == 18
    assert r.area() == 108


def test_partial_overlap_is_not_major():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 15, 15)
    inter = a.intersection(b)
    assert inter == Rect(5, 5, 10, 10)
    assert inter.area() == 25
    assert not a.major_overlap(b)


def test_nested_rect_is_major_overlap():
    a = Rect(0, 0, 10, 10)
    b = Rect(1, 1, 9, 9)
    assert a.intersection(b) == b
    assert a.major_overlap(b)
    assert b.major_overlap(a)


def test_disjoint_and_touching_have_no_intersection():
    a = Rect(0, 0, 10, 10)
    assert a.intersection(Rect(20, 20, 30, 30)) is None
    # shared edge
    assert a.intersection(Rect(10, 0, 20, 10)) is None
    assert not a.major_overlap(Rect(10, 0, 20, 10))
    # shared corner
    assert a.intersection(Rect(10, 10, 20, 20)) is None
    assert not a.major_overlap(Rect(10, 10, 20, 20))


def test_origin_rect_is_a_real_intersection():
    a = Rect(-5, -5, 0, 0)
    b = Rect(-2, -2, 5, 5)
    assert a.intersection(b) == Rect(-2, -2, 0, 0)


def test_inverted_rect_yields_no_intersection():
    inverted = Rect(10, 10, 0, 0)
    assert inverted.area() == 100
    assert inverted.intersection(Rect(0, 0, 10, 10)) is None
    assert not inverted.major_overlap(Rect(0, 0, 10, 10))


def test_zero_area_rect_never_majorly_overlaps():
    flat = Rect(0, 5, 10, 5)
    assert flat.area() == 0
    assert not flat.major_overlap(Rect(0, 0, 10, 10))
    assert not Rect(0, 0, 10, 10).major_overlap(flat)


def test_exactly_half_is_not_enough():
    a = Rect(0, 0, 10, 10)
    b = Rect(0, 0, 10, 5)
    # overlap 50 is the whole of b, min area 50 -> 50 > 25
    assert a.major_overlap(b)
    c = Rect(0, 5, 10, 15)
    # overlap 50, min area 100 -> 50 is not > 50
    assert not a.major_overlap(c)


def test_intersection_area_bounded_by_smaller_area():
    for a, b in itertools.product(_sample_rects(), repeat=2):
        assert area_of(a.intersection(b)) <= min(a.area(), b.area())


def test_intersection_commutative_and_overlap_symmetric():
    for a, b in itertools.product(_sample_rects(), repeat=2):
        assert a.intersection(b) == b.intersection(a)
        assert a.major_overlap(b) == b.major_overlap(a)


def test_intersection_idempotent():
    for a in _sample_rects():
        assert a.intersection(a) == a
        assert a.major_overlap(a)


def test_contains_excludes_border():
    r = Rect(0, 0, 10, 10)
    assert r.contains(5, 5)
    assert not r.contains(0, 5)
    assert not r.contains(5, 10)
    assert not r.contains(11, 5)


def test_tuple_round_trip_and_str():
    r = Rect.from_tuple((1, 2, 3, 4))
    assert r.to_tuple() == (1, 2, 3, 4)
    assert str(r) == "1, 2, 3, 4"
    assert area_of(None) == 0
