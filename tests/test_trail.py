import pytest

from trail import TrailBuffer, TrailPoint


def test_length_never_exceeds_capacity():
    trail = TrailBuffer(capacity=5)
    for i in range(50):
        trail.append(TrailPoint(i, -i, i % 255))
        assert len(trail) <= 5


def test_keeps_last_points_in_insertion_order():
    trail = TrailBuffer(capacity=5)
    for i in range(12):
        trail.append(TrailPoint(i, 2 * i, float(i)))

    assert [p.x for p in trail] == [7, 8, 9, 10, 11]
    assert [p.y for p in trail] == [14, 16, 18, 20, 22]


def test_under_capacity_keeps_everything():
    trail = TrailBuffer(capacity=200)
    for i in range(3):
        trail.append(TrailPoint(i, i, 0.0))
    assert len(trail) == 3
    assert trail.capacity == 200


def test_segments_pair_consecutive_points():
    trail = TrailBuffer(capacity=4)
    for i in range(6):
        trail.append(TrailPoint(i, 0, 0.0))

    pairs = [(a.x, b.x) for a, b in trail.segments()]
    assert pairs == [(2, 3), (3, 4), (4, 5)]


def test_segments_empty_for_short_trail():
    trail = TrailBuffer()
    assert list(trail.segments()) == []
    trail.append(TrailPoint(0, 0, 0.0))
    assert list(trail.segments()) == []


def test_clear():
    trail = TrailBuffer(capacity=3)
    trail.append(TrailPoint(1, 1, 1.0))
    trail.clear()
    assert len(trail) == 0


@pytest.mark.parametrize("capacity", [0, -1])
def test_rejects_non_positive_capacity(capacity):
    with pytest.raises(ValueError):
        TrailBuffer(capacity=capacity)
