import pytest

from algobox.circular import SortedCircularList


@pytest.mark.parametrize(
    "values",
    [[5], [3, 1, 2], [1, 2, 3], [9, 7, 7, 1, 4, 4], [-2, 0, -5, 3]],
)
def test_iteration_is_sorted(values):
    ring = SortedCircularList(values)
    assert list(ring) == sorted(values)
    assert len(ring) == len(values)


def test_insert_new_head():
    ring = SortedCircularList([5, 8])
    ring.insert(2)
    assert list(ring)[0] == 2
    assert list(ring) == [2, 5, 8]


def test_insert_after_tail():
    ring = SortedCircularList([5, 8])
    ring.insert(12)
    assert list(ring) == [5, 8, 12]


def test_insert_equal_to_head():
    ring = SortedCircularList([5, 8])
    ring.insert(5)
    assert list(ring) == [5, 5, 8]


def test_take_wraps_around():
    values = [3, 1, 2]
    ring = SortedCircularList(values)
    taken = ring.take(10)
    assert len(taken) == 10
    ordered = sorted(values)
    for position, value in enumerate(taken):
        assert value == ordered[position % len(ordered)]


def test_take_fewer_than_length():
    ring = SortedCircularList([4, 2, 6, 8])
    assert ring.take(2) == [2, 4]


def test_take_zero_on_empty():
    assert SortedCircularList().take(0) == []


def test_take_from_empty_raises():
    with pytest.raises(ValueError):
        SortedCircularList().take(3)


def test_take_negative_raises():
    with pytest.raises(ValueError):
        SortedCircularList([1]).take(-1)


def test_iteration_is_a_snapshot():
    ring = SortedCircularList([1, 3])
    seen = list(ring)
    ring.insert(2)
    assert seen == [1, 3]
    assert list(ring) == [1, 2, 3]