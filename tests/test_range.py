import pytest

from bstmap import OrderedMap


@pytest.fixture
def odd_tree():
    tree = OrderedMap()
    for key in (5, 1, 9, 3, 7):
        tree.insert(key, key * 10)
    return tree


def test_range_half_open(odd_tree):
    view = odd_tree.range(3, 7)

    assert list(view) == [(3, 30), (5, 50)]
    assert view.begin().get() == (3, 30)
    assert view.end().get() == (7, 70)


def test_range_low_between_keys(odd_tree):
    assert list(odd_tree.range(2, 6).keys()) == [3, 5]


def test_range_reversed_bounds_is_empty(odd_tree):
    view = odd_tree.range(7, 3)

    assert list(view) == []
    assert view.is_empty()
    assert view.begin() == odd_tree.end()
    assert view.end() == odd_tree.end()


def test_range_equal_bounds_is_empty(odd_tree):
    assert list(odd_tree.range(5, 5)) == []


def test_range_above_all_keys_is_empty(odd_tree):
    view = odd_tree.range(10, 20)

    assert list(view) == []
    assert view.begin() == odd_tree.end()


def test_range_below_all_keys_is_empty(odd_tree):
    view = odd_tree.range(-5, 0)

    assert list(view) == []
    assert view.begin() == odd_tree.end()
    assert view.end() == odd_tree.end()


def test_range_running_to_the_last_key(odd_tree):
    view = odd_tree.range(6, 100)

    assert list(view.values()) == [70, 90]
    assert view.end() == odd_tree.end()


def test_range_covering_everything(odd_tree):
    assert list(odd_tree.range(0, 10)) == list(odd_tree.items())


def test_range_on_empty_map():
    tree = OrderedMap()

    assert list(tree.range(0, 10)) == []


def test_range_can_be_iterated_twice(odd_tree):
    view = odd_tree.range(1, 6)

    assert list(view) == list(view) == [(1, 10), (3, 30), (5, 50)]


def test_range_views_entries_without_copying(odd_tree):
    view = odd_tree.range(3, 7)
    odd_tree.insert(5, "updated")

    assert list(view) == [(3, 30), (5, "updated")]


class LessThanOnlyKey:
    """Key ordered through __lt__ alone."""

    def __init__(self, number):
        self.number = number

    def __lt__(self, other):
        return self.number < other.number


def test_range_needs_only_less_than_on_keys():
    tree = OrderedMap()
    for number in (5, 1, 9, 3, 7):
        tree.insert(LessThanOnlyKey(number), number)

    view = tree.range(LessThanOnlyKey(3), LessThanOnlyKey(7))
    assert list(view.values()) == [3, 5]
    assert list(tree.range(LessThanOnlyKey(7), LessThanOnlyKey(3))) == []
    assert list(tree.range(LessThanOnlyKey(10), LessThanOnlyKey(20))) == []

    tree.erase(LessThanOnlyKey(5))
    assert tree.find(LessThanOnlyKey(9)).value == 9
    assert list(tree.values()) == [1, 3, 7, 9]
