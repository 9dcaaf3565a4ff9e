from hypothesis import given
from hypothesis import strategies as st

from dsakit.searching import binary_search, linear_search

SOURCE_ARRAY = [70, 40, 30, 11, 57, 41, 25, 14]


@given(st.lists(st.integers(-50, 50), min_size=1), st.data())
def test_binary_search_finds_present_key(items, data):
    items = sorted(items)
    key = data.draw(st.sampled_from(items))
    index = binary_search(items, key)
    assert items[index] == key


@given(st.lists(st.integers(-50, 50)), st.integers(-100, 100))
def test_binary_search_absent_key(items, key):
    items = sorted(x for x in items if x != key)
    assert binary_search(items, key) is None


def test_binary_search_empty():
    assert binary_search([], 3) is None


def test_binary_search_duplicates_uses_midpoint():
    assert binary_search([7, 7, 7], 7) == 1


def test_binary_search_ends():
    items = [1, 3, 5, 7, 9]
    assert binary_search(items, 1) == 0
    assert binary_search(items, 9) == len(items) - 1


def test_linear_search_source_array():
    for key in SOURCE_ARRAY:
        assert linear_search(SOURCE_ARRAY, key) == SOURCE_ARRAY.index(key)


def test_linear_search_missing():
    assert linear_search(SOURCE_ARRAY, 99) is None


@given(st.lists(st.integers(0, 5)), st.integers(0, 5))
def test_linear_search_first_occurrence(items, key):
    expected = items.index(key) if key in items else None
    assert linear_search(items, key) == expected