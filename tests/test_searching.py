import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.searching import binary_search, linear_search


@pytest.mark.parametrize("target", [1, 2, 4, 6, 7, 9])
def test_binary_search_finds_present(target):
    assert binary_search(sorted([4, 7, 2, 6, 1, 9, 7]), target) is True


@pytest.mark.parametrize("target", [0, 3, 5, 8, 10])
def test_binary_search_missing(target):
    assert binary_search(sorted([4, 7, 2, 6, 1, 9, 7]), target) is False


def test_binary_search_empty():
    assert binary_search([], 1) is False


@given(
    data=st.lists(st.integers(-50, 50)).map(sorted),
    target=st.integers(-60, 60),
)
def test_binary_search_property(data, target):
    assert binary_search(data, target) == (target in data)


def test_linear_search_first_occurrence():
    assert linear_search([4, 7, 2, 6, 1, 9, 7], 7) == 1


def test_linear_search_missing():
    assert linear_search([4, 7, 2], 5) is None


def test_linear_search_iterable():
    assert linear_search(iter("abc"), "c") == 2


@given(data=st.lists(st.integers(-10, 10)), target=st.integers(-12, 12))
def test_linear_search_property(data, target):
    index = linear_search(data, target)
    if target in data:
        assert index == data.index(target)
    else:
        assert index is None