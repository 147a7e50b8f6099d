import bisect

import pytest

from algodojo.algorithm.binary_search import binary_search


def test_search_0_element():
    assert binary_search([], 0) == (False, 0)


def test_search_1_element():
    assert binary_search([1], 0) == (False, 0)
    assert binary_search([1], 1) == (True, 0)
    assert binary_search([1], 2) == (False, 1)


def test_search_2_elements():
    assert binary_search([1, 3], 0) == (False, 0)
    assert binary_search([1, 3], 1) == (True, 0)
    assert binary_search([1, 3], 2) == (False, 1)
    assert binary_search([1, 3], 3) == (True, 1)
    assert binary_search([1, 3], 4) == (False, 2)


def test_search_3_elements():
    assert binary_search([1, 3, 5], 0) == (False, 0)
    assert binary_search([1, 3, 5], 1) == (True, 0)
    assert binary_search([1, 3, 5], 2) == (False, 1)
    assert binary_search([1, 3, 5], 3) == (True, 1)
    assert binary_search([1, 3, 5], 4) == (False, 2)
    assert binary_search([1, 3, 5], 5) == (True, 2)
    assert binary_search([1, 3, 5], 6) == (False, 3)


@pytest.mark.parametrize("y", range(-1, 22))
def test_agrees_with_bisect_on_missing(y):
    xs = list(range(0, 21, 2))
    result = binary_search(xs, y)
    assert result.found == (y in xs)
    if result.found:
        assert xs[result.index] == y
    else:
        assert result.index == bisect.bisect_left(xs, y)