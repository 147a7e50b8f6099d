import pytest

from algodojo.tessoku.dp_paths import (
    count_grid_paths,
    longest_increasing_subsequence,
    max_score_path,
    min_coupons,
    min_dungeon_cost,
    min_dungeon_route,
    min_jump_cost,
    min_jump_route,
    min_stairs_cost,
)


def test_min_dungeon_cost():
    assert min_dungeon_cost([2, 4, 1, 3], [5, 3, 7]) == 8


def test_min_dungeon_cost_single_room():
    assert min_dungeon_cost([], []) == 0


def test_min_dungeon_route():
    assert min_dungeon_route([2, 4, 1, 3], [5, 3, 7]) == [1, 2, 4, 5]


def test_min_dungeon_cost_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        min_dungeon_cost([1, 2, 3], [1])


def test_min_jump_cost():
    assert min_jump_cost([10, 30, 40, 20]) == 30
    assert min_jump_cost([5]) == 0


def test_min_jump_route():
    assert min_jump_route([10, 30, 40, 20]) == [1, 2, 4]
    assert min_jump_route([5]) == [1]


def test_min_jump_cost_rejects_empty():
    with pytest.raises(ValueError):
        min_jump_cost([])


@pytest.mark.parametrize(
    ("xs", "ys", "expected"),
    [
        ([1], [1], 150),
        ([1, 2], [2, 2], 250),
        ([1, 2], [1, 2], 300),
        ([1, 3, 3, 6, 5, 6], [2, 4, 5, 6, 6, 6], 500),
    ],
)
def test_max_score_path(xs, ys, expected):
    assert max_score_path(xs, ys) == expected


def test_max_score_path_skips_unreachable():
    assert max_score_path([4, 2, 3, 4], [4, 2, 3, 4]) == 150


def test_max_score_path_unreachable_end():
    with pytest.raises(ValueError):
        max_score_path([1, 1], [1, 1])


def test_min_coupons():
    assert min_coupons(3, [[0, 0, 1], [0, 1, 0], [1, 0, 0]]) == 3
    assert min_coupons(3, [[1, 1, 1], [1, 0, 0]]) == 1


def test_min_coupons_impossible():
    assert min_coupons(3, [[1, 1, 0]]) is None


def test_min_coupons_rejects_bad_coupon():
    with pytest.raises(ValueError):
        min_coupons(3, [[1, 1]])


@pytest.mark.parametrize(
    ("xs", "expected"),
    [
        ([1], 1),
        ([1, 2], 2),
        ([1, 2, 3], 3),
        ([1, 2, 0, 3], 3),
        ([1, 0, 2, 3], 3),
        ([1, 2, 3, 0], 3),
        ([3, 2, 1], 1),
        ([1, 2, 1, 3, 4], 4),
        ([1, 2, 1, 2, 3, 4], 4),
        ([2, 1, 2, 1, 3, 4], 4),
    ],
)
def test_longest_increasing_subsequence(xs, expected):
    assert longest_increasing_subsequence(xs) == expected


def test_count_grid_paths():
    assert count_grid_paths(["...", "...", "..."]) == 6
    assert count_grid_paths([".#", ".."]) == 1
    assert count_grid_paths(["."]) == 1
    assert count_grid_paths(["#"]) == 0


def test_count_grid_paths_rejects_ragged():
    with pytest.raises(ValueError):
        count_grid_paths(["..", "."])


def test_min_stairs_cost():
    assert min_stairs_cost([1, 2], [0]) == 0