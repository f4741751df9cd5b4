import pytest

from algodrills.dynamic_programming import (
    can_partition,
    climb_stairs,
    climb_stairs_memo,
    coin_change,
    find_target_sum_ways,
    maximum_profit,
    min_cost_climbing_stairs,
    rob,
    rob_circular,
)


def test_coin_change_example():
    assert coin_change([1, 2, 5], 11) == 3


def test_coin_change_impossible():
    assert coin_change([2], 3) == -1


def test_coin_change_zero_amount():
    assert coin_change([1, 2], 0) == 0


@pytest.mark.parametrize("coin,times", [(3, 4), (7, 1), (1, 9)])
def test_coin_change_single_coin(coin, times):
    assert coin_change([coin], coin * times) == times


def test_coin_change_negative_amount():
    with pytest.raises(ValueError):
        coin_change([1], -1)


def test_rob_example():
    assert rob([2, 7, 9, 3, 1]) == 12


def test_rob_single():
    assert rob([5]) == 5


@pytest.mark.parametrize("nums", [[1, 2, 3, 1], [2, 1, 1, 2], [5, 1, 1, 5, 9], [4]])
def test_rob_invariants(nums):
    assert rob(nums) >= max(nums)
    assert rob(nums) <= sum(nums)
    assert rob_circular(nums) <= rob(nums)


def test_rob_circular_three_equal_ends():
    nums = [2, 3, 2]
    assert rob_circular(nums) == max(nums)


def test_rob_circular_pair():
    nums = [4, 9]
    assert rob_circular(nums) == max(nums)


def test_min_cost_climbing_stairs():
    cost = [10, 15, 20]
    assert min_cost_climbing_stairs(cost) == cost[1]


def test_min_cost_climbing_stairs_two_steps():
    cost = [7, 3]
    assert min_cost_climbing_stairs(cost) == min(cost)


def test_min_cost_climbing_stairs_too_short():
    with pytest.raises(ValueError):
        min_cost_climbing_stairs([1])


def test_climb_stairs_base_cases():
    assert climb_stairs(0) == 1
    assert climb_stairs(1) == 1
    assert climb_stairs(2) == 2


@pytest.mark.parametrize("n", range(2, 30))
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


@pytest.mark.parametrize("n", range(0, 40))
def test_climb_stairs_variants_agree(n):
    assert climb_stairs_memo(n) == climb_stairs(n)


def test_climb_stairs_negative():
    with pytest.raises(ValueError):
        climb_stairs(-1)
    with pytest.raises(ValueError):
        climb_stairs_memo(-1)


def test_maximum_profit_example():
    assert maximum_profit([4, 4, 7, 1], [5, 2, 3, 1], 8) == 12


def test_maximum_profit_everything_fits():
    profit = [3, 5, 2]
    weight = [1, 2, 3]
    assert maximum_profit(profit, weight, sum(weight)) == sum(profit)


def test_maximum_profit_no_capacity():
    assert maximum_profit([3, 5], [1, 2], 0) == 0


def test_maximum_profit_length_mismatch():
    with pytest.raises(ValueError):
        maximum_profit([1, 2], [1], 5)


@pytest.mark.parametrize(
    "nums,expected",
    [([1, 5, 11, 5], True), ([1, 2, 3, 5], False), ([1, 2], False), ([2, 2], True), ([], False)],
)
def test_can_partition(nums, expected):
    assert can_partition(nums) is expected


@pytest.mark.parametrize("nums", [[1, 1, 1, 1, 1], [1, 2, 3], [0, 4, 2], [5]])
def test_target_sum_ways_cover_all_signings(nums):
    bound = sum(nums)
    total = sum(find_target_sum_ways(nums, t) for t in range(-bound, bound + 1))
    assert total == 2 ** len(nums)


@pytest.mark.parametrize("nums,target", [([1, 1, 1, 1, 1], 3), ([2, 3, 5], 4), ([1], 1)])
def test_target_sum_ways_symmetric(nums, target):
    assert find_target_sum_ways(nums, target) == find_target_sum_ways(nums, -target)


def test_target_sum_ways_all_plus():
    nums = [1, 2, 4]
    assert find_target_sum_ways(nums, sum(nums)) == 1


def test_target_sum_ways_out_of_reach():
    nums = [1, 2]
    assert find_target_sum_ways(nums, sum(nums) + 1) == 0


def test_target_sum_ways_empty():
    assert find_target_sum_ways([], 0) == 1