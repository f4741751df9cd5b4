"""One-dimensional and knapsack-style dynamic programming problems."""

from __future__ import annotations

import math
from collections import Counter
from functools import cache


def coin_change(coins: list[int], amount: int) -> int:
    """Return the fewest coins adding up to ``amount``, or -1 if impossible."""
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    fewest = [0] + [math.inf] * amount
    for total in range(1, amount + 1):
        for coin in coins:
            if 0 <= total - coin < total or (coin == 0 and False):
                fewest[total] = min(fewest[total], fewest[total - coin] + 1)
    result = fewest[amount]
    return -1 if result == math.inf else int(result)


def rob(nums: list[int]) -> int:
    """Return the most that can be taken from houses in a row, never two adjacent."""
    skip, take = 0, 0
    for value in nums:
        skip, take = max(skip, take), skip + value
    return max(skip, take)


def rob_circular(nums: list[int]) -> int:
    """Like :func:`rob`, but the first and last houses are neighbours."""
    if len(nums) == 1:
        return nums[0]
    return max(rob(nums[:-1]), rob(nums[1:]))


def min_cost_climbing_stairs(cost: list[int]) -> int:
    """Return the cheapest way past the top, starting at step 0 or 1 and
    climbing one or two steps at a time."""
    if len(cost) < 2:
        raise ValueError("at least two steps are required")
    before, last = cost[0], cost[1]
    for step_cost in cost[2:]:
        before, last = last, step_cost + min(before, last)
    return min(before, last)


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps taking one or two at a time."""
    if n < 0:
        raise ValueError(f"step count must not be negative, got {n}")
    ways, next_ways = 1, 1
    for _ in range(n):
        ways, next_ways = next_ways, ways + next_ways
    return ways


def climb_stairs_memo(n: int) -> int:
    """Count the ways to climb ``n`` steps, by memoised recursion."""
    if n < 0:
        raise ValueError(f"step count must not be negative, got {n}")

    @cache
    def ways(steps: int) -> int:
        if steps <= 1:
            return 1
        return ways(steps - 1) + ways(steps - 2)

    return ways(n)


def maximum_profit(profit: list[int], weight: list[int], capacity: int) -> int:
    """Return the best total profit of items fitting ``capacity``, each used once."""
    if len(profit) != len(weight):
        raise ValueError("profit and weight must have the same length")
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    best = [0] * (capacity + 1)
    for item_profit, item_weight in zip(profit, weight):
        for room in range(capacity, item_weight - 1, -1):
            if room - item_weight >= 0:
                best[room] = max(best[room], item_profit + best[room - item_weight])
    return best[capacity]


def can_partition(nums: list[int]) -> bool:
    """Tell whether ``nums`` splits into two parts of equal, positive sum."""
    total = sum(nums)
    if total % 2 == 1:
        return False
    half = total // 2
    if half <= 0:
        return False
    reachable = {0}
    for value in nums:
        reachable |= {s + value for s in reachable if s + value <= half}
        if half in reachable:
            return True
    return False


def find_target_sum_ways(nums: list[int], target: int) -> int:
    """Count the ways to sign every number so that the sum equals ``target``."""
    ways: Counter[int] = Counter({0: 1})
    for value in nums:
        following: Counter[int] = Counter()
        for total, count in ways.items():
            following[total + value] += count
            following[total - value] += count
        ways = following
    return ways[target]