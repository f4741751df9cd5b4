"""Array problems: two pointers, sliding windows, prefix sums and bit tricks."""

from __future__ import annotations

from functools import reduce
from itertools import accumulate
from operator import xor


class NumArray:
    """Answers range-sum queries over a fixed sequence in constant time."""

    def __init__(self, nums: list[int]) -> None:
        self._prefix = [0, *accumulate(nums)]

    def sum_range(self, left: int, right: int) -> int:
        """Return the sum of the elements from ``left`` to ``right`` inclusive."""
        size = len(self._prefix) - 1
        if not (0 <= left < size and 0 <= right < size):
            raise IndexError(f"range [{left}, {right}] outside 0..{size - 1}")
        return self._prefix[right + 1] - self._prefix[left]


def get_concatenation(nums: list[int]) -> list[int]:
    """Return ``nums`` followed by itself."""
    return [*nums, *nums]


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list so each value appears once at its front.

    Returns the number of unique values kept at the front.
    """
    if not nums:
        return 0
    write = 0
    for value in nums[1:]:
        if value != nums[write]:
            write += 1
            nums[write] = value
    return write + 1


def remove_duplicates_at_most_twice(nums: list[int]) -> int:
    """Compact a sorted list so each value appears at most twice at its front.

    Returns the length of the compacted front.
    """
    write = 0
    for value in list(nums):
        if write < 2 or value != nums[write - 2]:
            nums[write] = value
            write += 1
    return write


def remove_element(nums: list[int], val: int) -> int:
    """Move every element not equal to ``val`` to the front, keeping order.

    Returns the number of elements kept.
    """
    write = 0
    for value in list(nums):
        if value != val:
            nums[write] = value
            write += 1
    return write


def pivot_index(nums: list[int]) -> int:
    """Return the leftmost index whose left and right sums match, or -1."""
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if left == total - left - value:
            return index
        left += value
    return -1


def contains_nearby_duplicate(nums: list[int], k: int) -> bool:
    """Tell whether two equal values sit at most ``k`` positions apart."""
    window: set[int] = set()
    for right, value in enumerate(nums):
        if right > k:
            window.discard(nums[right - k - 1])
        if value in window:
            return True
        window.add(value)
    return False


def num_of_subarrays(arr: list[int], k: int, threshold: int) -> int:
    """Count windows of size ``k`` whose average is at least ``threshold``."""
    needed = threshold * k
    count = 0
    window = 0
    for right, value in enumerate(arr):
        window += value
        if right >= k:
            window -= arr[right - k]
        if right >= k - 1 and window >= needed:
            count += 1
    return count


def max_area(height: list[int]) -> int:
    """Return the most water held between two of the given walls."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def min_sub_array_len(target: int, nums: list[int]) -> int:
    """Return the length of the shortest window summing to at least
    ``target``, or 0 if there is none."""
    best = 0
    window = 0
    left = 0
    for right, value in enumerate(nums):
        window += value
        while window >= target:
            length = right - left + 1
            best = length if best == 0 else min(best, length)
            window -= nums[left]
            left += 1
    return best


def max_profit(prices: list[int]) -> int:
    """Return the best gain from buying once and selling later, or 0."""
    profit = 0
    lowest = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        profit = max(profit, price - lowest)
    return profit


def longest_consecutive(nums: list[int]) -> int:
    """Return the length of the longest run of consecutive integers present."""
    present = set(nums)
    longest = 0
    for value in present:
        if value - 1 in present:
            continue
        end = value
        while end + 1 in present:
            end += 1
        longest = max(longest, end - value + 1)
    return longest


def arithmetic_triplets(nums: list[int], diff: int) -> int:
    """Count triplets x, x+diff, x+2*diff in a strictly increasing list."""
    present = set(nums)
    return sum(1 for x in nums if x + diff in present and x + 2 * diff in present)


def single_number(nums: list[int]) -> int:
    """Return the value that appears once when every other appears twice."""
    return reduce(xor, nums, 0)


def hamming_weight(n: int) -> int:
    """Count the set bits of ``n`` taken as an unsigned 32-bit integer."""
    return bin(n & 0xFFFFFFFF).count("1")