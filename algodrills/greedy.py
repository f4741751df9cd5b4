"""Greedy reachability problems over jump lengths."""

from __future__ import annotations


def can_jump(nums: list[int]) -> bool:
    """Tell whether the last index is reachable from the first, where each
    value is the longest jump allowed from its position."""
    if not nums:
        raise ValueError("nums must not be empty")
    reach = 0
    for index, length in enumerate(nums):
        if index > reach:
            return False
        reach = max(reach, index + length)
    return True


def jump(nums: list[int]) -> int:
    """Return the fewest jumps from the first index to the last."""
    if not nums:
        raise ValueError("nums must not be empty")
    jumps = 0
    current_end = 0
    farthest = 0
    for index in range(len(nums) - 1):
        farthest = max(farthest, index + nums[index])
        if index == current_end:
            if farthest <= index:
                raise ValueError("the last index cannot be reached")
            jumps += 1
            current_end = farthest
    return jumps