"""Binary search over a sorted list and over a sorted matrix."""

from __future__ import annotations

from bisect import bisect_left, bisect_right


def binary_search(nums: list[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or -1."""
    index = bisect_left(nums, target)
    if index < len(nums) and nums[index] == target:
        return index
    return -1


def search_matrix(matrix: list[list[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows are sorted and each
    row starts after the previous row ends."""
    if not matrix or not matrix[0]:
        return False
    firsts = [row[0] for row in matrix]
    row_index = bisect_right(firsts, target) - 1
    if row_index < 0:
        return False
    return binary_search(matrix[row_index], target) != -1