import itertools

import pytest

from algodrills.linked_lists import (
    ListNode,
    from_values,
    merge_k_lists,
    merge_k_lists_sequential,
    merge_two_lists,
    reverse_list,
    reverse_list_recursive,
    to_values,
)

SAMPLES = [[], [1], [1, 2], [4, 8, 15, 16, 23, 42], [7, 7, 3, 1, 9]]


@pytest.mark.parametrize("values", SAMPLES)
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_empty_builds_none():
    assert from_values([]) is None
    assert to_values(None) == []


def test_node_iteration():
    head = ListNode(1, ListNode(2, ListNode(3)))
    assert list(head) == [1, 2, 3]


@pytest.mark.parametrize("values", SAMPLES)
def test_reverse_list(values):
    assert to_values(reverse_list(from_values(values))) == values[::-1]


@pytest.mark.parametrize("values", SAMPLES)
def test_reverse_list_recursive(values):
    assert to_values(reverse_list_recursive(from_values(values))) == values[::-1]


def test_reverse_twice_restores():
    values = [5, 1, 4]
    head = reverse_list(reverse_list_recursive(from_values(values)))
    assert to_values(head) == values


@pytest.mark.parametrize(
    "a, b",
    [([], []), ([1, 2, 4], [1, 3, 4]), ([], [0]), ([2, 5, 9], []), ([1, 1], [1])],
)
def test_merge_two_lists_sorted(a, b):
    assert to_values(merge_two_lists(from_values(a), from_values(b))) == sorted(a + b)


def test_merge_two_lists_prefers_first_on_ties():
    first = ListNode(1)
    second = ListNode(1)
    merged = merge_two_lists(first, second)
    assert merged is first
    assert merged.next is second


KS = [
    [[1, 4, 5], [1, 3, 4], [2, 6]],
    [[]],
    [[3], [1], [2], [0], [5]],
    [[1, 2, 3]],
    [[], [2, 8], [], [1, 9, 10]],
]


@pytest.mark.parametrize("lists", KS)
def test_merge_k_lists(lists):
    expected = sorted(itertools.chain.from_iterable(lists))
    assert to_values(merge_k_lists([from_values(v) for v in lists])) == expected


@pytest.mark.parametrize("lists", KS)
def test_merge_k_lists_sequential(lists):
    expected = sorted(itertools.chain.from_iterable(lists))
    result = merge_k_lists_sequential([from_values(v) for v in lists])
    assert to_values(result) == expected


def test_merge_k_lists_empty_input():
    assert merge_k_lists([]) is None
    assert merge_k_lists_sequential([]) is None