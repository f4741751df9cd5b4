"""Small step-by-step simulations: a score keeper and a lunch queue."""

from __future__ import annotations

from collections import Counter
from typing import Iterable


def cal_points(operations: Iterable[str]) -> int:
    """Total a baseball score record.

    Each operation is an integer score, ``"+"`` (sum of the last two scores),
    ``"D"`` (double the last score) or ``"C"`` (cancel the last score).
    """
    scores: list[int] = []
    for op in operations:
        if op == "+":
            if len(scores) < 2:
                raise ValueError("'+' needs two previous scores")
            scores.append(scores[-1] + scores[-2])
        elif op == "D":
            if not scores:
                raise ValueError("'D' needs a previous score")
            scores.append(2 * scores[-1])
        elif op == "C":
            if not scores:
                raise ValueError("'C' needs a previous score")
            scores.pop()
        else:
            try:
                scores.append(int(op))
            except ValueError:
                raise ValueError(f"unknown operation {op!r}") from None
    return sum(scores)


def count_students(students: list[int], sandwiches: list[int]) -> int:
    """Return how many students are left without lunch.

    Students queue with a sandwich preference; the top sandwich of the stack
    goes to the student at the front if it matches, otherwise that student
    moves to the back. Serving stops when nobody left wants the top sandwich.
    """
    if len(students) != len(sandwiches):
        raise ValueError("there must be one sandwich per student")
    waiting = Counter(students)
    for served, sandwich in enumerate(sandwiches):
        if waiting[sandwich] == 0:
            return len(sandwiches) - served
        waiting[sandwich] -= 1
    return 0