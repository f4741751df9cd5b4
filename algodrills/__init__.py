"""Classic algorithm and data-structure exercises: linked lists, trees, arrays,
searching, dynamic programming, greedy problems, containers and simulations."""

__version__ = "0.1.0"