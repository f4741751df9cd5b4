"""Binary tree nodes and classic tree algorithms."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def from_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, with None marking a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            value = next(items, None)
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def diameter_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best


def diameter_of_binary_tree_naive(root: Optional[TreeNode]) -> int:
    """Diameter computed by recomputing subtree heights at every node."""
    if root is None:
        return 0
    through_root = max_depth(root.left) + max_depth(root.right)
    return max(
        diameter_of_binary_tree_naive(root.left),
        diameter_of_binary_tree_naive(root.right),
        through_root,
    )


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    if root is not None:
        root.left, root.right = root.right, root.left
        invert_tree(root.left)
        invert_tree(root.right)
    return root


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Tell whether some root-to-leaf path adds up to ``target_sum``."""
    if root is None:
        return False
    remaining = target_sum - root.val
    if root.left is None and root.right is None:
        return remaining == 0
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding ``val`` in a search tree, or None."""
    node = root
    while node is not None:
        if val < node.val:
            node = node.left
        elif val > node.val:
            node = node.right
        else:
            return node
    return None


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values of each level, left to right."""
    levels: list[list[int]] = []
    queue = deque([root] if root is not None else [])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(level)
    return levels


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the rightmost value of each level, top to bottom."""
    view: list[int] = []
    queue = deque([root] if root is not None else [])
    while queue:
        view.append(queue[0].val)
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.right is not None:
                queue.append(node.right)
            if node.left is not None:
                queue.append(node.left)
    return view


def insert_into_bst(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert ``val`` into a search tree; equal values go to the right."""
    if root is None:
        return TreeNode(val)
    if root.val > val:
        root.left = insert_into_bst(root.left, val)
    else:
        root.right = insert_into_bst(root.right, val)
    return root


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove ``key`` from a search tree and return the new root."""
    if root is None:
        return None
    if key > root.val:
        root.right = delete_node(root.right, key)
    elif key < root.val:
        root.left = delete_node(root.left, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = root.right
        while successor.left is not None:
            successor = successor.left
        root.val = successor.val
        root.right = delete_node(root.right, successor.val)
    return root


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values in left-root-right order, by recursion."""
    if root is None:
        return []
    return inorder_traversal(root.left) + [root.val] + inorder_traversal(root.right)


def inorder_traversal_iterative(root: Optional[TreeNode]) -> list[int]:
    """Return the values in left-root-right order, with an explicit stack."""
    visited: list[int] = []
    stack: list[TreeNode] = []
    curr = root
    while stack or curr is not None:
        while curr is not None:
            stack.append(curr)
            curr = curr.left
        node = stack.pop()
        visited.append(node.val)
        curr = node.right
    return visited


def build_tree(preorder: list[int], inorder: list[int]) -> Optional[TreeNode]:
    """Rebuild a tree from its preorder and inorder value sequences."""
    positions: dict[int, int] = {}
    for index, value in enumerate(inorder):
        positions.setdefault(value, index)
    values = iter(preorder)

    def build(left: int, right: int) -> Optional[TreeNode]:
        if left > right:
            return None
        node = TreeNode(next(values))
        split = positions[node.val]
        node.left = build(left, split - 1)
        node.right = build(split + 1, right)
        return node

    return build(0, len(inorder) - 1)


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th smallest value (1-based) of a search tree, or -1."""
    stack: list[TreeNode] = []
    curr = root
    seen = 0
    while stack or curr is not None:
        while curr is not None:
            stack.append(curr)
            curr = curr.left
        node = stack.pop()
        seen += 1
        if seen == k:
            return node.val
        curr = node.right
    return -1