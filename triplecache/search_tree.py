"""Unbalanced binary search tree of keyed records."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from .output import Log
from .records import Record


@dataclass(eq=False)
class TreeNode:
    """A tree node with subtree bookkeeping.

    ``number_of_nodes`` counts the nodes in the subtree rooted here and
    ``height`` is the number of edges on the longest path down to a leaf.
    """

    key: int
    record: Record | None = None
    number_of_nodes: int = 1
    height: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None

    def children(self) -> list[TreeNode]:
        """The present children, left before right."""
        return [child for child in (self.left, self.right) if child is not None]


def _refresh(nodes: list[TreeNode]) -> None:
    """Recompute counts and heights for ``nodes``, given top-down, bottom-up."""
    for node in reversed(nodes):
        children = node.children()
        node.number_of_nodes = 1 + sum(child.number_of_nodes for child in children)
        node.height = max((child.height + 1 for child in children), default=0)


def _sorted_walk(root: TreeNode | None, ascending: bool) -> Iterator[TreeNode]:
    near, far = ("left", "right") if ascending else ("right", "left")
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = getattr(node, near)
        node = stack.pop()
        yield node
        node = getattr(node, far)


class SearchTree:
    """Binary search tree keyed by integers; each key appears once."""

    def __init__(self) -> None:
        self._root: TreeNode | None = None

    def __len__(self) -> int:
        return self._root.number_of_nodes if self._root else 0

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return False

    def root(self) -> TreeNode | None:
        """The root node, or ``None`` when the tree is empty."""
        return self._root

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""
        return self._root.height + 1 if self._root else 0

    def add(self, key: int, record: Record | None) -> None:
        """Insert ``key``; if it is already present, only its record is replaced."""
        path: list[TreeNode] = []
        node = self._root
        while node is not None:
            if key == node.key:
                node.record = record
                return
            path.append(node)
            node = node.left if key < node.key else node.right

        new_node = TreeNode(key, record)
        if not path:
            self._root = new_node
            return
        parent = path[-1]
        if key < parent.key:
            parent.left = new_node
        else:
            parent.right = new_node
        _refresh(path)

    def remove(self, key: int) -> bool:
        """Remove the node with ``key``; return whether it was found."""
        path: list[TreeNode] = []
        node = self._root
        while node is not None and node.key != key:
            path.append(node)
            node = node.left if key < node.key else node.right
        if node is None:
            return False

        if node.left is None or node.right is None:
            replacement = node.left if node.left is not None else node.right
            fix_path = path
        else:
            successor_path: list[TreeNode] = []
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_path.append(successor)
                successor_parent = successor
                successor = successor.left
            if successor_parent is not node:
                successor_parent.left = successor.right
                successor.right = node.right
            successor.left = node.left
            replacement = successor
            fix_path = path + [successor] + successor_path

        parent = path[-1] if path else None
        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        node.left = node.right = None
        _refresh(fix_path)
        return True

    def clear(self) -> None:
        self._root = None

    def in_order(self) -> Iterator[TreeNode]:
        """Nodes in ascending key order."""
        return _sorted_walk(self._root, ascending=True)

    def reverse_order(self) -> Iterator[TreeNode]:
        """Nodes in descending key order."""
        return _sorted_walk(self._root, ascending=False)

    def pre_order(self) -> Iterator[TreeNode]:
        """Each node before its left subtree, then its right subtree."""
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))

    def post_order(self) -> Iterator[TreeNode]:
        """Left subtree, right subtree, then the node itself."""
        stack = [self._root] if self._root else []
        visited: list[TreeNode] = []
        while stack:
            node = stack.pop()
            visited.append(node)
            stack.extend(node.children())
        yield from reversed(visited)

    def breadth_first(self) -> Iterator[TreeNode]:
        """Nodes level by level, left to right."""
        queue = deque([self._root] if self._root else [])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node.children())

    def in_range(self, low: int, high: int) -> Iterator[TreeNode]:
        """Nodes with ``low <= key <= high``, ascending."""
        stack: list[TreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left if low < node.key else None
            node = stack.pop()
            if low <= node.key <= high:
                yield node
            node = node.right if node.key < high else None

    def print_node(self, node: TreeNode | None, log: Log) -> None:
        """Emit a node's key and, if it carries one, its record."""
        if node is None:
            log.emit("Node is null")
            return
        log.emit(f"Node key: {node.key}")
        if node.record is not None:
            log.emit(node.record.describe())

    def _emit_keys(self, heading: str, nodes: Iterator[TreeNode], log: Log) -> None:
        log.emit(heading)
        for node in nodes:
            log.emit(f"Node key: {node.key}")

    def print_in_order(self, log: Log) -> None:
        self._emit_keys("Performing In-order traversal", self.in_order(), log)

    def print_reverse_order(self, log: Log) -> None:
        self._emit_keys("Performing reverse-order traversal", self.reverse_order(), log)

    def print_pre_order(self, log: Log) -> None:
        self._emit_keys("Performing Pre-order traversal", self.pre_order(), log)

    def print_post_order(self, log: Log) -> None:
        self._emit_keys("Performing Post-order traversal", self.post_order(), log)

    def print_depth_first(self, log: Log) -> None:
        log.emit("Performing Depth First via PreOrder traversal")
        self.print_pre_order(log)

    def print_breadth_first(self, log: Log) -> None:
        if self._root is None:
            log.emit("Tree is empty")
            return
        self._emit_keys("Performing Breadth First traversal", self.breadth_first(), log)

    def print_range(self, low: int, high: int, log: Log) -> None:
        """Emit every node in ``[low, high]`` with its record."""
        log.emit(f"Printing nodes in range [{low}, {high}]")
        for node in self.in_range(low, high):
            self.print_node(node, log)