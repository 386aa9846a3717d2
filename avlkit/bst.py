"""Plain binary search tree that can be rebalanced into AVL shape."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator

from avlkit.avl import Node, balance_factor, height, rotate_left, rotate_right


def _update_height(node: Node) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def _rebalance(node: Node) -> Node:
    _update_height(node)
    balance = balance_factor(node)
    if balance > 1:
        if balance_factor(node.left) < 0:
            node.left = rotate_left(node.left)
        return rotate_right(node)
    if balance < -1:
        if balance_factor(node.right) > 0:
            node.right = rotate_right(node.right)
        return rotate_left(node)
    return node


class BinarySearchTree:
    """An unbalanced binary search tree of distinct values."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Insert ``value`` without rebalancing. Return False for a duplicate."""
        if self.root is None:
            self.root = Node(value)
            return True
        path: list[Node] = []
        node = self.root
        while True:
            path.append(node)
            if value > node.value:
                if node.right is None:
                    node.right = Node(value)
                    break
                node = node.right
            elif value < node.value:
                if node.left is None:
                    node.left = Node(value)
                    break
                node = node.left
            else:
                return False
        for ancestor in reversed(path):
            _update_height(ancestor)
        return True

    def __iter__(self) -> Iterator[int]:
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def inorder(self) -> list[int]:
        """All values in ascending order."""
        return list(self)

    def height(self) -> int:
        """Height of the whole tree; 0 when empty."""
        return height(self.root)

    def to_avl(self) -> None:
        """Rebalance in place with one post-order pass of AVL rotations."""
        order: list[tuple[Node, Node | None, bool]] = []
        stack = [(self.root, None, False)] if self.root is not None else []
        while stack:
            node, parent, is_left = stack.pop()
            order.append((node, parent, is_left))
            if node.left is not None:
                stack.append((node.left, node, True))
            if node.right is not None:
                stack.append((node.right, node, False))

        for node, parent, is_left in reversed(order):
            subtree = _rebalance(node)
            if parent is None:
                self.root = subtree
            elif is_left:
                parent.left = subtree
            else:
                parent.right = subtree


def main(argv: list[str] | None = None) -> int:
    """Show a tree's in-order listing before and after conversion to AVL shape."""
    parser = argparse.ArgumentParser(description="BST to AVL demonstration.")
    parser.parse_args(argv)

    tree = BinarySearchTree([10, 16, 12, 18])
    print(" ".join(map(str, tree)))
    tree.to_avl()
    print(" ".join(map(str, tree)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())