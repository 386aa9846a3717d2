"""Self-balancing AVL tree of integers with order-statistic queries."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A tree node holding a value and the height of its subtree."""

    value: int
    left: Node | None = None
    right: Node | None = None
    height: int = 1


def height(node: Node | None) -> int:
    """Height of the subtree rooted at ``node``; an empty subtree has height 0."""
    return 0 if node is None else node.height


def balance_factor(node: Node | None) -> int:
    """Left subtree height minus right subtree height; 0 for an empty subtree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _update_height(node: Node) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def rotate_right(node: Node) -> Node:
    """Rotate the subtree right and return its new root (the former left child)."""
    pivot = node.left
    if pivot is None:
        raise ValueError("cannot rotate right: node has no left child")
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def rotate_left(node: Node) -> Node:
    """Rotate the subtree left and return its new root (the former right child)."""
    pivot = node.right
    if pivot is None:
        raise ValueError("cannot rotate left: node has no right child")
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


class AVLTree:
    """An AVL tree of distinct values; duplicates are ignored on insertion."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Insert ``value``, rebalancing on the way up. Return False for a duplicate."""
        self.root, added = self._insert(self.root, value)
        if added:
            self._size += 1
        return added

    def _insert(self, node: Node | None, value: int) -> tuple[Node, bool]:
        if node is None:
            return Node(value), True
        if value < node.value:
            node.left, added = self._insert(node.left, value)
        elif value > node.value:
            node.right, added = self._insert(node.right, value)
        else:
            return node, False

        _update_height(node)
        balance = balance_factor(node)
        if balance > 1:
            if value > node.left.value:
                node.left = rotate_left(node.left)
            return rotate_right(node), added
        if balance < -1:
            if value < node.right.value:
                node.right = rotate_right(node.right)
            return rotate_left(node), added
        return node, added

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

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def display(self) -> str:
        """The in-order values as one space-separated line."""
        return " ".join(str(value) for value in self)

    def rotate_left_at_root(self) -> None:
        """Rotate the whole tree left once; does nothing on an empty tree."""
        if self.root is not None:
            self.root = rotate_left(self.root)

    def _checked_values(self, k: int) -> list[int]:
        values = self.inorder()
        if not 1 <= k <= len(values):
            raise ValueError(f"invalid k: {k}")
        return values

    def kth_smallest(self, k: int) -> int:
        """The k-th smallest value, counting from 1."""
        return self._checked_values(k)[k - 1]

    def kth_largest(self, k: int) -> int:
        """The k-th largest value, counting from 1."""
        return self._checked_values(k)[-k]

    def root_heights(self) -> tuple[int, int]:
        """Heights of the root's left and right subtrees."""
        if self.root is None:
            raise ValueError("Tree is empty!")
        return height(self.root.left), height(self.root.right)


def main(argv: list[str] | None = None) -> int:
    """Run the insertion, rotation and order-statistic demonstrations."""
    parser = argparse.ArgumentParser(description="AVL tree demonstrations.")
    parser.parse_args(argv)

    tree = AVLTree([50, 30, 70, 20, 40, 60, 80])
    print(tree.display())
    tree.insert(55)
    print(f"After inserting 55: {tree.display()}")
    tree.rotate_left_at_root()
    print(f"After left rotation on root: {tree.display()}")

    tree = AVLTree([10, 5, 15, 3, 7])
    print(tree.display())
    tree.insert(12)
    print(f"After inserting 12: {tree.display()}")

    tree = AVLTree([10, 5, 15, 3, 7])
    left_height, right_height = tree.root_heights()
    print(f"Left height of root: {left_height}")
    print(f"Right height of root: {right_height}")
    print(f"3th largest: {tree.kth_largest(3)}")
    print(f"2th smallest: {tree.kth_smallest(2)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())