# avlkit

avlkit provides two small binary tree structures for integers. It has no dependencies.

- `avlkit.avl.AVLTree` is a self-balancing AVL tree. It rebalances on every insert.
- `avlkit.bst.BinarySearchTree` is a plain, unbalanced binary search tree. It can be rebalanced into AVL shape when you ask for it.

Both trees ignore duplicate values. `insert` returns `False` when the value is already present and `True` when it was added.

## Installation

```
pip install avlkit
```

## AVL trees

```python
from avlkit.avl import AVLTree

tree = AVLTree([10, 5, 15, 3, 7])
tree.insert(12)

print(tree.inorder())         # [3, 5, 7, 10, 12, 15]
print(tree.display())         # "3 5 7 10 12 15"
print(len(tree), 7 in tree)   # 6 True
print(tree.kth_smallest(2))   # 5
print(tree.kth_largest(3))    # 10
print(tree.root_heights())    # (left subtree height, right subtree height)
```

Iterating over a tree yields its values in ascending order.

The following calls raise `ValueError`:

- `kth_smallest(k)` and `kth_largest(k)` when `k` is outside `1..len(tree)`.
- `root_heights()` on an empty tree.

`rotate_left_at_root()` performs a single left rotation at the root. It does nothing on an empty tree. It raises `ValueError` if the root has no right child. After the rotation the tree keeps its order, but it may no longer be balanced.

The module `avlkit.avl` also has helpers that work on `Node` objects directly:

- `height(node)` returns the height of a node, and 0 for `None`.
- `balance_factor(node)` returns the left height minus the right height.
- `rotate_left(node)` and `rotate_right(node)` each return the new subtree root. They raise `ValueError` when the child they need is missing.

## Binary search trees

```python
from avlkit.bst import BinarySearchTree

bst = BinarySearchTree([10, 16, 12, 18])
print(bst.inorder(), bst.height())   # [10, 12, 16, 18] 3
bst.to_avl()                         # rebalance in place
print(bst.inorder(), bst.height())
```

`to_avl()` makes one post-order pass over the tree and applies AVL rotations at each node along the way.

## Command line

There are two demonstration commands. Each prints sample trees to standard output:

```
avlkit-avl
avlkit-bst
```

## Limitations

The trees support insertion, membership tests and traversal only. There is no deletion, and values are not stored to disk.

## Running the tests

```
pip install "avlkit[test]"
pytest
```