"""AVL trees and plain binary search trees of integers."""

__version__ = "0.1.0"
__all__ = ["avl", "bst"]