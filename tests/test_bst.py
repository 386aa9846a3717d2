from hypothesis import given
from hypothesis import strategies as st

from avlkit.bst import BinarySearchTree, main


def _check_heights(node):
    """Verify every stored height; return the subtree height."""
    if node is None:
        return 0
    left = _check_heights(node.left)
    right = _check_heights(node.right)
    assert node.height == 1 + max(left, right)
    return node.height


def _check_order(node, low=None, high=None):
    if node is None:
        return
    assert low is None or node.value > low
    assert high is None or node.value < high
    _check_order(node.left, low, node.value)
    _check_order(node.right, node.value, high)


@given(st.lists(st.integers(-500, 500), max_size=60))
def test_insert_keeps_sorted_unique(values):
    tree = BinarySearchTree(values)
    assert tree.inorder() == sorted(set(values))
    assert list(tree) == tree.inorder()
    assert _check_heights(tree.root) == tree.height()


def test_insert_reports_duplicates():
    tree = BinarySearchTree([3])
    assert tree.insert(3) is False
    assert tree.insert(4) is True
    assert tree.inorder() == [3, 4]


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.height() == 0
    assert tree.inorder() == []
    tree.to_avl()
    assert tree.root is None


def test_sorted_insertion_makes_a_chain():
    values = list(range(5000))
    tree = BinarySearchTree(values)
    assert tree.height() == len(values)
    assert tree.inorder() == values


@given(st.lists(st.integers(-500, 500), max_size=60))
def test_to_avl_preserves_order_and_heights(values):
    tree = BinarySearchTree(values)
    before_height = tree.height()
    tree.to_avl()
    assert tree.inorder() == sorted(set(values))
    _check_order(tree.root)
    assert _check_heights(tree.root) == tree.height()
    assert tree.height() <= before_height


def test_to_avl_on_three_chain():
    tree = BinarySearchTree([1, 2, 3])
    tree.to_avl()
    assert tree.root.value == 2
    assert tree.height() == 2


def test_to_avl_example_keeps_listing():
    tree = BinarySearchTree([10, 16, 12, 18])
    tree.to_avl()
    assert tree.inorder() == [10, 12, 16, 18]
    assert tree.root.value == 16


def test_to_avl_on_long_chain_is_iterative():
    values = list(range(3000))
    tree = BinarySearchTree(values)
    tree.to_avl()
    assert tree.inorder() == values
    assert tree.height() < len(values)


def test_main_prints_listing_twice(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["10 12 16 18", "10 12 16 18"]