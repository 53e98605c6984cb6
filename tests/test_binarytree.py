import pytest

from dsworkbench.binarytree import (
    Node,
    depth,
    find,
    inorder,
    is_complete,
    leaf_count,
    level_count,
    level_order,
    postorder,
    preorder,
    tree_size,
)


def make_tree(with_seven=False):
    n = {i: Node(i) for i in range(1, 8)}
    n[1].left = n[2]
    n[1].right = n[4]
    n[2].left = n[3]
    if with_seven:
        n[2].right = n[7]
    n[4].left = n[5]
    n[4].right = n[6]
    return n[1]


def test_counts_from_source_example():
    root = make_tree()
    assert tree_size(root) == 6
    assert leaf_count(root) == 3
    assert level_count(root, 2) == 2
    assert depth(root) == 3


def test_traversals_cover_all_values():
    root = make_tree()
    for traversal in (preorder, inorder, postorder):
        values = [v for v in traversal(root) if v is not None]
        assert sorted(values) == [1, 2, 3, 4, 5, 6]
        assert traversal(root).count(None) == tree_size(root) + 1


def test_traversal_orders():
    root = make_tree()
    assert preorder(root)[0] == 1
    assert postorder(root)[-1] == 1
    assert [v for v in inorder(root) if v is not None] == [3, 2, 1, 5, 4, 6]


def test_level_order():
    assert level_order(make_tree()) == [1, 2, 4, 3, 5, 6]
    assert level_order(None) == []


def test_empty_tree():
    assert preorder(None) == [None]
    assert tree_size(None) == 0
    assert leaf_count(None) == 0
    assert depth(None) == 0
    assert level_count(None, 1) == 0
    assert is_complete(None) is True


def test_level_count_sums_to_size():
    root = make_tree()
    total = sum(level_count(root, k) for k in range(1, depth(root) + 1))
    assert total == tree_size(root)
    assert level_count(root, depth(root) + 1) == 0


def test_level_count_rejects_nonpositive_level():
    with pytest.raises(ValueError):
        level_count(make_tree(), 0)


def test_find():
    root = make_tree()
    node = find(root, 5)
    assert node is root.right.left
    assert node.value == 5
    assert find(root, 42) is None


def test_find_returns_first_in_preorder():
    root = Node("A", Node("B", Node("X")), Node("X"))
    assert find(root, "X") is root.left.left


def test_is_complete():
    assert is_complete(make_tree()) is False
    assert is_complete(make_tree(with_seven=True)) is True
    assert is_complete(Node(1, Node(2))) is True
    assert is_complete(Node(1, None, Node(2))) is False


def test_leaf_count_single_node():
    assert leaf_count(Node("A")) == 1
    assert depth(Node("A")) == 1