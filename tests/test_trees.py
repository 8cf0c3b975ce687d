import pytest

from algoset.trees import ContaminatedTree, TreeNode, recover_from_preorder


def _serialise(node, depth=0):
    if node is None:
        return ""
    return (
        "-" * depth
        + str(node.val)
        + _serialise(node.left, depth + 1)
        + _serialise(node.right, depth + 1)
    )


def _size(node):
    return 0 if node is None else 1 + _size(node.left) + _size(node.right)


@pytest.mark.parametrize(
    "traversal",
    [
        "1-2--3--4-5--6--7",
        "1-2--3---4-5--6---7",
        "1-401--349---90--88",
        "42",
        "7-8",
    ],
)
def test_round_trip(traversal):
    assert _serialise(recover_from_preorder(traversal)) == traversal


def test_structure_of_example():
    root = recover_from_preorder("1-2--3--4-5--6--7")
    assert root.val == 1
    assert (root.left.val, root.right.val) == (2, 5)
    assert (root.left.left.val, root.left.right.val) == (3, 4)
    assert (root.right.left.val, root.right.right.val) == (6, 7)


def test_single_child_is_left():
    root = recover_from_preorder("1-2--3")
    assert root.right is None
    assert root.left.right is None
    assert root.left.left.val == 3


def test_empty_traversal():
    assert recover_from_preorder("") is None


def test_depth_jump_stops_parsing():
    root = recover_from_preorder("1---2")
    assert root == TreeNode(1)


@pytest.mark.parametrize("traversal", ["1-x", "1-", "a", "1--"])
def test_malformed_traversal(traversal):
    with pytest.raises(ValueError):
        recover_from_preorder(traversal)


def _full_tree(depth):
    if depth < 0:
        return None
    return TreeNode(-1, _full_tree(depth - 1), _full_tree(depth - 1))


@pytest.mark.parametrize("depth", [0, 1, 2, 4])
def test_full_tree_recovers_consecutive_values(depth):
    root = _full_tree(depth)
    tree = ContaminatedTree(root)
    count = _size(root)
    assert all(tree.find(value) for value in range(count))
    assert not tree.find(count)
    assert len(tree) == count


def test_right_only_chain():
    tree = ContaminatedTree(TreeNode(-1, None, TreeNode(-1, None, TreeNode(-1))))
    values = [0]
    for _ in range(2):
        values.append(2 * values[-1] + 2)
    assert all(value in tree for value in values)
    assert not tree.find(1)
    assert len(tree) == len(values)


def test_empty_tree_finds_nothing():
    tree = ContaminatedTree(None)
    assert not tree.find(0)
    assert len(tree) == 0


def test_recovered_tree_from_traversal():
    root = recover_from_preorder("1-2--3")
    tree = ContaminatedTree(root)
    assert tree.find(0) and tree.find(1) and tree.find(3)
    assert not tree.find(2)