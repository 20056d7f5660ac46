import random
import struct

import pytest

from edakit.rbtree import NodeColor, NodeSide, RBTree, read_keys


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.data] + _inorder(node.right)


def _nodes(node):
    if node is None:
        return []
    return [node] + _nodes(node.left) + _nodes(node.right)


def test_traverse_format():
    tree = RBTree([10, 5, 15])
    assert tree.traverse() == "*10  L\n**5  L\n**15  R\n"


def test_empty_tree():
    tree = RBTree()
    assert tree.traverse() == ""
    assert tree.find(3) is None


def test_find_present_and_missing():
    tree = RBTree([8, 3, 12, 1, 5])
    assert tree.find(5).data == 5
    assert tree.find(7) is None


def test_search_order_and_links():
    rng = random.Random(11)
    values = [rng.randint(-50, 50) for _ in range(100)]
    tree = RBTree(values)
    assert _inorder(tree.root) == sorted(values)
    for node in _nodes(tree.root):
        if node.left is not None:
            assert node.left.parent is node
            assert node.left.side is NodeSide.LEFT
        if node.right is not None:
            assert node.right.parent is node
            assert node.right.side is NodeSide.RIGHT


def test_new_nodes_are_red():
    tree = RBTree([4, 2, 6])
    assert all(node.color is NodeColor.RED for node in _nodes(tree.root))
    assert tree.root.color.symbol == "R"
    assert NodeColor.BLACK.symbol == "B"


def test_read_keys_round_trip(tmp_path):
    keys = [0, 1, -1, 2**31 - 1, -(2**31), 123456]
    path = tmp_path / "keys.bin"
    path.write_bytes(struct.pack(f"<{len(keys)}i", *keys))
    assert read_keys(path) == keys


def test_read_keys_ignores_partial_trailer(tmp_path):
    keys = [7, 8, 9]
    path = tmp_path / "keys.bin"
    path.write_bytes(struct.pack("<3i", *keys) + b"\x01\x02")
    assert read_keys(str(path)) == keys


def test_read_keys_empty_file(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    assert read_keys(path) == []


def test_read_keys_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_keys(tmp_path / "absent.bin")