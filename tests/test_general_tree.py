import pytest

from edakit.general_tree import Tree, TreeNode


@pytest.fixture
def sample_tree():
    tree = Tree()
    tree.set_root(TreeNode(10))
    tree.insert(5, 10)
    tree.insert(6, 5)
    tree.insert(7, 10)
    tree.insert(17, 7)
    tree.insert(71, 7)
    tree.insert(41, 7)
    return tree


def test_traverse_matches_source_example(sample_tree):
    assert sample_tree.traverse() == (
        "--10 at level 1\n"
        "----7 at level 2\n"
        "------41 at level 3\n"
        "------71 at level 3\n"
        "------17 at level 3\n"
        "----5 at level 2\n"
        "------6 at level 3\n"
    )


def test_children_of_root(sample_tree):
    node = sample_tree.find(10)
    assert [child.data for child in node.children] == [7, 5]


def test_find_nested_and_missing(sample_tree):
    node = sample_tree.find(71)
    assert node.data == 71
    assert node.parent.data == 7
    assert sample_tree.find(999) is None


def test_insert_with_missing_parent_changes_nothing(sample_tree):
    before = sample_tree.traverse()
    assert sample_tree.insert(3, 999) is None
    assert sample_tree.traverse() == before


def test_insert_returns_new_node(sample_tree):
    node = sample_tree.insert(8, 6)
    assert node.data == 8
    assert sample_tree.find(8) is node


def test_set_root_keeps_first_root():
    tree = Tree()
    first = TreeNode(1)
    tree.set_root(first)
    tree.set_root(TreeNode(2))
    assert tree.root is first


def test_empty_tree():
    tree = Tree()
    assert tree.traverse() == ""
    assert tree.find(1) is None
    assert tree.insert(1, 1) is None


def test_remove_and_find_child():
    node = TreeNode(1)
    for value in (2, 3, 2, 4):
        node.add_child(TreeNode(value))
    assert [child.data for child in node.children] == [4, 2, 3, 2]
    assert node.find_child(3).data == 3
    node.remove_child(2)
    assert [child.data for child in node.children] == [4, 3]
    assert node.find_child(2) is None