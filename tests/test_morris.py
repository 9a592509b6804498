from algocollect.binary_tree import TreeNode
from algocollect.morris import LevelOrderTree, morris_inorder


def build(values):
    tree = LevelOrderTree()
    for value in values:
        tree.insert(value)
    return tree


def test_seven_node_complete_tree():
    tree = build(range(1, 8))
    assert morris_inorder(tree.root) == [4, 2, 5, 1, 6, 3, 7]


def test_traversal_leaves_tree_unchanged():
    tree = build(range(1, 8))
    first = morris_inorder(tree.root)
    second = morris_inorder(tree.root)
    assert first == second
    assert tree.root.left.left.right is None
    assert tree.root.right.right.right is None


def test_empty_tree():
    assert morris_inorder(None) == []


def test_level_order_placement():
    tree = build([1, 2, 3, 4])
    assert tree.root.value == 1
    assert tree.root.left.value == 2
    assert tree.root.right.value == 3
    assert tree.root.left.left.value == 4


def test_insert_returns_new_node():
    tree = build([1])
    node = tree.insert(2)
    assert tree.root.left is node
    assert node.value == 2


def test_search_tree_inorder_is_sorted():
    root = TreeNode(
        8,
        TreeNode(3, TreeNode(1), TreeNode(6, TreeNode(4), TreeNode(7))),
        TreeNode(10, None, TreeNode(14, TreeNode(13))),
    )
    assert morris_inorder(root) == sorted([8, 3, 1, 6, 4, 7, 10, 14, 13])


def test_traversal_visits_every_value():
    values = list(range(20))
    tree = build(values)
    assert sorted(morris_inorder(tree.root)) == values