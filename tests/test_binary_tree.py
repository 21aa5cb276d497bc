from dsakit.binary_tree import (
    TreeNode,
    build_sample_tree,
    count_leaves,
    count_nodes,
    height,
    inorder,
    level_order,
    mirror,
    postorder,
    preorder,
)


def test_sample_tree_preorder():
    assert preorder(build_sample_tree()) == ["A", "B", "D", "E", "C", "F"]


def test_sample_tree_level_order():
    assert level_order(build_sample_tree()) == list("ABCDEF")


def test_sample_tree_height():
    assert height(build_sample_tree()) == 3


def test_all_traversals_visit_every_node_once():
    tree = build_sample_tree()
    expected = sorted(level_order(tree))
    assert sorted(preorder(tree)) == expected
    assert sorted(inorder(tree)) == expected
    assert sorted(postorder(tree)) == expected
    assert count_nodes(tree) == len(expected)


def test_postorder_is_reverse_of_mirrored_preorder():
    tree = build_sample_tree()
    post = postorder(tree)
    assert post[-1] == tree.value
    assert preorder(mirror(tree))[::-1] == post


def test_mirror_reverses_inorder_in_place():
    tree = build_sample_tree()
    original = inorder(tree)
    original_height = height(tree)
    assert mirror(tree) is tree
    assert inorder(tree) == original[::-1]
    assert height(tree) == original_height


def test_leaf_count_changes_with_new_children():
    tree = build_sample_tree()
    before = count_leaves(tree)
    tree.left.left.left = TreeNode("G")
    assert count_leaves(tree) == before
    tree.right.left = TreeNode("H")
    assert count_leaves(tree) == before + 1


def test_height_follows_right_only_chain():
    chain = TreeNode("r", None, TreeNode("s", None, TreeNode("t")))
    assert height(chain) == count_nodes(chain)
    assert count_leaves(chain) == count_leaves(TreeNode("t"))


def test_empty_tree():
    assert preorder(None) == []
    assert inorder(None) == []
    assert postorder(None) == []
    assert level_order(None) == []
    assert height(None) == 0
    assert count_nodes(None) == 0
    assert count_leaves(None) == 0
    assert mirror(None) is None