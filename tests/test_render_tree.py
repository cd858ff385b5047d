from huffman_tree import Tree, TreeNode, build_huffman_tree, iter_levels
from render_tree import render_node, render_tree

SENTENCE_TREE = (
    "9\n"
    "| \n+- 5\n"
    "| | \n| +- 3 ( the )\n"
    "| | \n| +- 2 ( cat )\n"
    "| \n+- 4\n"
    "| | \n| +- 2 ( sat )\n"
    "| | \n| +- 2\n"
    "| | | \n| | +- 1 ( on )\n"
    "| | | \n| | +- 1 ( mat )\n"
)


def test_empty_tree_renders_empty():
    assert render_tree(Tree()) == ""
    assert render_tree(None) == ""
    assert render_node(None) == ""


def test_single_leaf():
    assert render_tree(Tree(root=TreeNode(occurrence=3, content="hi"))) == "3 ( hi )\n"


def test_two_leaves():
    tree = build_huffman_tree({"a": 2, "b": 2})
    assert render_tree(tree) == "4\n| \n+- 2 ( a )\n| \n+- 2 ( b )\n"


def test_sentence_tree():
    tree = build_huffman_tree({"the": 3, "cat": 2, "sat": 2, "on": 1, "mat": 1})
    assert render_tree(tree) == SENTENCE_TREE


def test_grandchild_prefix():
    tree = build_huffman_tree({"the": 3, "cat": 2, "sat": 2, "on": 1, "mat": 1})
    lines = render_tree(tree).splitlines()
    i = lines.index("| +- 3 ( the )")
    assert lines[i - 1] == "| | "


def test_render_sets_levels():
    tree = build_huffman_tree({"the": 3, "cat": 2, "sat": 2, "on": 1, "mat": 1})
    render_tree(tree)
    for node, level in iter_levels(tree.root):
        assert node.level == level


def test_render_node_at_depth():
    assert render_node(TreeNode(occurrence=1, content="x"), 2) == "| | \n| +- 1 ( x )\n"
