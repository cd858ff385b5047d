from __future__ import annotations

from typing import Optional

from huffman_tree import Tree, TreeNode

INDENT = "| "
CONNECTOR = "+- "


def render_node(node: Optional[TreeNode], level: int = 0) -> str:
    """Render `node` and its subtree, left child first.

    Every node gets its own bar line followed by a connector line, e.g. a
    child at level 2 reads ``"| | \\n| +- 3 ( the )\\n"``. The root has no
    connector. Visited nodes have ``level`` set as a side effect.
    """
    if node is None:
        return ""

    node.level = level
    connector = f"\n{INDENT * (level - 1)}{CONNECTOR}" if level > 0 else ""
    return (
        f"{INDENT * level}{connector}{node.label()}\n"
        f"{render_node(node.left, level + 1)}"
        f"{render_node(node.right, level + 1)}"
    )


def render_tree(tree: Optional[Tree]) -> str:
    if tree is None:
        return ""
    return render_node(tree.root, 0)
