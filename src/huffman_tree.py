from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass
class TreeNode:
    occurrence: int
    content: Optional[str] = None
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None
    # Set by the renderer; not part of the node's identity.
    level: Optional[int] = field(default=None, compare=False, repr=False)

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def label(self) -> str:
        if self.content is not None:
            return f"{self.occurrence} ( {self.content} )"
        return str(self.occurrence)

    @classmethod
    def from_entry(cls, content: str, occurrence: int) -> "TreeNode":
        return cls(occurrence=occurrence, content=content)

    @classmethod
    def parent_of(cls, right: "TreeNode", left: "TreeNode") -> "TreeNode":
        return cls(occurrence=right.occurrence + left.occurrence, left=left, right=right)


@dataclass
class Tree:
    root: Optional[TreeNode] = None


def build_huffman_tree(freqs: dict[str, int]) -> Tree:
    stack = [TreeNode.from_entry(word, n) for word, n in freqs.items()]
    if not stack:
        return Tree()

    while len(stack) > 1:
        # list.sort is stable with reverse=True too: equal occurrences keep their order.
        stack.sort(key=lambda node: node.occurrence, reverse=True)
        first = stack.pop()
        second = stack.pop()
        stack.append(TreeNode.parent_of(first, second))
    return Tree(root=stack[0])


def iter_leaves(node: Optional[TreeNode]) -> Iterator[TreeNode]:
    if node is None:
        return
    if node.is_leaf:
        yield node
        return
    yield from iter_leaves(node.left)
    yield from iter_leaves(node.right)


def iter_levels(node: Optional[TreeNode], level: int = 0) -> Iterator[tuple[TreeNode, int]]:
    """Pre-order (node, level) pairs, left before right, as the renderer visits them."""
    if node is None:
        return
    yield node, level
    yield from iter_levels(node.left, level + 1)
    yield from iter_levels(node.right, level + 1)


def depth(node: Optional[TreeNode]) -> int:
    if node is None:
        return -1
    if node.is_leaf:
        return 0
    return 1 + max(depth(node.left), depth(node.right))


def check_sums(node: Optional[TreeNode]) -> None:
    if node is None or node.is_leaf:
        return
    if node.left is None or node.right is None:
        raise ValueError(f"internal node {node.occurrence} has a single child")
    expected = node.left.occurrence + node.right.occurrence
    if node.occurrence != expected:
        raise ValueError(f"node occurrence {node.occurrence} != children sum {expected}")
    check_sums(node.left)
    check_sums(node.right)


def main() -> None:
    freqs = {"the": 3, "cat": 2, "sat": 2, "on": 1, "mat": 1}
    tree = build_huffman_tree(freqs)
    check_sums(tree.root)
    for leaf in iter_leaves(tree.root):
        print(leaf.label())
    print(f"words: {len(freqs)}; root occurrence: {tree.root.occurrence}; depth: {depth(tree.root)}")


if __name__ == "__main__":
    main()
