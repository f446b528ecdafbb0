"""Rule extraction and structural statistics for a built tree."""

from __future__ import annotations

from id3tree.tree.models import ClassificationRule, DecisionNode, LeafNode, Predicate, TreeNode


def extract_rules(node: TreeNode) -> list[ClassificationRule]:
    """Turn every root-to-leaf path into a rule.

    Rules are listed in depth-first order following the stored branch order,
    which is the order the renderer prints the leaves in.

    Args:
        node (TreeNode): Root of the tree.

    Returns:
        list[ClassificationRule]: One rule per leaf.
    """
    rules: list[ClassificationRule] = []
    _walk_tree(node, path_predicates=[], rules=rules)
    return rules


def tree_depth(node: TreeNode) -> int:
    """Return the number of decision nodes on the longest root-to-leaf path."""
    if isinstance(node, LeafNode):
        return 0
    return 1 + max(tree_depth(branch.child) for branch in node.branches)


def leaf_count(node: TreeNode) -> int:
    """Return the number of leaves under `node` (1 for a leaf)."""
    if isinstance(node, LeafNode):
        return 1
    return sum(leaf_count(branch.child) for branch in node.branches)


def features_used(node: TreeNode) -> list[str]:
    """Return the features split on anywhere in the tree, in first-visited order."""
    seen: dict[str, None] = {}
    stack: list[TreeNode] = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, DecisionNode):
            seen.setdefault(current.feature, None)
            stack.extend(branch.child for branch in reversed(current.branches))
    return list(seen)


def _walk_tree(
    node: TreeNode,
    *,
    path_predicates: list[Predicate],
    rules: list[ClassificationRule],
) -> None:
    if isinstance(node, LeafNode):
        rules.append(
            ClassificationRule(
                predicates=path_predicates,
                prediction=node.prediction,
                samples=node.samples,
                confidence=node.confidence,
            )
        )
        return
    for branch in node.branches:
        predicate = Predicate(variable=node.feature, value=branch.value)
        _walk_tree(branch.child, path_predicates=[*path_predicates, predicate], rules=rules)
