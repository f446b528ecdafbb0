"""Traversal of a built tree against a single instance."""

from __future__ import annotations

from collections.abc import Mapping

from id3tree.tree.models import UNKNOWN_LABEL, LeafNode, TreeNode


def predict(node: TreeNode, instance: Mapping[str, str]) -> str:
    """Classify `instance` by walking the tree from `node` down to a leaf.

    At each decision node the instance's value for the node's feature selects
    the branch with an exactly equal value. A missing feature or a value never
    seen during training ends the walk with `"unknown"`; there is no fallback
    branch.

    Args:
        node (TreeNode): Root of the tree (or subtree) to walk.
        instance (Mapping[str, str]): Feature name to value. Extra keys are
            ignored.

    Returns:
        str: The predicted class label, or `"unknown"`.

    Examples:
        >>> from id3tree.tree.models import Branch, DecisionNode
        >>> tree = DecisionNode(
        ...     feature="Wind",
        ...     branches=[Branch(value="Weak", child=LeafNode(prediction="Yes"))],
        ... )
        >>> predict(tree, {"Wind": "Weak"})
        'Yes'
        >>> predict(tree, {"Wind": "Strong"})
        'unknown'
    """
    current: TreeNode | None = node
    while not isinstance(current, LeafNode):
        if current is None or current.feature not in instance:
            return UNKNOWN_LABEL
        current = current.child_for(instance[current.feature])
    return current.prediction
