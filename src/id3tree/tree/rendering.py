"""Human-readable rendering of a built tree."""

from __future__ import annotations

from id3tree.tree.models import DecisionNode, LeafNode, TreeNode

_ROOT_PREFIX = "Root: "
_LEAF_PREFIX = "-> "


def render_tree(node: TreeNode, *, indent: str = "  ") -> str:
    """Render the tree as nested conditional text.

    A decision root is announced as `Root: <feature>`; each decision node then
    lists one `<feature> == <value>:` line per branch, in stored branch order,
    followed by that branch's subtree indented one level deeper. Leaves render
    as `-> <label>`.

    Args:
        node (TreeNode): Root of the tree to render.
        indent (str): Text added per nesting level.

    Returns:
        str: The rendering, lines joined with newlines.

    Examples:
        >>> from id3tree.tree.models import Branch, DecisionNode
        >>> tree = DecisionNode(
        ...     feature="Wind",
        ...     branches=[
        ...         Branch(value="Weak", child=LeafNode(prediction="Yes")),
        ...         Branch(value="Strong", child=LeafNode(prediction="No")),
        ...     ],
        ... )
        >>> print(render_tree(tree))
        Root: Wind
          Wind == Weak:
            -> Yes
          Wind == Strong:
            -> No
    """
    if isinstance(node, LeafNode):
        return f"{_LEAF_PREFIX}{node.prediction}"
    lines = [f"{_ROOT_PREFIX}{node.feature}"]
    _render_branches(node, lines, depth=1, indent=indent)
    return "\n".join(lines)


def _render_branches(node: DecisionNode, lines: list[str], *, depth: int, indent: str) -> None:
    prefix = indent * depth
    for branch in node.branches:
        lines.append(f"{prefix}{node.feature} == {branch.value}:")
        child = branch.child
        if isinstance(child, LeafNode):
            lines.append(f"{prefix}{indent}{_LEAF_PREFIX}{child.prediction}")
        else:
            _render_branches(child, lines, depth=depth + 1, indent=indent)
