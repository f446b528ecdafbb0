"""Recursive ID3 tree construction."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from loguru import logger

from id3tree.dataset import Dataset
from id3tree.tree.evaluation import best_feature, class_counts, partition
from id3tree.tree.models import UNKNOWN_LABEL, Branch, DecisionNode, LeafNode, TreeNode


def build_tree(
    dataset: Dataset,
    subset: Iterable[int] | None = None,
    used_features: frozenset[str] = frozenset(),
) -> TreeNode:
    """Grow an ID3 decision tree over `subset`.

    The recursion stops at an empty subset (leaf `"unknown"`), a class-pure
    subset (leaf with that class), or when every feature has been used on the
    current path (leaf with the majority class). Otherwise the subset is split
    on the feature with the highest information gain and one child is grown
    per observed value.

    Args:
        dataset (Dataset): The training dataset.
        subset (Iterable[int] | None): Row positions to grow the tree from.
            `None` means every row.
        used_features (frozenset[str]): Features already split on along the
            path to this node. Each child receives its own extended copy.

    Returns:
        TreeNode: The root of the grown (sub)tree.
    """
    indices = list(dataset.all_indices()) if subset is None else sorted(set(subset))
    return _grow(dataset, indices, used_features, depth=0)


def majority_class(dataset: Dataset, subset: Iterable[int]) -> tuple[str, int]:
    """Return the most frequent class in `subset` and its row count.

    Ties go to the class whose first row appears earliest in `subset`.

    Args:
        dataset (Dataset): The training dataset.
        subset (Iterable[int]): Row positions, scanned in the given order.

    Returns:
        tuple[str, int]: The winning label and how many rows carry it, or
            `("unknown", 0)` for an empty subset.
    """
    label, count = UNKNOWN_LABEL, 0
    for candidate, candidate_count in class_counts(dataset, subset).items():
        if candidate_count > count:
            label, count = candidate, candidate_count
    return label, count


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _grow(
    dataset: Dataset,
    indices: Sequence[int],
    used_features: frozenset[str],
    *,
    depth: int,
) -> TreeNode:
    if not indices:
        logger.debug("Empty leaf", depth=depth)
        return LeafNode(prediction=UNKNOWN_LABEL, samples=0, confidence=0.0)

    first_label = dataset.target_value(indices[0])
    if all(dataset.target_value(row_index) == first_label for row_index in indices):
        logger.debug("Pure leaf", depth=depth, prediction=first_label, samples=len(indices))
        return LeafNode(prediction=first_label, samples=len(indices), confidence=1.0)

    feature = best_feature(dataset, indices, used_features)
    if feature is None:
        label, count = majority_class(dataset, indices)
        logger.debug("Majority leaf", depth=depth, prediction=label, samples=len(indices))
        return LeafNode(prediction=label, samples=len(indices), confidence=count / len(indices))

    groups = partition(dataset, indices, feature)
    logger.debug(
        "Split",
        depth=depth,
        feature=feature,
        values=list(groups),
    )
    child_features = used_features | {feature}
    branches = [
        Branch(value=value, child=_grow(dataset, group, child_features, depth=depth + 1))
        for value, group in groups.items()
    ]
    return DecisionNode(feature=feature, branches=branches, samples=len(indices))
