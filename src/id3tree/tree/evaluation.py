"""Entropy, information gain, and best-feature selection over index subsets."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy as np

from id3tree.dataset import Dataset

# ---------------------------------------------------------------------------
# Public interface -- Grouping
# ---------------------------------------------------------------------------


def class_counts(dataset: Dataset, subset: Iterable[int]) -> dict[str, int]:
    """Count target classes over `subset`.

    Args:
        dataset (Dataset): The training dataset.
        subset (Iterable[int]): Row positions to count.

    Returns:
        dict[str, int]: Class label to row count, ordered by the first row in
            `subset` carrying each label.
    """
    counts: dict[str, int] = {}
    for row_index in subset:
        label = dataset.target_value(row_index)
        counts[label] = counts.get(label, 0) + 1
    return counts


def partition(dataset: Dataset, subset: Iterable[int], column: str) -> dict[str, list[int]]:
    """Group row positions by their value in `column`.

    Dict insertion order records encounter order, so scanning `subset` in
    increasing index order yields groups in first-encountered value order.

    Args:
        dataset (Dataset): The training dataset.
        subset (Iterable[int]): Row positions to group.
        column (str): Column whose values define the groups.

    Returns:
        dict[str, list[int]]: Value to the row positions carrying it, each
            list in the order rows were scanned.
    """
    groups: dict[str, list[int]] = {}
    for row_index in subset:
        groups.setdefault(dataset.value_at(row_index, column), []).append(row_index)
    return groups


# ---------------------------------------------------------------------------
# Public interface -- Entropy and gain
# ---------------------------------------------------------------------------


def entropy(dataset: Dataset, subset: Sequence[int]) -> float:
    """Compute the base-2 Shannon entropy of the target classes in `subset`.

    Args:
        dataset (Dataset): The training dataset.
        subset (Sequence[int]): Row positions under consideration.

    Returns:
        float: Entropy in bits. 0.0 for an empty or class-pure subset, 1.0 for
            an even two-class split, never negative.

    Examples:
        >>> ds = Dataset.from_rows(["f", "y"], [["a", "Yes"], ["b", "No"]], target="y")
        >>> entropy(ds, [0, 1])
        1.0
        >>> entropy(ds, [])
        0.0
    """
    if len(subset) == 0:
        return 0.0
    counts = np.fromiter(class_counts(dataset, subset).values(), dtype=np.float64)
    # Every counted class has at least one row, so no probability is zero here.
    probabilities = counts / len(subset)
    # Correctly rounded sum: the result must not depend on class order.
    value = -math.fsum(probabilities * np.log2(probabilities))
    return value if value > 0.0 else 0.0


def information_gain(dataset: Dataset, subset: Sequence[int], feature: str) -> float:
    """Compute the entropy reduction from splitting `subset` on `feature`.

    Args:
        dataset (Dataset): The training dataset.
        subset (Sequence[int]): Row positions under consideration.
        feature (str): Candidate feature column.

    Returns:
        float: Parent entropy minus the size-weighted entropy of each value
            group. Never negative.
    """
    if len(subset) == 0:
        return 0.0
    parent_entropy = entropy(dataset, subset)
    total = len(subset)
    # Correctly rounded sum: the result must not depend on group order.
    weighted_entropy = math.fsum(
        len(group) / total * entropy(dataset, group) for group in partition(dataset, subset, feature).values()
    )
    # Float rounding can leave a tiny negative residue when the split is useless.
    gain = parent_entropy - weighted_entropy
    return gain if gain > 0.0 else 0.0


def best_feature(
    dataset: Dataset,
    subset: Sequence[int],
    used_features: frozenset[str] | set[str],
) -> str | None:
    """Pick the eligible feature with the highest information gain.

    Eligible features are all non-target columns not in `used_features`. Ties
    go to the feature that comes first in header order.

    Args:
        dataset (Dataset): The training dataset.
        subset (Sequence[int]): Row positions under consideration.
        used_features (frozenset[str] | set[str]): Features already split on
            along the current root-to-node path.

    Returns:
        str | None: The winning feature name, or None when no feature is
            eligible.
    """
    winner: str | None = None
    winner_gain = -1.0
    for feature in dataset.feature_columns:
        if feature in used_features:
            continue
        gain = information_gain(dataset, subset, feature)
        if gain > winner_gain:
            winner, winner_gain = feature, gain
    return winner
