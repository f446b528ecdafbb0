"""Training entry points and the trained classifier value."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from id3tree.dataset import Dataset
from id3tree.loader import load_csv
from id3tree.logging import TRAINING_LEVEL
from id3tree.tree.building import build_tree
from id3tree.tree.models import ClassificationRule, LeafNode, TrainingSummary, TreeNode
from id3tree.tree.prediction import predict
from id3tree.tree.rendering import render_tree
from id3tree.tree.rules import extract_rules, features_used, leaf_count, tree_depth

_TREE_HEADING = "Decision Tree Structure:"


@dataclass(frozen=True)
class TrainedClassifier:
    """A built ID3 tree together with the dataset it was trained on.

    Both members are read-only, so one classifier can serve any number of
    predictions without locking.

    Attributes:
        dataset (Dataset): The training data.
        root (TreeNode): Root of the built tree.
    """

    dataset: Dataset
    root: TreeNode

    @property
    def target(self) -> str:
        return self.dataset.target

    def predict(self, instance: Mapping[str, str]) -> str:
        """Classify `instance`; unseen values and missing features give `"unknown"`."""
        return predict(self.root, instance)

    def render(self) -> str:
        """Return the nested conditional text of the tree."""
        return render_tree(self.root)

    def describe(self) -> str:
        """Return the tree rendering under a heading, as shown on the console."""
        return "\n".join([_TREE_HEADING, "=" * len(_TREE_HEADING), self.render()])

    def rules(self) -> list[ClassificationRule]:
        """Return one rule per leaf, in rendering order."""
        return extract_rules(self.root)

    def summary(self) -> TrainingSummary:
        """Describe the tree's shape and how well it fits its own training rows."""
        correct = sum(
            predict(self.root, dict(zip(self.dataset.headers, row, strict=False))) == self.dataset.target_value(index)
            for index, row in enumerate(self.dataset.rows)
        )
        return TrainingSummary(
            target=self.target,
            sample_count=len(self.dataset),
            features_used=features_used(self.root),
            depth=tree_depth(self.root),
            leaf_count=leaf_count(self.root),
            training_accuracy=round(correct / len(self.dataset), 4),
        )


def train(dataset: Dataset) -> TrainedClassifier:
    """Grow an ID3 tree over every row of `dataset`.

    Args:
        dataset (Dataset): Validated training data.

    Returns:
        TrainedClassifier: The trained classifier.
    """
    logger.log(TRAINING_LEVEL, "Training started", target=dataset.target, rows=len(dataset))
    root = build_tree(dataset)
    logger.log(
        TRAINING_LEVEL,
        "Training finished",
        target=dataset.target,
        root=root.prediction if isinstance(root, LeafNode) else root.feature,
        leaves=leaf_count(root),
        depth=tree_depth(root),
    )
    return TrainedClassifier(dataset=dataset, root=root)


def train_from_csv(path: str | Path, target: str, *, separator: str = ",") -> TrainedClassifier:
    """Load a delimited file and train a classifier on it.

    Args:
        path (str | Path): Location of the training file.
        target (str): Target column name.
        separator (str): Field delimiter. Defaults to ",".

    Returns:
        TrainedClassifier: The trained classifier.

    Raises:
        TrainingError: If the file cannot be loaded, holds no rows, or lacks
            the target column.
        DuplicateColumnsError: If a header name repeats.
    """
    return train(load_csv(path, target, separator=separator))
