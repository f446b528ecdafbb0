"""Decision tree sub-package: node models, evaluation, building, prediction, and rendering."""

from __future__ import annotations

from id3tree.tree.building import build_tree, majority_class
from id3tree.tree.evaluation import best_feature, class_counts, entropy, information_gain, partition
from id3tree.tree.models import (
    UNKNOWN_LABEL,
    Branch,
    ClassificationRule,
    DecisionNode,
    LeafNode,
    Predicate,
    PredicateOp,
    TrainingSummary,
    TreeNode,
)
from id3tree.tree.prediction import predict
from id3tree.tree.rendering import render_tree
from id3tree.tree.rules import extract_rules, features_used, leaf_count, tree_depth

__all__ = [
    "UNKNOWN_LABEL",
    "Branch",
    "ClassificationRule",
    "DecisionNode",
    "LeafNode",
    "Predicate",
    "PredicateOp",
    "TrainingSummary",
    "TreeNode",
    "best_feature",
    "build_tree",
    "class_counts",
    "entropy",
    "extract_rules",
    "features_used",
    "information_gain",
    "leaf_count",
    "majority_class",
    "partition",
    "predict",
    "render_tree",
    "tree_depth",
]
