"""Pydantic tree nodes and rule models for the ID3 tree."""

from __future__ import annotations

from typing import Final, Literal

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Public constants and type aliases
# ---------------------------------------------------------------------------

UNKNOWN_LABEL: Final[str] = "unknown"

type PredicateOp = Literal["=="]

type TreeNode = LeafNode | DecisionNode

# ---------------------------------------------------------------------------
# Public models -- Tree nodes
# ---------------------------------------------------------------------------


class LeafNode(BaseModel, frozen=True):
    """Terminal node holding a predicted class label.

    Attributes:
        node_type (Literal["leaf"]): Discriminator field; always `"leaf"`.
        prediction (str): Class label returned for instances reaching this
            leaf, or `"unknown"` when no training row reached it.
        samples (int): Number of training rows that reached this leaf.
        confidence (float): Fraction of those rows whose class equals
            `prediction`; 0.0 for an empty leaf.
    """

    node_type: Literal["leaf"] = Field(default="leaf", description='Discriminator field. Always "leaf".')
    prediction: str = Field(description="Predicted class label, or 'unknown' for an empty training subset.")
    samples: int = Field(default=0, ge=0, description="Number of training rows that reached this leaf.")
    confidence: float = Field(
        default=1.0,
        ge=0.0,
        le=1.0,
        description="Fraction of rows at this leaf belonging to the predicted class.",
    )


class Branch(BaseModel, frozen=True):
    """An edge from a decision node to the child chosen for one feature value.

    Attributes:
        value (str): The feature value that selects this branch (exact,
            case-sensitive match).
        child (TreeNode): The subtree for rows carrying `value`.
    """

    value: str = Field(description="Feature value selecting this branch.")
    child: LeafNode | DecisionNode = Field(
        discriminator="node_type",
        description="Subtree for rows carrying this value.",
    )


class DecisionNode(BaseModel, frozen=True):
    """Internal node that splits on one categorical feature.

    Branches are stored in the order their values were first encountered
    while scanning the training rows at this node in increasing row order;
    prediction and rendering both follow that order.

    Attributes:
        node_type (Literal["decision"]): Discriminator field; always
            `"decision"`.
        feature (str): Feature column this node splits on.
        branches (list[Branch]): One branch per distinct value of `feature`
            seen in the training subset at this node.
        samples (int): Number of training rows that reached this node.
    """

    node_type: Literal["decision"] = Field(default="decision", description='Discriminator field. Always "decision".')
    feature: str = Field(description="Feature column this node splits on.")
    branches: list[Branch] = Field(min_length=1, description="One branch per observed value of the feature.")
    samples: int = Field(default=0, ge=0, description="Number of training rows that reached this node.")

    def child_for(self, value: str) -> TreeNode | None:
        """Return the child whose branch value equals `value`, or None if unseen."""
        for branch in self.branches:
            if branch.value == value:
                return branch.child
        return None


# Branch and DecisionNode reference each other; resolve both once defined.
Branch.model_rebuild()
DecisionNode.model_rebuild()

# ---------------------------------------------------------------------------
# Public models -- Rules
# ---------------------------------------------------------------------------


class Predicate(BaseModel, frozen=True):
    """A single equality condition on one categorical feature.

    Examples:
        >>> p = Predicate(variable="Outlook", value="Sunny")
        >>> str(p)
        'Outlook == Sunny'
    """

    variable: str = Field(description="Feature name the condition applies to, e.g. 'Outlook'.")
    operator: PredicateOp = Field(default="==", description="Comparison operator. Only equality is supported.")
    value: str = Field(description="Category the feature must equal.")

    def __str__(self) -> str:
        return f"{self.variable} {self.operator} {self.value}"


class ClassificationRule(BaseModel):
    """A root-to-leaf path of the tree expressed as a rule.

    Attributes:
        predicates (list[Predicate]): Conditions along the path from the root
            to the leaf. Empty when the whole tree is a single leaf.
        prediction (str): Class label at the leaf.
        samples (int): Number of training rows that reached the leaf.
        confidence (float): Share of those rows in the predicted class.

    Examples:
        >>> rule = ClassificationRule(
        ...     predicates=[Predicate(variable="Outlook", value="Overcast")],
        ...     prediction="Yes",
        ...     samples=4,
        ...     confidence=1.0,
        ... )
        >>> str(rule)
        'IF Outlook == Overcast THEN Yes'
    """

    predicates: list[Predicate] = Field(description="Conditions along the root-to-leaf path.")
    prediction: str = Field(description="Class label at the leaf.")
    samples: int = Field(ge=0, description="Number of training rows that reached the leaf.")
    confidence: float = Field(ge=0.0, le=1.0, description="Share of rows at the leaf in the predicted class.")

    def __str__(self) -> str:
        if not self.predicates:
            return f"ALWAYS {self.prediction}"
        conditions = " AND ".join(str(predicate) for predicate in self.predicates)
        return f"IF {conditions} THEN {self.prediction}"


class TrainingSummary(BaseModel):
    """Structured description of a trained classifier.

    Attributes:
        target (str): Target column the tree predicts.
        sample_count (int): Number of training rows.
        features_used (list[str]): Features that appear in at least one
            decision node, in the order they are first visited.
        depth (int): Number of decision levels on the longest path.
        leaf_count (int): Number of leaves.
        training_accuracy (float): Share of training rows the tree classifies
            correctly.
    """

    target: str = Field(description="Target column the tree predicts.")
    sample_count: int = Field(ge=1, description="Number of training rows.")
    features_used: list[str] = Field(description="Features used by at least one decision node.")
    depth: int = Field(ge=0, description="Number of decision levels on the longest path.")
    leaf_count: int = Field(ge=1, description="Number of leaves.")
    training_accuracy: float = Field(ge=0.0, le=1.0, description="Share of training rows classified correctly.")
