"""Tests for training entry points and the `TrainedClassifier` value."""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_check import check

from id3tree.classifier import TrainedClassifier, train, train_from_csv
from id3tree.dataset import Dataset
from id3tree.exceptions import DatasetLoadError, EmptyDatasetError, TargetColumnNotFoundError, TrainingError
from id3tree.tree.models import UNKNOWN_LABEL, DecisionNode


class TestTrain:
    """Tests for `train` and `train_from_csv`."""

    def test_train_returns_classifier(self, golf_dataset: Dataset) -> None:
        """Training should return a classifier holding the dataset and tree."""
        # Act
        classifier = train(golf_dataset)

        # Assert
        with check:
            assert isinstance(classifier, TrainedClassifier)
        with check:
            assert classifier.dataset is golf_dataset
        with check:
            assert isinstance(classifier.root, DecisionNode)
        with check:
            assert classifier.target == "Play"

    def test_train_from_csv(self, golf_csv: Path) -> None:
        """Training straight from a file should give the same tree as from rows."""
        # Act
        from_file = train_from_csv(golf_csv, "Play")

        # Assert
        with check:
            assert from_file.predict({"Outlook": "Overcast"}) == "Yes"
        with check:
            assert isinstance(from_file.root, DecisionNode)
            assert from_file.root.feature == "Outlook"

    def test_training_twice_gives_identical_trees(self, golf_csv: Path) -> None:
        """Training is deterministic."""
        assert train_from_csv(golf_csv, "Play").root == train_from_csv(golf_csv, "Play").root

    @pytest.mark.parametrize(
        ("content", "target", "expected_error"),
        [
            ("Outlook,Play\n", "Play", EmptyDatasetError),
            ("Outlook,Play\nSunny,No\n", "play", TargetColumnNotFoundError),
        ],
    )
    def test_training_failures(
        self,
        tmp_path: Path,
        content: str,
        target: str,
        expected_error: type[TrainingError],
    ) -> None:
        """Bad input should abort training with a `TrainingError` subclass.

        Args:
            tmp_path (Path): Temporary directory for the CSV file.
            content (str): File contents.
            target (str): Requested target column.
            expected_error (type[TrainingError]): Expected exception type.
        """
        # Arrange
        path = tmp_path / "bad.csv"
        path.write_text(content, encoding="utf-8")

        # Act / Assert
        with pytest.raises(expected_error):
            train_from_csv(path, target)

    def test_missing_file_fails_training(self, tmp_path: Path) -> None:
        """An unreadable file aborts training without producing a classifier."""
        with pytest.raises(DatasetLoadError):
            train_from_csv(tmp_path / "nope.csv", "Play")


class TestTrainedClassifier:
    """Tests for `TrainedClassifier` methods."""

    def test_predict_unknowns(self, golf_dataset: Dataset) -> None:
        """Unseen values and missing features fall back to `unknown`."""
        # Arrange
        classifier = train(golf_dataset)

        # Act / Assert
        with check:
            assert classifier.predict({"Outlook": "Foggy"}) == UNKNOWN_LABEL
        with check:
            assert classifier.predict({"Wind": "Weak"}) == UNKNOWN_LABEL

    def test_describe_has_heading(self, golf_dataset: Dataset) -> None:
        """The console description should put a heading above the rendering."""
        # Act
        lines = train(golf_dataset).describe().splitlines()

        # Assert
        with check:
            assert lines[0] == "Decision Tree Structure:"
        with check:
            assert set(lines[1]) == {"="}
        with check:
            assert lines[2] == "Root: Outlook"

    def test_rules(self, golf_dataset: Dataset) -> None:
        """One rule per leaf should be returned."""
        assert len(train(golf_dataset).rules()) == 5

    def test_summary(self, golf_dataset: Dataset) -> None:
        """The summary describes the golf tree and its perfect training fit."""
        # Act
        summary = train(golf_dataset).summary()

        # Assert
        with check:
            assert summary.target == "Play"
        with check:
            assert summary.sample_count == 14
        with check:
            assert summary.features_used == ["Outlook", "Humidity", "Wind"]
        with check:
            assert summary.depth == 2
        with check:
            assert summary.leaf_count == 5
        with check:
            assert summary.training_accuracy == 1.0

    def test_summary_accuracy_with_conflicting_rows(self) -> None:
        """Contradictory rows cannot all be fitted."""
        # Arrange
        dataset = Dataset.from_rows(["a", "y"], [["x", "Yes"], ["x", "Yes"], ["x", "No"], ["x", "No"]], target="y")

        # Act
        summary = train(dataset).summary()

        # Assert
        assert summary.training_accuracy == 0.5
