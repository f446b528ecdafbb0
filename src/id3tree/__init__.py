"""id3tree: ID3 decision-tree induction and classification for categorical data."""

from loguru import logger

from id3tree.classifier import TrainedClassifier, train, train_from_csv
from id3tree.dataset import Dataset
from id3tree.loader import dataset_from_frame, load_csv
from id3tree.logging import PACKAGE_NAME, enable_logging

logger.disable(PACKAGE_NAME)  # noqa: RUF067 - Disable logging for the id3tree module by default

__all__ = [
    "Dataset",
    "TrainedClassifier",
    "dataset_from_frame",
    "enable_logging",
    "load_csv",
    "train",
    "train_from_csv",
]
