"""Line-based interactive prediction session and command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO, get_args

from loguru import logger

from id3tree.classifier import TrainedClassifier, train_from_csv
from id3tree.config import ClassifierSettings
from id3tree.exceptions import DuplicateColumnsError, InvalidInstanceFormatError, TrainingError
from id3tree.instance import parse_instance
from id3tree.logging import LoggingHandle, LogLevel, enable_logging

_PREDICTION_PROMPT = "Enter feature values (format: feature1=value1,feature2=value2): "
_SESSION_HEADING = "Interactive Prediction Mode"
_APP_HEADING = "Decision Tree Builder"


def run_session(
    classifier: TrainedClassifier,
    input_stream: TextIO,
    output_stream: TextIO,
    *,
    quit_command: str = "quit",
) -> int:
    """Prompt for instances and print a prediction for each until told to stop.

    A malformed line prints a format notice and the prompt repeats. The loop
    ends on `quit_command` or end of input.

    Args:
        classifier (TrainedClassifier): The trained classifier to query.
        input_stream (TextIO): Source of instance lines.
        output_stream (TextIO): Destination for prompts and predictions.
        quit_command (str): Input that ends the session. Defaults to "quit".

    Returns:
        int: Number of predictions made.
    """
    _print_heading(output_stream, _SESSION_HEADING, leading_blank=True)
    print(f"Enter '{quit_command}' to exit", file=output_stream)

    predictions = 0
    while True:
        print(f"\n{_PREDICTION_PROMPT}", end="", file=output_stream, flush=True)
        line = input_stream.readline()
        if not line:
            break
        text = line.rstrip("\r\n")
        if text == quit_command:
            break
        try:
            instance = parse_instance(text)
        except InvalidInstanceFormatError as exc:
            logger.debug("Rejected instance input", text=exc.text)
            print(str(exc), file=output_stream)
            continue
        prediction = classifier.predict(instance)
        logger.debug("Prediction", instance=instance, prediction=prediction)
        print(f"Prediction: {prediction}", file=output_stream)
        predictions += 1

    return predictions


def main(
    argv: Sequence[str] | None = None,
    *,
    input_stream: TextIO | None = None,
    output_stream: TextIO | None = None,
    error_stream: TextIO | None = None,
) -> int:
    """Train from a CSV file, print the tree, then run the prediction session.

    Args:
        argv (Sequence[str] | None): Command-line arguments; defaults to
            `sys.argv[1:]`.
        input_stream (TextIO | None): Interactive input; defaults to stdin.
        output_stream (TextIO | None): Normal output; defaults to stdout.
        error_stream (TextIO | None): Error output; defaults to stderr.

    Returns:
        int: Process exit code, 0 on success and 1 when training fails.
    """
    stdin = input_stream or sys.stdin
    stdout = output_stream or sys.stdout
    stderr = error_stream or sys.stderr

    settings = ClassifierSettings()
    args = _build_parser(settings).parse_args(argv)

    logging_handle: LoggingHandle | None = None
    if args.log_level is not None:
        logging_handle = enable_logging(level=args.log_level, stream=stderr)
    try:
        _print_heading(stdout, _APP_HEADING)
        csv_path = args.csv or _ask(stdin, stdout, "Enter CSV filename: ")
        target = args.target or _ask(stdin, stdout, "Enter target column name: ")

        try:
            classifier = train_from_csv(csv_path, target, separator=args.separator)
        except (TrainingError, DuplicateColumnsError) as exc:
            print(f"Error: {exc}", file=stderr)
            return 1

        print(classifier.dataset.summary(), file=stdout)
        print(f"\n{classifier.describe()}", file=stdout)
        run_session(classifier, stdin, stdout, quit_command=args.quit_command)
        return 0
    finally:
        if logging_handle is not None:
            logging_handle.disable()


def _build_parser(settings: ClassifierSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="id3tree",
        description="Build an ID3 decision tree from a CSV file and classify instances interactively.",
    )
    parser.add_argument(
        "csv",
        nargs="?",
        type=Path,
        default=settings.csv_path,
        help="training file; prompted for when omitted",
    )
    parser.add_argument("-t", "--target", default=settings.target, help="target column name")
    parser.add_argument("--separator", default=settings.separator, help="field delimiter (default: %(default)r)")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=get_args(LogLevel.__value__),
        help="log id3tree records to stderr at this level",
    )
    parser.add_argument("--quit-command", default=settings.quit_command, help="input that ends the session")
    return parser


def _ask(input_stream: TextIO, output_stream: TextIO, prompt: str) -> str:
    print(prompt, end="", file=output_stream, flush=True)
    return input_stream.readline().strip()


def _print_heading(output_stream: TextIO, title: str, *, leading_blank: bool = False) -> None:
    if leading_blank:
        print(file=output_stream)
    print(title, file=output_stream)
    print("=" * len(title), file=output_stream)
