"""Train on the play-golf data with logging enabled and inspect the result.

id3tree logging is disabled by default. ``enable_logging()`` returns a
``LoggingHandle`` that works as a context manager; logging is switched off
again when the block exits.

``level="DEBUG"`` shows every split and leaf the builder creates; the default
``"TRAINING"`` level only reports when training starts and ends.
"""

from pathlib import Path

from id3tree import enable_logging, train_from_csv

DATA_PATH = Path(__file__).parent / "data" / "golf.csv"

with enable_logging(level="DEBUG"):
    classifier = train_from_csv(DATA_PATH, "Play")

print(classifier.dataset.summary())
print()
print(classifier.describe())
print()

for rule in classifier.rules():
    print(f"{rule}  (samples={rule.samples}, confidence={rule.confidence:.2f})")
print()

print(classifier.summary().model_dump_json(indent=2))

for instance in (
    {"Outlook": "Overcast"},
    {"Outlook": "Sunny", "Humidity": "Normal"},
    {"Outlook": "Foggy"},
    {"Wind": "Weak"},
):
    print(f"{instance} -> {classifier.predict(instance)}")
