"""Parsing of `feature=value` instance strings typed at the prompt."""

from __future__ import annotations

from id3tree.exceptions import InvalidInstanceFormatError

_PAIR_SEPARATOR = ","
_KEY_VALUE_SEPARATOR = "="
_STRIP_CHARS = " \t"


def parse_instance(text: str) -> dict[str, str]:
    """Parse comma-separated `feature=value` pairs into an instance mapping.

    Pieces without `=` are skipped. Each pair splits at its first `=`, and
    spaces/tabs around the feature and the value are trimmed. A feature given
    twice keeps its last value.

    Args:
        text (str): Raw input, e.g. `"Outlook=Sunny, Wind = Weak"`.

    Returns:
        dict[str, str]: Feature name to value.

    Raises:
        InvalidInstanceFormatError: If no piece contains `=`.

    Examples:
        >>> parse_instance("Outlook=Sunny, Wind = Weak")
        {'Outlook': 'Sunny', 'Wind': 'Weak'}
    """
    instance: dict[str, str] = {}
    for piece in text.split(_PAIR_SEPARATOR):
        feature, separator, value = piece.partition(_KEY_VALUE_SEPARATOR)
        if not separator:
            continue
        instance[feature.strip(_STRIP_CHARS)] = value.strip(_STRIP_CHARS)
    if not instance:
        raise InvalidInstanceFormatError(text)
    return instance
