"""Split a raw METAR into groups."""

from typing import Tuple

_REPORT_TYPE_PREFIXES = ("METAR", "SPECI")


def tokenize(raw_text: str) -> Tuple[str, ...]:
    """
    Split a report into its whitespace-delimited groups.

    A leading "METAR" or "SPECI" word is dropped so the station identifier
    is always the first group.

    Args:
        raw_text: Raw report, e.g. "KTIK 251753Z 04009KT 10SM OVC037 01/M04 A3010"

    Returns:
        Tuple of groups, station identifier first
    """
    tokens = raw_text.upper().split()
    if tokens and tokens[0] in _REPORT_TYPE_PREFIXES:
        tokens = tokens[1:]
    return tuple(tokens)
