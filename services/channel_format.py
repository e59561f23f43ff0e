"""
Channel label and frequency cell parsing.

Labels look like ``א12``: a marker character followed by the channel
number. Frequencies are read from numeric cells, or from text by taking
its leading number (``"101.5 MHz"`` parses as 101.5).
"""

import math
import re
from datetime import date, datetime, time, timedelta
from typing import Any, Optional

DEFAULT_CHANNEL_MARKER = 'א'

VALIDATION_LEGACY = 'legacy'
VALIDATION_STRICT = 'strict'
VALIDATION_MODES = (VALIDATION_LEGACY, VALIDATION_STRICT)

# Longest numeric prefix; ``Infinity`` spelled out
_FLOAT_PREFIX = re.compile(r'[+-]?(?:Infinity|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)')


def _legacy_label_check(label: str, marker: str) -> bool:
    """Character scan as the importer has always done it."""
    found_marker = False
    for char in label:
        if char == marker:
            found_marker = True
        elif found_marker:
            # Anything after the marker rejects the label, digits included
            return False
    return False


def _strict_label_check(label: str, marker: str) -> bool:
    return re.fullmatch(re.escape(marker) + r'[0-9]+', label) is not None


def is_valid_channel_label(value: Any, marker: str = DEFAULT_CHANNEL_MARKER,
                           mode: str = VALIDATION_LEGACY) -> bool:
    """
    Check whether a column-1 cell value is an acceptable channel label.

    Args:
        value: Raw cell value
        marker: Channel prefix character
        mode: 'legacy' reproduces the historical scan, which rejects every
              label (see DESIGN.md); 'strict' accepts marker + digits only

    Returns:
        True if the row may be ingested
    """
    if mode not in VALIDATION_MODES:
        raise ValueError(f"Unsupported validation mode: {mode}")

    if not isinstance(value, str) or not value.startswith(marker):
        return False

    if mode == VALIDATION_STRICT:
        return _strict_label_check(value, marker)
    return _legacy_label_check(value, marker)


def parse_channel(label: str, marker: str = DEFAULT_CHANNEL_MARKER) -> int:
    """Return the channel number following the marker."""
    return int(label[label.index(marker) + len(marker):])


def parse_float_text(text: str) -> float:
    """
    Parse the leading number in ``text``.

    Leading whitespace is ignored and trailing garbage is dropped.
    Returns NaN when no number prefix exists.
    """
    match = _FLOAT_PREFIX.match(text.lstrip())
    if not match:
        return math.nan
    return float(match.group(0).replace('Infinity', 'inf'))


def is_empty_cell(value: Any) -> bool:
    """True for cells with no value at all."""
    return value is None or value == ''


def parse_frequency(value: Any) -> float:
    """
    Convert a column-2 cell value to a frequency.

    Numbers pass through, text is prefix-parsed, anything else
    (booleans, dates, times) is NaN.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, (datetime, date, time, timedelta)):
        return math.nan
    if isinstance(value, str):
        return parse_float_text(value)
    return math.nan


def is_valid_frequency(frequency: Optional[float]) -> bool:
    """Any float except NaN; infinities are accepted."""
    return frequency is not None and not math.isnan(frequency)
