# This module turns the free-form deposits text field into a number the record store can accept.
# It exists so the acceptance rule lives in one place and can be tested without the UI.
# Parsing reads the longest numeric prefix, the way browser number inputs are commonly parsed.
# Anything that is not a finite positive number is rejected quietly with no state change.

from __future__ import annotations

import logging
import math
import re

LOGGER = logging.getLogger("deposits")

_FLOAT_PREFIX_RE = re.compile(
    r"""
    [+-]?
    (?:
        Infinity
        |
        (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
    )
    """,
    re.VERBOSE | re.ASCII,
)


def parse_float_prefix(text: str | None) -> float | None:
    """Parse the leading number in `text`, ignoring any trailing characters.

    Returns ``None`` when the text does not start with a number. ``"12abc"``
    parses as ``12.0``; ``"abc12"`` does not parse.
    """

    if text is None:
        return None
    match = _FLOAT_PREFIX_RE.match(text.lstrip())
    if match is None:
        return None
    token = match.group(0)
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def parse_deposits_input(text: str | None) -> float | None:
    """Return the deposits value if the text holds a finite number above zero."""

    value = parse_float_prefix(text)
    if value is None or not math.isfinite(value) or value <= 0:
        LOGGER.debug("deposits input rejected raw=%r", text)
        return None
    return value
