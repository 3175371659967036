"""Turning user-typed text into keys.

The engine trusts its callers to hand it valid integers; this is where text
from an input box is checked before that happens.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[,\s]+")


class InvalidKeyError(ValueError):
    """Text that does not name an integer key."""


def parse_key(text: str) -> int:
    """Parse a single integer key.

    Surrounding whitespace is ignored.

    Raises:
        InvalidKeyError: If ``text`` is not an integer literal.
    """
    try:
        return int(text.strip())
    except ValueError:
        raise InvalidKeyError(f"not an integer key: {text!r}") from None


def parse_keys(text: str) -> list[int]:
    """Parse a comma- and/or whitespace-separated list of keys.

    Tokens that are not integers are skipped.

    Example:
        >>> parse_keys("30, 20 40,x, 10")
        [30, 20, 40, 10]
    """
    keys = []
    for token in _SEPARATORS.split(text):
        if not token:
            continue
        try:
            keys.append(parse_key(token))
        except InvalidKeyError:
            logger.debug("Skipping token %r", token)
    return keys
