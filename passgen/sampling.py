"""
Unbiased random index sampling.

Draws fixed-width words from a secure random byte source and maps them
into [0, limit) by rejection sampling, so no index is favoured when limit
does not evenly divide the word range.
"""

from __future__ import annotations

import logging
import os
from typing import Callable

from .errors import RandomSourceError
from .secure import wipe

logger = logging.getLogger(__name__)

# Random word width in bytes (64-bit words).
WORD_BYTES = 8

RandomSource = Callable[[int], bytes]


def _draw_word(source: RandomSource, word_bytes: int) -> int:
    """
    Read one unsigned little-endian word from the random source.
    """
    try:
        raw = source(word_bytes)
    except OSError as exc:
        # No retry and no fallback to a weaker generator.
        raise RandomSourceError(exc.strerror or str(exc)) from exc

    buf = bytearray(raw)
    try:
        if len(buf) != word_bytes:
            raise RandomSourceError(
                f"short read from random source ({len(buf)} of {word_bytes} bytes)"
            )
        return int.from_bytes(buf, "little")
    finally:
        wipe(buf)


def rand_index(
    limit: int,
    source: RandomSource = os.urandom,
    word_bytes: int = WORD_BYTES,
) -> int:
    """
    Return a uniformly distributed integer in [0, limit).

    - max_value is the largest word the source can produce.
    - bound = max_value // limit * limit is the largest multiple of limit
      that fits; words in [0, bound) hold every residue equally often.
    - Words at or above bound are discarded and redrawn.

    Raises ValueError for limit <= 0 and RandomSourceError if the source
    fails.
    """
    if limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")

    max_value = (1 << (8 * word_bytes)) - 1
    if limit > max_value:
        raise ValueError(f"limit {limit} exceeds the {word_bytes}-byte word range")

    bound = max_value // limit * limit

    while True:
        word = _draw_word(source, word_bytes)
        if word < bound:
            return word % limit
        logger.debug("Rejected random word above bound for limit %d", limit)
