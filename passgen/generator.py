"""
Password assembly: build the effective charset and fill the password
buffer with characters chosen by unbiased random indices.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Iterator

from .config import PassgenConfig, DEFAULT_CONFIG
from .errors import EmptyCharsetError
from .sampling import RandomSource, rand_index
from .secure import SecretBuffer

logger = logging.getLogger(__name__)

EMPTY_CHARSET_MESSAGE = "No characters enabled, cannot generate password"


def build_charset(config: PassgenConfig | None = None) -> SecretBuffer:
    """
    Concatenate the enabled alphabets, preserving class order
    (lower, upper, number, symbol) and the order within each class.
    """
    cfg = config or DEFAULT_CONFIG
    return SecretBuffer.concat(cfg.alphabets())


def fill_password(
    password: SecretBuffer,
    charset: SecretBuffer,
    source: RandomSource = os.urandom,
) -> None:
    """
    Fill every position of password with a random charset character.
    """
    if len(password) and not len(charset):
        raise EmptyCharsetError(EMPTY_CHARSET_MESSAGE)

    limit = len(charset)
    for i in range(len(password)):
        password[i] = charset[rand_index(limit, source)]


@contextmanager
def generate(
    config: PassgenConfig | None = None,
    source: RandomSource = os.urandom,
) -> Iterator[SecretBuffer]:
    """
    Generate a password and yield it as a SecretBuffer.

    Both the charset and the password buffer are wiped when the block
    exits, whether it finishes normally or generation fails part way.
    """
    cfg = config or DEFAULT_CONFIG
    logger.debug(
        "Generating password: lower=%s upper=%s number=%s symbol=%s charset=%d length=%d",
        cfg.lower,
        cfg.upper,
        cfg.number,
        cfg.symbol,
        cfg.charset_size(),
        cfg.length,
    )

    with build_charset(cfg) as charset:
        if cfg.length > 0 and not len(charset):
            raise EmptyCharsetError(EMPTY_CHARSET_MESSAGE)

        with SecretBuffer(cfg.length) as password:
            fill_password(password, charset, source)
            yield password


def generate_password(
    config: PassgenConfig | None = None,
    source: RandomSource = os.urandom,
) -> str:
    """
    High-level function returning the password as a str.

    The returned str cannot be wiped; callers that care about memory
    disclosure should use generate() and consume the buffer directly.
    """
    with generate(config, source) as password:
        return password.data.decode("ascii")
