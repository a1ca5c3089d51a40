"""
Configuration for the passgen password generator.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping


# Character classes, in the order they are concatenated into the charset.
LOWERS = b"abcdefghijklmnopqrstuvwxyz"
UPPERS = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBERS = b"0123456789"
SYMBOLS = b"!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"

DEFAULT_LENGTH = 22

# Largest LENGTH accepted on the command line (signed 64-bit long).
MAX_LENGTH = 2**63 - 1

LOG_LEVEL_ENV = "PASSGEN_LOG_LEVEL"


@dataclass(frozen=True)
class PassgenConfig:
    # Character classes to draw from.
    lower: bool = True
    upper: bool = True
    number: bool = True
    symbol: bool = False

    # Desired password length in characters.
    length: int = DEFAULT_LENGTH

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(
                f"Configured length={self.length} is negative. "
                "Password length must be zero or more."
            )

    def alphabets(self) -> list[bytes]:
        """
        Enabled alphabets in class order: lower, upper, number, symbol.
        """
        enabled = [
            (self.lower, LOWERS),
            (self.upper, UPPERS),
            (self.number, NUMBERS),
            (self.symbol, SYMBOLS),
        ]
        return [alphabet for on, alphabet in enabled if on]

    def charset_size(self) -> int:
        return sum(len(alphabet) for alphabet in self.alphabets())


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = PassgenConfig()


def log_level_from_env(environ: Mapping[str, str] | None = None) -> int:
    """
    Resolve the logging level from PASSGEN_LOG_LEVEL.

    Unset or unknown names fall back to WARNING so that stderr only
    carries the documented diagnostics.
    """
    env = os.environ if environ is None else environ
    name = env.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    if not isinstance(level, int):
        return logging.WARNING
    return level
