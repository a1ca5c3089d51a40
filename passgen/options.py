"""
Command-line option parsing.

Options are classified token by token. Parsing never raises: anything
unrecognized is collected for the caller to report, and the run continues
with the toggles set so far.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from enum import Enum

from .config import DEFAULT_CONFIG, MAX_LENGTH, PassgenConfig


class Option(Enum):
    LOWER_ENABLE = "lower_enable"
    LOWER_DISABLE = "lower_disable"
    UPPER_ENABLE = "upper_enable"
    UPPER_DISABLE = "upper_disable"
    NUMBER_ENABLE = "number_enable"
    NUMBER_DISABLE = "number_disable"
    SYMBOL_ENABLE = "symbol_enable"
    SYMBOL_DISABLE = "symbol_disable"
    HELP = "help"
    UNRECOGNIZED = "unrecognized"


_SHORT_ENABLE = {
    "l": Option.LOWER_ENABLE,
    "u": Option.UPPER_ENABLE,
    "n": Option.NUMBER_ENABLE,
    "s": Option.SYMBOL_ENABLE,
}

_SHORT_DISABLE = {
    "l": Option.LOWER_DISABLE,
    "u": Option.UPPER_DISABLE,
    "n": Option.NUMBER_DISABLE,
    "s": Option.SYMBOL_DISABLE,
}

_LONG_OPTIONS = {
    "--help": Option.HELP,
    "--enable-lower": Option.LOWER_ENABLE,
    "--enable-upper": Option.UPPER_ENABLE,
    "--enable-number": Option.NUMBER_ENABLE,
    "--enable-symbol": Option.SYMBOL_ENABLE,
    "--disable-lower": Option.LOWER_DISABLE,
    "--disable-upper": Option.UPPER_DISABLE,
    "--disable-number": Option.NUMBER_DISABLE,
    "--disable-symbol": Option.SYMBOL_DISABLE,
}

# Option -> (config field, value)
_TOGGLES = {
    Option.LOWER_ENABLE: ("lower", True),
    Option.LOWER_DISABLE: ("lower", False),
    Option.UPPER_ENABLE: ("upper", True),
    Option.UPPER_DISABLE: ("upper", False),
    Option.NUMBER_ENABLE: ("number", True),
    Option.NUMBER_DISABLE: ("number", False),
    Option.SYMBOL_ENABLE: ("symbol", True),
    Option.SYMBOL_DISABLE: ("symbol", False),
}

_LENGTH_RE = re.compile(r"[0-9]+")


@dataclass
class ParseResult:
    """
    Outcome of parsing the process arguments.
    """

    config: PassgenConfig = DEFAULT_CONFIG
    show_help: bool = False
    # Tokens to report as unrecognized, in the order they appeared.
    unrecognized: list[str] = field(default_factory=list)


def parse_long_option(arg: str) -> Option:
    return _LONG_OPTIONS.get(arg, Option.UNRECOGNIZED)


def parse_option(arg: str) -> Option:
    """
    Classify a single argument.

    Short flags are exactly two characters: '+' enables a class and '-'
    disables it. Anything starting with '--' is a long option.
    """
    if arg.startswith("--"):
        return parse_long_option(arg)

    if len(arg) != 2:
        return Option.UNRECOGNIZED

    if arg[0] == "+":
        return _SHORT_ENABLE.get(arg[1], Option.UNRECOGNIZED)
    if arg[0] == "-":
        return _SHORT_DISABLE.get(arg[1], Option.UNRECOGNIZED)
    return Option.UNRECOGNIZED


def parse_length(token: str) -> int | None:
    """
    Parse a LENGTH argument: ASCII digits only, no sign, no whitespace,
    at most MAX_LENGTH. Returns None when the token is not a valid length.
    """
    if not _LENGTH_RE.fullmatch(token):
        return None
    # Anything with more significant digits than MAX_LENGTH is out of range,
    # and too long for int() to convert.
    digits = token.lstrip("0") or "0"
    if len(digits) > len(str(MAX_LENGTH)):
        return None
    value = int(digits)
    if value > MAX_LENGTH:
        return None
    return value


def parse_args(argv: list[str]) -> ParseResult:
    """
    Map process arguments (without the program name) to a ParseResult.

    - Later flags override earlier ones for the same class.
    - --help stops parsing immediately.
    - Only the final argument may supply LENGTH; an unparsable final
      argument keeps the default length and is reported.
    """
    result = ParseResult()
    config = DEFAULT_CONFIG
    last = len(argv) - 1

    for i, arg in enumerate(argv):
        option = parse_option(arg)

        if option is Option.HELP:
            result.show_help = True
            break

        if option is Option.UNRECOGNIZED:
            if i == last:
                length = parse_length(arg)
                if length is not None:
                    config = replace(config, length=length)
                    continue
            result.unrecognized.append(arg)
            continue

        name, value = _TOGGLES[option]
        config = replace(config, **{name: value})

    result.config = config
    return result
