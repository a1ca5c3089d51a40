"""
Command-line interface: argument handling, diagnostics, and the
console-script entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from .config import log_level_from_env
from .errors import EmptyCharsetError, RandomSourceError
from .generator import generate
from .options import parse_args

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"

HELP_TEXT = (
    "NAME\n"
    "\tpassgen - password generator\n"
    "\n"
    "SYNOPSIS\n"
    "\tpassgen [OPTION...] [LENGTH]\n"
    "\n"
    "DESCRIPTION\n"
    "\tGenerate cryptographically secure passwords of LENGTH characters,\n"
    "\tdefault length is 22.\n"
    "\n"
    "OPTIONS\n"
    "\t+l, --enable-lower\n"
    "\t\tenables lowercase letters to be generated, default\n"
    "\t-l, --disable-lower\n"
    "\t\tdisables lowercase letters\n"
    "\t+u, --enable-upper\n"
    "\t\tenables uppercase letters to be generated, default\n"
    "\t-u, --disable-upper\n"
    "\t\tdisables uppercase letters\n"
    "\t+n, --enable-number\n"
    "\t\tenables numbers to be generated, default\n"
    "\t-n, --disable-number\n"
    "\t\tdisables numbers\n"
    "\t+s, --enable-symbol\n"
    "\t\tenables symbols to be generated\n"
    "\t-s, --disable-symbol\n"
    "\t\tdisables symbols, default\n"
    "\t--help\n"
    "\t\tprints this message\n"
)

EXIT_OK = 0
EXIT_FAILURE = 1


def setup_logging(stream: TextIO | None = None) -> None:
    """
    Send log records to stderr at the level named by PASSGEN_LOG_LEVEL.
    """
    logging.basicConfig(
        level=log_level_from_env(),
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
    )


def _write_password(password: bytearray, stream: TextIO) -> None:
    """
    Write the password and a newline to stream.

    The binary layer is used when the stream has one, so no str copy of
    the secret is created.
    """
    binary = getattr(stream, "buffer", None)
    if binary is not None:
        stream.flush()
        binary.write(password)
        binary.write(b"\n")
        binary.flush()
    else:
        stream.write(password.decode("ascii") + "\n")
        stream.flush()


def main(
    argv: list[str] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """
    Run passgen with argv (without the program name) and return the
    exit status.
    """
    args = sys.argv[1:] if argv is None else argv
    out = stdout or sys.stdout
    err = stderr or sys.stderr

    parsed = parse_args(args)
    for token in parsed.unrecognized:
        print(f"Unrecognized option: {token}", file=err)

    if parsed.show_help:
        err.write(HELP_TEXT)
        return EXIT_OK

    config = parsed.config
    logger.debug("Resolved configuration: %s", config)
    try:
        with generate(config) as password:
            _write_password(password.data, out)
    except EmptyCharsetError as exc:
        print(exc, file=err)
        return EXIT_FAILURE
    except RandomSourceError as exc:
        print(f"Failed to get random: {exc}", file=err)
        return EXIT_FAILURE
    except (MemoryError, OverflowError):
        print(f"Failed to allocate password of length {config.length}", file=err)
        return EXIT_FAILURE

    return EXIT_OK


def run() -> None:
    """
    Entry point for the `passgen` console script and `python -m passgen`.
    """
    setup_logging()
    sys.exit(main())
