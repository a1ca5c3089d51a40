"""
Exceptions raised by the password generator.
"""


class PassgenError(Exception):
    """Generic passgen error."""


class GenerationError(PassgenError):
    """A password could not be generated."""


class EmptyCharsetError(GenerationError):
    """Every character class is disabled but a non-empty password was requested."""


class RandomSourceError(GenerationError):
    """The secure random source failed."""
