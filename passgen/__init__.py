"""
passgen: cryptographically secure password generator.
"""

from .config import PassgenConfig, DEFAULT_CONFIG
from .errors import EmptyCharsetError, GenerationError, PassgenError, RandomSourceError
from .generator import generate, generate_password

__all__ = [
    "PassgenConfig",
    "DEFAULT_CONFIG",
    "PassgenError",
    "GenerationError",
    "EmptyCharsetError",
    "RandomSourceError",
    "generate",
    "generate_password",
]
