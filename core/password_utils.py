# core/password_utils.py
"""
Password generation: character pool construction and secure random draws.

Each character costs exactly one byte from the secure random source and is
mapped onto the pool with ``byte % len(pool)``. When the pool size does not
divide 256 the low indexes are very slightly favoured (e.g. a 70-char pool:
indexes 0..45 get 4/256, the rest 3/256). That bias is accepted for this tool;
there is no rejection sampling, so the output is a pure function of the byte
stream.
"""
from __future__ import annotations
import logging
import secrets
import string
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Characters easily confused visually
AMBIGUOUS = "0O1Il"

RandomBytes = Callable[[int], bytes]


class PasswordOptionsError(ValueError):
    """Options that cannot produce a password."""
    kind = "options"


class InvalidOptionsError(PasswordOptionsError):
    kind = "invalid-options"

    def __init__(self, message: str = "Select at least one character type.") -> None:
        super().__init__(message)


class EmptyPoolError(PasswordOptionsError):
    kind = "empty-pool"

    def __init__(self, message: str = "No characters left after exclusions.") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class GenerationOptions:
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_digits: bool = True
    include_symbols: bool = True
    exclude_ambiguous: bool = False
    exclude_chars: str = ""

    def is_valid(self) -> bool:
        return (
            self.include_uppercase
            or self.include_lowercase
            or self.include_digits
            or self.include_symbols
        )


@dataclass(frozen=True)
class GenerationResult:
    password: Optional[str] = None
    error: Optional[PasswordOptionsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.password is not None


def build_character_pool(options: GenerationOptions) -> str:
    """
    Returns the pool for ``options``: enabled classes concatenated in fixed
    order (A-Z, a-z, 0-9, symbols), minus ambiguous glyphs if requested, minus
    every character of ``exclude_chars`` taken literally.
    Raises InvalidOptionsError / EmptyPoolError.
    """
    if not options.is_valid():
        raise InvalidOptionsError()

    pool = ""
    if options.include_uppercase:
        pool += UPPERCASE
    if options.include_lowercase:
        pool += LOWERCASE
    if options.include_digits:
        pool += DIGITS
    if options.include_symbols:
        pool += SYMBOLS

    removed = set(options.exclude_chars)
    if options.exclude_ambiguous:
        removed |= set(AMBIGUOUS)
    if removed:
        pool = "".join(c for c in pool if c not in removed)

    if not pool:
        raise EmptyPoolError()
    return pool


def _check_length(length: int) -> None:
    if isinstance(length, bool) or not isinstance(length, int):
        raise ValueError(f"Password length must be an integer, got {length!r}")
    if length < 1:
        raise ValueError("Password length must be at least 1")


def draw_from_pool(length: int, pool: str, random_bytes: RandomBytes = secrets.token_bytes) -> str:
    """Map ``length`` secure random bytes onto ``pool`` (one byte per character)."""
    _check_length(length)
    if not pool:
        raise EmptyPoolError()
    data = random_bytes(length)
    if len(data) != length:
        raise RuntimeError(f"Random source returned {len(data)} bytes, expected {length}.")
    size = len(pool)
    return "".join(pool[b % size] for b in data)


def generate_password(
    length: int,
    options: GenerationOptions,
    random_bytes: RandomBytes = secrets.token_bytes,
) -> GenerationResult:
    """
    Generate one password. Option problems come back as a failed
    GenerationResult; a non-positive ``length`` raises ValueError.
    """
    _check_length(length)
    try:
        pool = build_character_pool(options)
    except PasswordOptionsError as e:
        logger.info("Password generation rejected: %s", e.kind)
        return GenerationResult(error=e)

    password = draw_from_pool(length, pool, random_bytes)
    logger.debug("Generated password: length=%d pool=%d", length, len(pool))
    return GenerationResult(password=password)

