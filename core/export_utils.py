# core/export_utils.py
"""
Batch generation and CSV export.

The CSV is deliberately plain: no quoting or escaping, so a password that
contains a comma produces a row with an extra field. Generated symbols include
',' so callers who need strict CSV should exclude it when generating.
"""
from __future__ import annotations
import logging
import secrets
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from core.password_utils import (
    GenerationOptions,
    PasswordOptionsError,
    RandomBytes,
    generate_password,
)

logger = logging.getLogger(__name__)

CSV_FILENAME = "passwords.csv"
CSV_MIME = "text/csv"
CSV_HEADER: Tuple[str, str] = ("index", "password")


@dataclass(frozen=True)
class BatchResult:
    passwords: Tuple[str, ...] = ()
    error: Optional[PasswordOptionsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __len__(self) -> int:
        return len(self.passwords)


def generate_batch(
    count: int,
    length: int,
    options: GenerationOptions,
    random_bytes: RandomBytes = secrets.token_bytes,
) -> BatchResult:
    """
    Generate ``count`` passwords, each drawn independently (no dedupe).
    If the options cannot produce a password the whole batch fails.
    """
    if count < 0:
        raise ValueError("Batch count must not be negative.")

    passwords = []
    for _ in range(count):
        result = generate_password(length, options, random_bytes)
        if result.error is not None:
            return BatchResult(error=result.error)
        passwords.append(result.password)

    logger.info("Generated batch: count=%d length=%d", count, length)
    return BatchResult(passwords=tuple(passwords))


def export_csv(passwords: Iterable[str], header: Sequence[str] = CSV_HEADER) -> str:
    """Header row, then ``index,password`` rows (1-based), newline-joined."""
    lines = [",".join(header)]
    lines.extend(f"{i},{pw}" for i, pw in enumerate(passwords, 1))
    return "\n".join(lines)
