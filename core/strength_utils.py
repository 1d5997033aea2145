# core/strength_utils.py
"""
Heuristic password strength scoring and crack-time estimation.

These numbers are quick feedback for a human, not a cryptographic measure:
the score counts simple signals, and the entropy uses the password's own
observed alphabet (distinct characters) rather than the pool it was drawn
from, so it underestimates generated passwords.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List, Tuple

from core.config import DEFAULT_CONFIG

ATTEMPTS_PER_SECOND = DEFAULT_CONFIG.attempts_per_second

# Score thresholds, highest first
LABELS: List[Tuple[int, str]] = [
    (80, "very-strong"),
    (60, "strong"),
    (40, "medium"),
    (20, "weak"),
    (0, "very-weak"),
]

LABEL_TEXT = {
    "very-strong": "Very strong",
    "strong": "Strong",
    "medium": "Medium",
    "weak": "Weak",
    "very-weak": "Very weak",
}

_UNITS: List[Tuple[float, float, str]] = [
    # (upper bound in seconds, seconds per unit, unit)
    (60, 1, "second"),
    (3600, 60, "minute"),
    (86400, 3600, "hour"),
    (31536000, 86400, "day"),
]
_YEAR = 31536000


@dataclass(frozen=True)
class StrengthResult:
    score: int
    label: str

    @property
    def text(self) -> str:
        return LABEL_TEXT[self.label]


@dataclass(frozen=True)
class PasswordReport:
    strength: StrengthResult
    entropy: float
    crack_time: str


def strength_label(score: int) -> str:
    for threshold, label in LABELS:
        if score >= threshold:
            return label
    return "very-weak"


def _has_triple_run(password: str) -> bool:
    # newlines never form a run
    run = 1
    for prev, cur in zip(password, password[1:]):
        run = run + 1 if cur == prev and cur != "\n" else 1
        if run >= 3:
            return True
    return False


def score_password(password: str) -> StrengthResult:
    """Ten criteria worth 10 points each: length, classes, uniqueness, repeats."""
    n = len(password)
    checks = [
        n >= 8,
        n >= 12,
        n >= 16,
        n >= 20,
        any("a" <= c <= "z" for c in password),
        any("A" <= c <= "Z" for c in password),
        any("0" <= c <= "9" for c in password),
        any(not (c.isascii() and c.isalnum()) for c in password),
        len(set(password)) >= n * 0.7,
        not _has_triple_run(password),
    ]
    score = 10 * sum(checks)
    return StrengthResult(score=score, label=strength_label(score))


def entropy_bits(password: str) -> float:
    distinct = len(set(password))
    if distinct == 0:
        return 0.0
    return len(password) * math.log2(distinct)


def crack_time_seconds(password: str, attempts_per_second: float = ATTEMPTS_PER_SECOND) -> float:
    try:
        return 2.0 ** entropy_bits(password) / attempts_per_second
    except OverflowError:
        return math.inf


def format_duration(seconds: float) -> str:
    if seconds < 1:
        return "instant"
    if math.isinf(seconds):
        return "forever"
    for bound, per_unit, unit in _UNITS:
        if seconds < bound:
            return _plural(_round_half_up(seconds / per_unit), unit)
    return _plural(_round_half_up(seconds / _YEAR), "year")


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def _plural(n: int, unit: str) -> str:
    return f"{n:,} {unit}" + ("" if n == 1 else "s")


def estimate_crack_time(password: str, attempts_per_second: float = ATTEMPTS_PER_SECOND) -> str:
    return format_duration(crack_time_seconds(password, attempts_per_second))


def analyze_password(password: str, attempts_per_second: float = ATTEMPTS_PER_SECOND) -> PasswordReport:
    return PasswordReport(
        strength=score_password(password),
        entropy=entropy_bits(password),
        crack_time=estimate_crack_time(password, attempts_per_second),
    )
