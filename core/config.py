# core/config.py
"""
Configuration for the PassForge password tools.
"""
from __future__ import annotations
import os
from dataclasses import dataclass, fields, replace
from typing import Mapping, Optional

ENV_PREFIX = "PASSFORGE_"


@dataclass(frozen=True)
class AppConfig:
    # Password length bounds for the slider; the core accepts any positive length.
    min_length: int = 4
    max_length: int = 64
    default_length: int = 16

    # Recent-history capacity (most recent first).
    history_size: int = 10

    # Batch size bounds for the batch page.
    batch_min: int = 1
    batch_max: int = 100
    default_batch: int = 10

    # Assumed brute-force rate for crack-time estimates.
    attempts_per_second: float = 1e9

    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.min_length < 1 or self.max_length < self.min_length:
            raise ValueError(f"Invalid length bounds: {self.min_length}..{self.max_length}")
        if not self.min_length <= self.default_length <= self.max_length:
            raise ValueError(f"default_length {self.default_length} is outside the length bounds.")
        if self.history_size < 1:
            raise ValueError("history_size must be at least 1.")
        if self.batch_min < 1 or self.batch_max < self.batch_min:
            raise ValueError(f"Invalid batch bounds: {self.batch_min}..{self.batch_max}")
        if not self.batch_min <= self.default_batch <= self.batch_max:
            raise ValueError(f"default_batch {self.default_batch} is outside the batch bounds.")
        if self.attempts_per_second <= 0:
            raise ValueError("attempts_per_second must be positive.")


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Build an AppConfig from PASSFORGE_* environment variables,
    e.g. PASSFORGE_MAX_LENGTH=128. Unknown variables are ignored.
    """
    env = os.environ if environ is None else environ
    overrides = {}
    for f in fields(AppConfig):
        raw = env.get(ENV_PREFIX + f.name.upper())
        if raw is None or not raw.strip():
            continue
        raw = raw.strip()
        kind = type(getattr(DEFAULT_CONFIG, f.name))
        try:
            overrides[f.name] = kind(raw) if kind is not str else raw
        except ValueError:
            raise ValueError(f"{ENV_PREFIX}{f.name.upper()}: expected {kind.__name__}, got {raw!r}") from None
    return replace(DEFAULT_CONFIG, **overrides) if overrides else DEFAULT_CONFIG


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = AppConfig()
