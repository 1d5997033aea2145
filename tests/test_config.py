"""Tests for configuration defaults and environment overrides."""

from __future__ import annotations

import pytest

from core.config import DEFAULT_CONFIG, AppConfig, load_config


class TestConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG.history_size == 10
        assert DEFAULT_CONFIG.attempts_per_second == 1e9
        assert (DEFAULT_CONFIG.min_length, DEFAULT_CONFIG.max_length) == (4, 64)

    def test_no_overrides_returns_default(self):
        assert load_config({}) is DEFAULT_CONFIG

    def test_env_overrides(self):
        cfg = load_config({
            "PASSFORGE_MAX_LENGTH": "128",
            "PASSFORGE_ATTEMPTS_PER_SECOND": "1e12",
            "PASSFORGE_LOG_LEVEL": "debug",
            "UNRELATED": "x",
        })
        assert cfg.max_length == 128
        assert cfg.attempts_per_second == 1e12
        assert cfg.log_level == "debug"
        assert cfg.min_length == 4

    def test_bad_number(self):
        with pytest.raises(ValueError, match="PASSFORGE_HISTORY_SIZE"):
            load_config({"PASSFORGE_HISTORY_SIZE": "ten"})

    def test_inconsistent_bounds(self):
        with pytest.raises(ValueError):
            AppConfig(min_length=10, max_length=8)
        with pytest.raises(ValueError):
            AppConfig(default_length=100)
        with pytest.raises(ValueError):
            AppConfig(attempts_per_second=0)
