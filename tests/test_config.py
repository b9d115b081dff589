"""
Configuration Tests

Tests verify:
- Reference defaults
- MINDWORK_ environment overrides
- Threshold and log level validation
"""

import logging

import pytest
from pydantic import ValidationError

from mindwork.config import Settings, configure_logging


class TestDefaults:

    def test_reference_thresholds(self):
        config = Settings()

        assert config.STRESS_THRESHOLD == 4.0
        assert config.WORKLOAD_THRESHOLD == 4.0
        assert config.LOW_MOOD_THRESHOLD == 2.0

    def test_reference_windows(self):
        config = Settings()

        assert config.LOOKBACK_DAYS == 30
        assert config.DASHBOARD_DEFAULT_DAYS == 30


class TestEnvironment:

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MINDWORK_STRESS_THRESHOLD", "3.5")
        monkeypatch.setenv("MINDWORK_LOOKBACK_DAYS", "14")

        config = Settings()

        assert config.STRESS_THRESHOLD == 3.5
        assert config.LOOKBACK_DAYS == 14

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("STRESS_THRESHOLD", "1.0")

        assert Settings().STRESS_THRESHOLD == 4.0


class TestValidation:

    @pytest.mark.parametrize("value", [0.5, 5.5])
    def test_threshold_outside_scale(self, value):
        with pytest.raises(ValidationError):
            Settings(STRESS_THRESHOLD=value)

    def test_lookback_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(LOOKBACK_DAYS=0)

    def test_log_level_normalized(self):
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="chatty")

    def test_configure_logging(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))

        configure_logging(Settings(LOG_LEVEL="WARNING"))

        assert calls["level"] == "WARNING"
