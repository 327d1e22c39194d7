"""Tests for classifier configuration."""

import pytest
from pydantic import ValidationError

from street_intent.config import Settings, get_settings


class TestSettingsDefaults:
    """Tests for default configuration values."""

    def test_combiner_thresholds(self):
        """Default thresholds match the documented merge policy."""
        settings = Settings(_env_file=None)
        assert settings.high_confidence_threshold == 0.7
        assert settings.pattern_confidence_threshold == 0.4
        assert settings.semantic_confidence_threshold == 0.25
        assert settings.semantic_fallback_similarity == 0.15

    def test_pattern_scoring(self):
        """A trigger rule is worth 3 and a score of 6 is full confidence."""
        settings = Settings(_env_file=None)
        assert settings.rule_bonus == 3.0
        assert settings.pattern_score_scale == 6.0

    def test_semantic_blend_weights(self):
        """Centroid and best-exemplar weights sum to 1."""
        settings = Settings(_env_file=None)
        assert settings.centroid_weight + settings.exemplar_weight == pytest.approx(1.0)

    def test_cache_sizes(self):
        settings = Settings(_env_file=None)
        assert settings.classification_cache_size == 200
        assert settings.typo_cache_size == 1000
        assert settings.phrase_cache_size == 500

    def test_default_debug_is_false(self):
        """Debug mode should be off by default."""
        settings = Settings(_env_file=None)
        assert settings.debug is False


class TestSettingsFromEnvironment:
    """Tests for environment overrides."""

    def test_env_prefix_overrides(self, monkeypatch):
        """STREET_INTENT_ variables override defaults."""
        monkeypatch.setenv("STREET_INTENT_HIGH_CONFIDENCE_THRESHOLD", "0.8")
        monkeypatch.setenv("STREET_INTENT_CLASSIFICATION_CACHE_SIZE", "10")
        settings = Settings(_env_file=None)
        assert settings.high_confidence_threshold == 0.8
        assert settings.classification_cache_size == 10

    def test_env_names_are_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("street_intent_max_typo_distance", "1")
        settings = Settings(_env_file=None)
        assert settings.max_typo_distance == 1

    def test_rejects_out_of_range_threshold(self):
        """Thresholds must stay within [0, 1]."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, high_confidence_threshold=1.5)

    def test_rejects_zero_cache_size(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, typo_cache_size=0)

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")


class TestGetSettings:
    """Tests for the cached accessor."""

    def test_returns_same_instance(self):
        assert get_settings() is get_settings()
