"""Engine configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """Classifier settings loaded from environment variables.

    Every field can be overridden with a ``STREET_INTENT_`` prefixed
    environment variable or an entry in ``.env``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STREET_INTENT_",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Combiner Thresholds
    # ==========================================================================
    high_confidence_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    pattern_confidence_threshold: float = Field(default=0.4, ge=0.0, le=1.0)
    semantic_confidence_threshold: float = Field(default=0.25, ge=0.0, le=1.0)
    semantic_fallback_similarity: float = Field(default=0.15, ge=0.0, le=1.0)
    agreement_divisor: float = Field(default=1.5, gt=0.0)  # (pattern + semantic) / divisor
    disagreement_penalty: float = Field(default=0.9, ge=0.0, le=1.0)

    # ==========================================================================
    # Pattern Matcher
    # ==========================================================================
    rule_bonus: float = Field(default=3.0, gt=0.0)  # Added per matching trigger rule
    pattern_score_scale: float = Field(default=6.0, gt=0.0)  # confidence = score / scale

    # ==========================================================================
    # Semantic Engine
    # ==========================================================================
    centroid_weight: float = Field(default=0.6, ge=0.0, le=1.0)
    exemplar_weight: float = Field(default=0.4, ge=0.0, le=1.0)
    top_matches: int = Field(default=3, ge=1)
    similarity_threshold: float = Field(default=0.5, ge=0.0, le=1.0)  # is_similar_to default

    # ==========================================================================
    # Typo Correction
    # ==========================================================================
    max_typo_distance: int = Field(default=2, ge=0)
    suggestion_max_distance: float = Field(default=2.5, ge=0.0)
    max_suggestions: int = Field(default=5, ge=1)

    # ==========================================================================
    # Cache Sizes (oldest entry evicted first)
    # ==========================================================================
    classification_cache_size: int = Field(default=200, ge=1)
    typo_cache_size: int = Field(default=1000, ge=1)
    phrase_cache_size: int = Field(default=500, ge=1)

    # Debug
    debug: bool = False
    log_level: LogLevel = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience alias
settings = get_settings()
