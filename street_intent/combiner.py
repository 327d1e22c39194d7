"""Merge policy for the pattern and semantic classifiers.

The combiner only decides: it never runs a classifier itself. Given the
two verdicts it picks an intent, a confidence and a source tag naming the
branch that produced the decision.
"""

import logging
from typing import Protocol, runtime_checkable

from street_intent.config import Settings, get_settings
from street_intent.intent_types import (
    UNKNOWN_INTENT,
    ClassificationSource,
    CombinedVerdict,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class IntentVerdict(Protocol):
    """Minimal view of a classifier's answer."""

    intent: str
    confidence: float


@runtime_checkable
class SimilarityVerdict(IntentVerdict, Protocol):
    """Verdict that also reports the raw similarity behind its confidence."""

    similarity: float


@runtime_checkable
class IntentClassifier(Protocol):
    """A strategy that maps preprocessed text to a verdict.

    Both PatternMatcher and SemanticEngine implement it.
    """

    def classify_intent(self, text: str) -> IntentVerdict:
        """Classify preprocessed text.

        Args:
            text: Normalized, typo-corrected input.

        Returns:
            Verdict with an intent identifier and a confidence in [0, 1].
        """
        ...


class Combiner:
    """Threshold policy that merges a pattern and a semantic verdict.

    Decision order:
    1. Pattern confidence >= high threshold: pattern wins outright
    2. Both confident and agree: boosted confidence
    3. Both confident and disagree: the more confident one, penalized
    4. Only one confident: that one as-is
    5. Neither: semantic if it has any similarity signal, else unknown
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def is_decisive(self, pattern: IntentVerdict) -> bool:
        """Whether the pattern verdict is strong enough to skip semantics."""
        return pattern.confidence >= self.settings.high_confidence_threshold

    def combine(self, pattern: IntentVerdict, semantic: SimilarityVerdict | None = None) -> CombinedVerdict:
        """Merge two verdicts into one decision.

        Args:
            pattern: Pattern matcher verdict, usually a PatternMatch.
            semantic: Semantic verdict with a similarity, usually a
                SemanticMatch. May be omitted only when the pattern verdict
                is decisive.

        Returns:
            CombinedVerdict with the final intent, confidence and source.

        Raises:
            ValueError: If ``semantic`` is missing for a non-decisive pattern.
        """
        s = self.settings

        if self.is_decisive(pattern):
            return CombinedVerdict(pattern.intent, pattern.confidence, ClassificationSource.PATTERN_HIGH)

        if semantic is None:
            raise ValueError("A semantic verdict is required unless the pattern verdict is decisive")

        pattern_ok = pattern.confidence >= s.pattern_confidence_threshold
        semantic_ok = semantic.confidence >= s.semantic_confidence_threshold

        if pattern_ok and semantic_ok:
            if pattern.intent == semantic.intent:
                confidence = min(1.0, (pattern.confidence + semantic.confidence) / s.agreement_divisor)
                return CombinedVerdict(pattern.intent, confidence, ClassificationSource.COMBINED_AGREEMENT)

            logger.debug(
                f"Classifiers disagree: pattern={pattern.intent} ({pattern.confidence:.2f}), "
                f"semantic={semantic.intent} ({semantic.confidence:.2f})"
            )
            if pattern.confidence >= semantic.confidence:
                return CombinedVerdict(
                    pattern.intent,
                    pattern.confidence * s.disagreement_penalty,
                    ClassificationSource.PATTERN_PREFERRED,
                )
            return CombinedVerdict(
                semantic.intent,
                semantic.confidence * s.disagreement_penalty,
                ClassificationSource.SEMANTIC_PREFERRED,
            )

        if pattern_ok:
            return CombinedVerdict(pattern.intent, pattern.confidence, ClassificationSource.PATTERN_ONLY)

        if semantic_ok:
            return CombinedVerdict(semantic.intent, semantic.confidence, ClassificationSource.SEMANTIC_ONLY)

        if semantic.similarity > s.semantic_fallback_similarity:
            return CombinedVerdict(
                semantic.intent, semantic.confidence, ClassificationSource.SEMANTIC_FALLBACK
            )

        return CombinedVerdict(UNKNOWN_INTENT, 0.0, ClassificationSource.NO_MATCH)
