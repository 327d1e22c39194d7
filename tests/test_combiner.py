"""Tests for the pattern/semantic merge policy."""

from dataclasses import dataclass

import pytest

from street_intent.combiner import Combiner, IntentClassifier, IntentVerdict, SimilarityVerdict
from street_intent.intent_types import ClassificationSource, PatternMatch, SemanticMatch
from street_intent.pattern_matcher import PatternMatcher


@dataclass
class Verdict:
    intent: str
    confidence: float
    similarity: float = 0.0


@pytest.fixture
def combiner(settings) -> Combiner:
    return Combiner(settings)


def pattern(intent: str, confidence: float) -> PatternMatch:
    return PatternMatch(intent=intent, confidence=confidence, score=confidence * 6)


def semantic(intent: str, confidence: float, similarity: float | None = None) -> SemanticMatch:
    return SemanticMatch(
        intent=intent,
        confidence=confidence,
        similarity=confidence if similarity is None else similarity,
    )


class TestDecisivePattern:
    """Tests for the pattern short-circuit."""

    def test_high_pattern_wins_without_semantic(self, combiner):
        verdict = combiner.combine(pattern("money_advice", 0.8))
        assert verdict.intent == "money_advice"
        assert verdict.confidence == 0.8
        assert verdict.source == ClassificationSource.PATTERN_HIGH

    def test_threshold_is_inclusive(self, combiner):
        assert combiner.is_decisive(pattern("money_advice", 0.7))
        assert not combiner.is_decisive(pattern("money_advice", 0.69))

    def test_high_pattern_ignores_semantic(self, combiner):
        verdict = combiner.combine(pattern("money_advice", 1.0), semantic("heat_advice", 0.99))
        assert verdict.intent == "money_advice"
        assert verdict.source == ClassificationSource.PATTERN_HIGH

    def test_semantic_required_below_threshold(self, combiner):
        with pytest.raises(ValueError):
            combiner.combine(pattern("money_advice", 0.5))


class TestBothConfident:
    """Tests for agreement and disagreement."""

    def test_agreement_boosts_confidence(self, combiner):
        verdict = combiner.combine(pattern("money_advice", 0.5), semantic("money_advice", 0.4))
        assert verdict.intent == "money_advice"
        assert verdict.confidence == pytest.approx(0.9 / 1.5)
        assert verdict.source == ClassificationSource.COMBINED_AGREEMENT

    def test_agreement_is_capped_at_one(self, combiner):
        verdict = combiner.combine(pattern("money_advice", 0.69), semantic("money_advice", 0.95))
        assert verdict.confidence == 1.0

    def test_disagreement_prefers_pattern(self, combiner):
        verdict = combiner.combine(pattern("market_analysis", 0.583), semantic("trade_analysis", 0.503))
        assert verdict.intent == "market_analysis"
        assert verdict.confidence == pytest.approx(0.583 * 0.9)
        assert verdict.source == ClassificationSource.PATTERN_PREFERRED

    def test_disagreement_prefers_semantic(self, combiner):
        verdict = combiner.combine(pattern("crime_advice", 0.5), semantic("heat_advice", 0.6))
        assert verdict.intent == "heat_advice"
        assert verdict.confidence == pytest.approx(0.54)
        assert verdict.source == ClassificationSource.SEMANTIC_PREFERRED

    def test_disagreement_tie_goes_to_pattern(self, combiner):
        verdict = combiner.combine(pattern("crime_advice", 0.5), semantic("heat_advice", 0.5))
        assert verdict.intent == "crime_advice"
        assert verdict.source == ClassificationSource.PATTERN_PREFERRED


class TestOneOrNeitherConfident:
    """Tests for the single-signal and fallback branches."""

    def test_pattern_only(self, combiner):
        verdict = combiner.combine(pattern("crime_advice", 0.5), semantic("heat_advice", 0.1))
        assert verdict.intent == "crime_advice"
        assert verdict.confidence == 0.5
        assert verdict.source == ClassificationSource.PATTERN_ONLY

    def test_semantic_only(self, combiner):
        verdict = combiner.combine(pattern("unknown", 0.0), semantic("heat_advice", 0.877))
        assert verdict.intent == "heat_advice"
        assert verdict.confidence == 0.877
        assert verdict.source == ClassificationSource.SEMANTIC_ONLY

    def test_semantic_fallback(self, combiner):
        verdict = combiner.combine(pattern("crime_advice", 0.2), semantic("heat_advice", 0.2, similarity=0.3))
        assert verdict.intent == "heat_advice"
        assert verdict.confidence == 0.2
        assert verdict.source == ClassificationSource.SEMANTIC_FALLBACK

    def test_fallback_needs_similarity_above_floor(self, combiner):
        verdict = combiner.combine(pattern("crime_advice", 0.2), semantic("heat_advice", 0.2, similarity=0.15))
        assert verdict.source == ClassificationSource.NO_MATCH

    def test_no_match(self, combiner):
        verdict = combiner.combine(pattern("unknown", 0.0), semantic("unknown", 0.0))
        assert verdict.intent == "unknown"
        assert verdict.confidence == 0.0
        assert verdict.source == ClassificationSource.NO_MATCH


class TestCustomThresholds:
    """Tests for settings-driven policy."""

    def test_raised_high_threshold(self, settings):
        combiner = Combiner(settings.model_copy(update={"high_confidence_threshold": 0.95}))
        verdict = combiner.combine(pattern("money_advice", 0.9), semantic("money_advice", 0.3))
        assert verdict.source == ClassificationSource.COMBINED_AGREEMENT


class TestProtocols:
    """Tests for the structural classifier interface."""

    def test_results_are_verdicts(self):
        assert isinstance(pattern("money_advice", 0.5), IntentVerdict)
        assert isinstance(semantic("money_advice", 0.5), IntentVerdict)

    def test_both_classifiers_satisfy_protocol(self, engine, catalog, settings):
        assert isinstance(PatternMatcher(catalog, settings=settings), IntentClassifier)
        assert isinstance(engine.semantic, IntentClassifier)

    def test_semantic_result_reports_similarity(self):
        assert isinstance(semantic("money_advice", 0.5), SimilarityVerdict)
        assert not isinstance(object(), SimilarityVerdict)

    def test_combines_any_verdict_objects(self, combiner):
        """The merge policy reads only intent, confidence and similarity."""
        verdict = combiner.combine(Verdict("money_advice", 0.5), Verdict("money_advice", 0.4, 0.4))
        assert verdict.intent == "money_advice"
        assert verdict.confidence == pytest.approx(0.6)
        assert verdict.source == ClassificationSource.COMBINED_AGREEMENT

    def test_decisive_plain_verdict(self, combiner):
        verdict = combiner.combine(Verdict("crime_advice", 0.9))
        assert verdict.source == ClassificationSource.PATTERN_HIGH
