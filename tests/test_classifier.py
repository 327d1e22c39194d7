"""Tests for the end-to-end classifier engine."""

from unittest.mock import patch

import pytest

from street_intent import ClassificationSource, ClassifierEngine
from street_intent.data.exemplars import INTENT_EXEMPLARS
from street_intent.exceptions import UnknownClusterError, UnknownIntentError
from street_intent.intent_types import SubstitutionKind


class TestClassify:
    """Tests for the main classification scenarios."""

    def test_clear_pattern_hit(self, engine):
        result = engine.classify("how do i make money")
        assert result.intent == "money_advice"
        assert result.confidence == 1.0
        assert result.source == ClassificationSource.PATTERN_HIGH
        assert result.friendly_name == "Money Tips"
        assert result.semantic is None
        assert result.pattern.score == 8.0

    def test_slang_and_abbreviation(self, engine):
        result = engine.classify("need that paper rn")
        assert result.intent == "money_advice"
        assert result.confidence == pytest.approx(5 / 6)
        assert result.source == ClassificationSource.PATTERN_HIGH
        assert result.preprocessed.normalized == "need money right now"
        assert [c.kind for c in result.preprocessed.changes] == [
            SubstitutionKind.PHRASE,
            SubstitutionKind.ABBREVIATION,
        ]

    def test_typos(self, engine):
        result = engine.classify("wat crme shud i do")
        assert result.intent == "crime_advice"
        assert result.confidence == pytest.approx(5 / 6)
        assert result.preprocessed.normalized == "what crime should i do"
        changes = [(c.original, c.replacement, c.kind) for c in result.preprocessed.changes]
        assert changes == [
            ("wat", "what", SubstitutionKind.ABBREVIATION),
            ("crme", "crime", SubstitutionKind.TYPO),
            ("shud", "should", SubstitutionKind.TYPO),
        ]

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_input(self, engine, text):
        result = engine.classify(text)
        assert result.intent == "unknown"
        assert result.confidence == 0.0
        assert result.source == ClassificationSource.EMPTY_INPUT
        assert result.preprocessed is None

    def test_gibberish(self, engine):
        result = engine.classify("xyzzy plugh")
        assert result.intent == "unknown"
        assert result.confidence == 0.0
        assert result.source == ClassificationSource.NO_MATCH
        assert result.is_unknown
        assert result.needs_clarification()

    def test_disagreement_prefers_pattern(self, engine):
        result = engine.classify("market prices for crimes")
        assert result.intent == "market_analysis"
        assert result.confidence == pytest.approx(3.5 / 6 * 0.9)
        assert result.source == ClassificationSource.PATTERN_PREFERRED
        assert result.semantic.intent == "trade_analysis"

    @pytest.mark.parametrize(
        "text,intent,source",
        [
            ("mony", "money_advice", ClassificationSource.SEMANTIC_ONLY),
            ("police", "heat_advice", ClassificationSource.SEMANTIC_ONLY),
            ("yo whats good", "greeting", ClassificationSource.PATTERN_HIGH),
            ("thx fam", "thanks", ClassificationSource.PATTERN_HIGH),
            ("cops are after me", "heat_advice", ClassificationSource.PATTERN_HIGH),
            ("where should i go", "location_tips", ClassificationSource.PATTERN_HIGH),
            ("how much is a gun", "equipment_advice", ClassificationSource.SEMANTIC_ONLY),
            ("help", "help", ClassificationSource.PATTERN_HIGH),
        ],
    )
    def test_everyday_inputs(self, engine, text, intent, source):
        result = engine.classify(text)
        assert result.intent == intent
        assert result.source == source

    def test_confidence_is_bounded(self, engine):
        for text in ["money money money money", "how do i make money fast", "the"]:
            assert 0.0 <= engine.classify(text).confidence <= 1.0

    def test_semantic_top_matches(self, engine):
        result = engine.classify("police")
        assert result.top_matches[0].intent == "heat_advice"
        assert len(result.top_matches) == 3

    def test_pattern_top_matches_are_confidences(self, engine):
        result = engine.classify("how do i make money")
        assert result.top_matches[0].intent == "money_advice"
        assert result.top_matches[0].score == 1.0

    def test_every_exemplar_classifies_as_its_intent(self, engine):
        """Authored examples are the floor of what the engine must recognize."""
        failures = {}
        for intent, entry in INTENT_EXEMPLARS.items():
            for phrase in entry.get("exemplars", []):
                result = engine.classify(phrase)
                if result.intent != intent or result.confidence < 0.7:
                    failures[phrase] = (intent, result.intent, round(result.confidence, 3))
        assert failures == {}

    def test_to_dict(self, engine):
        data = engine.classify("need that paper rn").to_dict()
        assert data["intent"] == "money_advice"
        assert data["source"] == "pattern_high"
        assert data["preprocessed"]["normalized"] == "need money right now"
        assert data["from_cache"] is False


class TestCache:
    """Tests for the classification cache."""

    def test_repeat_is_served_from_cache(self, engine):
        first = engine.classify("How do I make money")
        second = engine.classify("  how do i make MONEY ")
        assert second.from_cache
        assert second.intent == first.intent
        assert second.confidence == first.confidence
        assert second.source == first.source
        assert second.preprocessed is None

    def test_clear_cache(self, engine):
        engine.classify("police")
        engine.clear_cache()
        assert not engine.classify("police").from_cache

    def test_vocabulary_change_invalidates_cache(self, engine):
        engine.classify("skrilla")
        engine.add_slang("skrilla", "money")
        result = engine.classify("skrilla")
        assert not result.from_cache
        assert result.intent == "money_advice"
        assert result.preprocessed.normalized == "money"

    def test_bounded(self, settings):
        engine = ClassifierEngine(settings=settings.model_copy(update={"classification_cache_size": 1}))
        engine.classify("police")
        engine.classify("help")
        assert not engine.classify("police").from_cache


class TestStats:
    """Tests for usage counters."""

    def test_counts_by_source(self, engine):
        engine.classify("how do i make money")
        engine.classify("how do i make money")
        engine.classify("police")
        stats = engine.stats()
        assert stats["total_classifications"] == 2
        assert stats["cache_hits"] == 1
        assert stats["pattern_hits"] == 1
        assert stats["semantic_hits"] == 1
        assert stats["hit_rate"] == pytest.approx(0.5)

    def test_empty_input_is_not_counted(self, engine):
        engine.classify("")
        assert engine.stats()["total_classifications"] == 0

    def test_reset_stats(self, engine):
        engine.classify("police")
        engine.reset_stats()
        assert engine.stats()["total_classifications"] == 0

    def test_component_stats(self, engine):
        stats = engine.stats()
        assert stats["vocabulary"]["clusters"] == stats["semantic"]["dimensions"]
        assert stats["typo"]["vocabulary_size"] == stats["vocabulary"]["vocabulary"]


class TestDiagnostics:
    """Tests for top matches, concepts, similarity and suggestions."""

    def test_get_top_matches(self, engine):
        top = engine.get_top_matches("market prices for crimes")
        assert [m.intent for m in top] == ["trade_analysis", "market_analysis", "crime_advice"]
        assert len(engine.get_top_matches("market prices for crimes", n=1)) == 1

    def test_get_concepts(self, engine):
        assert engine.get_concepts("need that paper rn") == ["action", "money", "time"]
        assert engine.get_concepts("xyzzy") == []

    def test_is_similar_to(self, engine):
        assert engine.is_similar_to("how do i make money", "how can i earn cash")
        assert not engine.is_similar_to("how do i make money", "where are the cops")

    def test_get_suggestions(self, engine):
        suggestions = engine.get_suggestions("market prices for crimes")
        assert [s.intent for s in suggestions][:3] == ["trade_analysis", "market_analysis", "crime_advice"]
        assert suggestions[0].friendly_name == "Trade Check"
        assert suggestions[0].suggestion == "Trade offer scam detection"

    def test_no_suggestions_for_gibberish(self, engine):
        assert engine.get_suggestions("xyzzy") == []

    def test_clarifying_question_three_options(self, engine):
        assert engine.get_clarifying_question("market prices for crimes") == (
            "I think you might be asking about: Trade Check, Market Info, Crime Tips. Which one?"
        )

    def test_clarifying_question_skips_conversation(self, engine):
        """Greetings and zero-score candidates are never offered."""
        assert engine.get_clarifying_question("hello") is None
        assert engine.get_clarifying_question("xyzzy") is None

    def test_clarifying_question_from_given_matches(self, engine):
        top = engine.get_top_matches("market prices for crimes")
        assert engine.get_clarifying_question("", top[:1]) == "Did you mean you want help with Trade Check?"
        assert engine.get_clarifying_question("", top[:2]) == (
            "Are you asking about Trade Check or Market Info?"
        )

    def test_analyze(self, engine):
        report = engine.analyze("need that paper rn")
        assert set(report) == {"input", "pattern", "semantic", "concepts", "final"}
        assert report["input"]["normalized"] == "need money right now"
        assert [c["stage"] for c in report["input"]["changes"]] == ["normalize", "normalize"]
        assert report["pattern"]["intent"] == "money_advice"
        assert report["semantic"]["intent"] == "money_advice"
        assert report["final"]["intent"] == "money_advice"

    def test_analyze_reports_typo_stage(self, engine):
        report = engine.analyze("mony")
        assert report["input"]["normalized"] == "mony"
        assert report["input"]["corrected"] == "money"
        assert report["input"]["changes"][0]["stage"] == "typo"


class TestRuntimeUpdates:
    """Tests for teaching the engine at runtime."""

    def test_add_phrase(self, engine):
        engine.add_phrase("bread and butter", "main job")
        assert engine.classify("my bread and butter").preprocessed.normalized == "my main job"

    def test_add_word_stops_correction(self, engine):
        assert engine.preprocess("crimee").normalized == "crime"
        assert engine.add_word("crimee")
        assert engine.preprocess("crimee").normalized == "crimee"

    def test_add_abbreviation(self, engine):
        engine.add_abbreviation("mny", "money")
        assert engine.preprocess("need mny").normalized == "need money"

    def test_add_word_to_cluster(self, engine):
        engine.add_word_to_cluster("skrilla", "money")
        assert "money" in engine.get_concepts("skrilla")

    def test_add_word_to_unknown_cluster(self, engine):
        with pytest.raises(UnknownClusterError):
            engine.add_word_to_cluster("skrilla", "bling")

    def test_add_exemplar(self, engine):
        engine.classify("police")
        assert engine.add_exemplar("heat_advice", "the fuzz is everywhere") is True
        assert not engine.classify("police").from_cache
        assert engine.add_exemplar("heat_advice", "the fuzz is everywhere") is False

    def test_add_exemplar_unknown_intent(self, engine):
        with pytest.raises(UnknownIntentError):
            engine.add_exemplar("bake_cake", "how do i bake")

    def test_engines_are_isolated(self, settings):
        first = ClassifierEngine(settings=settings)
        second = ClassifierEngine(settings=settings)
        first.add_slang("skrilla", "money")
        assert second.preprocess("skrilla").normalized != "money"


class TestFailureIsolation:
    """Tests for a failing pattern matcher."""

    def test_bad_rule_falls_back_to_semantics(self, settings):
        engine = ClassifierEngine(rules={"money_advice": ["("]}, settings=settings)
        result = engine.classify("how do i make money")
        assert result.intent == "money_advice"
        assert result.source == ClassificationSource.SEMANTIC_ONLY
        assert result.pattern.confidence == 0.0

    def test_non_string_rule_falls_back_to_semantics(self, settings):
        engine = ClassifierEngine(rules={"money_advice": [42]}, settings=settings)
        result = engine.classify("how do i make money")
        assert result.intent == "money_advice"
        assert result.source == ClassificationSource.SEMANTIC_ONLY
        assert result.pattern.confidence == 0.0

    def test_unexpected_matcher_error_is_contained(self, engine):
        with patch.object(engine.pattern, "classify_intent", side_effect=RuntimeError("boom")):
            result = engine.classify("how do i make money")
        assert result.intent == "money_advice"
        assert result.source == ClassificationSource.SEMANTIC_ONLY
