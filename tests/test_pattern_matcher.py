"""Tests for trigger-rule and keyword scoring."""

import pytest

from street_intent.exceptions import PatternRuleError, UnknownIntentError
from street_intent.pattern_matcher import PatternMatcher, canonical_text


@pytest.fixture
def matcher(catalog, settings) -> PatternMatcher:
    return PatternMatcher(catalog, settings=settings)


def test_canonical_text_drops_punctuation():
    assert canonical_text("How do I make  money?!") == "how do i make money"
    assert canonical_text("what's up") == "what's up"


class TestScoring:
    """Tests for raw scores and confidence."""

    def test_rules_and_keywords_add_up(self, matcher):
        match = matcher.classify_intent("how do i make money")
        assert match.intent == "money_advice"
        assert match.score == 8.0
        assert match.confidence == 1.0

    def test_confidence_is_scaled_score(self, matcher):
        match = matcher.classify_intent("hello")
        assert match.intent == "greeting"
        assert match.score == 5.5
        assert match.confidence == pytest.approx(5.5 / 6)

    def test_keywords_count_every_occurrence(self, matcher):
        assert matcher.score("Money money MONEY")["money_advice"] == 6.0

    def test_punctuation_does_not_block_rules(self, matcher):
        assert matcher.score("how do i make money?!")["money_advice"] == 8.0

    def test_every_intent_is_scored(self, matcher, catalog):
        assert list(matcher.score("xyzzy")) == catalog.intents

    def test_no_signal_is_unknown(self, matcher):
        match = matcher.classify_intent("xyzzy")
        assert match.intent == "unknown"
        assert match.confidence == 0.0
        assert all(value == 0 for value in match.scores.values())

    def test_competing_intents(self, matcher):
        match = matcher.classify_intent("market prices for crimes")
        assert match.intent == "market_analysis"
        assert match.scores["market_analysis"] == 3.5
        assert match.scores["crime_advice"] == 2.0

    def test_canonical_rules_need_normalized_text(self, matcher):
        """Rules are written against canonical words, not raw slang."""
        assert matcher.matches_intent("i am broke", "money_advice")
        assert not matcher.matches_intent("xyzzy", "money_advice")
        assert not matcher.matches_intent("i am broke", "bake_cake")


class TestTopMatches:
    """Tests for ranked pattern candidates."""

    def test_ranked_as_confidences(self, matcher):
        top = matcher.get_top_matches("market prices for crimes")
        assert [m.intent for m in top] == ["market_analysis", "crime_advice"]
        assert top[0].score == pytest.approx(3.5 / 6)

    def test_conversational_intents_are_excluded(self, matcher):
        assert matcher.get_top_matches("hello") == []

    def test_rank_keeps_conversational_intents_by_default(self, matcher):
        ranked = matcher.rank(matcher.score("hello"), 3)
        assert [m.intent for m in ranked] == ["greeting"]


class TestRules:
    """Tests for runtime rule additions."""

    def test_add_rule(self, matcher):
        assert matcher.score("stack that bread")["money_advice"] == 0
        matcher.add_rule("money_advice", r"\bstack that bread\b")
        assert matcher.classify_intent("stack that bread").intent == "money_advice"

    def test_add_rule_after_compilation(self, matcher):
        matcher.score("warm up")
        matcher.add_rule("money_advice", r"\bcha ching\b")
        assert matcher.matches_intent("cha ching", "money_advice")

    def test_add_rule_unknown_intent(self, matcher):
        with pytest.raises(UnknownIntentError):
            matcher.add_rule("bake_cake", r"\bcake\b")

    def test_add_rule_bad_pattern(self, matcher):
        before = matcher.stats()["rules"]
        with pytest.raises(PatternRuleError):
            matcher.add_rule("money_advice", "(")
        assert matcher.stats()["rules"] == before

    def test_bad_configured_rule_surfaces_on_use(self, catalog, settings):
        matcher = PatternMatcher(catalog, rules={"money_advice": ["("]}, settings=settings)
        with pytest.raises(PatternRuleError) as exc_info:
            matcher.classify_intent("money")
        assert exc_info.value.intent == "money_advice"

    def test_non_string_rule_is_a_rule_error(self, catalog, settings):
        matcher = PatternMatcher(catalog, rules={"money_advice": [42]}, settings=settings)
        with pytest.raises(PatternRuleError) as exc_info:
            matcher.classify_intent("money")
        assert exc_info.value.pattern == 42

    def test_custom_rules_replace_defaults(self, catalog, settings):
        matcher = PatternMatcher(catalog, rules={}, settings=settings)
        # Keywords still score
        assert matcher.score("how do i make money")["money_advice"] == 2.0


class TestEntities:
    """Tests for shallow entity extraction."""

    def test_name_after_phrase(self, matcher):
        assert matcher.extract_entities("tell me about marcus").player_name == "marcus"

    def test_name_before_verb(self, matcher):
        assert matcher.extract_entities("marcus has a gun").player_name == "marcus"

    def test_common_words_and_districts_are_not_names(self, matcher):
        assert matcher.extract_entities("who is downtown").player_name is None

    def test_numbers_crime_and_district(self, matcher):
        entities = matcher.extract_entities("heist in yorkville with 3 guys")
        assert entities.numbers == [3]
        assert entities.crime_type == "heist"
        assert entities.district == "yorkville"

    def test_multiword_crime_type(self, matcher):
        entities = matcher.extract_entities("car theft downtown for 500 dollars")
        assert entities.numbers == [500]
        assert entities.crime_type == "car theft"
        assert entities.district == "downtown"

    def test_job_type(self, matcher):
        assert matcher.extract_entities("work as a bartender").job_type == "bartender"

    def test_nothing_found(self, matcher):
        entities = matcher.extract_entities("xyzzy")
        assert entities.is_empty
        assert entities.to_dict() == {}

    def test_entities_ride_along_with_match(self, matcher):
        match = matcher.classify_intent("tell me about marcus")
        assert match.intent == "unknown"
        assert match.entities.player_name == "marcus"
