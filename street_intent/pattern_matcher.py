"""Trigger-rule and keyword scoring: the precision-oriented first pass.

Every intent scores a fixed bonus per matching trigger rule plus the
weight of each of its keywords per occurrence in the text. The best score
is scaled into a confidence. Rules are compiled on first use so that a
malformed rule surfaces as a PatternRuleError at classification time.
"""

import logging
import re
from collections.abc import Mapping

from street_intent.catalog import IntentCatalog
from street_intent.config import Settings, get_settings
from street_intent.data.patterns import (
    COMMON_WORDS,
    CRIME_TYPES,
    DISTRICTS,
    JOB_TYPES,
    NAME_PATTERNS,
    TRIGGER_RULES,
)
from street_intent.exceptions import PatternRuleError
from street_intent.intent_types import (
    UNKNOWN_INTENT,
    ExtractedEntities,
    IntentScore,
    PatternMatch,
)

logger = logging.getLogger(__name__)

WORD_RE = re.compile(r"[\w']+")
NUMBER_RE = re.compile(r"\d+")

# Conversational intents never offered as "did you mean" alternatives
NON_SUGGESTIBLE_INTENTS = frozenset({UNKNOWN_INTENT, "greeting", "thanks", "who_are_you"})


def canonical_text(text: str) -> str:
    """Lowercased word tokens joined by single spaces, punctuation dropped."""
    return " ".join(WORD_RE.findall(text.lower()))


class PatternMatcher:
    """Scores text against per-intent trigger rules and keyword weights.

    Example:
        >>> matcher = PatternMatcher(catalog)
        >>> matcher.classify_intent("how do i make money").intent
        'money_advice'
    """

    def __init__(
        self,
        catalog: IntentCatalog,
        rules: Mapping[str, list[str]] | None = None,
        settings: Settings | None = None,
    ):
        self.catalog = catalog
        self.settings = settings or get_settings()
        self._rules: dict[str, list[str]] = {
            intent: list(patterns)
            for intent, patterns in (TRIGGER_RULES if rules is None else rules).items()
        }
        self._compiled: dict[str, list[re.Pattern[str]]] | None = None
        self._keywords: dict[str, dict[str, float]] | None = None
        self._name_patterns = [re.compile(pattern) for pattern in NAME_PATTERNS]
        self._common_words = frozenset(COMMON_WORDS) | frozenset(DISTRICTS)

    # ==========================================================================
    # Scoring
    # ==========================================================================

    def score(self, text: str) -> dict[str, float]:
        """Raw score of every catalog intent, in catalog order.

        Raises:
            PatternRuleError: If a trigger rule does not compile.
        """
        canonical = canonical_text(text)
        scores = {intent: 0.0 for intent in self.catalog.intents}

        for intent, patterns in self._compiled_rules().items():
            if intent not in scores:
                continue
            for pattern in patterns:
                if pattern.search(canonical):
                    scores[intent] += self.settings.rule_bonus

        for word in canonical.split():
            for intent, weight in self._keyword_index().get(word, {}).items():
                scores[intent] += weight

        return scores

    def classify_intent(self, text: str) -> PatternMatch:
        """Pick the highest-scoring intent.

        Ties go to the intent listed first in the catalog. Confidence is
        ``min(1, score / pattern_score_scale)``.

        Raises:
            PatternRuleError: If a trigger rule does not compile.
        """
        scores = self.score(text)
        best_intent, best_score = UNKNOWN_INTENT, 0.0
        for intent, value in scores.items():
            if value > best_score:
                best_intent, best_score = intent, value

        return PatternMatch(
            intent=best_intent,
            confidence=self._confidence(best_score),
            score=best_score,
            scores=scores,
            entities=self.extract_entities(text),
        )

    def get_top_matches(self, text: str, count: int = 3) -> list[IntentScore]:
        """Best-scoring task intents with a positive score, as confidences.

        Conversational intents (greeting, thanks, who_are_you) and
        ``unknown`` are never included.
        """
        return self.rank(self.score(text), count, exclude=NON_SUGGESTIBLE_INTENTS)

    def rank(
        self,
        scores: dict[str, float],
        count: int,
        exclude: frozenset[str] = frozenset({UNKNOWN_INTENT}),
    ) -> list[IntentScore]:
        """Turn raw scores into the best ``count`` positive candidates.

        Ties keep catalog order.
        """
        ranked = sorted(
            ((intent, value) for intent, value in scores.items() if intent not in exclude and value > 0),
            key=lambda item: item[1],
            reverse=True,
        )
        return [
            IntentScore(intent, self.catalog.friendly_name(intent), self._confidence(value))
            for intent, value in ranked[:count]
        ]

    def matches_intent(self, text: str, intent: str) -> bool:
        """Whether any trigger rule of ``intent`` matches the text."""
        canonical = canonical_text(text)
        return any(pattern.search(canonical) for pattern in self._compiled_rules().get(intent, []))

    def _confidence(self, score: float) -> float:
        return min(1.0, score / self.settings.pattern_score_scale)

    # ==========================================================================
    # Entities
    # ==========================================================================

    def extract_entities(self, text: str) -> ExtractedEntities:
        """Pull a character name, numbers and known domain terms from text."""
        lowered = text.lower()
        entities = ExtractedEntities()

        for pattern in self._name_patterns:
            match = pattern.search(lowered)
            if match and match.group(1) not in self._common_words:
                entities.player_name = match.group(1)
                break

        entities.numbers = [int(number) for number in NUMBER_RE.findall(lowered)]
        entities.crime_type = _first_mentioned(lowered, CRIME_TYPES)
        entities.job_type = _first_mentioned(lowered, JOB_TYPES)
        entities.district = _first_mentioned(lowered, DISTRICTS)
        return entities

    # ==========================================================================
    # Rules
    # ==========================================================================

    def add_rule(self, intent: str, pattern: str) -> None:
        """Add a trigger rule for a catalog intent.

        Raises:
            UnknownIntentError: If the intent is not in the catalog.
            PatternRuleError: If the pattern does not compile.
        """
        self.catalog.get(intent)
        compiled = _compile(intent, pattern)
        self._rules.setdefault(intent, []).append(pattern)
        if self._compiled is not None:
            self._compiled.setdefault(intent, []).append(compiled)

    def _compiled_rules(self) -> dict[str, list[re.Pattern[str]]]:
        if self._compiled is None:
            self._compiled = {
                intent: [_compile(intent, pattern) for pattern in patterns]
                for intent, patterns in self._rules.items()
            }
            logger.debug(
                f"Compiled {sum(len(p) for p in self._compiled.values())} trigger rules"
            )
        return self._compiled

    def _keyword_index(self) -> dict[str, dict[str, float]]:
        """Keyword -> {intent: weight}; catalog keywords are fixed after load."""
        if self._keywords is None:
            self._keywords = {}
            for definition in self.catalog:
                for word, weight in definition.keywords.items():
                    self._keywords.setdefault(word, {})[definition.key] = weight
        return self._keywords

    def stats(self) -> dict:
        return {
            "intents_with_rules": len(self._rules),
            "rules": sum(len(patterns) for patterns in self._rules.values()),
            "keywords": len(self._keyword_index()),
        }


def _compile(intent: str, pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except (re.error, TypeError) as e:
        raise PatternRuleError(intent, pattern, str(e)) from e


def _first_mentioned(text: str, terms: list[str]) -> str | None:
    for term in terms:
        if term in text:
            return term
    return None
