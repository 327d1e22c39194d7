"""Hybrid intent classifier: the single public entry point.

Pipeline per call:
1. Trim; empty input is ``unknown`` with confidence 0
2. Classification cache lookup on the lowercased input
3. Preprocess: normalizer, then typo corrector
4. Pattern matcher; a decisive verdict short-circuits the semantic engine
5. Semantic engine on the same preprocessed text
6. Combiner merges the verdicts; the summary is cached

Each ClassifierEngine owns its vocabulary store, catalog, caches and
stats. Build one at startup and pass it to whoever needs it.
"""

import logging
from dataclasses import asdict, dataclass

from street_intent.cache import BoundedCache
from street_intent.catalog import IntentCatalog
from street_intent.combiner import Combiner
from street_intent.config import Settings, get_settings
from street_intent.data.exemplars import INTENT_EXEMPLARS
from street_intent.intent_types import (
    UNKNOWN_INTENT,
    ClassificationResult,
    ClassificationSource,
    CorrectionResult,
    IntentScore,
    IntentSuggestion,
    NormalizationResult,
    PatternMatch,
    PreprocessTrace,
)
from street_intent.normalizer import TextNormalizer
from street_intent.pattern_matcher import NON_SUGGESTIBLE_INTENTS, PatternMatcher
from street_intent.semantic import SemanticEngine
from street_intent.store import WORD_RE, VocabularyStore
from street_intent.typo import TypoCorrector

logger = logging.getLogger(__name__)

PATTERN_SOURCES = frozenset(
    {
        ClassificationSource.PATTERN_HIGH,
        ClassificationSource.PATTERN_PREFERRED,
        ClassificationSource.PATTERN_ONLY,
    }
)
SEMANTIC_SOURCES = frozenset(
    {
        ClassificationSource.SEMANTIC_PREFERRED,
        ClassificationSource.SEMANTIC_ONLY,
        ClassificationSource.SEMANTIC_FALLBACK,
    }
)


@dataclass
class CachedClassification:
    """What the classification cache keeps per input."""

    intent: str
    confidence: float
    friendly_name: str
    source: ClassificationSource


@dataclass
class ClassifierStats:
    """Counters of which branch decided each classification."""

    pattern_hits: int = 0
    semantic_hits: int = 0
    combined_hits: int = 0
    cache_hits: int = 0
    total_classifications: int = 0

    def record(self, source: ClassificationSource) -> None:
        if source in PATTERN_SOURCES:
            self.pattern_hits += 1
        elif source in SEMANTIC_SOURCES:
            self.semantic_hits += 1
        elif source == ClassificationSource.COMBINED_AGREEMENT:
            self.combined_hits += 1

    def to_dict(self) -> dict:
        total = max(1, self.total_classifications)
        return {
            **asdict(self),
            "hit_rate": self.cache_hits / total,
            "pattern_rate": self.pattern_hits / total,
            "semantic_rate": self.semantic_hits / total,
            "combined_rate": self.combined_hits / total,
        }


class ClassifierEngine:
    """Normalizes, corrects and classifies free-form player input.

    Example:
        >>> engine = ClassifierEngine()
        >>> result = engine.classify("need that paper rn")
        >>> result.intent
        'money_advice'
        >>> result.preprocessed.normalized
        'need money right now'
    """

    def __init__(
        self,
        catalog: IntentCatalog | None = None,
        store: VocabularyStore | None = None,
        rules: dict[str, list[str]] | None = None,
        settings: Settings | None = None,
    ):
        """Initialize the engine and every component it owns.

        Args:
            catalog: Intent catalog. Defaults to the built-in catalog.
            store: Vocabulary tables. Defaults to the built-in tables.
            rules: Trigger rules per intent. Defaults to the built-in rules.
            settings: Thresholds and cache sizes. Defaults to get_settings().
        """
        self.settings = settings or get_settings()
        if catalog is None:
            catalog = IntentCatalog.from_mapping(INTENT_EXEMPLARS)
        self.catalog = catalog
        self.store = store if store is not None else VocabularyStore()

        self.normalizer = TextNormalizer(self.store)
        self.corrector = TypoCorrector(self.store, self.settings)
        self.semantic = SemanticEngine(
            self.catalog, self.store, self.normalizer, self.corrector, self.settings
        )
        self.pattern = PatternMatcher(self.catalog, rules, self.settings)
        self.combiner = Combiner(self.settings)

        self._cache: BoundedCache[str, CachedClassification] = BoundedCache(
            self.settings.classification_cache_size, name="classification"
        )
        self._stats = ClassifierStats()

        learned = self._learn_catalog_words()
        self._revision = self.store.revision
        logger.info(
            f"Classifier ready: {len(self.catalog)} intents, "
            f"{len(self.store.vocabulary)} vocabulary words ({learned} from catalog)"
        )

    # ==========================================================================
    # Classification
    # ==========================================================================

    def classify(self, text: str | None) -> ClassificationResult:
        """Classify raw player input.

        Never raises for any input: anything the engine cannot place comes
        back as ``unknown`` with confidence 0.

        Args:
            text: Raw utterance as typed.

        Returns:
            ClassificationResult. Cache hits carry only the summary fields
            and are marked ``from_cache``.
        """
        trimmed = text.strip() if isinstance(text, str) else ""
        if not trimmed:
            return self._result(UNKNOWN_INTENT, 0.0, ClassificationSource.EMPTY_INPUT)

        self._check_revision()
        key = trimmed.lower()
        cached = self._cache.get(key)
        if cached is not None:
            self._stats.cache_hits += 1
            return self._result(cached.intent, cached.confidence, cached.source, from_cache=True)

        self._stats.total_classifications += 1
        trace = self.preprocess(trimmed)
        pattern = self._pattern_classify(trace.normalized)

        semantic = None
        if self.combiner.is_decisive(pattern):
            top_matches = self.pattern.rank(pattern.scores, self.settings.top_matches)
        else:
            semantic = self.semantic.classify_intent(trace.normalized)
            top_matches = semantic.top_matches

        verdict = self.combiner.combine(pattern, semantic)
        self._stats.record(verdict.source)
        logger.debug(f"Classified {trimmed!r} as {verdict.intent} via {verdict.source.value}")

        result = self._result(
            verdict.intent,
            verdict.confidence,
            verdict.source,
            preprocessed=trace,
            top_matches=top_matches,
            pattern=pattern,
            semantic=semantic,
        )
        self._cache.put(
            key,
            CachedClassification(
                result.intent, result.confidence, result.friendly_name, result.source
            ),
        )
        return result

    def preprocess(self, text: str) -> PreprocessTrace:
        """Normalize then typo-correct text.

        Returns:
            PreprocessTrace whose ``normalized`` is the corrected text and
            whose changes list normalizer substitutions before corrections.
        """
        normalization, correction = self._run_preprocess(text)
        return PreprocessTrace(
            original=text,
            normalized=correction.corrected,
            changes=normalization.changes + correction.corrections,
        )

    def _run_preprocess(self, text: str) -> tuple[NormalizationResult, CorrectionResult]:
        normalization = self.normalizer.normalize(text)
        correction = self.corrector.correct(normalization.normalized)
        return normalization, correction

    def _pattern_classify(self, text: str) -> PatternMatch:
        try:
            return self.pattern.classify_intent(text)
        except Exception as e:
            logger.warning(f"Pattern matcher failed, continuing with semantics only: {e}", exc_info=True)
            return PatternMatch(intent=UNKNOWN_INTENT, confidence=0.0)

    def _result(
        self,
        intent: str,
        confidence: float,
        source: ClassificationSource,
        **fields,
    ) -> ClassificationResult:
        return ClassificationResult(
            intent=intent,
            confidence=confidence,
            friendly_name=self.catalog.friendly_name(intent),
            source=source,
            **fields,
        )

    # ==========================================================================
    # Diagnostics
    # ==========================================================================

    def get_top_matches(self, text: str, n: int = 3) -> list[IntentScore]:
        """Best semantic candidates for the input, for clarification prompts."""
        return self.semantic.rank_intents(self.preprocess(text).normalized)[:n]

    def get_concepts(self, text: str) -> list[str]:
        """Concept clusters mentioned by the input, in first-seen order."""
        return self.semantic.extract_concepts(self.preprocess(text).normalized)

    def is_similar_to(self, text: str, reference: str, threshold: float | None = None) -> bool:
        """Whether two utterances are paraphrases (e.g. a repeated question)."""
        return self.semantic.are_similar(
            self.preprocess(text).normalized,
            self.preprocess(reference).normalized,
            threshold,
        )

    def get_suggestions(self, text: str, n: int = 4) -> list[IntentSuggestion]:
        """Intents the player may have meant, each with a hint to rephrase."""
        return [
            IntentSuggestion(
                intent=match.intent,
                friendly_name=match.friendly_name,
                confidence=match.score,
                suggestion=self.catalog.description(match.intent),
            )
            for match in self.get_top_matches(text, n)
        ]

    def get_clarifying_question(
        self, text: str, top_matches: list[IntentScore] | None = None
    ) -> str | None:
        """A question asking which of the closest intents the player meant.

        Conversational intents and zero-score candidates are never offered.

        Returns:
            None when nothing comes close.
        """
        if top_matches is None:
            top_matches = self.get_top_matches(text)
        names = [
            m.friendly_name
            for m in top_matches
            if m.score > 0 and m.intent not in NON_SUGGESTIBLE_INTENTS
        ]
        if not names:
            return None
        if len(names) == 1:
            return f"Did you mean you want help with {names[0]}?"
        if len(names) == 2:
            return f"Are you asking about {names[0]} or {names[1]}?"
        return f"I think you might be asking about: {', '.join(names[:3])}. Which one?"

    def analyze(self, text: str) -> dict:
        """Every intermediate step for one input, for debugging and tuning."""
        normalization, correction = self._run_preprocess(text)
        corrected = correction.corrected
        pattern = self._pattern_classify(corrected)
        semantic = self.semantic.classify_intent(corrected)

        return {
            "input": {
                "original": text,
                "normalized": normalization.normalized,
                "corrected": corrected,
                "changes": [
                    {**change.to_dict(), "stage": "normalize"} for change in normalization.changes
                ]
                + [{**change.to_dict(), "stage": "typo"} for change in correction.corrections],
            },
            "pattern": {
                "intent": pattern.intent,
                "confidence": pattern.confidence,
                "score": pattern.score,
                "entities": pattern.entities.to_dict(),
            },
            "semantic": {
                "intent": semantic.intent,
                "confidence": semantic.confidence,
                "similarity": semantic.similarity,
                "top_matches": [match.to_dict() for match in semantic.top_matches],
            },
            "concepts": self.semantic.extract_concepts(corrected),
            "final": self.classify(text).to_dict(),
        }

    # ==========================================================================
    # Runtime Vocabulary Updates
    # ==========================================================================

    def add_word(self, word: str) -> bool:
        """Add a word to the typo-correction vocabulary."""
        return self.store.add_word(word)

    def add_phrase(self, phrase: str, canonical: str) -> None:
        """Add a multi-word idiom and its canonical rewrite."""
        self.store.add_idiom(phrase, canonical)
        logger.info(f"Added idiom {phrase!r} -> {canonical!r}")

    add_idiom = add_phrase

    def add_slang(self, term: str, canonical: str) -> None:
        self.store.add_slang(term, canonical)
        logger.info(f"Added slang {term!r} -> {canonical!r}")

    def add_abbreviation(self, term: str, canonical: str) -> None:
        self.store.add_abbreviation(term, canonical)

    def add_word_to_cluster(self, word: str, cluster: str) -> None:
        """Make a word a member of a concept cluster.

        Raises:
            UnknownClusterError: If the cluster does not exist.
        """
        self.store.add_word_to_cluster(word, cluster)

    def set_word_importance(self, word: str, weight: float) -> None:
        """Set how much a word contributes to its clusters.

        Raises:
            VocabularyError: If the weight is not positive.
        """
        self.store.set_word_importance(word, weight)

    def add_exemplar(self, intent: str, phrase: str) -> bool:
        """Teach an intent a new example phrasing.

        Returns:
            True if the phrase was new for the intent.

        Raises:
            UnknownIntentError: If the intent is not in the catalog.
        """
        added = self.catalog.add_exemplar(intent, phrase)
        if added:
            self._learn_words(phrase)
            self.semantic.invalidate()
            self._cache.clear()
            logger.info(f"Added exemplar to {intent}: {phrase!r}")
        return added

    def _learn_catalog_words(self) -> int:
        learned = 0
        for definition in self.catalog:
            learned += self.store.add_words(definition.keywords)
        for definition in self.catalog:
            for phrase in definition.exemplars:
                learned += self._learn_words(phrase)
        return learned

    def _learn_words(self, phrase: str) -> int:
        normalized = self.normalizer.normalize(phrase).normalized
        return self.store.add_words(word for word in WORD_RE.findall(normalized) if len(word) > 1)

    def _check_revision(self) -> None:
        if self._revision != self.store.revision:
            logger.debug("Vocabulary changed, clearing classification cache")
            self._cache.clear()
            self._revision = self.store.revision

    # ==========================================================================
    # Cache & Stats
    # ==========================================================================

    def clear_cache(self) -> None:
        """Empty every cache the engine owns."""
        self._cache.clear()
        self.semantic.clear_cache()
        self.corrector.clear_cache()

    def stats(self) -> dict:
        return {
            **self._stats.to_dict(),
            "cache_size": len(self._cache),
            "cache": self._cache.stats(),
            "vocabulary": self.store.stats(),
            "semantic": self.semantic.stats(),
            "typo": self.corrector.stats(),
        }

    def reset_stats(self) -> None:
        self._stats = ClassifierStats()
