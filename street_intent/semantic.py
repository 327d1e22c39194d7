"""Bag-of-concepts semantic matching.

Every phrase is projected onto a fixed vector space whose dimensions are
the concept clusters: each known word adds its importance weight to the
dimension of every cluster it belongs to, and the sum is scaled to unit
length. An intent's position in that space is the centroid of its
exemplar vectors. Input is classified by blending how well it fits each
centroid with how closely it matches the intent's single best exemplar.
"""

import logging
import math
from dataclasses import dataclass

from street_intent.cache import BoundedCache
from street_intent.catalog import IntentCatalog
from street_intent.config import Settings, get_settings
from street_intent.intent_types import UNKNOWN_INTENT, IntentScore, SemanticMatch
from street_intent.normalizer import TextNormalizer
from street_intent.store import WORD_RE, VocabularyStore
from street_intent.typo import TypoCorrector

logger = logging.getLogger(__name__)

Vector = tuple[float, ...]


def normalize_vector(values: list[float]) -> Vector:
    """Scale to unit length; the zero vector stays zero."""
    magnitude = math.sqrt(sum(v * v for v in values))
    if magnitude == 0:
        return tuple(values)
    return tuple(v / magnitude for v in values)


def cosine_similarity(a: Vector, b: Vector) -> float:
    """Cosine of the angle between two vectors; 0 if either is zero."""
    if len(a) != len(b):
        return 0.0
    dot = sum(x * y for x, y in zip(a, b))
    mag_a = math.sqrt(sum(x * x for x in a))
    mag_b = math.sqrt(sum(y * y for y in b))
    if mag_a == 0 or mag_b == 0:
        return 0.0
    return dot / (mag_a * mag_b)


def compute_centroid(vectors: list[Vector], dimensions: int) -> Vector:
    """Unit-length mean of ``vectors``."""
    if not vectors:
        return (0.0,) * dimensions
    totals = [0.0] * dimensions
    for vector in vectors:
        for i, value in enumerate(vector):
            totals[i] += value
    return normalize_vector([total / len(vectors) for total in totals])


@dataclass
class SimilarPhrase:
    """A candidate phrase ranked by similarity to an input."""

    phrase: str
    similarity: float


@dataclass
class _IntentIndex:
    exemplar_vectors: dict[str, list[Vector]]
    centroids: dict[str, Vector]


class SemanticEngine:
    """Classifies phrases by cosine similarity in concept-cluster space.

    Exemplar vectors and centroids are built on first use and rebuilt only
    after the catalog or the vocabulary store changes.
    """

    def __init__(
        self,
        catalog: IntentCatalog,
        store: VocabularyStore,
        normalizer: TextNormalizer,
        corrector: TypoCorrector,
        settings: Settings | None = None,
    ):
        self.catalog = catalog
        self.store = store
        self.normalizer = normalizer
        self.corrector = corrector
        self.settings = settings or get_settings()
        self._phrase_cache: BoundedCache[str, Vector] = BoundedCache(
            self.settings.phrase_cache_size, name="phrase_vectors"
        )
        self._index: _IntentIndex | None = None
        self._revision = store.revision

    @property
    def dimensions(self) -> int:
        return len(self.store.clusters)

    # ==========================================================================
    # Vectors
    # ==========================================================================

    def phrase_to_vector(self, phrase: str) -> Vector:
        """Project a phrase onto the cluster dimensions.

        The phrase is normalized and typo-corrected first. Single-character
        tokens are ignored. Returns the zero vector when no word of the
        phrase belongs to any cluster.
        """
        self._check_revision()
        cached = self._phrase_cache.get(phrase)
        if cached is not None:
            return cached

        normalized = self.normalizer.normalize(phrase).normalized
        corrected = self.corrector.correct(normalized).corrected
        positions = {name: i for i, name in enumerate(self.store.clusters)}

        values = [0.0] * len(positions)
        for word in WORD_RE.findall(corrected.lower()):
            if len(word) < 2:
                continue
            weight = self.store.weight(word)
            for cluster in self.store.clusters_for(word):
                values[positions[cluster]] += weight

        vector = normalize_vector(values)
        self._phrase_cache.put(phrase, vector)
        return vector

    def is_zero(self, vector: Vector) -> bool:
        return not any(vector)

    # ==========================================================================
    # Intent Index
    # ==========================================================================

    def initialize(self) -> None:
        """Vectorize every exemplar and compute each intent's centroid."""
        self._check_revision()
        exemplar_vectors: dict[str, list[Vector]] = {}
        centroids: dict[str, Vector] = {}
        for definition in self.catalog:
            vectors = [self.phrase_to_vector(phrase) for phrase in definition.exemplars]
            exemplar_vectors[definition.key] = vectors
            if vectors:
                centroids[definition.key] = compute_centroid(vectors, self.dimensions)

        self._index = _IntentIndex(exemplar_vectors=exemplar_vectors, centroids=centroids)
        logger.info(
            f"Semantic index built: {len(centroids)} intents, {self.dimensions} dimensions"
        )

    def invalidate(self) -> None:
        """Drop the intent index so it is rebuilt on next use."""
        self._index = None

    def _check_revision(self) -> None:
        if self._revision != self.store.revision:
            logger.debug("Vocabulary changed, dropping phrase vectors and intent index")
            self._phrase_cache.clear()
            self._index = None
            self._revision = self.store.revision

    def _ensure_index(self) -> _IntentIndex:
        self._check_revision()
        if self._index is None:
            self.initialize()
        return self._index  # type: ignore[return-value]

    def centroid(self, intent: str) -> Vector | None:
        return self._ensure_index().centroids.get(intent)

    # ==========================================================================
    # Classification
    # ==========================================================================

    def rank_intents(self, phrase: str) -> list[IntentScore]:
        """Score every intent that has exemplars, best first.

        The score is ``centroid_weight * centroid similarity +
        exemplar_weight * best single-exemplar similarity``. Ties keep
        catalog order. Empty when the phrase has no known words.
        """
        vector = self.phrase_to_vector(phrase)
        if self.is_zero(vector):
            return []

        index = self._ensure_index()
        scores = []
        for intent, centroid in index.centroids.items():
            best_exemplar = max(
                [0.0]
                + [cosine_similarity(vector, exemplar) for exemplar in index.exemplar_vectors[intent]]
            )
            blended = (
                self.settings.centroid_weight * cosine_similarity(vector, centroid)
                + self.settings.exemplar_weight * best_exemplar
            )
            scores.append(IntentScore(intent, self.catalog.friendly_name(intent), blended))

        scores.sort(key=lambda score: score.score, reverse=True)
        return scores

    def classify_intent(self, phrase: str) -> SemanticMatch:
        """Classify a phrase by vector similarity.

        Confidence rewards both the absolute top score and its separation
        from the runner-up: ``0.7 * top + 0.3 * (top - second) / top``.

        Returns:
            SemanticMatch; ``unknown`` with confidence 0 for a phrase with
            no recognizable words.
        """
        ranked = self.rank_intents(phrase)
        if not ranked:
            return SemanticMatch(intent=UNKNOWN_INTENT, confidence=0.0)

        top_matches = ranked[: self.settings.top_matches]
        best = top_matches[0].score
        second = top_matches[1].score if len(top_matches) > 1 else 0.0
        separation = (best - second) / best if best > 0 else 0.0
        confidence = best * 0.7 + separation * 0.3

        return SemanticMatch(
            intent=top_matches[0].intent,
            confidence=confidence,
            similarity=best,
            top_matches=top_matches,
        )

    # ==========================================================================
    # Phrase Comparison
    # ==========================================================================

    def phrase_similarity(self, a: str, b: str) -> float:
        return cosine_similarity(self.phrase_to_vector(a), self.phrase_to_vector(b))

    def are_similar(self, a: str, b: str, threshold: float | None = None) -> bool:
        """Whether two phrases are paraphrases of each other."""
        if threshold is None:
            threshold = self.settings.similarity_threshold
        return self.phrase_similarity(a, b) >= threshold

    def find_similar(self, phrase: str, candidates: list[str], top_k: int = 5) -> list[SimilarPhrase]:
        """Rank candidate phrases by similarity to ``phrase``."""
        vector = self.phrase_to_vector(phrase)
        scored = [
            SimilarPhrase(candidate, cosine_similarity(vector, self.phrase_to_vector(candidate)))
            for candidate in candidates
        ]
        scored.sort(key=lambda item: item.similarity, reverse=True)
        return scored[:top_k]

    def extract_concepts(self, phrase: str) -> list[str]:
        """Cluster names touched by the phrase's words, in first-seen order."""
        normalized = self.normalizer.normalize(phrase).normalized
        concepts: dict[str, None] = {}
        for word in WORD_RE.findall(normalized):
            if len(word) < 2:
                continue
            for cluster in self.store.clusters_for(word):
                concepts[cluster] = None
        return list(concepts)

    # ==========================================================================
    # Runtime Updates
    # ==========================================================================

    def add_word_to_cluster(self, word: str, cluster: str) -> None:
        """Add a word to a concept cluster; vectors are rebuilt on next use."""
        self.store.add_word_to_cluster(word, cluster)

    def set_word_importance(self, word: str, weight: float) -> None:
        self.store.set_word_importance(word, weight)

    def clear_cache(self) -> None:
        self._phrase_cache.clear()

    def stats(self) -> dict:
        self._check_revision()
        return {
            "initialized": self._index is not None,
            "intents": len(self._index.centroids) if self._index else 0,
            "dimensions": self.dimensions,
            "clusters": len(self.store.clusters),
            "word_mappings": len(self.store.word_clusters),
            "phrase_cache": self._phrase_cache.stats(),
        }
