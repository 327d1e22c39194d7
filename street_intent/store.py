"""Mutable vocabulary tables owned by one classifier engine.

The store holds everything the preprocessing and vectorizing stages look
up: the rewrite tables, the typo-correction vocabulary, the concept
clusters and the word importance weights. Each engine gets its own copy,
so runtime additions never leak between engines.
"""

import logging
import re
from collections.abc import Iterable

from street_intent.data.clusters import WORD_CLUSTERS, WORD_IMPORTANCE
from street_intent.data.lexicon import ABBREVIATIONS, CONTRACTIONS, IDIOM_MAP, SLANG_MAP
from street_intent.data.vocabulary import DOMAIN_VOCABULARY
from street_intent.exceptions import UnknownClusterError, VocabularyError

logger = logging.getLogger(__name__)

WORD_RE = re.compile(r"\w+")


class VocabularyStore:
    """Rewrite tables, vocabulary, clusters and importance weights.

    The typo vocabulary is an insertion-ordered set: ties between equally
    close corrections go to the word that was added first.
    """

    def __init__(
        self,
        slang: dict[str, str] | None = None,
        abbreviations: dict[str, str] | None = None,
        contractions: dict[str, str] | None = None,
        idioms: dict[str, str] | None = None,
        vocabulary: Iterable[str] | None = None,
        clusters: dict[str, list[str]] | None = None,
        importance: dict[str, float] | None = None,
    ):
        self.slang = _lowered(SLANG_MAP if slang is None else slang)
        self.abbreviations = _lowered(ABBREVIATIONS if abbreviations is None else abbreviations)
        self.contractions = _lowered(CONTRACTIONS if contractions is None else contractions)
        self.idioms = _lowered(IDIOM_MAP if idioms is None else idioms)

        self.clusters: dict[str, list[str]] = {}
        self.word_clusters: dict[str, list[str]] = {}
        for name, words in (WORD_CLUSTERS if clusters is None else clusters).items():
            self.clusters[name] = []
            for word in words:
                self._link(word.lower(), name)

        self.importance: dict[str, float] = dict(
            WORD_IMPORTANCE if importance is None else importance
        )

        # Bumped on every change; components holding derived caches compare against it
        self.revision = 0

        self._vocabulary: dict[str, None] = {}
        self.add_words(DOMAIN_VOCABULARY if vocabulary is None else vocabulary)
        for table in (self.contractions, self.abbreviations, self.slang, self.idioms):
            for canonical in table.values():
                self.add_words(WORD_RE.findall(canonical))
        for words in self.clusters.values():
            self.add_words(words)
        self.add_words(self.importance)
        self.revision = 0

    # ==========================================================================
    # Lookups
    # ==========================================================================

    @property
    def vocabulary(self) -> list[str]:
        """Vocabulary words in insertion order."""
        return list(self._vocabulary)

    def has_word(self, word: str) -> bool:
        return word in self._vocabulary

    @property
    def cluster_names(self) -> list[str]:
        """Cluster names in dimension order."""
        return list(self.clusters)

    def clusters_for(self, word: str) -> list[str]:
        return self.word_clusters.get(word, [])

    def weight(self, word: str) -> float:
        return self.importance.get(word, 1.0)

    # ==========================================================================
    # Mutation
    # ==========================================================================

    def add_word(self, word: str) -> bool:
        """Add a word to the typo vocabulary.

        Returns:
            True if the word was new.
        """
        word = word.strip().lower()
        if not word or word in self._vocabulary:
            return False
        self._vocabulary[word] = None
        self.revision += 1
        return True

    def add_words(self, words: Iterable[str]) -> int:
        """Add several words; returns how many were new."""
        return sum(1 for word in words if self.add_word(word))

    def add_slang(self, term: str, canonical: str) -> None:
        self.slang[_key(term)] = _value(canonical)
        self.add_words(WORD_RE.findall(canonical.lower()))
        self.revision += 1

    def add_abbreviation(self, term: str, canonical: str) -> None:
        self.abbreviations[_key(term)] = _value(canonical)
        self.add_words(WORD_RE.findall(canonical.lower()))
        self.revision += 1

    def add_idiom(self, phrase: str, canonical: str) -> None:
        self.idioms[_key(phrase)] = _value(canonical)
        self.add_words(WORD_RE.findall(canonical.lower()))
        self.revision += 1

    def add_word_to_cluster(self, word: str, cluster: str) -> None:
        """Make ``word`` a member of an existing concept cluster.

        Raises:
            UnknownClusterError: If the cluster does not exist. The set of
                clusters is the vector space's dimensions and cannot grow.
        """
        if cluster not in self.clusters:
            raise UnknownClusterError(f"Unknown cluster: {cluster!r}")
        word = _key(word)
        if cluster in self.word_clusters.get(word, []):
            return
        self._link(word, cluster)
        self.add_word(word)
        self.revision += 1

    def set_word_importance(self, word: str, weight: float) -> None:
        """Set the importance weight of a word.

        Raises:
            VocabularyError: If the weight is not positive.
        """
        if weight <= 0:
            raise VocabularyError(f"Importance weight must be positive, got {weight}")
        self.importance[_key(word)] = float(weight)
        self.revision += 1

    def stats(self) -> dict:
        return {
            "slang_terms": len(self.slang),
            "abbreviations": len(self.abbreviations),
            "contractions": len(self.contractions),
            "idioms": len(self.idioms),
            "vocabulary": len(self._vocabulary),
            "clusters": len(self.clusters),
            "clustered_words": len(self.word_clusters),
            "weighted_words": len(self.importance),
        }

    def _link(self, word: str, cluster: str) -> None:
        self.clusters[cluster].append(word)
        self.word_clusters.setdefault(word, []).append(cluster)


def _lowered(table: dict[str, str]) -> dict[str, str]:
    return {key.lower(): value.lower() for key, value in table.items()}


def _key(text: str) -> str:
    key = " ".join(text.lower().split())
    if not key:
        raise VocabularyError("Vocabulary term must not be blank")
    return key


def _value(text: str) -> str:
    value = " ".join(text.lower().split())
    if not value:
        raise VocabularyError("Canonical form must not be blank")
    return value
