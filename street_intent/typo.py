"""Typo correction against the domain vocabulary.

Two distances live here on purpose:

- ``damerau_levenshtein`` is the strict distance used by ``correct``. Every
  insertion, deletion, substitution and adjacent transposition costs 1.
- ``weighted_distance`` discounts keyboard-adjacent, phonetically similar
  and transposed characters. It only ranks suggestions and answers
  "might this be a typo?" queries; it never rewrites input.
"""

import logging
import re
from collections.abc import Iterable

from street_intent.cache import BoundedCache
from street_intent.config import Settings, get_settings
from street_intent.data.vocabulary import KEYBOARD_ADJACENT, PHONETIC_GROUPS
from street_intent.intent_types import CorrectionResult, Substitution, SubstitutionKind
from street_intent.store import VocabularyStore

logger = logging.getLogger(__name__)

# Words, punctuation runs and whitespace runs; joining the tokens restores the text
TOKEN_RE = re.compile(r"\w+|[^\w\s]+|\s+")

ADJACENT_KEY_COST = 0.5
PHONETIC_COST = 0.7
WEIGHTED_TRANSPOSITION_COST = 0.5


def damerau_levenshtein(s1: str, s2: str) -> int:
    """Optimal string alignment distance between two strings.

    Example:
        >>> damerau_levenshtein("crmie", "crime")
        1
    """
    len1, len2 = len(s1), len(s2)
    if len1 == 0:
        return len2
    if len2 == 0:
        return len1

    d = [[0] * (len2 + 1) for _ in range(len1 + 1)]
    for i in range(len1 + 1):
        d[i][0] = i
    for j in range(len2 + 1):
        d[0][j] = j

    for i in range(1, len1 + 1):
        for j in range(1, len2 + 1):
            cost = 0 if s1[i - 1] == s2[j - 1] else 1
            d[i][j] = min(
                d[i - 1][j] + 1,  # Deletion
                d[i][j - 1] + 1,  # Insertion
                d[i - 1][j - 1] + cost,  # Substitution
            )
            if i > 1 and j > 1 and s1[i - 1] == s2[j - 2] and s1[i - 2] == s2[j - 1]:
                d[i][j] = min(d[i][j], d[i - 2][j - 2] + 1)

    return d[len1][len2]


def is_adjacent_key(a: str, b: str) -> bool:
    return b.lower() in KEYBOARD_ADJACENT.get(a.lower(), ())


def is_phonetically_similar(a: str, b: str) -> bool:
    a, b = a.lower(), b.lower()
    return any(a in group and b in group for group in PHONETIC_GROUPS)


def weighted_distance(s1: str, s2: str) -> float:
    """Edit distance with discounts for likely typing slips.

    Substituting a keyboard neighbour costs 0.5, a phonetically similar
    letter 0.7, and swapping two adjacent letters 0.5. Insertions and
    deletions cost 1.
    """
    len1, len2 = len(s1), len(s2)
    if len1 == 0:
        return float(len2)
    if len2 == 0:
        return float(len1)

    d = [[0.0] * (len2 + 1) for _ in range(len1 + 1)]
    for i in range(len1 + 1):
        d[i][0] = float(i)
    for j in range(len2 + 1):
        d[0][j] = float(j)

    for i in range(1, len1 + 1):
        for j in range(1, len2 + 1):
            a, b = s1[i - 1], s2[j - 1]
            if a == b:
                cost = 0.0
            elif is_adjacent_key(a, b):
                cost = ADJACENT_KEY_COST
            elif is_phonetically_similar(a, b):
                cost = PHONETIC_COST
            else:
                cost = 1.0
            d[i][j] = min(d[i - 1][j] + 1, d[i][j - 1] + 1, d[i - 1][j - 1] + cost)
            if i > 1 and j > 1 and a == s2[j - 2] and s1[i - 2] == b:
                d[i][j] = min(d[i][j], d[i - 2][j - 2] + WEIGHTED_TRANSPOSITION_COST)

    return d[len1][len2]


class TypoCorrector:
    """Corrects misspelled words to their nearest vocabulary word.

    The vocabulary is the owning engine's VocabularyStore; words added
    there are candidates on the next call. Per-token results are memoized
    in a bounded cache.
    """

    def __init__(self, store: VocabularyStore, settings: Settings | None = None):
        self.store = store
        self.settings = settings or get_settings()
        self._cache: BoundedCache[tuple[str, int], tuple[str, int | None]] = BoundedCache(
            self.settings.typo_cache_size, name="typo"
        )
        self._revision = store.revision

    def correct(self, text: str | None, max_distance: int | None = None) -> CorrectionResult:
        """Correct every word token of ``text``.

        Punctuation and whitespace pass through untouched. A word already in
        the vocabulary is kept; otherwise it is replaced by the first
        vocabulary word at the smallest Damerau-Levenshtein distance, if
        that distance is within ``max_distance``.

        Args:
            text: Text to correct, normally already normalized.
            max_distance: Largest distance accepted for a replacement.
                Defaults to ``settings.max_typo_distance``.

        Returns:
            CorrectionResult with the corrected text and one substitution
            per replaced token.
        """
        if not text or not isinstance(text, str):
            return CorrectionResult(original=text or "", corrected="")
        if max_distance is None:
            max_distance = self.settings.max_typo_distance

        corrections: list[Substitution] = []
        tokens = TOKEN_RE.findall(text.lower())
        for index, token in enumerate(tokens):
            if not self._is_candidate(token):
                continue
            replacement, distance = self._correct_token(token, max_distance)
            if distance is not None:
                corrections.append(
                    Substitution(token, replacement, SubstitutionKind.TYPO, distance=distance)
                )
                tokens[index] = replacement

        return CorrectionResult(original=text, corrected="".join(tokens), corrections=corrections)

    def _is_candidate(self, token: str) -> bool:
        # Single letters and anything with digits ("2", "5k") are never typos
        if len(token) < 2 or not token[0].isalnum():
            return False
        return not any(char.isdigit() for char in token)

    def _correct_token(self, token: str, max_distance: int) -> tuple[str, int | None]:
        if self._revision != self.store.revision:
            self._cache.clear()
            self._revision = self.store.revision

        key = (token, max_distance)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        if self.store.has_word(token):
            result: tuple[str, int | None] = (token, None)
        else:
            match = self.find_best_correction(token, max_distance)
            result = match if match else (token, None)
            if match:
                logger.debug(f"Corrected {token!r} -> {match[0]!r} (distance {match[1]})")

        self._cache.put(key, result)
        return result

    def find_best_correction(self, word: str, max_distance: int) -> tuple[str, int] | None:
        """Nearest vocabulary word within ``max_distance``, first found on ties."""
        best: tuple[str, int] | None = None
        for candidate in self.store.vocabulary:
            if abs(len(candidate) - len(word)) > max_distance:
                continue
            distance = damerau_levenshtein(word, candidate)
            if distance <= max_distance and (best is None or distance < best[1]):
                best = (candidate, distance)
                if distance <= 1:
                    break
        return best

    def might_be_typo(self, word: str) -> bool:
        """Whether ``word`` is unknown but close to a vocabulary word."""
        word = word.strip().lower()
        if not word or self.store.has_word(word):
            return False
        return self.find_best_correction(word, self.settings.max_typo_distance) is not None

    def get_suggestions(self, word: str, max_results: int | None = None) -> list[str]:
        """Vocabulary words that ``word`` may have been meant as.

        Ranked by weighted distance, closest first; ties keep vocabulary
        order.
        """
        word = word.strip().lower()
        if not word:
            return []
        limit = max_results or self.settings.max_suggestions
        suggestions = []
        for candidate in self.store.vocabulary:
            if abs(len(candidate) - len(word)) > 2:
                continue
            distance = weighted_distance(word, candidate)
            if distance <= self.settings.suggestion_max_distance:
                suggestions.append((distance, candidate))
        suggestions.sort(key=lambda item: item[0])
        return [candidate for _, candidate in suggestions[:limit]]

    def add_word(self, word: str) -> bool:
        """Add a word to the vocabulary; cached results are dropped on the next call."""
        return self.store.add_word(word)

    def add_words(self, words: Iterable[str]) -> int:
        return self.store.add_words(words)

    def clear_cache(self) -> None:
        self._cache.clear()

    def stats(self) -> dict:
        return {
            "vocabulary_size": len(self.store.vocabulary),
            "cache": self._cache.stats(),
        }
