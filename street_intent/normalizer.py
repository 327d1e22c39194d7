"""Text normalizer: rewrites street slang and shorthand into canonical words.

Normalization runs in three stages:
1. Clean the raw text (whitespace, quote glyphs, repeated punctuation, case)
2. Expand multi-word idioms, longest first, on whole-word boundaries
3. Rewrite each token through the contraction, abbreviation and slang tables

Stages 2 and 3 repeat until a round changes nothing, so a rewrite that
produces another known form (a slang term whose canonical word is itself slang) is
followed through and normalizing the output again is always a no-op.
"""

import logging
import re

from street_intent.intent_types import NormalizationResult, Substitution, SubstitutionKind
from street_intent.store import VocabularyStore

logger = logging.getLogger(__name__)

# Upper bound on idiom + token rounds; the shipped tables settle in two
MAX_ROUNDS = 6

_WHITESPACE_RE = re.compile(r"\s+")
_APOSTROPHE_RE = re.compile(r"[‘’‛′`´]")
_QUOTE_RE = re.compile(r"[“”„″]")
_REPEATED_PUNCT_RE = re.compile(r"([!?.]){2,}")
_TRAILING_PUNCT_RE = re.compile(r"^(.+?)([.,!?;:]+)$")


class TextNormalizer:
    """Rewrites slang, abbreviations, contractions and idioms.

    Lookups go through the owning engine's VocabularyStore, so runtime
    additions take effect on the next call.

    Example:
        >>> normalizer = TextNormalizer(VocabularyStore())
        >>> normalizer.normalize("need that paper rn").normalized
        'need money right now'
    """

    def __init__(self, store: VocabularyStore):
        self.store = store
        self._idiom_patterns: list[tuple[str, re.Pattern[str], str]] = []
        self._compiled_idioms: dict[str, str] = {}

    def normalize(self, text: str | None) -> NormalizationResult:
        """Normalize raw player input.

        Args:
            text: Raw input. ``None`` and blank strings are accepted.

        Returns:
            NormalizationResult with the canonical text and every
            substitution in the order it was applied.
        """
        if not text or not isinstance(text, str):
            return NormalizationResult(original=text or "", normalized="")

        changes: list[Substitution] = []
        normalized = self.clean(text)

        for _ in range(MAX_ROUNDS):
            round_changes: list[Substitution] = []
            normalized = self._expand_idioms(normalized, round_changes)
            normalized = self._rewrite_tokens(normalized, round_changes)
            if not round_changes:
                break
            changes.extend(round_changes)
        else:
            logger.warning(f"Normalization did not settle after {MAX_ROUNDS} rounds: {text!r}")

        normalized = _WHITESPACE_RE.sub(" ", normalized).strip()
        return NormalizationResult(original=text, normalized=normalized, changes=changes)

    @staticmethod
    def clean(text: str) -> str:
        """Collapse whitespace, unify quotes and repeated punctuation, lowercase."""
        text = _WHITESPACE_RE.sub(" ", text).strip()
        text = _APOSTROPHE_RE.sub("'", text)
        text = _QUOTE_RE.sub('"', text)
        text = _REPEATED_PUNCT_RE.sub(r"\1", text)
        return text.lower()

    def has_slang(self, text: str) -> bool:
        """Whether any token of ``text`` is a known slang term or abbreviation."""
        return any(
            token in self.store.slang or token in self.store.abbreviations
            for token in self.clean(text).split()
        )

    def _expand_idioms(self, text: str, changes: list[Substitution]) -> str:
        for phrase, pattern, canonical in self._patterns():
            matches = list(pattern.finditer(text))
            if matches:
                changes.extend(
                    Substitution(match.group(0), canonical, SubstitutionKind.PHRASE)
                    for match in matches
                )
                text = pattern.sub(lambda _: canonical, text)
        return text

    def _rewrite_tokens(self, text: str, changes: list[Substitution]) -> str:
        words = []
        for token in text.split(" "):
            rewritten = self._rewrite_token(token, changes)
            if rewritten is None:
                match = _TRAILING_PUNCT_RE.match(token)
                if match:
                    core, punctuation = match.groups()
                    rewritten = self._rewrite_token(core, changes)
                    if rewritten is not None:
                        rewritten += punctuation
            words.append(token if rewritten is None else rewritten)
        return " ".join(words)

    def _rewrite_token(self, token: str, changes: list[Substitution]) -> str | None:
        for table, kind in (
            (self.store.contractions, SubstitutionKind.CONTRACTION),
            (self.store.abbreviations, SubstitutionKind.ABBREVIATION),
            (self.store.slang, SubstitutionKind.SLANG),
        ):
            replacement = table.get(token)
            if replacement is not None:
                changes.append(Substitution(token, replacement, kind))
                return replacement
        return None

    def _patterns(self) -> list[tuple[str, re.Pattern[str], str]]:
        """Idiom patterns sorted longest first, recompiled when the table changes."""
        if self._compiled_idioms != self.store.idioms:
            ordered = sorted(self.store.idioms.items(), key=lambda item: len(item[0]), reverse=True)
            self._idiom_patterns = [
                (phrase, re.compile(rf"\b{re.escape(phrase)}\b"), canonical)
                for phrase, canonical in ordered
            ]
            self._compiled_idioms = dict(self.store.idioms)
            logger.debug(f"Compiled {len(self._idiom_patterns)} idiom patterns")
        return self._idiom_patterns

    def stats(self) -> dict:
        return {
            "slang_terms": len(self.store.slang),
            "abbreviations": len(self.store.abbreviations),
            "contractions": len(self.store.contractions),
            "idioms": len(self.store.idioms),
        }
