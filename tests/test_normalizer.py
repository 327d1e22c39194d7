"""Tests for the slang and shorthand normalizer."""

import pytest

from street_intent.data.exemplars import INTENT_EXEMPLARS
from street_intent.intent_types import SubstitutionKind
from street_intent.normalizer import TextNormalizer


class TestClean:
    """Tests for the cleaning stage."""

    def test_collapses_whitespace_and_lowercases(self):
        assert TextNormalizer.clean("  How   DO I\tearn  ") == "how do i earn"

    def test_collapses_repeated_punctuation(self):
        assert TextNormalizer.clean("so what?!?!") == "so what!"
        assert TextNormalizer.clean("wait...") == "wait."

    def test_unifies_quote_glyphs(self):
        assert TextNormalizer.clean("it’s “fine”") == "it's \"fine\""


class TestNormalize:
    """Tests for the full normalization pipeline."""

    def test_idiom_and_abbreviation(self, normalizer):
        """Idioms expand before tokens are rewritten."""
        result = normalizer.normalize("need that paper rn")
        assert result.normalized == "need money right now"
        assert [(c.original, c.replacement, c.kind) for c in result.changes] == [
            ("need that paper", "need money", SubstitutionKind.PHRASE),
            ("rn", "right now", SubstitutionKind.ABBREVIATION),
        ]
        assert result.was_modified

    def test_longest_idiom_wins(self, normalizer):
        """'need that paper' is not shadowed by the single word 'paper'."""
        assert normalizer.normalize("need that paper").normalized == "need money"
        assert normalizer.normalize("paper").normalized == "money"

    def test_every_idiom_occurrence_is_recorded(self, normalizer):
        result = normalizer.normalize("need that paper and need that paper")
        assert result.normalized == "need money and need money"
        assert [(c.original, c.kind) for c in result.changes] == [
            ("need that paper", SubstitutionKind.PHRASE),
            ("need that paper", SubstitutionKind.PHRASE),
        ]

    def test_contraction_with_curly_apostrophe(self, normalizer):
        result = normalizer.normalize("I CAN’T   do this")
        assert result.normalized == "i cannot do this"
        assert result.changes[0].kind == SubstitutionKind.CONTRACTION

    def test_slang_and_abbreviation_tokens(self, normalizer):
        result = normalizer.normalize("thx fam")
        assert result.normalized == "thanks friend"
        assert [c.kind for c in result.changes] == [
            SubstitutionKind.ABBREVIATION,
            SubstitutionKind.SLANG,
        ]

    def test_trailing_punctuation_is_kept(self, normalizer):
        assert normalizer.normalize("need cash!").normalized == "need money!"
        assert normalizer.normalize("I need that paper, fam").normalized == "i need money, friend"

    def test_idiom_at_sentence_end_with_punctuation(self, normalizer):
        assert normalizer.normalize("boys in blue on my tail!!!").normalized == "police on my tail!"

    def test_greeting_idioms(self, normalizer):
        assert normalizer.normalize("what is up").normalized == "sup"
        assert normalizer.normalize("whats up with u").normalized == "sup with you"

    def test_unknown_words_pass_through(self, normalizer):
        result = normalizer.normalize("xyzzy plugh")
        assert result.normalized == "xyzzy plugh"
        assert result.changes == []
        assert not result.was_modified

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_input(self, normalizer, text):
        result = normalizer.normalize(text)
        assert result.normalized == ""
        assert result.changes == []

    def test_chained_rewrites_settle(self, normalizer, store):
        """A rewrite that yields another known term is followed through."""
        store.add_slang("zoinks", "cops")
        result = normalizer.normalize("zoinks")
        assert result.normalized == "police"
        assert [c.replacement for c in result.changes] == ["cops", "police"]

    def test_runtime_idiom_takes_effect(self, normalizer, store):
        store.add_idiom("bread and butter", "main job")
        assert normalizer.normalize("my bread and butter").normalized == "my main job"


class TestIdempotence:
    """Normalizing normalized text is always a no-op."""

    def test_table_entries(self, normalizer, store):
        inputs = [*store.slang, *store.abbreviations, *store.contractions, *store.idioms]
        failures = {}
        for text in inputs:
            once = normalizer.normalize(text).normalized
            again = normalizer.normalize(once)
            if again.changes:
                failures[text] = [str(change) for change in again.changes]
        assert failures == {}

    def test_exemplars(self, normalizer):
        failures = {}
        for entry in INTENT_EXEMPLARS.values():
            for phrase in entry.get("exemplars", []):
                once = normalizer.normalize(phrase).normalized
                if normalizer.normalize(once).changes:
                    failures[phrase] = once
        assert failures == {}


class TestHasSlang:
    """Tests for slang detection."""

    def test_detects_slang(self, normalizer):
        assert normalizer.has_slang("yo got any cash")

    def test_detects_abbreviation(self, normalizer):
        assert normalizer.has_slang("need it rn")

    def test_plain_text(self, normalizer):
        assert not normalizer.has_slang("hello there")
