"""Tests for the intent catalog."""

import pytest
from pydantic import ValidationError

from street_intent.catalog import IntentCatalog, IntentDefinition
from street_intent.data.exemplars import INTENT_EXEMPLARS
from street_intent.exceptions import UnknownIntentError


class TestIntentDefinition:
    """Tests for single intent validation."""

    def test_keywords_are_lowercased(self):
        definition = IntentDefinition(key="x", friendly_name="X", keywords={"Money": 2})
        assert definition.keywords == {"money": 2}

    def test_rejects_non_positive_keyword_weight(self):
        with pytest.raises(ValidationError):
            IntentDefinition(key="x", friendly_name="X", keywords={"money": 0})

    def test_is_frozen(self):
        definition = IntentDefinition(key="x", friendly_name="X")
        with pytest.raises(ValidationError):
            definition.friendly_name = "Y"


class TestCatalogLoading:
    """Tests for building the built-in catalog."""

    def test_preserves_authoring_order(self, catalog):
        assert catalog.intents[: len(INTENT_EXEMPLARS)] == list(INTENT_EXEMPLARS)

    def test_always_contains_unknown(self):
        catalog = IntentCatalog.from_mapping({"greeting": {"friendly_name": "Greeting"}})
        assert "unknown" in catalog
        assert catalog.get("unknown").exemplars == ()

    def test_every_task_intent_has_exemplars(self, catalog):
        for definition in catalog:
            if definition.key != "unknown":
                assert definition.exemplars, definition.key

    def test_no_exemplar_is_shared_between_intents(self, catalog):
        """A phrase that belongs to two intents could never classify as both."""
        owners: dict[str, str] = {}
        for definition in catalog:
            for phrase in definition.exemplars:
                assert phrase not in owners, f"{phrase!r} in {owners.get(phrase)} and {definition.key}"
                owners[phrase] = definition.key


class TestCatalogLookups:
    """Tests for lookups."""

    def test_get_unknown_intent_raises(self, catalog):
        with pytest.raises(UnknownIntentError):
            catalog.get("bake_cake")

    def test_friendly_name_falls_back_to_key(self, catalog):
        assert catalog.friendly_name("bake_cake") == "bake_cake"

    def test_description(self, catalog):
        assert catalog.description("money_advice")
        assert catalog.description("bake_cake") == "Try rephrasing your question"

    def test_find_by_keyword(self, catalog):
        assert "money_advice" in catalog.find_by_keyword("money")
        assert catalog.find_by_keyword("   ") == []

    def test_summary_counts(self, catalog):
        rows = {row["intent"]: row for row in catalog.summary()}
        assert rows["money_advice"]["exemplars"] == len(INTENT_EXEMPLARS["money_advice"]["exemplars"])


class TestAddExemplar:
    """Tests for runtime exemplar additions."""

    def test_appends_phrase(self, catalog):
        before = len(catalog.get("money_advice").exemplars)
        assert catalog.add_exemplar("money_advice", "  stack that bread  ") is True
        exemplars = catalog.get("money_advice").exemplars
        assert len(exemplars) == before + 1
        assert exemplars[-1] == "stack that bread"

    def test_duplicate_is_ignored(self, catalog):
        phrase = catalog.get("money_advice").exemplars[0]
        assert catalog.add_exemplar("money_advice", phrase) is False

    def test_unknown_intent_raises(self, catalog):
        with pytest.raises(UnknownIntentError):
            catalog.add_exemplar("bake_cake", "how do i bake")

    def test_reserved_unknown_intent_rejected(self, catalog):
        with pytest.raises(ValueError):
            catalog.add_exemplar("unknown", "anything")

    def test_blank_phrase_rejected(self, catalog):
        with pytest.raises(ValueError):
            catalog.add_exemplar("money_advice", "   ")
