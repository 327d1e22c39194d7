"""Core test fixtures for intent classifier tests."""

import pytest

from street_intent.catalog import IntentCatalog
from street_intent.classifier import ClassifierEngine
from street_intent.config import Settings
from street_intent.data.exemplars import INTENT_EXEMPLARS
from street_intent.normalizer import TextNormalizer
from street_intent.store import VocabularyStore
from street_intent.typo import TypoCorrector


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def store() -> VocabularyStore:
    """Fresh vocabulary store built from the shipped tables."""
    return VocabularyStore()


@pytest.fixture
def catalog() -> IntentCatalog:
    """Fresh copy of the built-in intent catalog."""
    return IntentCatalog.from_mapping(INTENT_EXEMPLARS)


@pytest.fixture
def normalizer(store) -> TextNormalizer:
    return TextNormalizer(store)


@pytest.fixture
def corrector(store, settings) -> TypoCorrector:
    return TypoCorrector(store, settings)


@pytest.fixture
def engine(settings) -> ClassifierEngine:
    """Isolated engine; every test gets its own caches and vocabulary."""
    return ClassifierEngine(settings=settings)
