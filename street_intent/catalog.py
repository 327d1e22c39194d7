"""Pydantic schemas for the intent catalog.

The catalog is the read-only knowledge input of the engine: one definition
per intent with its display name, a description used for suggestion
prompts, exemplar phrases for the semantic engine, and weighted keywords
for the pattern matcher. It always contains the reserved ``unknown`` intent.
"""

import logging
from collections.abc import Iterator, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from street_intent.exceptions import UnknownIntentError
from street_intent.intent_types import UNKNOWN_INTENT

logger = logging.getLogger(__name__)


class IntentDefinition(BaseModel):
    """One recognized intent and the data that describes it."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Stable intent identifier (e.g., 'money_advice')")
    friendly_name: str = Field(description="Display name shown to the player")
    description: str = Field(
        default="Try rephrasing your question",
        description="One-line hint used when suggesting this intent",
    )
    exemplars: tuple[str, ...] = Field(
        default=(),
        description="Example phrasings, in authoring order",
    )
    keywords: dict[str, float] = Field(
        default_factory=dict,
        description="Canonical keyword -> score added per occurrence",
    )

    @field_validator("keywords")
    @classmethod
    def _positive_weights(cls, value: dict[str, float]) -> dict[str, float]:
        for word, weight in value.items():
            if weight <= 0:
                raise ValueError(f"Keyword weight for {word!r} must be positive, got {weight}")
        return {word.lower(): weight for word, weight in value.items()}


class IntentCatalog:
    """Ordered, closed set of intent definitions.

    Iteration order is the authoring order of the source mapping, which is
    also the tie-break order for rankings.
    """

    def __init__(self, definitions: list[IntentDefinition]):
        self._definitions: dict[str, IntentDefinition] = {}
        for definition in definitions:
            self._definitions[definition.key] = definition
        if UNKNOWN_INTENT not in self._definitions:
            self._definitions[UNKNOWN_INTENT] = IntentDefinition(
                key=UNKNOWN_INTENT, friendly_name="Unknown"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Mapping]) -> "IntentCatalog":
        """Build a catalog from a plain ``{intent: {...}}`` mapping.

        Args:
            data: Mapping shaped like ``INTENT_EXEMPLARS``.

        Returns:
            Validated catalog.
        """
        definitions = [
            IntentDefinition(
                key=key,
                friendly_name=entry.get("friendly_name", key),
                description=entry.get("description", "Try rephrasing your question"),
                exemplars=tuple(entry.get("exemplars", ())),
                keywords=dict(entry.get("keywords", {})),
            )
            for key, entry in data.items()
        ]
        catalog = cls(definitions)
        logger.debug(
            f"Loaded {len(catalog)} intents with {catalog.exemplar_count()} exemplars"
        )
        return catalog

    def __contains__(self, intent: object) -> bool:
        return intent in self._definitions

    def __iter__(self) -> Iterator[IntentDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    @property
    def intents(self) -> list[str]:
        return list(self._definitions)

    def get(self, intent: str) -> IntentDefinition:
        """Get an intent definition.

        Raises:
            UnknownIntentError: If the intent is not in the catalog.
        """
        try:
            return self._definitions[intent]
        except KeyError:
            raise UnknownIntentError(f"Unknown intent: {intent!r}") from None

    def friendly_name(self, intent: str) -> str:
        """Display name for an intent, falling back to the identifier."""
        definition = self._definitions.get(intent)
        return definition.friendly_name if definition else intent

    def description(self, intent: str) -> str:
        definition = self._definitions.get(intent)
        return definition.description if definition else "Try rephrasing your question"

    def exemplar_count(self) -> int:
        return sum(len(definition.exemplars) for definition in self)

    def add_exemplar(self, intent: str, phrase: str) -> bool:
        """Append an exemplar phrase to an intent.

        Returns:
            True if the phrase was added, False if the intent already had it.

        Raises:
            UnknownIntentError: If the intent is not in the catalog.
            ValueError: If the phrase is blank or the intent is ``unknown``.
        """
        definition = self.get(intent)
        if intent == UNKNOWN_INTENT:
            raise ValueError("The unknown intent cannot have exemplars")
        phrase = phrase.strip()
        if not phrase:
            raise ValueError("Exemplar phrase must not be blank")
        if phrase in definition.exemplars:
            return False
        self._definitions[intent] = definition.model_copy(
            update={"exemplars": definition.exemplars + (phrase,)}
        )
        return True

    def find_by_keyword(self, keyword: str) -> list[str]:
        """Intents whose keywords contain, or are contained in, ``keyword``."""
        lower = keyword.lower().strip()
        if not lower:
            return []
        return [
            definition.key
            for definition in self
            if any(lower in word or word in lower for word in definition.keywords)
        ]

    def summary(self) -> list[dict]:
        """Per-intent exemplar and keyword counts."""
        return [
            {
                "intent": definition.key,
                "friendly_name": definition.friendly_name,
                "exemplars": len(definition.exemplars),
                "keywords": len(definition.keywords),
            }
            for definition in self
        ]
