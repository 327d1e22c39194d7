"""Result types shared by the normalizer, corrector, classifiers and combiner.

Every stage of the pipeline returns one of these plain dataclasses. None of
them represents a failure: an input the engine cannot place still yields a
fully populated result whose intent is ``unknown``.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum


UNKNOWN_INTENT = "unknown"


class SubstitutionKind(str, Enum):
    """Which rewrite produced a substitution."""

    PHRASE = "phrase"  # Multi-word idiom
    CONTRACTION = "contraction"
    ABBREVIATION = "abbreviation"
    SLANG = "slang"
    TYPO = "typo"  # Edit-distance correction


class ClassificationSource(str, Enum):
    """Which branch of the combiner produced a final decision."""

    PATTERN_HIGH = "pattern_high"  # Pattern confident enough to skip semantics
    COMBINED_AGREEMENT = "combined_agreement"  # Both agree, confidence boosted
    PATTERN_PREFERRED = "pattern_preferred"  # Both confident, disagree, pattern higher
    SEMANTIC_PREFERRED = "semantic_preferred"  # Both confident, disagree, semantic higher
    PATTERN_ONLY = "pattern_only"
    SEMANTIC_ONLY = "semantic_only"
    SEMANTIC_FALLBACK = "semantic_fallback"  # Neither confident, some semantic signal
    NO_MATCH = "no_match"
    EMPTY_INPUT = "empty_input"


@dataclass
class Substitution:
    """One rewrite applied during preprocessing.

    Attributes:
        original: Text that was replaced
        replacement: Text it was replaced with
        kind: Which table or stage produced the rewrite
        distance: Edit distance, only set for typo corrections
    """

    original: str
    replacement: str
    kind: SubstitutionKind
    distance: int | None = None

    def to_dict(self) -> dict:
        data = {"from": self.original, "to": self.replacement, "type": self.kind.value}
        if self.distance is not None:
            data["distance"] = self.distance
        return data

    def __str__(self) -> str:
        return f"{self.original!r} -> {self.replacement!r} ({self.kind.value})"


@dataclass
class NormalizationResult:
    """Output of the text normalizer."""

    original: str
    normalized: str
    changes: list[Substitution] = field(default_factory=list)

    @property
    def was_modified(self) -> bool:
        return len(self.changes) > 0


@dataclass
class CorrectionResult:
    """Output of the typo corrector."""

    original: str
    corrected: str
    corrections: list[Substitution] = field(default_factory=list)

    @property
    def was_modified(self) -> bool:
        return len(self.corrections) > 0


@dataclass
class PreprocessTrace:
    """What preprocessing did to a raw utterance.

    Attributes:
        original: The raw input as received
        normalized: Text after normalization and typo correction
        changes: Normalizer substitutions followed by typo corrections
    """

    original: str
    normalized: str
    changes: list[Substitution] = field(default_factory=list)

    @property
    def was_modified(self) -> bool:
        return len(self.changes) > 0

    def to_dict(self) -> dict:
        return {
            "original": self.original,
            "normalized": self.normalized,
            "was_modified": self.was_modified,
            "changes": [change.to_dict() for change in self.changes],
        }


@dataclass
class IntentScore:
    """A ranked candidate intent.

    For semantic rankings ``score`` is the blended similarity; for pattern
    rankings it is the pattern confidence.
    """

    intent: str
    friendly_name: str
    score: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ExtractedEntities:
    """Shallow entities pulled out of an utterance by the pattern matcher."""

    player_name: str | None = None
    numbers: list[int] = field(default_factory=list)
    crime_type: str | None = None
    job_type: str | None = None
    district: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (
            self.player_name or self.numbers or self.crime_type or self.job_type or self.district
        )

    def to_dict(self) -> dict:
        return {key: value for key, value in asdict(self).items() if value}


@dataclass
class PatternMatch:
    """Verdict of the trigger-rule and keyword matcher.

    Attributes:
        intent: Highest-scoring intent, or ``unknown`` if nothing scored
        confidence: min(1, score / scale)
        score: Raw score of the winning intent
        scores: Raw score of every intent, for debugging
        entities: Entities found in the text
    """

    intent: str
    confidence: float
    score: float = 0.0
    scores: dict[str, float] = field(default_factory=dict)
    entities: ExtractedEntities = field(default_factory=ExtractedEntities)


@dataclass
class SemanticMatch:
    """Verdict of the vector-space classifier.

    Attributes:
        intent: Best-ranked intent, or ``unknown`` for a zero vector
        confidence: Blend of absolute score and separation from the runner-up
        similarity: Blended score of the best intent
        top_matches: Best candidates, highest first
    """

    intent: str
    confidence: float
    similarity: float = 0.0
    top_matches: list[IntentScore] = field(default_factory=list)


@dataclass
class CombinedVerdict:
    """Decision reached by the combiner before it is wrapped into a result."""

    intent: str
    confidence: float
    source: ClassificationSource


@dataclass
class ClassificationResult:
    """Final answer for one utterance.

    Attributes:
        intent: Intent identifier
        confidence: Confidence in [0, 1]
        friendly_name: Display name of the intent
        source: Combiner branch that produced the decision
        preprocessed: Preprocessing trace, absent for empty input and cache hits
        top_matches: Ranked candidates behind the decision
        from_cache: Whether this came from the classification cache
        pattern: Pattern matcher verdict, when it ran
        semantic: Semantic engine verdict, when it ran
    """

    intent: str
    confidence: float
    friendly_name: str
    source: ClassificationSource
    preprocessed: PreprocessTrace | None = None
    top_matches: list[IntentScore] = field(default_factory=list)
    from_cache: bool = False
    pattern: PatternMatch | None = None
    semantic: SemanticMatch | None = None

    @property
    def is_unknown(self) -> bool:
        return self.intent == UNKNOWN_INTENT

    def needs_clarification(self, threshold: float = 0.4) -> bool:
        """Whether the caller should ask the player what they meant."""
        return self.is_unknown or self.confidence < threshold

    def to_dict(self) -> dict:
        """Serialize the caller-facing fields (verdict details omitted)."""
        return {
            "intent": self.intent,
            "confidence": self.confidence,
            "friendly_name": self.friendly_name,
            "source": self.source.value,
            "preprocessed": self.preprocessed.to_dict() if self.preprocessed else None,
            "top_matches": [match.to_dict() for match in self.top_matches],
            "from_cache": self.from_cache,
        }

    def __str__(self) -> str:
        cached = " [cached]" if self.from_cache else ""
        return f"{self.intent} ({self.confidence:.2f}, {self.source.value}){cached}"


@dataclass
class IntentSuggestion:
    """An intent offered to the player when their input was ambiguous."""

    intent: str
    friendly_name: str
    confidence: float
    suggestion: str

    def to_dict(self) -> dict:
        return asdict(self)
