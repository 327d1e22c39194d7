"""Street Intent - hybrid slang-tolerant intent classifier for a game assistant."""

from street_intent.classifier import ClassifierEngine
from street_intent.intent_types import ClassificationResult, ClassificationSource

__all__ = ["ClassifierEngine", "ClassificationResult", "ClassificationSource"]

__version__ = "0.1.0"
