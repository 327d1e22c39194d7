"""Errors raised by the vocabulary mutation API and the pattern matcher.

Classification itself never raises: unrecognized or malformed input
degrades to an ``unknown`` result instead.
"""


class VocabularyError(ValueError):
    """Raised when a runtime vocabulary update is rejected."""

    pass


class UnknownIntentError(VocabularyError):
    """Raised when an operation names an intent the catalog does not define."""

    pass


class UnknownClusterError(VocabularyError):
    """Raised when a word is added to a concept cluster that does not exist."""

    pass


class PatternRuleError(ValueError):
    """Raised when a trigger rule cannot be compiled."""

    def __init__(self, intent: str, pattern: str, reason: str):
        self.intent = intent
        self.pattern = pattern
        super().__init__(f"Invalid trigger rule for {intent!r}: {pattern!r} ({reason})")
