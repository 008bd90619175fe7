"""
SimpleRedactorProvider - the default provider.

Every non-None value becomes the same constant marker, so nothing about the
original value (not even its length) leaks into the output.
"""

from typing import Optional

from ..config import DEFAULT_REDACTION_MARKER
from .base import DataClassificationSet, Redactor, RedactorProvider


class SimpleRedactor(Redactor):
    """Replaces any value with a constant marker."""

    def __init__(self, marker: str = DEFAULT_REDACTION_MARKER):
        self.marker = marker

    def redact(self, text: Optional[str]) -> str:
        # None is "no value", which differs from redacting an empty value
        return "" if text is None else self.marker

    def __repr__(self) -> str:
        return f"<SimpleRedactor: {self.marker!r}>"


class SimpleRedactorProvider(RedactorProvider):
    """
    Returns a fresh SimpleRedactor for any classification, including None.

    Example:
        provider = SimpleRedactorProvider(marker="***")
        provider.get_redactor(None).redact("secret")  # "***"
    """

    def __init__(self, marker: str = DEFAULT_REDACTION_MARKER):
        self.marker = marker

    def get_redactor(self, classification: Optional[DataClassificationSet] = None) -> Redactor:
        return SimpleRedactor(self.marker)
