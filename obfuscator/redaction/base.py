"""
Redactor contracts and the classification token passed to providers.

The sanitization engine only talks to these interfaces:

    provider = SimpleRedactorProvider()
    redactor = provider.get_redactor(DataClassificationSet())
    redactor.redact("john@example.com")   # "[REDACTED]"

Implement RedactorProvider to plug in a different redaction strategy.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(frozen=True)
class DataClassification:
    """A single data class, e.g. DataClassification("pii", "email")."""
    taxonomy: str
    value: str

    def __str__(self) -> str:
        return f"{self.taxonomy}:{self.value}"


class DataClassificationSet:
    """
    An immutable set of classifications describing the data being redacted.

    An empty set means the data is unclassified. Providers decide what, if
    anything, a set changes; the engine passes it through untouched.
    """

    __slots__ = ("_items",)

    def __init__(self, classifications: Iterable[DataClassification] = ()):
        self._items = frozenset(classifications)

    def __iter__(self) -> Iterator[DataClassification]:
        return iter(sorted(self._items, key=str))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DataClassificationSet) and other._items == self._items

    def __hash__(self) -> int:
        return hash(self._items)

    def union(self, other: "DataClassificationSet") -> "DataClassificationSet":
        return DataClassificationSet(self._items | other._items)

    def __repr__(self) -> str:
        return f"DataClassificationSet({[str(c) for c in self]})"


class Redactor(ABC):
    """Turns a string into its redacted form."""

    @abstractmethod
    def redact(self, text: Optional[str]) -> str:
        """Return the redacted form of text. None must not raise."""
        pass

    def redacted_length(self, text: Optional[str]) -> int:
        """
        Length of the string redact() would produce for text.

        Length-preserving strategies can size output buffers with this.
        The default is the input length.
        """
        return len(text) if text else 0

    def redact_into(self, source: str, destination: list[str]) -> int:
        """Write the redacted form of source into destination, in place."""
        raise NotImplementedError(f"{type(self).__name__} does not support buffer redaction")


class RedactorProvider(ABC):
    """Supplies a Redactor for a classification set."""

    @abstractmethod
    def get_redactor(self, classification: Optional[DataClassificationSet]) -> Redactor:
        """Return a redactor. Must accept None as 'unclassified'."""
        pass
