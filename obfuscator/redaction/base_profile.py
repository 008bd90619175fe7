"""
Compliance profiles - regex rules for partial redaction.

A profile is a named bundle of RedactionPatterns plus the data
classifications it is responsible for. The ProfileRedactorProvider applies
the profiles that serve the classification set it is asked for, so one
provider can scrub card data differently from credentials.

Each profile defines:
    - name: Unique identifier for the profile
    - description: Human-readable description
    - classifications: Data classes the profile serves
    - get_patterns(): Regex rules applied to sensitive values
    - get_scrubadub_detectors(): Optional custom scrubadub detectors
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Pattern

from .base import DataClassification, DataClassificationSet


@dataclass
class RedactionPattern:
    """A single redaction pattern definition."""
    name: str  # e.g., "credit_card", "ssn"
    pattern: Pattern[str]
    replacement: str  # e.g., "{{CREDIT_CARD}}"
    description: str = ""


class ComplianceProfile(ABC):
    """
    Abstract base class for compliance profiles.

    Example:
        class PanProfile(ComplianceProfile):
            name = "india_pan"
            description = "Indian PAN card numbers"
            classifications = frozenset({DataClassification("pii", "tax_id")})

            def get_patterns(self) -> list[RedactionPattern]:
                return [
                    RedactionPattern(
                        name="pan_card",
                        pattern=re.compile(r'\b[A-Z]{5}[0-9]{4}[A-Z]\b'),
                        replacement="{{PAN_CARD}}",
                    ),
                ]
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this profile (e.g., 'us_global')."""
        pass

    @property
    def description(self) -> str:
        return ""

    @property
    def classifications(self) -> frozenset[DataClassification]:
        """
        Classifications this profile serves.

        An empty frozenset means the profile applies to every request.
        """
        return frozenset()

    @abstractmethod
    def get_patterns(self) -> list[RedactionPattern]:
        """Regex rules, applied after scrubadub's detectors."""
        pass

    def get_scrubadub_detectors(self) -> list:
        """Custom scrubadub Detector classes. None by default."""
        return []

    def serves(self, classification: DataClassificationSet) -> bool:
        """True if this profile should run for the given classification set."""
        if not self.classifications or not classification:
            return True
        return any(item in classification for item in self.classifications)

    def __repr__(self) -> str:
        return f"<ComplianceProfile: {self.name}>"
