"""
Redaction - the redactors the sanitization engine delegates to.

    - Redactor / RedactorProvider: the contracts the engine calls
    - SimpleRedactorProvider: whole-value replacement with a constant marker
    - ProfileRedactorProvider: partial redaction with scrubadub and
      compliance profiles
"""

from .base import DataClassification, DataClassificationSet, Redactor, RedactorProvider
from .base_profile import ComplianceProfile, RedactionPattern
from .profile_redactor import ProfileRedactor, ProfileRedactorProvider
from .simple import SimpleRedactor, SimpleRedactorProvider

__all__ = [
    "DataClassification",
    "DataClassificationSet",
    "Redactor",
    "RedactorProvider",
    "ComplianceProfile",
    "RedactionPattern",
    "ProfileRedactor",
    "ProfileRedactorProvider",
    "SimpleRedactor",
    "SimpleRedactorProvider",
]
