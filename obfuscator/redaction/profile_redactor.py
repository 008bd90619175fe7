"""
ProfileRedactorProvider - partial redaction driven by compliance profiles.

Unlike SimpleRedactorProvider, which replaces a whole value with a marker,
the redactors built here only rewrite the sensitive fragments of a value:

1. scrubadub's built-in detectors (emails, phone numbers, URLs, ...)
2. the regex patterns of every loaded profile that serves the requested
   classification set

    provider = ProfileRedactorProvider()
    redactor = provider.get_redactor(DataClassificationSet([PAYMENT_CARD]))
    redactor.redact("card 4111111111111111 on file")
    # "card {{CREDIT_CARD}} on file"
"""

import logging
from typing import Iterable, Optional

import scrubadub

from .base import DataClassificationSet, Redactor, RedactorProvider
from .base_profile import ComplianceProfile
from .profiles import DEFAULT_PROFILE

logger = logging.getLogger(__name__)


class ProfileRedactor(Redactor):
    """Applies scrubadub and a fixed list of profiles to each value."""

    def __init__(self, scrubber: Optional[scrubadub.Scrubber], profiles: Iterable[ComplianceProfile]):
        self._scrubber = scrubber
        self._profiles = tuple(profiles)

    @property
    def profiles(self) -> tuple[ComplianceProfile, ...]:
        return self._profiles

    def redact(self, text: Optional[str]) -> str:
        if text is None:
            return ""
        if not text:
            return text

        if self._scrubber is not None:
            try:
                text = self._scrubber.clean(text)
            except Exception as e:
                logger.warning(f"Scrubadub error (continuing with regex): {e}")

        for profile in self._profiles:
            for pattern in profile.get_patterns():
                text = pattern.pattern.sub(pattern.replacement, text)

        return text

    def redacted_length(self, text: Optional[str]) -> int:
        return len(self.redact(text))


class ProfileRedactorProvider(RedactorProvider):
    """
    Provider that builds ProfileRedactors from a set of loaded profiles.

    Profiles whose classifications intersect the requested set are applied;
    an empty or None set applies every loaded profile.

    Thread Safety:
        get_redactor() is safe to call concurrently. load_profile() and
        unload_profile() should only be called during initialization.
    """

    def __init__(self, load_default_profile: bool = True, use_scrubadub: bool = True):
        """
        Args:
            load_default_profile: Load the US/Global profile.
            use_scrubadub: Run scrubadub's detectors before the regex patterns.
        """
        self._profiles: dict[str, ComplianceProfile] = {}
        self._scrubber = scrubadub.Scrubber() if use_scrubadub else None

        if load_default_profile:
            self.load_profile(DEFAULT_PROFILE)

    def load_profile(self, profile: ComplianceProfile) -> None:
        """Add a profile, replacing any loaded profile with the same name."""
        self._profiles[profile.name] = profile
        logger.info(f"Loaded compliance profile: {profile.name}")

        if self._scrubber is not None:
            for detector in profile.get_scrubadub_detectors():
                self._scrubber.add_detector(detector)

    def unload_profile(self, profile_name: str) -> bool:
        """Remove a profile. Returns False if it was not loaded."""
        if profile_name in self._profiles:
            del self._profiles[profile_name]
            logger.info(f"Unloaded compliance profile: {profile_name}")
            return True
        return False

    def list_profiles(self) -> list[str]:
        return list(self._profiles.keys())

    def get_redactor(self, classification: Optional[DataClassificationSet] = None) -> Redactor:
        classification = classification or DataClassificationSet()
        profiles = [p for p in self._profiles.values() if p.serves(classification)]
        logger.debug(f"Redactor for {classification!r} uses profiles {[p.name for p in profiles]}")
        return ProfileRedactor(self._scrubber, profiles)
