"""
Built-in compliance profiles.

    - us_global: payment cards, SSN, AWS keys, JWTs, key=value secrets

Load extra profiles with ProfileRedactorProvider.load_profile().
"""

from .us_global import (
    CREDENTIAL,
    DEFAULT_PROFILE,
    GOVERNMENT_ID,
    PAYMENT_CARD,
    USGlobalProfile,
)

__all__ = ["USGlobalProfile", "DEFAULT_PROFILE", "PAYMENT_CARD", "GOVERNMENT_ID", "CREDENTIAL"]
