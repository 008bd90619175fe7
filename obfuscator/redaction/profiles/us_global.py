"""
US/Global profile - default partial-redaction rules.

Covers values that commonly end up inside free-text fields of DTOs:
    - Payment card numbers, plain and formatted
    - US Social Security Numbers
    - AWS access key IDs
    - JWTs, with or without a Bearer prefix
    - Secrets written as key=value
"""

import re

from ..base import DataClassification
from ..base_profile import ComplianceProfile, RedactionPattern

PAYMENT_CARD = DataClassification("pci", "payment_card")
GOVERNMENT_ID = DataClassification("pii", "government_id")
CREDENTIAL = DataClassification("security", "credential")


class USGlobalProfile(ComplianceProfile):
    """Default profile, loaded by ProfileRedactorProvider unless told otherwise."""

    @property
    def name(self) -> str:
        return "us_global"

    @property
    def description(self) -> str:
        return "US and global patterns (payment cards, SSN, credentials)"

    @property
    def classifications(self) -> frozenset[DataClassification]:
        return frozenset({PAYMENT_CARD, GOVERNMENT_ID, CREDENTIAL})

    def get_patterns(self) -> list[RedactionPattern]:
        return [
            RedactionPattern(
                name="credit_card",
                pattern=re.compile(
                    r'\b(?:'
                    r'4[0-9]{12}(?:[0-9]{3})?|'  # Visa
                    r'5[1-5][0-9]{14}|'  # Mastercard
                    r'3[47][0-9]{13}|'  # Amex
                    r'6(?:011|5[0-9]{2})[0-9]{12}'  # Discover
                    r')\b'
                ),
                replacement="{{CREDIT_CARD}}",
                description="Payment card number",
            ),
            RedactionPattern(
                name="credit_card_formatted",
                pattern=re.compile(r'\b(?:\d{4}[-\s]){3}\d{4}\b'),
                replacement="{{CREDIT_CARD}}",
                description="Payment card number with spaces or dashes",
            ),
            RedactionPattern(
                name="ssn",
                pattern=re.compile(r'\b(?!000|666|9\d{2})\d{3}-(?!00)\d{2}-(?!0000)\d{4}\b'),
                replacement="{{SSN}}",
                description="US Social Security Number",
            ),
            RedactionPattern(
                name="aws_access_key",
                pattern=re.compile(r'\b(?:AKIA|ABIA|ACCA|ASIA)[A-Z0-9]{16}\b'),
                replacement="{{AWS_ACCESS_KEY}}",
                description="AWS access key ID",
            ),
            RedactionPattern(
                name="bearer_token",
                pattern=re.compile(r'Bearer\s+eyJ[A-Za-z0-9_-]+\.eyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+'),
                replacement="Bearer {{JWT_TOKEN}}",
                description="JWT bearer token",
            ),
            RedactionPattern(
                name="jwt_token",
                pattern=re.compile(r'\beyJ[A-Za-z0-9_-]{10,}\.eyJ[A-Za-z0-9_-]{10,}\.[A-Za-z0-9_-]{10,}\b'),
                replacement="{{JWT_TOKEN}}",
                description="JWT",
            ),
            RedactionPattern(
                name="secret_value",
                pattern=re.compile(
                    r'(?i)\b(password|passwd|pwd|api[_-]?key|secret|token)\s*[=:]\s*["\']?[^\s"\']{4,}["\']?'
                ),
                replacement=r"\1={{REDACTED}}",
                description="Secret written as key=value",
            ),
        ]


DEFAULT_PROFILE = USGlobalProfile()
