"""
Pytest configuration and shared fixtures for the obfuscator tests.

Redactor collaborators are replaced with unittest.mock doubles so tests can
count exactly which values were handed to the redactor.
"""

import os
import sys
from unittest.mock import Mock

import pytest

# Add parent directory to path for package imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from obfuscator import ObfuscatorService, Redactor, RedactorProvider  # noqa: E402

OBFUSCATOR_ENV_VARS = (
    "OBFUSCATOR_REDACTION_MARKER",
    "OBFUSCATOR_MAX_DEPTH",
    "OBFUSCATOR_LOWERCASE_VALUE_KEYS",
    "OBFUSCATOR_EMBED_COMPOSITES",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Make sure no OBFUSCATOR_* variable leaks into a test."""
    for name in OBFUSCATOR_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def mock_redactor():
    """A redactor that returns [REDACTED] for any value and '' for None."""
    redactor = Mock(spec=Redactor)
    redactor.redact.side_effect = lambda text: "" if text is None else "[REDACTED]"
    return redactor


@pytest.fixture
def mock_provider(mock_redactor):
    """A provider that always hands out mock_redactor."""
    provider = Mock(spec=RedactorProvider)
    provider.get_redactor.return_value = mock_redactor
    return provider


@pytest.fixture
def service(mock_provider):
    return ObfuscatorService(mock_provider)

