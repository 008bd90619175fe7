"""
Obfuscator - sanitize structured data before it is logged or sent.

Annotate the fields of your DTOs, then turn instances into JSON with the
sensitive values redacted.

Architecture:
    - markers: Sensitive and JsonName field annotations
    - descriptors: per-type field tables (TEXT, PRIMITIVE, COMPOSITE, OTHER)
    - ObfuscatorService: the recursive sanitization engine
    - redaction/: the redactors the engine delegates to
    - registration: optional container wiring

Example:
    from dataclasses import dataclass
    from typing import Annotated
    from obfuscator import ObfuscatorService, Sensitive, SimpleRedactorProvider

    @dataclass
    class Login:
        Username: str
        Password: Annotated[str, Sensitive()]

    service = ObfuscatorService(SimpleRedactorProvider())
    service.sanitize(Login("john", "hunter2"))
    # '{"Username":"john","Password":"[REDACTED]"}'
"""

from .config import Settings, load_settings
from .descriptors import FieldCategory, FieldDescriptor, classify, describe_fields
from .engine import ObfuscatorService
from .exceptions import (
    ConfigurationError,
    MarkerError,
    MaxDepthExceededError,
    ObfuscatorError,
    ServiceNotRegisteredError,
)
from .markers import SENSITIVE, JsonName, Sensitive, json_field, sensitive_field
from .redaction import (
    DataClassification,
    DataClassificationSet,
    ProfileRedactorProvider,
    Redactor,
    RedactorProvider,
    SimpleRedactorProvider,
)
from .registration import ServiceRegistry, add_obfuscator, get_default_service

__all__ = [
    "ObfuscatorService",
    "Settings",
    "load_settings",
    "FieldCategory",
    "FieldDescriptor",
    "classify",
    "describe_fields",
    "Sensitive",
    "SENSITIVE",
    "JsonName",
    "sensitive_field",
    "json_field",
    "DataClassification",
    "DataClassificationSet",
    "Redactor",
    "RedactorProvider",
    "SimpleRedactorProvider",
    "ProfileRedactorProvider",
    "ServiceRegistry",
    "add_obfuscator",
    "get_default_service",
    "ObfuscatorError",
    "MarkerError",
    "MaxDepthExceededError",
    "ServiceNotRegisteredError",
    "ConfigurationError",
]
