"""
ObfuscatorService - sanitizes objects into JSON with sensitive values redacted.

For every public field of the input's type the engine picks a rendering from
the field's declared category:

    TEXT       redacted if marked Sensitive, else copied; None becomes ""
    PRIMITIVE  redacted (via its canonical string form) if marked Sensitive
               and not None, else passed through as a JSON value
    COMPOSITE  sanitized recursively; the nested JSON text is stored as a
               string value (or embedded, see Settings.embed_composites);
               None becomes null
    OTHER      passed through; None becomes the string "null"

Example:
    @dataclass
    class User:
        Name: str
        Email: Annotated[str, Sensitive()]
        Age: int

    service = ObfuscatorService(SimpleRedactorProvider())
    service.sanitize(User("John Doe", "john@x.com", 30))
    # '{"Name":"John Doe","Email":"[REDACTED]","age":30}'

The engine does not catch anything: a redactor failure aborts the whole
call and reaches the caller unchanged.
"""

import datetime
import decimal
import enum
import json
import uuid
from typing import Any, Optional

from .config import Settings
from .descriptors import FieldCategory, FieldDescriptor, describe_fields
from .exceptions import MaxDepthExceededError
from .redaction.base import DataClassificationSet, Redactor, RedactorProvider

_DATE_KINDS = (datetime.datetime, datetime.date, datetime.time)


def canonical_text(value: Any) -> str:
    """String form of a primitive value, as handed to the redactor."""
    if isinstance(value, enum.Enum):
        return value.name
    if isinstance(value, _DATE_KINDS):
        return value.isoformat()
    return str(value)


def _json_default(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, _DATE_KINDS):
        return value.isoformat()
    if isinstance(value, datetime.timedelta):
        return value.total_seconds()
    if isinstance(value, (decimal.Decimal, uuid.UUID)):
        return str(value)
    if isinstance(value, (set, frozenset)):
        return list(value)
    return str(value)


def to_json(mapping: dict[str, Any]) -> str:
    """
    Serialize a sanitized mapping compactly.

    Raises:
        ValueError: If a value is a non-finite float (NaN, Infinity), which
                    has no JSON representation.
    """
    return json.dumps(mapping, default=_json_default, separators=(",", ":"), allow_nan=False)


class ObfuscatorService:
    """
    The sanitization engine.

    Args:
        redactor_provider: Supplies the redactor for each call. Not validated
                           here; a missing provider fails on first use.
        settings: Engine settings. Defaults to Settings().
    """

    def __init__(self, redactor_provider: RedactorProvider, settings: Optional[Settings] = None):
        self._redactor_provider = redactor_provider
        self.settings = settings or Settings()

    @property
    def redactor_provider(self) -> RedactorProvider:
        return self._redactor_provider

    def sanitize(self, value: Any) -> str:
        """
        Return value as JSON text with its sensitive fields redacted.

        Raises:
            AttributeError: If the service was built without a provider.
            TypeError: If value is None.
            MaxDepthExceededError: If composites nest deeper than
                                   settings.max_depth.
            ValueError: If a non-sensitive float field is NaN or infinite.
        """
        return to_json(self._sanitize_mapping(value, depth=1))

    # Older method name, kept for existing callers
    sanitize_sensitive_data = sanitize

    def _sanitize_mapping(self, value: Any, depth: int) -> dict[str, Any]:
        # Resolved per level, nested calls do not share the parent's redactor
        redactor = self._redactor_provider.get_redactor(DataClassificationSet())

        if value is None:
            raise TypeError("Cannot sanitize None")
        if depth > self.settings.max_depth:
            raise MaxDepthExceededError(self.settings.max_depth, type(value).__name__)

        result: dict[str, Any] = {}
        for field in describe_fields(type(value)):
            key, output = self._render_field(field, getattr(value, field.name, None), redactor, depth)
            result[key] = output
        return result

    def _render_field(
        self, field: FieldDescriptor, value: Any, redactor: Redactor, depth: int
    ) -> tuple[str, Any]:
        key = field.json_name or field.name

        if field.category is FieldCategory.TEXT:
            text = value if value is not None else ""
            return key, redactor.redact(text) if field.sensitive else text

        if field.category is FieldCategory.PRIMITIVE:
            if field.sensitive and value is not None:
                return key, redactor.redact(canonical_text(value))
            if field.json_name is None and self.settings.lowercase_value_keys:
                key = field.name.lower()
            return key, value

        if field.category is FieldCategory.COMPOSITE:
            if value is None:
                return key, None
            nested = self._sanitize_mapping(value, depth + 1)
            return key, nested if self.settings.embed_composites else to_json(nested)

        return key, value if value is not None else "null"
