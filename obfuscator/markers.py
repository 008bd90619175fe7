"""
Field markers - declarative annotations read by the sanitization engine.

Two ways to mark a field:

    from typing import Annotated, Optional
    from dataclasses import dataclass

    @dataclass
    class User:
        name: str
        email: Annotated[str, Sensitive()]
        api_key: Annotated[str, Sensitive(), JsonName("api_key")]
        age: int = 0

    @dataclass
    class Card:
        number: str = sensitive_field(default="")
        holder: str = json_field("holder_name", default="")

Markers only have meaning on field declarations. Applying Sensitive more
than once is the same as applying it once.
"""

import dataclasses
from typing import Any, Optional

from .exceptions import MarkerError

SENSITIVE_METADATA_KEY = "obfuscator.sensitive"
JSON_NAME_METADATA_KEY = "obfuscator.json_name"


class Sensitive:
    """Marks a field whose value must be redacted before exposure."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Sensitive)

    def __hash__(self) -> int:
        return hash(Sensitive)

    def __repr__(self) -> str:
        return "Sensitive()"


# Shared instance for Annotated[str, SENSITIVE]
SENSITIVE = Sensitive()


class JsonName:
    """Overrides the output key used for a field."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        if not isinstance(name, str) or not name:
            raise MarkerError(f"JsonName requires a non-empty string, got {name!r}")
        self.name = name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, JsonName) and other.name == self.name

    def __hash__(self) -> int:
        return hash((JsonName, self.name))

    def __repr__(self) -> str:
        return f"JsonName({self.name!r})"


def sensitive_field(*, json_name: Optional[str] = None, **kwargs: Any) -> Any:
    """
    dataclasses.field() that also marks the field as sensitive.

    Args:
        json_name: Optional output key override.
        **kwargs: Passed through to dataclasses.field().
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[SENSITIVE_METADATA_KEY] = True
    if json_name is not None:
        metadata[JSON_NAME_METADATA_KEY] = JsonName(json_name).name
    return dataclasses.field(metadata=metadata, **kwargs)


def json_field(json_name: str, **kwargs: Any) -> Any:
    """dataclasses.field() carrying only an output key override."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[JSON_NAME_METADATA_KEY] = JsonName(json_name).name
    return dataclasses.field(metadata=metadata, **kwargs)


def resolve_markers(field_name: str, extras: tuple, metadata: Any = None) -> tuple[bool, Optional[str]]:
    """
    Collapse Annotated extras and dataclass metadata into (sensitive, json_name).

    Raises:
        MarkerError: If the field declares two different JsonName values.
    """
    sensitive = False
    names: set[str] = set()

    for extra in extras:
        if isinstance(extra, Sensitive) or extra is Sensitive:
            sensitive = True
        elif isinstance(extra, JsonName):
            names.add(extra.name)

    if metadata:
        if metadata.get(SENSITIVE_METADATA_KEY):
            sensitive = True
        if metadata.get(JSON_NAME_METADATA_KEY):
            names.add(metadata[JSON_NAME_METADATA_KEY])

    if len(names) > 1:
        raise MarkerError(
            f"Field '{field_name}' has conflicting JsonName overrides: {sorted(names)}"
        )
    return sensitive, next(iter(names), None)
