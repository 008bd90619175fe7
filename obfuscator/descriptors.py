"""
Field descriptors - per-type tables the engine dispatches on.

A type's descriptor table is built once, from its declared annotations, and
cached for the life of the process. The engine never inspects a runtime
value to decide how to treat a field; only the declared type matters.

Categories:
    TEXT       str and its subclasses
    PRIMITIVE  bool, int, float, Decimal, date/time kinds, UUID, Enum members
    COMPOSITE  dataclasses and other classes that declare annotated fields
    OTHER      everything else (collections, Any, bytes, opaque classes)
"""

import dataclasses
import datetime
import decimal
import enum
import inspect
import types
import typing
import uuid
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional

from .markers import resolve_markers

PRIMITIVE_TYPES: tuple[type, ...] = (
    bool,
    int,
    float,
    decimal.Decimal,
    datetime.datetime,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
)

_NONE_TYPE = type(None)


class FieldCategory(enum.Enum):
    TEXT = "text"
    PRIMITIVE = "primitive"
    COMPOSITE = "composite"
    OTHER = "other"


@dataclass(frozen=True)
class FieldDescriptor:
    """How one public field of a type is rendered."""
    name: str
    category: FieldCategory
    json_name: Optional[str] = None
    sensitive: bool = False
    declared_type: Any = None


def _split_annotated(tp: Any) -> tuple[Any, tuple]:
    if typing.get_origin(tp) is typing.Annotated:
        args = typing.get_args(tp)
        return args[0], tuple(args[1:])
    return tp, ()


def unwrap_type(tp: Any) -> tuple[Any, tuple]:
    """
    Strip Annotated and Optional wrappers from a declared type.

    Returns:
        (base_type, annotated_extras). Optional[Annotated[str, X]] and
        Annotated[Optional[str], X] both yield (str, (X,)). Unions with more
        than one non-None member are returned unchanged.
    """
    base, extras = _split_annotated(tp)
    origin = typing.get_origin(base)
    if origin is typing.Union or origin is types.UnionType:
        members = [arg for arg in typing.get_args(base) if arg is not _NONE_TYPE]
        if len(members) == 1:
            inner, inner_extras = _split_annotated(members[0])
            return inner, extras + inner_extras
    return base, extras


def is_record_type(cls: Any) -> bool:
    """True for dataclasses and classes that declare annotated fields."""
    if not isinstance(cls, type) or typing.get_origin(cls) is not None:
        return False
    if dataclasses.is_dataclass(cls):
        return True
    # TypedDict values are plain dicts at runtime
    if typing.is_typeddict(cls):
        return False
    return any(inspect.get_annotations(klass) for klass in cls.__mro__ if klass is not object)


def classify(declared_type: Any) -> FieldCategory:
    """Resolve the category of a declared field type."""
    base, _ = unwrap_type(declared_type)

    if typing.get_origin(base) is not None or not isinstance(base, type):
        return FieldCategory.OTHER
    # Enum before str so that str-mixin enums stay value kinds
    if issubclass(base, enum.Enum):
        return FieldCategory.PRIMITIVE
    if issubclass(base, str):
        return FieldCategory.TEXT
    if issubclass(base, PRIMITIVE_TYPES):
        return FieldCategory.PRIMITIVE
    if is_record_type(base):
        return FieldCategory.COMPOSITE
    return FieldCategory.OTHER


def _is_class_var(tp: Any) -> bool:
    base, _ = _split_annotated(tp)
    return base is typing.ClassVar or typing.get_origin(base) is typing.ClassVar


def _type_hints(cls: type) -> dict[str, Any]:
    # The class itself is not a module global when defined inside a function
    return typing.get_type_hints(cls, localns={cls.__name__: cls}, include_extras=True)


def _declared_fields(cls: type) -> list[tuple[str, Any, Any]]:
    if dataclasses.is_dataclass(cls):
        hints = _type_hints(cls)
        return [(f.name, hints.get(f.name, f.type), f.metadata) for f in dataclasses.fields(cls)]
    if not is_record_type(cls):
        return []
    hints = _type_hints(cls)
    return [(name, tp, None) for name, tp in hints.items() if not _is_class_var(tp)]


@lru_cache(maxsize=None)
def describe_fields(cls: type) -> tuple[FieldDescriptor, ...]:
    """
    Build (once) the descriptor table for a type's public fields.

    Public fields are annotated attributes whose names do not start with an
    underscore. Dataclasses keep their field order; other classes list base
    class fields first.

    Raises:
        MarkerError: If a field carries conflicting JsonName overrides.
        NameError: If an annotation is a forward reference that cannot be
                   resolved.
    """
    descriptors = []
    for name, declared, metadata in _declared_fields(cls):
        if name.startswith("_"):
            continue
        _, extras = unwrap_type(declared)
        sensitive, json_name = resolve_markers(name, extras, metadata)
        descriptors.append(
            FieldDescriptor(
                name=name,
                category=classify(declared),
                json_name=json_name,
                sensitive=sensitive,
                declared_type=declared,
            )
        )
    return tuple(descriptors)
