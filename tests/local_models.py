"""Dataclasses defined inside functions, with postponed annotations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Optional

from obfuscator import Sensitive


def make_local_tree():
    """A self-referencing dataclass that is not a module global."""

    @dataclass
    class LocalTree:
        label: str = ""
        token: Annotated[str, Sensitive()] = ""
        child: Optional[LocalTree] = None

    return LocalTree


def make_local_pair():
    """A dataclass whose field type is another function-local class."""

    @dataclass
    class LocalLeaf:
        name: str = ""

    @dataclass
    class LocalPair:
        leaf: Optional[LocalLeaf] = None

    return LocalPair
