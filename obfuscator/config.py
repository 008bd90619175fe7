"""
Configuration for the sanitization engine.

Settings are read from the environment (and a local .env file, if present):

    OBFUSCATOR_REDACTION_MARKER      Marker returned by the default redactor
    OBFUSCATOR_MAX_DEPTH             Maximum composite nesting depth
    OBFUSCATOR_LOWERCASE_VALUE_KEYS  Lower-case keys of plain value fields
    OBFUSCATOR_EMBED_COMPOSITES      Nest composites as objects, not strings
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

DEFAULT_REDACTION_MARKER = "[REDACTED]"
DEFAULT_MAX_DEPTH = 64

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """
    Engine settings. The defaults keep lower-cased value keys and
    string-encoded composites.

    redaction_marker is not read by ObfuscatorService; it configures the
    SimpleRedactorProvider that add_obfuscator() registers. When building
    the engine directly, pass the marker to the provider instead.
    """
    redaction_marker: str = DEFAULT_REDACTION_MARKER
    max_depth: int = DEFAULT_MAX_DEPTH
    lowercase_value_keys: bool = True  # "Age" is emitted as "age"
    embed_composites: bool = False  # nested results stay JSON-encoded strings


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def _parse_depth(name: str, raw: str) -> int:
    try:
        depth = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if depth < 1:
        raise ConfigurationError(f"{name} must be at least 1, got {depth}")
    return depth


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        env_file: Optional path to a .env file. When omitted, python-dotenv
                  searches for one starting at the current directory.
                  Variables already set in the environment win.

    Raises:
        ConfigurationError: If a variable is set but malformed.
    """
    load_dotenv(env_file)

    settings = Settings()
    marker = os.getenv("OBFUSCATOR_REDACTION_MARKER")
    max_depth = os.getenv("OBFUSCATOR_MAX_DEPTH")
    lowercase = os.getenv("OBFUSCATOR_LOWERCASE_VALUE_KEYS")
    embed = os.getenv("OBFUSCATOR_EMBED_COMPOSITES")

    return Settings(
        redaction_marker=marker if marker is not None else settings.redaction_marker,
        max_depth=(
            _parse_depth("OBFUSCATOR_MAX_DEPTH", max_depth)
            if max_depth is not None else settings.max_depth
        ),
        lowercase_value_keys=(
            _parse_bool("OBFUSCATOR_LOWERCASE_VALUE_KEYS", lowercase)
            if lowercase is not None else settings.lowercase_value_keys
        ),
        embed_composites=(
            _parse_bool("OBFUSCATOR_EMBED_COMPOSITES", embed)
            if embed is not None else settings.embed_composites
        ),
    )
