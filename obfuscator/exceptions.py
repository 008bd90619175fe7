"""
Exceptions raised by the obfuscator package.

Each error derives from ObfuscatorError and from the builtin exception it
most resembles, so callers can catch either.
"""


class ObfuscatorError(Exception):
    """Base class for all obfuscator errors."""


class MarkerError(ObfuscatorError, ValueError):
    """A field carries malformed or conflicting annotations."""


class MaxDepthExceededError(ObfuscatorError, RecursionError):
    """Composite nesting went deeper than the configured maximum."""

    def __init__(self, max_depth: int, type_name: str):
        self.max_depth = max_depth
        self.type_name = type_name
        super().__init__(
            f"Composite nesting exceeded max_depth={max_depth} at {type_name}"
        )


class ServiceNotRegisteredError(ObfuscatorError, LookupError):
    """A registry lookup named a service that was never registered."""


class ConfigurationError(ObfuscatorError, ValueError):
    """An environment setting could not be parsed."""
