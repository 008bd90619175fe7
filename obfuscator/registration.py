"""
Service registration - wiring the engine into an application.

Most callers should simply build the engine themselves:

    service = ObfuscatorService(SimpleRedactorProvider())

For applications that keep their services in a container, ServiceRegistry
is a minimal explicit one and add_obfuscator() registers the engine and its
default redactor provider in it. Registration is idempotent: calling
add_obfuscator() twice leaves one engine registered.
"""

import logging
import threading
from typing import Any, Callable, Optional

from .config import Settings, load_settings
from .engine import ObfuscatorService
from .exceptions import ServiceNotRegisteredError
from .redaction import RedactorProvider, SimpleRedactorProvider

logger = logging.getLogger(__name__)

_UNSET = object()


class _Singleton:
    """A lazily built, shared service instance."""

    def __init__(self, factory: Callable[["ServiceRegistry"], Any]):
        self._factory = factory
        self._instance: Any = _UNSET
        self._lock = threading.Lock()

    def get(self, registry: "ServiceRegistry") -> Any:
        if self._instance is _UNSET:
            with self._lock:
                if self._instance is _UNSET:
                    self._instance = self._factory(registry)
        return self._instance


class ServiceRegistry:
    """
    Keyed singleton container.

    Keys are usually the interface type (ObfuscatorService, RedactorProvider).
    A factory receives the registry so it can resolve its own dependencies.
    """

    def __init__(self):
        self._services: dict[Any, _Singleton] = {}

    def register_singleton(self, key: Any, provider: Any, replace: bool = False) -> bool:
        """
        Register a singleton under key.

        Args:
            key: Lookup key.
            provider: An instance, a class (instantiated with no arguments
                      on first resolve), or a callable taking the registry
                      and returning the instance.
            replace: Overwrite an existing registration.

        Returns:
            True if the registration was added, False if key was already
            registered and replace is False.
        """
        if key in self._services and not replace:
            logger.debug(f"Service already registered, keeping existing: {_key_name(key)}")
            return False

        if isinstance(provider, type):
            factory = lambda _: provider()
        elif callable(provider) and not _is_instance_key(key, provider):
            factory = provider
        else:
            factory = lambda _: provider
        self._services[key] = _Singleton(factory)
        logger.info(f"Registered service: {_key_name(key)}")
        return True

    def is_registered(self, key: Any) -> bool:
        return key in self._services

    def resolve(self, key: Any) -> Any:
        """
        Return the singleton registered under key.

        Raises:
            ServiceNotRegisteredError: If nothing is registered under key.
        """
        try:
            singleton = self._services[key]
        except KeyError:
            raise ServiceNotRegisteredError(f"No service registered for {_key_name(key)}") from None
        return singleton.get(self)

    def resolve_all(self, key: Any) -> list[Any]:
        """All services registered under key (at most one)."""
        return [self.resolve(key)] if key in self._services else []


def _key_name(key: Any) -> str:
    return getattr(key, "__name__", repr(key))


def _is_instance_key(key: Any, provider: Any) -> bool:
    # An instance of the key type is stored as-is, even when it is callable
    return isinstance(key, type) and isinstance(provider, key)


def configure_redaction(registry: ServiceRegistry) -> ServiceRegistry:
    """
    Redaction policy hook.

    No policy is configured: every classification maps to the registered
    RedactorProvider. Kept as a separate step so applications can override it.
    """
    return registry


def add_obfuscator(registry: ServiceRegistry, settings: Optional[Settings] = None) -> ServiceRegistry:
    """
    Register ObfuscatorService and a default SimpleRedactorProvider.

    A RedactorProvider registered beforehand is kept, so applications can
    plug in their own provider before calling this.

    Returns:
        The same registry, for chaining.
    """
    engine_settings = settings or Settings()

    registry.register_singleton(
        RedactorProvider,
        lambda _: SimpleRedactorProvider(marker=engine_settings.redaction_marker),
    )
    registry.register_singleton(
        ObfuscatorService,
        lambda r: ObfuscatorService(r.resolve(RedactorProvider), engine_settings),
    )
    return configure_redaction(registry)


_default_service: Optional[ObfuscatorService] = None


def get_default_service() -> ObfuscatorService:
    """
    Process-wide ObfuscatorService using settings from the environment.

    A convenience for simple use cases; construct ObfuscatorService
    directly for more control.
    """
    global _default_service
    if _default_service is None:
        _default_service = add_obfuscator(ServiceRegistry(), load_settings()).resolve(ObfuscatorService)
    return _default_service
