from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from navparser.exceptions import (
    NavParserInvalidRegistrationError,
    NavParserServiceCreationError,
    NavParserServiceNotFoundError,
)
from navparser.types import Factory, Lifetime, service_name

logger = logging.getLogger(__name__)

_MISSING: Any = object()


@dataclass(frozen=True, slots=True)
class Registration:
    """A single service registration held by a ``ServiceLocator``."""

    key: str
    factory: Factory | None = None
    instance: Any = _MISSING
    lifetime: Lifetime = Lifetime.SINGLETON

    @property
    def has_instance(self) -> bool:
        return self.instance is not _MISSING


class ServiceLocator:
    """In-memory lookup service with instance, factory and alias registrations.

    Factories receive the locator itself, so they can fetch their own
    collaborators::

        locator = ServiceLocator()
        locator.register("navigation", factory=lambda sl: Navigation())
        locator.alias("default", "navigation")
        locator.get("default")

    Factory classes are instantiated without arguments and the instance is
    called with the locator.
    """

    __slots__ = ("_aliases", "_instances", "_registry")

    def __init__(self) -> None:
        self._registry: dict[str, Registration] = {}
        self._aliases: dict[str, str] = {}
        # SINGLETON factory results, keyed by the canonical (non-alias) key
        self._instances: dict[str, Any] = {}

        self.register(service_name(type(self)), instance=self)

    def register(
        self,
        key: str,
        /,
        factory: Factory | None = None,
        instance: Any = _MISSING,
        lifetime: Lifetime = Lifetime.SINGLETON,
    ) -> None:
        """Register a service with the locator.

        Args:
            key: The lookup key of the service.
            factory: Callable building the service from the locator, or a
                factory class whose instances are such callables.
            instance: Pre-created service instance. ``None`` is a valid instance.
            lifetime: Whether factory results are cached. Ignored for instances.

        Raises:
            NavParserInvalidRegistrationError: If both or neither of ``factory``
                and ``instance`` are given.

        """
        if (factory is None) == (instance is _MISSING):
            msg = f'Service "{key}" must be registered with exactly one of factory or instance'
            raise NavParserInvalidRegistrationError(msg)

        self._registry[key] = Registration(
            key=key,
            factory=factory,
            instance=instance,
            lifetime=lifetime,
        )
        # Re-registration overwrites anything cached for the previous registration
        self._instances.pop(key, None)
        self._aliases.pop(key, None)
        logger.debug("Registered service %r (lifetime=%s)", key, lifetime.value)

    def alias(self, alias: str, target: str) -> None:
        """Make ``alias`` resolve to whatever ``target`` resolves to.

        A service registered under ``alias`` is replaced, the same way
        ``register`` replaces an alias.

        Raises:
            NavParserInvalidRegistrationError: If the alias would form a cycle.

        """
        seen = {alias}
        current = target
        while current in self._aliases:
            if current in seen:
                break
            seen.add(current)
            current = self._aliases[current]
        if current in seen:
            msg = f'Alias "{alias}" -> "{target}" would create a cycle'
            raise NavParserInvalidRegistrationError(msg)

        self._registry.pop(alias, None)
        self._instances.pop(alias, None)
        self._aliases[alias] = target
        logger.debug("Registered alias %r -> %r", alias, target)

    def configure(self, dependencies: Mapping[str, Mapping[str, Any]]) -> None:
        """Apply a dependency configuration mapping.

        Recognized sections are ``"services"`` (key to instance),
        ``"factories"`` (key to factory) and ``"aliases"`` (alias to target).
        Unknown sections are ignored.
        """
        for key, instance in dependencies.get("services", {}).items():
            self.register(key, instance=instance)
        for key, factory in dependencies.get("factories", {}).items():
            self.register(key, factory=factory)
        for alias, target in dependencies.get("aliases", {}).items():
            self.alias(alias, target)

    def has(self, key: str) -> bool:
        return self._resolve_alias(key) in self._registry

    def get(self, key: str) -> Any:
        """Return the service registered under ``key``.

        Raises:
            NavParserServiceNotFoundError: If nothing is registered for ``key``.
            NavParserServiceCreationError: If the registered factory raised.

        """
        canonical = self._resolve_alias(key)
        registration = self._registry.get(canonical)
        if registration is None:
            raise NavParserServiceNotFoundError(key)

        if registration.has_instance:
            return registration.instance

        if canonical in self._instances:
            return self._instances[canonical]

        instance = self._create(registration)
        if registration.lifetime is Lifetime.SINGLETON:
            self._instances[canonical] = instance
        return instance

    def _create(self, registration: Registration) -> Any:
        factory: Any = registration.factory
        logger.debug("Creating service %r", registration.key)
        try:
            if isinstance(factory, type):
                factory = factory()
            return factory(self)
        except Exception as exc:
            raise NavParserServiceCreationError(registration.key) from exc

    def _resolve_alias(self, key: str) -> str:
        while key in self._aliases:
            key = self._aliases[key]
        return key

    def __repr__(self) -> str:
        return f"{type(self).__name__}(services={sorted(self._registry)!r})"
