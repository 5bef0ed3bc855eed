from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Collection
from typing import Any

from navparser.containers import (
    CONTAINER_TYPES,
    FALLBACK_SERVICE,
    LEGACY_NAVIGATION_SERVICE,
    NAVIGATION_SERVICE,
    AbstractContainer,
    NavigationContainer,
    ResolvedContainer,
)
from navparser.exceptions import NavParserContractViolationError, NavParserResolutionError
from navparser.lookup import LookupService
from navparser.types import service_name

logger = logging.getLogger(__name__)

DEFAULT_ALIASES: tuple[str, ...] = ("default", "navigation")
"""Container references that trigger the well-known service lookup chain."""


class ContainerResolverInterface(ABC):
    """Interface for objects turning a container reference into a container."""

    @abstractmethod
    def resolve(self, container: Any = None) -> ResolvedContainer | None:
        """Verify ``container`` and fetch it from the lookup service if it is a string."""


class ContainerResolver(ContainerResolverInterface):
    """Resolve navigation container references against a lookup service.

    A reference is ``None``, a navigation container, or a string key. ``None``
    and containers are returned unchanged. Strings are fetched from the lookup
    service; the reserved aliases (``"default"`` and ``"navigation"``) first
    try the well-known navigation services in order:

    1. the new-style ``Navigation`` service,
    2. the legacy-style ``LegacyNavigation`` service,
    3. the historical ``"navigation"`` service.

    The first key the lookup service reports present is fetched and returned.
    If that fetch fails, resolution fails; later keys are not tried. When none
    is present, the alias itself is fetched like any other key.

    The resolver holds no state besides its configuration, so one instance
    can serve the whole process.
    """

    __slots__ = ("_aliases", "_candidates", "_service_locator")

    def __init__(
        self,
        service_locator: LookupService,
        *,
        aliases: Collection[str] = DEFAULT_ALIASES,
        fallback_service: str = FALLBACK_SERVICE,
    ) -> None:
        """Initialize the resolver.

        Args:
            service_locator: Lookup service consulted for string references.
            aliases: References that trigger the well-known service chain. A single
                string is treated as one alias.
            fallback_service: Key tried after both well-known navigation services.

        """
        self._service_locator = service_locator
        if isinstance(aliases, str):
            aliases = (aliases,)
        self._aliases = frozenset(aliases)
        self._candidates: tuple[tuple[str, tuple[type[Any], ...]], ...] = (
            (NAVIGATION_SERVICE, (NavigationContainer,)),
            (LEGACY_NAVIGATION_SERVICE, (AbstractContainer,)),
            (fallback_service, CONTAINER_TYPES),
        )

    @property
    def service_locator(self) -> LookupService:
        return self._service_locator

    def resolve(self, container: Any = None) -> ResolvedContainer | None:
        """Return the navigation container ``container`` refers to.

        Args:
            container: ``None``, a navigation container, or a string key.

        Returns:
            The container itself for ``None`` and container instances, otherwise
            the container fetched from the lookup service.

        Raises:
            NavParserResolutionError: If ``container`` has any other type, the
                lookup service fails to fetch the key, or a direct lookup returns
                something that is not a navigation container.
            NavParserContractViolationError: If a key reported present by the
                lookup service returns the wrong container type.

        """
        if container is None or isinstance(container, CONTAINER_TYPES):
            return container

        if isinstance(container, str):
            if container in self._aliases:
                for key, expected in self._candidates:
                    if not self._service_locator.has(key):
                        continue
                    logger.debug("Resolving container alias %r via service %r", container, key)
                    resolved = self._fetch(key)
                    if not isinstance(resolved, expected):
                        raise NavParserContractViolationError(key, expected, type(resolved))
                    return resolved

            logger.debug("Resolving container %r directly", container)
            resolved = self._fetch(container)
            if not isinstance(resolved, CONTAINER_TYPES):
                msg = (
                    f'Container "{container}" should be an instance of '
                    f"{_expected_names()}, but was {type(resolved).__qualname__}"
                )
                raise NavParserResolutionError(msg, key=container)
            return resolved

        msg = (
            "Container must be a string alias or an instance of "
            f"{service_name(NavigationContainer)} or an instance of "
            f"{service_name(AbstractContainer)}"
        )
        raise NavParserResolutionError(msg)

    def _fetch(self, key: str) -> Any:
        try:
            return self._service_locator.get(key)
        except Exception as exc:
            msg = f'Could not load Container "{key}"'
            raise NavParserResolutionError(msg, key=key) from exc


def _expected_names() -> str:
    return " or ".join(service_name(cls) for cls in CONTAINER_TYPES)
