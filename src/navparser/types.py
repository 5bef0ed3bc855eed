from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, TypeAlias

from navparser.lookup import LookupService


class Lifetime(str, Enum):
    """Defines how long a factory-built service lives in a ``ServiceLocator``."""

    TRANSIENT = "transient"
    """A new instance is created every time the service is requested."""

    SINGLETON = "singleton"
    """A single instance is created and shared for the lifetime of the locator."""


class FactoryClassProtocol:
    """Protocol for factory classes whose instances build a service from a locator."""

    def __call__(self, service_locator: LookupService) -> Any: ...  # noqa: D102


FactoryFunction: TypeAlias = Callable[[LookupService], Any]
"""A factory callable receiving the lookup service it is registered with."""

Factory: TypeAlias = type[FactoryClassProtocol] | FactoryFunction
"""A type alias for either a factory class or a factory function."""


def service_name(cls: type[Any]) -> str:
    """Return the lookup key under which ``cls`` is registered.

    The key is the dotted qualified name of the class, for example
    ``"navparser.containers.Navigation"``.
    """
    return f"{cls.__module__}.{cls.__qualname__}"
