from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LookupService(Protocol):
    """Protocol for the service locator a ``ContainerResolver`` consults.

    Any object exposing ``has`` and ``get`` qualifies, including
    ``navparser.ServiceLocator``.
    """

    def has(self, key: str) -> bool:
        """Return whether the service locator can return an entry for ``key``."""

    def get(self, key: str) -> Any:
        """Return the entry for ``key``.

        Implementations raise an exception of their own choosing when the key
        is unknown or the entry cannot be built.
        """
