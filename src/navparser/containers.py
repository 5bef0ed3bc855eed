from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TypeAlias

from typing_extensions import Self

from navparser.types import service_name


@dataclass(frozen=True, slots=True)
class Page:
    """A single navigation entry."""

    label: str
    uri: str


class NavigationContainer(ABC):
    """Interface for new-style navigation containers."""

    @abstractmethod
    def add_page(self, page: Page) -> Self:
        """Append a page to the container."""

    @abstractmethod
    def has_pages(self) -> bool:
        """Return whether the container holds at least one page."""

    @abstractmethod
    def __iter__(self) -> Iterator[Page]: ...

    @abstractmethod
    def __len__(self) -> int: ...


class Navigation(NavigationContainer):
    """Default new-style navigation container."""

    __slots__ = ("_pages",)

    def __init__(self, pages: Iterable[Page] = ()) -> None:
        self._pages: list[Page] = list(pages)

    def add_page(self, page: Page) -> Self:
        self._pages.append(page)
        return self

    def has_pages(self) -> bool:
        return bool(self._pages)

    def __iter__(self) -> Iterator[Page]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pages={self._pages!r})"


class AbstractContainer(ABC):
    """Base class for legacy-style navigation containers.

    Subclasses only need to exist; page storage is shared. The class stays
    abstract so it cannot be confused with a ready-made navigation.
    """

    def __init__(self, pages: Iterable[Page] = ()) -> None:
        self._pages: list[Page] = list(pages)

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name the container was configured under."""

    def add_page(self, page: Page) -> Self:
        self._pages.append(page)
        return self

    def has_pages(self) -> bool:
        return bool(self._pages)

    def __iter__(self) -> Iterator[Page]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)


class LegacyNavigation(AbstractContainer):
    """Default legacy-style navigation container."""

    def __init__(self, pages: Iterable[Page] = (), *, name: str = "default") -> None:
        super().__init__(pages)
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, pages={self._pages!r})"


ResolvedContainer: TypeAlias = NavigationContainer | AbstractContainer
"""Either of the two recognized navigation container variants."""

CONTAINER_TYPES: tuple[type[NavigationContainer], type[AbstractContainer]] = (
    NavigationContainer,
    AbstractContainer,
)

NAVIGATION_SERVICE = service_name(Navigation)
"""Lookup key of the new-style navigation service."""

LEGACY_NAVIGATION_SERVICE = service_name(LegacyNavigation)
"""Lookup key of the legacy-style navigation service."""

FALLBACK_SERVICE = "navigation"
"""Historical lookup key checked after both well-known navigation services."""
