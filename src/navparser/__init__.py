from navparser.config_provider import ConfigProvider
from navparser.containers import (
    FALLBACK_SERVICE,
    LEGACY_NAVIGATION_SERVICE,
    NAVIGATION_SERVICE,
    AbstractContainer,
    LegacyNavigation,
    Navigation,
    NavigationContainer,
    Page,
    ResolvedContainer,
)
from navparser.exceptions import (
    NavParserContractViolationError,
    NavParserError,
    NavParserInvalidRegistrationError,
    NavParserResolutionError,
    NavParserResolverNotSetError,
    NavParserServiceCreationError,
    NavParserServiceNotFoundError,
)
from navparser.factory import RESOLVER_SETTINGS_SERVICE, ContainerResolverFactory
from navparser.lookup import LookupService
from navparser.resolver import DEFAULT_ALIASES, ContainerResolver, ContainerResolverInterface
from navparser.service_locator import ServiceLocator
from navparser.types import Lifetime, service_name

__all__ = [
    "DEFAULT_ALIASES",
    "FALLBACK_SERVICE",
    "LEGACY_NAVIGATION_SERVICE",
    "NAVIGATION_SERVICE",
    "RESOLVER_SETTINGS_SERVICE",
    "AbstractContainer",
    "ConfigProvider",
    "ContainerResolver",
    "ContainerResolverFactory",
    "ContainerResolverInterface",
    "LegacyNavigation",
    "Lifetime",
    "LookupService",
    "NavParserContractViolationError",
    "NavParserError",
    "NavParserInvalidRegistrationError",
    "NavParserResolutionError",
    "NavParserResolverNotSetError",
    "NavParserServiceCreationError",
    "NavParserServiceNotFoundError",
    "Navigation",
    "NavigationContainer",
    "Page",
    "ResolvedContainer",
    "ServiceLocator",
    "service_name",
]
