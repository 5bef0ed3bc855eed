from __future__ import annotations

from navparser.exceptions import NavParserInvalidRegistrationError
from navparser.lookup import LookupService
from navparser.resolver import ContainerResolver

RESOLVER_SETTINGS_SERVICE = "navparser.settings"
"""Lookup key of the optional resolver settings object."""


class ContainerResolverFactory:
    """Create a ``ContainerResolver`` bound to the given lookup service.

    When the lookup service has an entry for ``RESOLVER_SETTINGS_SERVICE``,
    its ``aliases`` and ``fallback_service`` attributes configure the
    resolver. Nothing else is fetched.

    Failures fetching the settings propagate unchanged from the lookup
    service, for example ``NavParserServiceCreationError`` from a
    ``ServiceLocator`` whose settings factory raised. A settings object missing
    either attribute raises ``NavParserInvalidRegistrationError``.
    """

    def __call__(self, service_locator: LookupService) -> ContainerResolver:
        if not service_locator.has(RESOLVER_SETTINGS_SERVICE):
            return ContainerResolver(service_locator)

        settings = service_locator.get(RESOLVER_SETTINGS_SERVICE)
        try:
            aliases = settings.aliases
            fallback_service = settings.fallback_service
        except AttributeError as exc:
            msg = (
                f'Service "{RESOLVER_SETTINGS_SERVICE}" must provide '
                f"'aliases' and 'fallback_service', got {type(settings).__qualname__}"
            )
            raise NavParserInvalidRegistrationError(msg) from exc

        return ContainerResolver(
            service_locator,
            aliases=aliases,
            fallback_service=fallback_service,
        )
