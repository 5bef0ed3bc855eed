from __future__ import annotations

import pytest

from navparser.factory import ContainerResolverFactory
from navparser.lookup import LookupService
from navparser.resolver import ContainerResolver


@pytest.fixture()
def navparser_service_locator() -> LookupService:
    """Fixture hook for the lookup service used by ``navparser_resolver``.

    Users must override this fixture in their own test suite to provide
    registrations for the navigation containers under test.

    """
    msg = (
        "The navparser pytest plugin requires overriding the 'navparser_service_locator' "
        "fixture in your test suite. Define @pytest.fixture() def "
        "navparser_service_locator() -> ServiceLocator: ... and return a configured locator."
    )
    raise RuntimeError(msg)


@pytest.fixture()
def navparser_resolver(navparser_service_locator: LookupService) -> ContainerResolver:
    """Container resolver built from ``navparser_service_locator``."""
    return ContainerResolverFactory()(navparser_service_locator)
