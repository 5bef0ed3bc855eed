from __future__ import annotations

from collections.abc import Callable

from navparser.containers import ResolvedContainer
from navparser.exceptions import NavParserResolverNotSetError
from navparser.factory import ContainerResolverFactory
from navparser.lookup import LookupService
from navparser.resolver import ContainerResolverInterface

try:
    from fastapi import FastAPI, Request
except ModuleNotFoundError as exc:  # pragma: no cover - exercised in optional import scenarios
    message = "FastAPI integration requires fastapi. Install with 'fastapi'."
    raise ModuleNotFoundError(message) from exc

_RESOLVER_STATE_ATTR = "navparser_resolver"


def setup_navparser(app: FastAPI, service_locator: LookupService) -> ContainerResolverInterface:
    """Build a resolver for ``service_locator`` and attach it to ``app``."""
    resolver = ContainerResolverFactory()(service_locator)
    setattr(app.state, _RESOLVER_STATE_ATTR, resolver)
    return resolver


def get_resolver(app: FastAPI) -> ContainerResolverInterface:
    """Return the resolver attached by ``setup_navparser``.

    Raises:
        NavParserResolverNotSetError: If ``setup_navparser`` was not called for ``app``.

    """
    resolver = getattr(app.state, _RESOLVER_STATE_ATTR, None)
    if resolver is None:
        msg = "No container resolver is configured. Call setup_navparser(app, service_locator) first."
        raise NavParserResolverNotSetError(msg)
    return resolver


def navigation_container(
    container: str = "default",
) -> Callable[[Request], ResolvedContainer | None]:
    """Return a FastAPI dependency resolving ``container`` for each request.

    Usage::

        @app.get("/menu")
        def menu(nav: NavigationContainer = Depends(navigation_container("default"))):
            ...
    """

    def dependency(request: Request) -> ResolvedContainer | None:
        return get_resolver(request.app).resolve(container)

    return dependency


__all__ = ["get_resolver", "navigation_container", "setup_navparser"]
