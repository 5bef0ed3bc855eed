from __future__ import annotations

from navparser.containers import FALLBACK_SERVICE
from navparser.factory import RESOLVER_SETTINGS_SERVICE
from navparser.resolver import DEFAULT_ALIASES
from navparser.service_locator import ServiceLocator

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ModuleNotFoundError as exc:  # pragma: no cover - exercised in optional import scenarios
    message = (
        "pydantic-settings integration requires pydantic-settings. "
        "Install with 'pydantic-settings'."
    )
    raise ModuleNotFoundError(message) from exc


class NavigationSettings(BaseSettings):
    """Resolver settings read from ``NAVPARSER_``-prefixed environment variables.

    ``NAVPARSER_ALIASES`` takes a JSON list, for example ``'["default", "menu"]'``.
    """

    model_config = SettingsConfigDict(env_prefix="NAVPARSER_", frozen=True)

    aliases: tuple[str, ...] = DEFAULT_ALIASES
    fallback_service: str = FALLBACK_SERVICE


def register_settings(
    service_locator: ServiceLocator,
    settings: NavigationSettings | None = None,
) -> NavigationSettings:
    """Register resolver settings where ``ContainerResolverFactory`` looks for them.

    Args:
        service_locator: Locator the resolver will be built from.
        settings: Settings to register. Defaults to a fresh ``NavigationSettings()``,
            which reads the environment.

    Returns:
        The registered settings instance.

    """
    if settings is None:
        settings = NavigationSettings()
    service_locator.register(RESOLVER_SETTINGS_SERVICE, instance=settings)
    return settings


__all__ = ["NavigationSettings", "register_settings"]
