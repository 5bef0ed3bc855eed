from __future__ import annotations

import pytest

from navparser import (
    RESOLVER_SETTINGS_SERVICE,
    ContainerResolverFactory,
    LegacyNavigation,
    ServiceLocator,
)
from navparser.integrations.pydantic_settings import NavigationSettings, register_settings


def test_defaults_match_resolver_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NAVPARSER_ALIASES", raising=False)
    monkeypatch.delenv("NAVPARSER_FALLBACK_SERVICE", raising=False)

    settings = NavigationSettings()

    assert settings.aliases == ("default", "navigation")
    assert settings.fallback_service == "navigation"


def test_settings_are_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NAVPARSER_ALIASES", '["menu"]')
    monkeypatch.setenv("NAVPARSER_FALLBACK_SERVICE", "legacy.menu")

    settings = NavigationSettings()

    assert settings.aliases == ("menu",)
    assert settings.fallback_service == "legacy.menu"


def test_register_settings_configures_factory_built_resolver(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("NAVPARSER_FALLBACK_SERVICE", "legacy.menu")
    locator = ServiceLocator()
    legacy = LegacyNavigation(name="legacy")
    locator.register("legacy.menu", instance=legacy)

    settings = register_settings(locator)
    resolver = ContainerResolverFactory()(locator)

    assert locator.get(RESOLVER_SETTINGS_SERVICE) is settings
    assert resolver.resolve("default") is legacy


def test_register_explicit_settings() -> None:
    locator = ServiceLocator()
    settings = NavigationSettings(aliases=("menu",), fallback_service="navigation")

    assert register_settings(locator, settings) is settings
    assert locator.get(RESOLVER_SETTINGS_SERVICE) is settings
