from __future__ import annotations

from typing import Any

from navparser.factory import ContainerResolverFactory
from navparser.resolver import ContainerResolver, ContainerResolverInterface
from navparser.types import service_name


class ConfigProvider:
    """Dependency configuration for wiring the resolver into a service locator.

    Feed the result to ``ServiceLocator.configure``::

        locator.configure(ConfigProvider().get_dependency_config())
    """

    def __call__(self) -> dict[str, Any]:
        return {"dependencies": self.get_dependency_config()}

    def get_dependency_config(self) -> dict[str, dict[str, Any]]:
        return {
            "factories": {
                service_name(ContainerResolver): ContainerResolverFactory,
            },
            "aliases": {
                service_name(ContainerResolverInterface): service_name(ContainerResolver),
            },
        }
