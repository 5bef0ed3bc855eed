"""Shared pytest fixtures for navparser tests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from navparser.service_locator import ServiceLocator


class ServiceLookupFailedError(Exception):
    """Failure raised by ``RecordingLookupService`` for keys configured to fail."""


class RecordingLookupService:
    """Lookup service fake that records every ``has``/``get`` call.

    ``present`` lists keys ``has`` reports, ``services`` maps keys to the values
    ``get`` returns, and ``failing`` lists keys ``get`` raises for.
    """

    error_type = ServiceLookupFailedError

    def __init__(
        self,
        *,
        present: set[str] | None = None,
        services: Mapping[str, Any] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self.present = present or set()
        self.services = dict(services or {})
        self.failing = failing or set()
        self.has_calls: list[str] = []
        self.get_calls: list[str] = []

    def has(self, key: str) -> bool:
        self.has_calls.append(key)
        return key in self.present

    def get(self, key: str) -> Any:
        self.get_calls.append(key)
        if key in self.failing or key not in self.services:
            msg = f"lookup of {key!r} failed"
            raise ServiceLookupFailedError(msg)
        return self.services[key]


@pytest.fixture()
def service_locator() -> ServiceLocator:
    """Empty service locator."""
    return ServiceLocator()


@pytest.fixture()
def lookup() -> RecordingLookupService:
    """Recording lookup service with no entries."""
    return RecordingLookupService()


@pytest.fixture()
def make_lookup() -> type[RecordingLookupService]:
    """Factory for recording lookup services with custom entries."""
    return RecordingLookupService
