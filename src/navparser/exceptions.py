from __future__ import annotations

from typing import Any


class NavParserError(Exception):
    """Represent a base class for all navparser-specific failures.

    Catch this type when you want to handle any navparser error path without
    matching each concrete exception class individually.
    """


class NavParserResolutionError(NavParserError):
    """Signal that a container reference could not be resolved.

    Raised by ``ContainerResolver.resolve`` when the reference has an invalid
    shape (anything but ``None``, a string, or a navigation container), when
    the lookup service fails to fetch a key, or when a direct lookup returns
    something that is not a navigation container.

    When the failure comes from the lookup service, the original exception is
    available as ``__cause__``.

    Typical fixes include passing a string alias or a container instance,
    and registering the requested key with the lookup service.
    """

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class NavParserContractViolationError(NavParserResolutionError):
    """Signal that the lookup service returned the wrong kind of container.

    Raised when a key reported present by ``has`` is fetched successfully but
    the value is not an instance of the container type expected for that key.
    This points to a misconfigured lookup service rather than a missing
    service, so retrying will not help.

    Typical fix is registering the well-known navigation keys with factories
    that return the matching container type.
    """

    def __init__(
        self,
        key: str,
        expected: tuple[type[Any], ...],
        actual: type[Any],
    ) -> None:
        self.expected = expected
        self.actual = actual
        expected_names = " or ".join(_qualified_name(cls) for cls in expected)
        super().__init__(
            f'Container "{key}" should be an instance of {expected_names}, '
            f"but was {_qualified_name(actual)}",
            key=key,
        )


class NavParserServiceNotFoundError(NavParserError, LookupError):
    """Signal that a service key has no registration.

    Raised by ``ServiceLocator.get`` for unknown keys. ``ServiceLocator.has``
    never raises this error; it returns ``False`` instead.

    Typical fix is calling ``ServiceLocator.register`` or
    ``ServiceLocator.alias`` for the key before resolution.
    """

    def __init__(self, key: str) -> None:
        super().__init__(f'Service "{key}" is not registered')
        self.key = key


class NavParserServiceCreationError(NavParserError):
    """Signal that a registered factory failed while building a service.

    The exception raised by the factory is available as ``__cause__``.
    """

    def __init__(self, key: str) -> None:
        super().__init__(f'Service "{key}" could not be created')
        self.key = key


class NavParserInvalidRegistrationError(NavParserError):
    """Signal invalid registration on a ``ServiceLocator``.

    Raised by ``ServiceLocator.register`` when neither or both of ``factory``
    and ``instance`` are given, and by ``ServiceLocator.alias`` when the alias
    would create a cycle.
    """


class NavParserResolverNotSetError(NavParserError):
    """Signal use of the FastAPI dependency before a resolver is configured.

    Typical fix is calling ``setup_navparser(app, service_locator)`` during
    application startup.
    """


def _qualified_name(cls: type[Any]) -> str:
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"
