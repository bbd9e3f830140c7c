"""Exceptions raised while projecting connection details."""

from __future__ import annotations


class ConnectionDetailsError(Exception):
    """Base class for every error raised by oidc-conn."""


class MalformedAttributesError(ConnectionDetailsError, TypeError):
    """The attribute set handed to the projector is not a mapping."""

    def __init__(self, attributes: object) -> None:
        self.value_type = type(attributes).__name__
        super().__init__(
            f"Attribute set must be a mapping, got {self.value_type}"
        )


class InvalidAttributeError(ConnectionDetailsError, TypeError):
    """A recognized attribute holds a non-string value (strict mode only)."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value_type = type(value).__name__
        super().__init__(
            f"Attribute '{field}' must be a string, got {self.value_type}"
        )


class UnknownResourceError(ConnectionDetailsError, KeyError):
    """No resource type is registered under the requested name."""

    def __init__(self, resource_name: str) -> None:
        self.resource_name = resource_name
        super().__init__(resource_name)

    def __str__(self) -> str:
        return f"Unknown resource type '{self.resource_name}'"
