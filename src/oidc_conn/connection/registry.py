"""Resource type registry.

Provides a static registry of the resource types that publish connection
details, their metadata, and the function that builds their connection
detail map from the resource attributes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from oidc_conn.connection.details import project_connection_details
from oidc_conn.errors import UnknownResourceError
from oidc_conn.util.logging import get_logger

logger = get_logger(__name__)

RESOURCE_TYPES: dict[str, dict[str, Any]] = {
    "keycloak_openid_client": {
        "name": "keycloak_openid_client",
        "short_group": "openidclient",
        "kind": "Client",
        "description": "OpenID Connect client registration. Publishes the client secret, client ID and service-account user ID.",
        "connection_details": project_connection_details,
    },
}


def get_resource_type(name: str) -> dict[str, Any] | None:
    """Return the registry entry for the given resource type name, or
    ``None`` if the name is not registered.
    """
    return RESOURCE_TYPES.get(name)


def list_resource_types() -> list[dict[str, Any]]:
    """Return all registered resource types as a list of dicts."""
    return list(RESOURCE_TYPES.values())


def get_connection_details(
    resource_name: str, attributes: Mapping[str, Any]
) -> dict[str, bytes]:
    """Build the connection detail map for a resource of the named type.

    Raises ``UnknownResourceError`` if the type is not registered.  Errors
    from the type's connection-details function propagate unchanged.
    """
    resource_type = get_resource_type(resource_name)
    if resource_type is None:
        raise UnknownResourceError(resource_name)
    logger.debug("Building connection details for %s", resource_name)
    return resource_type["connection_details"](attributes)
