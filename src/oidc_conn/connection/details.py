"""
Connection details for OpenID client registrations.

Projects the attribute set of an OpenID client resource into the byte-valued
credential map exposed by the secret-management surface.

Key rules:
- Each recognized attribute is published under two keys: a simplified
  camel-case key and a legacy ``attribute.<field>`` key.
- An attribute is published only if it is present, a ``str``, and non-empty.
  Otherwise neither key appears.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from oidc_conn.errors import InvalidAttributeError, MalformedAttributesError
from oidc_conn.settings import settings
from oidc_conn.util.logging import get_logger

logger = get_logger(__name__)

LEGACY_KEY_PREFIX = "attribute."

# source field -> (simplified key, legacy key)
CONNECTION_DETAIL_KEYS: dict[str, tuple[str, str]] = {
    "client_secret": ("clientSecret", LEGACY_KEY_PREFIX + "client_secret"),
    "client_id": ("clientID", LEGACY_KEY_PREFIX + "client_id"),
    "service_account_user_id": (
        "serviceAccountUserId",
        LEGACY_KEY_PREFIX + "service_account_user_id",
    ),
}


def project_connection_details(
    attributes: Mapping[str, Any],
    *,
    strict: bool | None = None,
) -> dict[str, bytes]:
    """Build the connection detail map for an OpenID client attribute set.

    Parameters
    ----------
    attributes:
        Resource attributes keyed by name.  Values are of arbitrary type;
        only ``str`` values are published.  The mapping is never modified.
    strict:
        When true, a recognized attribute holding a value other than a
        ``str`` or ``None`` raises ``InvalidAttributeError`` instead of
        being skipped.  Defaults to ``settings.STRICT_ATTRIBUTE_TYPES``.

    Returns
    -------
    dict[str, bytes]
        A new dict holding two entries per qualifying attribute, e.g.::

            {
                "clientID": b"test-client",
                "attribute.client_id": b"test-client",
            }

    Raises
    ------
    MalformedAttributesError
        If ``attributes`` is not a mapping.
    InvalidAttributeError
        In strict mode, if a recognized attribute is not a string.
    """
    if not isinstance(attributes, Mapping):
        raise MalformedAttributesError(attributes)
    if strict is None:
        strict = settings.STRICT_ATTRIBUTE_TYPES

    conn: dict[str, bytes] = {}
    for field, (simplified_key, legacy_key) in CONNECTION_DETAIL_KEYS.items():
        value = attributes.get(field)
        if value is None:
            logger.debug("Skipping %s: not set", field)
            continue
        if not isinstance(value, str):
            if strict:
                raise InvalidAttributeError(field, value)
            logger.debug(
                "Skipping %s: expected str, got %s", field, type(value).__name__
            )
            continue
        if not value:
            logger.debug("Skipping %s: empty", field)
            continue

        secret = _raw_bytes(value)
        conn[simplified_key] = secret
        conn[legacy_key] = secret

    logger.debug("Projected %d connection detail keys", len(conn))
    return conn


def _raw_bytes(value: str) -> bytes:
    """Encode ``value`` as UTF-8, passing lone surrogates through as raw bytes.

    ``surrogateescape`` restores bytes that were decoded from non-UTF-8 input
    (``os.environ``, file names).  Any other lone surrogate is written with
    ``surrogatepass`` so encoding never fails.
    """
    try:
        return value.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return value.encode("utf-8", "surrogatepass")


def connection_detail_keys(field: str | None = None) -> list[str]:
    """Return the connection detail keys the projector can emit.

    With ``field`` given, return only its ``[simplified, legacy]`` pair;
    an unrecognized field raises ``KeyError``.
    """
    if field is not None:
        return list(CONNECTION_DETAIL_KEYS[field])
    return [key for pair in CONNECTION_DETAIL_KEYS.values() for key in pair]
