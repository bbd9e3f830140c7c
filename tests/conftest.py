"""Shared pytest fixtures for oidc-conn tests."""

from __future__ import annotations

import logging
from typing import Any, Generator

import pytest


# ---------------------------------------------------------------------------
# Attribute sets
# ---------------------------------------------------------------------------

@pytest.fixture()
def full_attributes() -> dict[str, Any]:
    """Attribute set with every recognized field populated, plus a few
    unrelated attributes the projector must ignore.
    """
    return {
        "client_secret": "test-secret-123",
        "client_id": "test-client",
        "service_account_user_id": "user-123",
        "realm_id": "master",
        "access_type": "CONFIDENTIAL",
        "valid_redirect_uris": ["https://app.example.com/*"],
    }


@pytest.fixture()
def expected_full_details() -> dict[str, bytes]:
    """Connection detail map expected for ``full_attributes``."""
    return {
        "clientSecret": b"test-secret-123",
        "attribute.client_secret": b"test-secret-123",
        "clientID": b"test-client",
        "attribute.client_id": b"test-client",
        "serviceAccountUserId": b"user-123",
        "attribute.service_account_user_id": b"user-123",
    }


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture()
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    """Put the root logger's level and handlers back after a test that
    reconfigures logging.
    """
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    try:
        yield root
    finally:
        for handler in list(root.handlers):
            if handler not in handlers:
                root.removeHandler(handler)
        for handler in handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(level)
