"""
Request bodies for the coordinator's password endpoints.

The coordinator never sees the password itself, only its MD5 digest
serialized as a JSON array of 16 integers under ``md5_password``.
"""

import json
import logging

from .md5 import md5_ints

logger = logging.getLogger(__name__)


class PasswordRequiredError(ValueError):
    """Raised when a password body is requested for an empty password."""

    def __init__(self):
        super().__init__("Password is required")


def hash_password_body(password) -> dict:
    """Return ``{"md5_password": [...]}`` for ``password``."""
    if not password:
        raise PasswordRequiredError()
    return {'md5_password': md5_ints(password)}


def login_request_body(username, password, retain=True) -> dict:
    """Return the body POSTed to ``<coordinator>/login``."""
    logger.debug("Login body for %r (password length %d, retain=%s)",
                 username, len(password), retain)
    return {
        'username': username,
        'md5_password': md5_ints(password),
        'retain': retain,
    }


def to_json(body: dict) -> str:
    """Encode a request body as compact JSON."""
    return json.dumps(body, separators=(',', ':'))
