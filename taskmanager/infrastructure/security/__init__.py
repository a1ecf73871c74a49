"""Security: bearer JWT creation and verification."""

from taskmanager.infrastructure.security.jwt import create_access_token, verify_token

__all__ = ["create_access_token", "verify_token"]
