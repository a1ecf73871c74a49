"""JWT token creation and verification for bearer authentication.

Used when the API runs without an API Gateway authorizer (local development,
container deployments). Tokens carry the same claims the identity provider
issues: sub, email, and the role claim.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from taskmanager.core.config import get_settings


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT access token with the given claims.

    Args:
        data: Claims to encode (e.g. sub, email, custom:role).
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    to_encode = data.copy()
    if expires_delta is not None:
        expire = datetime.now(UTC) + expires_delta
    else:
        expire = datetime.now(UTC) + timedelta(
            minutes=settings.access_token_expire_minutes
        )
    to_encode["exp"] = expire
    encoded = jwt.encode(
        to_encode,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces presence of exp and sub.

    Raises:
        ValueError: If no secret is configured, or the token is invalid,
            expired, or missing required claims.
    """
    settings = get_settings()
    secret = settings.secret_key.get_secret_value()
    if not secret:
        raise ValueError("Bearer authentication is not configured")
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if "sub" not in payload:
        raise ValueError("Token missing required claim: sub")
    return payload
