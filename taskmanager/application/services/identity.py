"""Identity context resolution: verified identity claims -> ActorContext."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from taskmanager.application.dtos.actor import ANONYMOUS_ACTOR, ActorContext
from taskmanager.domain.enums import UserRole

DEFAULT_ROLE_CLAIM = "custom:role"
GROUPS_CLAIM = "cognito:groups"


def _groups_from_claim(value: Any) -> list[str]:
    """Cognito REST authorizers flatten groups to a string ("[admin member]" or "admin,member")."""
    if isinstance(value, (list, tuple)):
        return [str(g).strip().lower() for g in value]
    if isinstance(value, str):
        cleaned = value.strip().strip("[]")
        return [g.strip().lower() for g in cleaned.replace(",", " ").split() if g.strip()]
    return []


def resolve_actor_context(
    claims: Mapping[str, Any] | None,
    role_claim: str = DEFAULT_ROLE_CLAIM,
) -> ActorContext:
    """Build the actor context from verified identity claims.

    Never raises: a missing or malformed claim set yields an actor with
    role UNKNOWN, leaving the authorization decision to the caller.

    Role lookup order: role_claim (e.g. 'custom:role'), then 'role', then
    membership of 'admin' in 'cognito:groups'.

    Args:
        claims: Claims already verified by the identity provider or gateway.
        role_claim: Claim name carrying the role attribute.

    Returns:
        ActorContext with id from 'sub' and role mapped to UserRole.
    """
    if not isinstance(claims, Mapping) or not claims:
        return ANONYMOUS_ACTOR

    sub = claims.get("sub")
    actor_id = sub.strip() if isinstance(sub, str) and sub.strip() else None
    email = claims.get("email") if isinstance(claims.get("email"), str) else None

    raw_role = claims.get(role_claim)
    if raw_role is None:
        raw_role = claims.get("role")
    role = UserRole.from_claim(raw_role)
    if role == UserRole.UNKNOWN and raw_role is None:
        if UserRole.ADMIN.value in _groups_from_claim(claims.get(GROUPS_CLAIM)):
            role = UserRole.ADMIN

    if actor_id is None:
        # Role without a subject is not attributable to anyone.
        return ActorContext(id=None, role=UserRole.UNKNOWN, email=email)
    return ActorContext(id=actor_id, role=role, email=email)
