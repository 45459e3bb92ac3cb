# Auth — Firebase ID tokens from the Authorization header
# Roles come from the token's custom claims ("role": [...]),
# defaulting to a plain customer.

import logging
from typing import Optional
from fastapi import Depends, Header, HTTPException
from firebase_admin import auth as firebase_auth
from config import HOST_ROLES, get_db
from models.schemas import User

logger = logging.getLogger(__name__)


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def user_from_claims(claims: dict) -> User:
    roles = claims.get("role") or ["customer"]
    if isinstance(roles, str):
        roles = [roles]
    return User(
        id=claims["uid"],
        email=claims.get("email"),
        name=claims.get("name"),
        roles=[r for r in roles if r in ("admin", "host", "customer")] or ["customer"]
    )


def get_current_user(authorization: Optional[str] = Header(default=None)) -> User:
    token = _bearer_token(authorization)
    if not token:
        raise HTTPException(status_code=401, detail="Unauthorized")

    get_db()  # ensures the Firebase app exists before verifying
    try:
        claims = firebase_auth.verify_id_token(token)
    except (ValueError, firebase_auth.InvalidIdTokenError, firebase_auth.ExpiredIdTokenError) as exc:
        logger.info("Rejected token: %s", exc)
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user_from_claims(claims)


def require_host(user: User = Depends(get_current_user)) -> User:
    if not any(role in HOST_ROLES for role in user.roles):
        raise HTTPException(status_code=403, detail="Only hosts can manage packages")
    return user
