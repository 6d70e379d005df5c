import logging
import time
import uuid as uuid_lib
from typing import Any, Callable, Dict, Optional

import httpx
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwk, jwt
from jose.exceptions import ExpiredSignatureError, JWKError, JWTClaimsError, JWTError
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import get_db
from app.models.user import User

logger = logging.getLogger(__name__)

ROLE_USER = "user"
ROLE_ADMIN = "admin"

SUPPORTED_ALGORITHMS = ["ES256", "RS256"]

# Missing credentials are not an error here; the role gate decides.
bearer_scheme = HTTPBearer(auto_error=False)

# JWKS cache with TTL
_jwks_cache: Optional[Dict[str, Any]] = None
_jwks_cache_time: float = 0
JWKS_CACHE_TTL = 600  # 10 minutes in seconds


class TokenError(Exception):
    """Token could not be verified. The message is for logs only."""


class Identity(BaseModel):
    """Represents the authenticated identity from the token."""
    provider: str
    uid: str
    email: Optional[str] = None


def fetch_jwks() -> Dict[str, Any]:
    """
    Fetch JWKS from the Supabase endpoint, cached for JWKS_CACHE_TTL seconds.

    Falls back to an expired cache when the endpoint is unreachable.

    Raises:
        TokenError: If no keys can be obtained
    """
    global _jwks_cache, _jwks_cache_time

    current_time = time.time()
    if _jwks_cache is not None and (current_time - _jwks_cache_time) < JWKS_CACHE_TTL:
        logger.debug("Using cached JWKS")
        return _jwks_cache

    try:
        logger.info(f"Fetching JWKS from {settings.supabase_jwks_url}")
        response = httpx.get(settings.supabase_jwks_url, timeout=10.0)
        response.raise_for_status()
        jwks_data = response.json()
        if not isinstance(jwks_data, dict) or "keys" not in jwks_data:
            raise ValueError("Invalid JWKS structure: missing 'keys' field")
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"Failed to fetch JWKS: {e}")
        if _jwks_cache is not None:
            logger.warning("Using expired JWKS cache due to fetch failure")
            return _jwks_cache
        raise TokenError("JWKS endpoint unavailable") from e

    _jwks_cache = jwks_data
    _jwks_cache_time = current_time
    logger.info(f"JWKS fetched successfully, {len(jwks_data['keys'])} keys found")
    return jwks_data


def get_signing_key(token: str, jwks: Dict[str, Any]) -> Dict[str, Any]:
    """Return the JWK whose kid matches the token header."""
    try:
        kid = jwt.get_unverified_header(token).get("kid")
    except JWTError as e:
        raise TokenError(f"Malformed token header: {e}") from e

    if not kid:
        raise TokenError("Token missing 'kid' in header")

    for key in jwks.get("keys", []):
        if key.get("kid") == kid:
            return key
    raise TokenError(f"Key ID '{kid}' not found in JWKS")


def verify_supabase_token(token: str) -> dict:
    """
    Verify a Supabase JWT and return its claims.

    Checks signature, audience, issuer and expiry.

    Raises:
        TokenError: If verification fails for any reason
    """
    jwk_key = get_signing_key(token, fetch_jwks())

    header_alg = jwt.get_unverified_header(token).get("alg")
    jwk_alg = jwk_key.get("alg")
    if header_alg and jwk_alg and header_alg != jwk_alg:
        raise TokenError(f"Algorithm mismatch: header={header_alg}, JWK={jwk_alg}")
    algorithm = header_alg or jwk_alg or "ES256"
    if algorithm not in SUPPORTED_ALGORITHMS:
        raise TokenError(f"Unsupported algorithm: {algorithm}")

    try:
        key = jwk.construct(jwk_key, algorithm)
    except JWKError as e:
        raise TokenError(f"Failed to construct key from JWK: {e}") from e

    try:
        payload = jwt.decode(
            token,
            key,
            algorithms=SUPPORTED_ALGORITHMS,
            audience=settings.supabase_jwt_audience,
            issuer=settings.supabase_issuer,
        )
    except ExpiredSignatureError as e:
        raise TokenError("Token has expired") from e
    except JWTClaimsError as e:
        raise TokenError(f"Token claims validation failed: {e}") from e
    except JWTError as e:
        raise TokenError(f"JWT verification error: {e}") from e

    logger.debug(f"Token verified successfully for sub: {payload.get('sub')}")
    return payload


def identity_from_claims(claims: dict) -> Identity:
    """Build an Identity from verified claims. sub must be a UUID."""
    uid = claims.get("sub")
    if not uid:
        raise TokenError("Token missing subject (sub) claim")
    try:
        uid = str(uuid_lib.UUID(str(uid)))
    except (ValueError, TypeError) as e:
        raise TokenError(f"Invalid subject (sub) claim: {uid!r}") from e

    # Supabase stores the OAuth provider in app_metadata; email/password has none
    provider = (claims.get("app_metadata") or {}).get("provider")
    if not provider:
        provider = (claims.get("user_metadata") or {}).get("provider", "email")

    return Identity(provider=provider, uid=uid, email=claims.get("email"))


def _sync_user_from_identity(db: Session, user: User, identity: Identity, is_listed_admin: bool) -> User:
    """Backfill a missing email and grant the admin flag to listed admins."""
    was_updated = False
    if identity.email is not None and user.email is None:
        user.email = identity.email
        was_updated = True
    if is_listed_admin and not user.admin:
        user.admin = True
        was_updated = True
    if was_updated:
        db.commit()
        db.refresh(user)
    return user


def get_or_create_user_for_identity(db: Session, identity: Identity) -> User:
    """
    Get the user row for a Supabase UID (JWT sub), creating it on first sight.
    On duplicate key (concurrent first requests), re-queries and returns the existing row.
    Emails listed in ADMIN_EMAILS get the admin flag persisted.
    """
    is_listed_admin = bool(identity.email) and identity.email.lower() in settings.admin_email_list

    user = db.query(User).filter(User.external_auth_uid == identity.uid).first()
    if user:
        return _sync_user_from_identity(db, user, identity, is_listed_admin)

    logger.info(f"Creating new user for external_auth_uid={identity.uid}, email={identity.email}")
    user = User(
        external_auth_uid=identity.uid,
        external_auth_provider=identity.provider,
        email=identity.email,
        admin=is_listed_admin,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        user = db.query(User).filter(User.external_auth_uid == identity.uid).first()
        if user is None:
            raise
        return _sync_user_from_identity(db, user, identity, is_listed_admin)
    db.refresh(user)
    logger.info(f"Created user: id={user.id}, admin={user.admin}")
    return user


def get_current_user_optional(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User | None:
    """
    Resolve the caller from the Bearer token, or None when there is no valid token.
    """
    if not credentials or not credentials.credentials:
        return None
    try:
        identity = identity_from_claims(verify_supabase_token(credentials.credentials))
    except TokenError as e:
        logger.warning(f"Rejected bearer token: {e}")
        return None
    return get_or_create_user_for_identity(db, identity)


def roles_for(user: User | None) -> set[str]:
    if user is None:
        return set()
    roles = {ROLE_USER}
    if user.admin or (user.email and user.email.lower() in settings.admin_email_list):
        roles.add(ROLE_ADMIN)
    return roles


def get_current_roles(user: User | None = Depends(get_current_user_optional)) -> set[str]:
    return roles_for(user)


def require_role(role: str) -> Callable[..., User]:
    """
    Build a dependency that lets the request through only when the caller has `role`.

    Unauthenticated callers have no roles, so they get the same 403 as
    authenticated callers lacking the role.
    """
    def _require_role(user: User | None = Depends(get_current_user_optional)) -> User:
        if role not in roles_for(user):
            logger.info(f"Denied: role {role!r} required, caller={getattr(user, 'id', None)}")
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access is denied")
        return user

    return _require_role


require_user = require_role(ROLE_USER)
require_admin = require_role(ROLE_ADMIN)
