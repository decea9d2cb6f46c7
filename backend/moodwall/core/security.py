"""
JWT helpers for tokens issued by the external auth provider.

The provider owns credentials and session issuance; this backend only
verifies the access token and reads its subject (the auth identity).
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from moodwall.core.config import settings


def create_access_token(auth_user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a provider-compatible access token.
    Used by local tooling and tests; production tokens come from the provider.
    """
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    to_encode = {
        "sub": auth_user_id,
        "aud": settings.AUTH_JWT_AUDIENCE,
        "role": "authenticated",
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.AUTH_JWT_SECRET, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """Decode and verify a JWT token."""
    try:
        payload = jwt.decode(
            token,
            settings.AUTH_JWT_SECRET,
            algorithms=[settings.ALGORITHM],
            audience=settings.AUTH_JWT_AUDIENCE,
        )
        return payload
    except JWTError:
        return None


def get_auth_user_id(token: str) -> Optional[str]:
    """Return the auth identity (token subject) or None if the token is invalid."""
    payload = decode_access_token(token)
    if not payload:
        return None
    return payload.get("sub")
