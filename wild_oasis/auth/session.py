"""Session token creation and verification.

A session is a signed JWT holding what the identity provider told us about
the guest (``email``, ``name``, ``image``). It is issued once at sign-in and
carried in an HTTP-only cookie; the guest id is looked up again on every
read rather than stored in the token.
"""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from wild_oasis.config import settings
from wild_oasis.schemas.auth import SessionClaims

SESSION_TOKEN_TYPE = "session"


def create_session_token(claims: SessionClaims, expires_delta: timedelta | None = None) -> str:
    """Create a session token for a signed-in guest.

    Args:
        claims: Identity-provider profile of the guest.
        expires_delta: Custom lifetime. Defaults to
            ``settings.session_expire_days`` days.

    Returns:
        Encoded JWT string.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(days=settings.session_expire_days))
    to_encode = {
        "sub": claims.email,
        "email": claims.email,
        "name": claims.name,
        "image": claims.image,
        "exp": expire,
        "iat": now,
        "type": SESSION_TOKEN_TYPE,
    }
    return jwt.encode(to_encode, settings.session_secret_key, algorithm=settings.session_algorithm)


def decode_session_token(token: str) -> SessionClaims:
    """Decode and verify a session token.

    Raises:
        jose.JWTError: If the token is invalid, expired, malformed or not a
            session token.
    """
    payload = jwt.decode(token, settings.session_secret_key, algorithms=[settings.session_algorithm])
    if payload.get("type") != SESSION_TOKEN_TYPE:
        raise JWTError("Invalid token type")
    return SessionClaims(email=payload.get("email"), name=payload.get("name"), image=payload.get("image"))
