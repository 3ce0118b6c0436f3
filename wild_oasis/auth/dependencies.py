"""FastAPI session dependencies for route protection."""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from wild_oasis.auth.identity import resolve_session_guest
from wild_oasis.auth.session import decode_session_token
from wild_oasis.config import settings
from wild_oasis.database import get_db
from wild_oasis.schemas.auth import SessionClaims, SessionGuest
from wild_oasis.services.errors import Unauthorized

# Optional bearer: returns None if no token provided
_bearer_scheme_optional = HTTPBearer(auto_error=False)


def _read_session_token(request: Request, credentials: HTTPAuthorizationCredentials | None) -> str | None:
    """Session cookie first, then ``Authorization: Bearer``."""
    token = request.cookies.get(settings.session_cookie_name)
    if token:
        return token
    if credentials is not None:
        return credentials.credentials
    return None


async def get_session_claims(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme_optional),
) -> SessionClaims | None:
    """Return the session's identity-provider claims, or ``None`` when signed out.

    Expired, tampered or otherwise unreadable tokens count as signed out.
    """
    token = _read_session_token(request, credentials)
    if token is None:
        return None
    try:
        return decode_session_token(token)
    except (JWTError, ValidationError):
        return None


async def get_optional_guest(
    claims: SessionClaims | None = Depends(get_session_claims),
    db: AsyncSession = Depends(get_db),
) -> SessionGuest | None:
    """Return the enriched session, or ``None`` when signed out.

    Raises:
        NotFound: Signed in, but no guest exists for the session's email.
    """
    if claims is None:
        return None
    return await resolve_session_guest(db, claims)


async def get_current_guest(
    guest: SessionGuest | None = Depends(get_optional_guest),
) -> SessionGuest:
    """Return the enriched session.

    Raises:
        Unauthorized: No valid session.
    """
    if guest is None:
        raise Unauthorized()
    return guest
