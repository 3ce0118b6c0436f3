"""Auth API router — Google sign-in, sign-out and the current session."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from wild_oasis.api.deps import get_current_guest, get_db
from wild_oasis.auth.identity import sign_in_guest
from wild_oasis.auth.oauth import get_google_user_info, oauth
from wild_oasis.auth.session import create_session_token
from wild_oasis.config import settings
from wild_oasis.schemas.auth import SessionClaims, SessionGuest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


# ---------------------------------------------------------------------------
# Google OAuth
# ---------------------------------------------------------------------------


@router.get("/google")
async def google_login(request: Request) -> RedirectResponse:
    """Redirect to Google's OAuth consent screen."""
    return await oauth.google.authorize_redirect(request, settings.google_redirect_uri)  # type: ignore[return-value]


@router.get("/google/callback")
async def google_callback(request: Request, db: AsyncSession = Depends(get_db)) -> RedirectResponse:
    """Handle Google OAuth callback — resolve the guest, set the session cookie, go to the account area."""
    try:
        token = await oauth.google.authorize_access_token(request)
    except Exception as exc:
        logger.warning("Google OAuth callback failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Google authentication failed. Please try again.",
        ) from None

    user_info = await get_google_user_info(token)

    if not await sign_in_guest(db, user_info):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Sign-in was rejected.",
        )

    session_token = create_session_token(
        SessionClaims(email=user_info["email"], name=user_info["name"], image=user_info.get("image"))
    )

    response = RedirectResponse(url=f"{settings.frontend_url}/account", status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session_token,
        max_age=settings.session_expire_days * 24 * 60 * 60,
        httponly=True,
        samesite="lax",
        secure=settings.environment == "production",
    )
    return response


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


@router.post("/signout")
async def sign_out() -> RedirectResponse:
    """Destroy the session cookie and return to the home page."""
    response = RedirectResponse(url=f"{settings.frontend_url}/", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(key=settings.session_cookie_name)
    return response


@router.get("/me", response_model=SessionGuest)
async def me(guest: SessionGuest = Depends(get_current_guest)) -> SessionGuest:
    """Return the current session, enriched with the guest id."""
    return guest
