"""Google OAuth configuration using authlib Starlette integration."""

from authlib.integrations.starlette_client import OAuth

from wild_oasis.config import settings

oauth = OAuth()

# Google OAuth: OpenID Connect (auto-discovers endpoints)
oauth.register(
    name="google",
    client_id=settings.google_client_id,
    client_secret=settings.google_client_secret,
    server_metadata_url="https://accounts.google.com/.well-known/openid-configuration",
    client_kwargs={"scope": "openid email profile"},
)


async def get_google_user_info(token: dict) -> dict:
    """Extract standardized user info from a Google OAuth token response.

    Google uses OpenID Connect, so user info is available in the ID token's
    ``userinfo`` claim without an extra API call.

    Returns:
        dict with keys: email, name, image
    """
    userinfo = token.get("userinfo") or {}
    return {
        "email": userinfo.get("email", ""),
        "name": userinfo.get("name", ""),
        "image": userinfo.get("picture"),
    }
