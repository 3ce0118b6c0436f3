"""Shared API dependencies — single import point for all routers.

Re-exports database session and session dependencies so that router
modules can import everything they need from one place::

    from wild_oasis.api.deps import get_db, get_current_guest
"""

from wild_oasis.auth.dependencies import (
    get_current_guest,
    get_optional_guest,
    get_session_claims,
)
from wild_oasis.database import get_db

__all__ = [
    "get_db",
    "get_session_claims",
    "get_optional_guest",
    "get_current_guest",
]
