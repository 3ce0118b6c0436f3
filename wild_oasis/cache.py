"""In-process page cache with path-based revalidation.

Read endpoints store their rendered payload under the page path they back
(``/cabins/<id>``, ``/account/reservations``) plus an optional scope such as
the guest id. Mutation handlers call :func:`revalidate_path` with their
session; the paths are invalidated only once that session commits, so a
read can never re-cache data from before the write became visible.
"""

import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from wild_oasis.config import settings

logger = logging.getLogger(__name__)

# Session.info key holding paths to invalidate after the next commit.
PENDING_PATHS_KEY = "revalidate_paths"


class PageCache:
    """Path-keyed TTL cache of JSON-ready payloads."""

    def __init__(self, ttl_seconds: float) -> None:
        self.ttl_seconds = ttl_seconds
        self._entries: dict[str, dict[str | None, tuple[float, Any]]] = {}
        # Bumped on every invalidation of a path.
        self._versions: dict[str, int] = {}

    def get(self, path: str, scope: str | None = None) -> Any | None:
        entry = self._entries.get(path, {}).get(scope)
        if entry is None:
            return None
        stored_at, payload = entry
        if time.monotonic() - stored_at > self.ttl_seconds:
            self._entries[path].pop(scope, None)
            return None
        return payload

    def set(self, path: str, payload: Any, scope: str | None = None) -> None:
        self._entries.setdefault(path, {})[scope] = (time.monotonic(), payload)

    async def get_or_load(
        self,
        path: str,
        loader: Callable[[], Awaitable[Any]],
        scope: str | None = None,
    ) -> Any:
        """Return the cached payload for ``path`` or build and store it.

        A payload whose path was invalidated while it was loading is
        returned but not stored.
        """
        payload = self.get(path, scope)
        if payload is None:
            version = self._versions.get(path, 0)
            payload = await loader()
            if self._versions.get(path, 0) == version:
                self.set(path, payload, scope)
            else:
                logger.debug("Not caching %s, revalidated during load", path)
        return payload

    def invalidate(self, path: str) -> None:
        """Drop every scope cached under ``path``."""
        self._versions[path] = self._versions.get(path, 0) + 1
        if self._entries.pop(path, None) is not None:
            logger.debug("Revalidated %s", path)

    def clear(self) -> None:
        for path in list(self._entries):
            self.invalidate(path)


page_cache = PageCache(ttl_seconds=settings.page_cache_ttl_seconds)


def revalidate_path(db: AsyncSession, path: str) -> None:
    """Invalidate the cached view backing ``path`` once ``db`` commits.

    Nothing is invalidated if the session rolls back instead.
    """
    db.sync_session.info.setdefault(PENDING_PATHS_KEY, set()).add(path)


@event.listens_for(Session, "after_commit")
def _revalidate_after_commit(session: Session) -> None:
    for path in session.info.pop(PENDING_PATHS_KEY, ()):
        page_cache.invalidate(path)


@event.listens_for(Session, "after_rollback")
def _discard_after_rollback(session: Session) -> None:
    session.info.pop(PENDING_PATHS_KEY, None)
