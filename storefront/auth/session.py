"""Web session utilities (in-memory).

Each session owns one StorefrontContext; cart and wishlist live and die
with it. Nothing here survives a process restart.
"""
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timezone, timedelta
from typing import Dict, List, Optional

from storefront import config
from storefront.context import StorefrontContext, create_context
from storefront.db import close_session_client
from storefront.logging import get_logger

logger = get_logger(__name__)


@dataclass
class WebSession:
    token: str
    context: StorefrontContext
    created_at: datetime
    expires_at: datetime

    @property
    def is_expired(self) -> bool:
        return datetime.now(timezone.utc) > self.expires_at


@dataclass
class SessionStore:
    """Token -> session map, bounded by expiry and max_sessions."""

    ttl: timedelta = field(default_factory=lambda: timedelta(days=config.SESSION_TTL_DAYS))
    max_sessions: int = field(default_factory=lambda: config.MAX_SESSIONS)
    _sessions: Dict[str, WebSession] = field(default_factory=dict)

    async def create(self) -> WebSession:
        """
        Start a new anonymous session with an empty context.

        Expired sessions are swept first; if the store is still full the
        oldest sessions are evicted.
        """
        dropped = self._sweep_expired()
        while self._sessions and len(self._sessions) >= self.max_sessions:
            # dicts keep insertion order, so the first token is the oldest
            dropped.append(self._sessions.pop(next(iter(self._sessions))))
        if dropped:
            logger.info(f"Dropped {len(dropped)} session(s)")
        for session in dropped:
            await close_session_client(session.context.auth.client)

        now = datetime.now(timezone.utc)
        session = WebSession(
            token=secrets.token_urlsafe(32),
            context=create_context(),
            created_at=now,
            expires_at=now + self.ttl,
        )
        self._sessions[session.token] = session
        return session

    def get(self, token: Optional[str]) -> Optional[WebSession]:
        """Return the live session for token; expired sessions are not returned."""
        if not token:
            return None
        session = self._sessions.get(token)
        if session is None or session.is_expired:
            return None
        return session

    async def destroy(self, token: str) -> None:
        """Drop the session and sign its backend auth client out."""
        session = self._sessions.pop(token, None)
        if session is not None:
            await close_session_client(session.context.auth.client)

    def _sweep_expired(self) -> List[WebSession]:
        expired = [token for token, s in self._sessions.items() if s.is_expired]
        return [self._sessions.pop(token) for token in expired]

    def __len__(self) -> int:
        return len(self._sessions)
