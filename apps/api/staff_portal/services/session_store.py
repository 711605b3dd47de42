from __future__ import annotations

from datetime import datetime, timedelta
import logging

from sqlalchemy import delete
from sqlalchemy.orm import Session

from ..core.clock import as_utc, utcnow
from ..core.config import settings
from ..core.security import generate_session_id
from ..models.user_session import UserSession

logger = logging.getLogger(__name__)


class SessionStore:
    """Server-side sessions keyed by an opaque id, with a sliding expiry.

    Every successful ``resolve`` pushes the expiry out by the full TTL, so a
    session only dies after ``ttl`` of inactivity.
    """

    def __init__(self, db: Session, ttl: timedelta | None = None):
        self.db = db
        self.ttl = ttl or timedelta(days=settings.session_ttl_days)

    def create(self, user_id: int, now: datetime | None = None) -> str:
        now = now or utcnow()
        sid = generate_session_id()
        self.db.add(UserSession(sid=sid, user_id=user_id, created_at=now, expires_at=now + self.ttl))
        self.db.commit()
        logger.info("session created for user_id=%s", user_id)
        return sid

    def resolve(self, sid: str, now: datetime | None = None) -> int | None:
        now = now or utcnow()
        row = self.db.get(UserSession, sid)
        if not row:
            return None
        if now > as_utc(row.expires_at):
            user_id = row.user_id
            self.db.delete(row)
            self.db.commit()
            logger.info("session expired for user_id=%s", user_id)
            return None
        row.expires_at = now + self.ttl
        self.db.commit()
        return row.user_id

    def destroy(self, sid: str) -> None:
        self.db.execute(delete(UserSession).where(UserSession.sid == sid))
        self.db.commit()
