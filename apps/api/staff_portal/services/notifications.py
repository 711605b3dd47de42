from __future__ import annotations

import logging

from sqlalchemy import desc, func, select, update
from sqlalchemy.orm import Session

from ..core.errors import NotFoundError
from ..models.notification import Notification

logger = logging.getLogger(__name__)

REQUEST_LABELS = {
    "transfer": "transfer",
    "loa": "LOA",
}


def notify_status_changed(db: Session, user_id: int, request_type: str, request_id: int, status: str) -> Notification:
    """Queue the owner's notification for a review decision; the caller commits."""
    new_status = status.lower()
    notification = Notification(
        user_id=user_id,
        message=f"Your {REQUEST_LABELS.get(request_type, request_type)} request has been {new_status}",
        type=f"{request_type}_{new_status}",
        request_id=request_id,
        request_type=request_type,
        read=False,
    )
    db.add(notification)
    return notification


def list_for_user(db: Session, user_id: int) -> list[Notification]:
    stmt = (
        select(Notification)
        .where(Notification.user_id == user_id)
        .order_by(desc(Notification.created_at), desc(Notification.id))
    )
    return list(db.scalars(stmt).all())


def unread_count(db: Session, user_id: int) -> int:
    stmt = (
        select(func.count(Notification.id))
        .where(Notification.user_id == user_id)
        .where(Notification.read.is_(False))
    )
    return int(db.scalar(stmt) or 0)


def mark_read(db: Session, user_id: int, notification_id: int) -> None:
    notification = db.get(Notification, notification_id)
    # Someone else's notification looks the same as a missing one.
    if not notification or notification.user_id != user_id:
        raise NotFoundError("Notification not found")
    notification.read = True
    db.commit()


def mark_all_read(db: Session, user_id: int) -> int:
    result = db.execute(
        update(Notification)
        .where(Notification.user_id == user_id)
        .where(Notification.read.is_(False))
        .values(read=True)
    )
    db.commit()
    logger.info("marked %d notifications read for user_id=%s", result.rowcount, user_id)
    return result.rowcount
