from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..db import get_session
from ..core.current_user import get_current_user
from ..models.user import User
from ..schemas.auth import SuccessOut
from ..schemas.notification import NotificationOut, UnreadCountOut
from ..services import notifications as notification_service

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationOut])
def list_notifications(
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
):
    return notification_service.list_for_user(session, user.id)


@router.get("/unread-count", response_model=UnreadCountOut)
def unread_count(
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
):
    return UnreadCountOut(count=notification_service.unread_count(session, user.id))


@router.patch("/{notification_id}/read", response_model=SuccessOut)
def mark_read(
    notification_id: int,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
):
    notification_service.mark_read(session, user.id, notification_id)
    return SuccessOut()


@router.post("/mark-all-read", response_model=SuccessOut)
def mark_all_read(
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
):
    notification_service.mark_all_read(session, user.id)
    return SuccessOut()
