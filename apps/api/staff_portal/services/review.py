from __future__ import annotations

import logging
from typing import TypeVar

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from ..core.clock import utcnow
from ..core.config import settings
from ..core.errors import NotFoundError, RequestAlreadyReviewed, ValidationError
from ..models.loa_request import LoaRequest
from ..models.transfer_request import TransferRequest
from ..models.user import User
from .notifications import notify_status_changed

logger = logging.getLogger(__name__)

PENDING = "Pending"
REVIEW_STATUSES = {"Approved", "Rejected"}

REQUEST_TYPES: dict[type, str] = {
    TransferRequest: "transfer",
    LoaRequest: "loa",
}

RequestT = TypeVar("RequestT", TransferRequest, LoaRequest)


def list_requests(db: Session, model: type[RequestT], user_id: int | None = None) -> list[RequestT]:
    stmt = select(model)
    if user_id is not None:
        stmt = stmt.where(model.user_id == user_id)
    stmt = stmt.order_by(desc(model.created_at), desc(model.id))
    return list(db.scalars(stmt).all())


def review_request(
    db: Session,
    model: type[RequestT],
    request_id: int,
    status: str,
    reviewer: User,
) -> RequestT:
    if status not in REVIEW_STATUSES:
        raise ValidationError("Invalid status")

    request = db.get(model, request_id)
    if not request:
        raise NotFoundError("Request not found")

    # Decided requests may be re-reviewed (and re-notified) unless configured otherwise.
    if settings.review_pending_only and request.status != PENDING:
        raise RequestAlreadyReviewed()

    request_type = REQUEST_TYPES[model]
    old = request.status
    request.status = status
    request.reviewed_by = reviewer.id
    request.reviewed_at = utcnow()
    notify_status_changed(db, request.user_id, request_type, request.id, status)
    db.commit()
    db.refresh(request)

    logger.info(
        "%s request %s reviewed by user_id=%s: %s -> %s",
        request_type,
        request.id,
        reviewer.id,
        old,
        status,
    )
    return request
