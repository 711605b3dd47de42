from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.current_user import get_current_user
from ..db import get_session
from ..models.transfer_request import TransferRequest
from ..models.user import User
from ..schemas.transfer_request import TransferRequestCreateIn, TransferRequestOut
from ..services.review import list_requests

router = APIRouter(prefix="/transfer-requests", tags=["transfer-requests"])


@router.get("", response_model=list[TransferRequestOut])
def list_my_transfer_requests(
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
):
    return list_requests(session, TransferRequest, user_id=user.id)


@router.post("", response_model=TransferRequestOut)
def create_transfer_request(
    payload: TransferRequestCreateIn,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
):
    # No check that the requested department differs from the current one.
    request = TransferRequest(
        user_id=user.id,
        current_department=payload.current_department,
        current_sub_department=payload.current_sub_department,
        requested_department=payload.requested_department,
        requested_sub_department=payload.requested_sub_department,
        reason=payload.reason or None,
        status="Pending",
    )
    session.add(request)
    session.commit()
    session.refresh(request)
    return request
