from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.current_user import get_current_user
from ..core.errors import ValidationError
from ..db import get_session
from ..models.loa_request import LoaRequest
from ..models.user import User
from ..schemas.loa_request import LoaRequestCreateIn, LoaRequestOut
from ..services.review import list_requests

router = APIRouter(prefix="/loa-requests", tags=["loa-requests"])


@router.get("", response_model=list[LoaRequestOut])
def list_my_loa_requests(
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
):
    return list_requests(session, LoaRequest, user_id=user.id)


@router.post("", response_model=LoaRequestOut)
def create_loa_request(
    payload: LoaRequestCreateIn,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
):
    if payload.end_date < payload.start_date:
        raise ValidationError("End date must be on or after the start date")

    request = LoaRequest(
        user_id=user.id,
        start_date=payload.start_date,
        end_date=payload.end_date,
        reason=payload.reason,
        status="Pending",
    )
    session.add(request)
    session.commit()
    session.refresh(request)
    return request
