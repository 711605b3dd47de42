from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.current_user import require_board_member
from ..db import get_session
from ..models.loa_request import LoaRequest
from ..models.transfer_request import TransferRequest
from ..models.user import User
from ..schemas.loa_request import LoaRequestOut
from ..schemas.review import ReviewIn
from ..schemas.transfer_request import TransferRequestOut
from ..services.review import list_requests, review_request

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/transfer-requests", response_model=list[TransferRequestOut])
def list_all_transfer_requests(
    session: Session = Depends(get_session),
    user: User = Depends(require_board_member),
):
    return list_requests(session, TransferRequest)


@router.patch("/transfer-requests/{request_id}", response_model=TransferRequestOut)
def review_transfer_request(
    request_id: int,
    payload: ReviewIn,
    session: Session = Depends(get_session),
    user: User = Depends(require_board_member),
):
    return review_request(session, TransferRequest, request_id, payload.status, user)


@router.get("/loa-requests", response_model=list[LoaRequestOut])
def list_all_loa_requests(
    session: Session = Depends(get_session),
    user: User = Depends(require_board_member),
):
    return list_requests(session, LoaRequest)


@router.patch("/loa-requests/{request_id}", response_model=LoaRequestOut)
def review_loa_request(
    request_id: int,
    payload: ReviewIn,
    session: Session = Depends(get_session),
    user: User = Depends(require_board_member),
):
    return review_request(session, LoaRequest, request_id, payload.status, user)
