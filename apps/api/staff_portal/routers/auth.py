from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from ..core.current_user import clear_session_cookie, get_current_user, get_session_id, set_session_cookie
from ..db import get_session
from ..models.user import User
from ..schemas.auth import CodeOut, SuccessOut, UsernameIn, VerifyOut
from ..schemas.user import UserOut
from ..services.roblox_client import RobloxClient, get_roblox_client
from ..services.session_store import SessionStore
from ..services.verification import issue_code, verify_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/generate-code", response_model=CodeOut)
def generate_code(
    payload: UsernameIn,
    session: Session = Depends(get_session),
    client: RobloxClient = Depends(get_roblox_client),
):
    return issue_code(session, client, payload.username)


@router.post("/verify", response_model=VerifyOut)
def verify(
    payload: UsernameIn,
    response: Response,
    session: Session = Depends(get_session),
    client: RobloxClient = Depends(get_roblox_client),
):
    user = verify_user(session, client, payload.username)
    sid = SessionStore(session).create(user.id)
    set_session_cookie(response, sid)
    return VerifyOut(user=UserOut.model_validate(user))


@router.get("/me", response_model=UserOut)
def me(user: User = Depends(get_current_user)):
    return user


@router.post("/logout", response_model=SuccessOut)
def logout(request: Request, response: Response, session: Session = Depends(get_session)):
    sid = get_session_id(request)
    if sid:
        SessionStore(session).destroy(sid)
    clear_session_cookie(response)
    return SuccessOut()
