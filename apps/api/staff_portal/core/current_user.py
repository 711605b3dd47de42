from fastapi import Depends, Request, Response
from sqlalchemy.orm import Session

from ..db import get_session
from ..models.user import User
from ..services.session_store import SessionStore
from .config import settings
from .errors import Forbidden, Unauthorized
from .ranks import is_privileged
from .security import sign_session_id, unsign_session_id


def set_session_cookie(response: Response, sid: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=sign_session_id(sid),
        max_age=settings.session_ttl_days * 24 * 60 * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(key=settings.session_cookie_name, path="/")


def get_session_id(request: Request) -> str | None:
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        return None
    return unsign_session_id(token)


def get_current_user(
    request: Request,
    response: Response,
    session: Session = Depends(get_session),
) -> User:
    sid = get_session_id(request)
    if not sid:
        raise Unauthorized()

    store = SessionStore(session)
    user_id = store.resolve(sid)
    if user_id is None:
        raise Unauthorized()

    user = session.get(User, user_id)
    if not user:
        store.destroy(sid)
        raise Unauthorized("User not found")

    # Rolling cookie: every authenticated call restarts the browser-side clock too.
    set_session_cookie(response, sid)
    return user


def require_board_member(user: User = Depends(get_current_user)) -> User:
    if not is_privileged(user.rank):
        raise Forbidden()
    return user
