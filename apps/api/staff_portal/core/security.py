import secrets
import string

import jwt

from .config import settings

CODE_ALPHABET = string.ascii_uppercase + string.digits
CODE_LENGTH = 8


def generate_verification_code() -> str:
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(CODE_LENGTH))


def generate_session_id() -> str:
    return secrets.token_urlsafe(32)


def sign_session_id(sid: str) -> str:
    # Expiry lives in the session store (sliding), so the token itself has no exp.
    return jwt.encode({"sid": sid}, settings.session_secret, algorithm="HS256")


def unsign_session_id(token: str) -> str | None:
    try:
        payload = jwt.decode(token, settings.session_secret, algorithms=["HS256"])
    except jwt.InvalidTokenError:
        return None
    sid = payload.get("sid")
    return sid if isinstance(sid, str) and sid else None
