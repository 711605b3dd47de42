import jwt

from staff_portal.core.config import settings
from staff_portal.core.security import (
    CODE_ALPHABET,
    generate_verification_code,
    sign_session_id,
    unsign_session_id,
)


def test_verification_code_shape():
    for _ in range(50):
        code = generate_verification_code()
        assert len(code) == 8
        assert set(code) <= set(CODE_ALPHABET)


def test_verification_codes_differ():
    assert len({generate_verification_code() for _ in range(50)}) == 50


def test_session_cookie_round_trip():
    token = sign_session_id("abc123")
    assert token != "abc123"
    assert unsign_session_id(token) == "abc123"


def test_session_cookie_rejects_foreign_signature():
    forged = jwt.encode({"sid": "abc123"}, settings.session_secret + "-other", algorithm="HS256")
    assert unsign_session_id(forged) is None
    assert unsign_session_id("not-a-token") is None


def test_session_cookie_without_sid_is_rejected():
    token = jwt.encode({"user": 1}, settings.session_secret, algorithm="HS256")
    assert unsign_session_id(token) is None
