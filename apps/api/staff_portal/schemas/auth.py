from pydantic import Field, field_validator

from .base import CamelModel, UtcDatetime
from .user import UserOut


class UsernameIn(CamelModel):
    username: str = Field(max_length=50)

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Username is required")
        return v


class CodeOut(CamelModel):
    code: str
    expires_at: UtcDatetime


class VerifyOut(CamelModel):
    success: bool = True
    user: UserOut


class SuccessOut(CamelModel):
    success: bool = True
