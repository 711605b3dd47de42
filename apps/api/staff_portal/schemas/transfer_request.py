from pydantic import Field

from .base import CamelModel, UtcDatetime


class TransferRequestCreateIn(CamelModel):
    current_department: str = Field(min_length=1, max_length=100)
    current_sub_department: str = Field(min_length=1, max_length=100)
    requested_department: str = Field(min_length=1, max_length=100)
    requested_sub_department: str = Field(min_length=1, max_length=100)
    reason: str | None = None


class TransferRequestOut(CamelModel):
    id: int
    user_id: int
    current_department: str
    current_sub_department: str
    requested_department: str
    requested_sub_department: str
    reason: str | None = None
    status: str
    created_at: UtcDatetime | None = None
    reviewed_at: UtcDatetime | None = None
    reviewed_by: int | None = None
