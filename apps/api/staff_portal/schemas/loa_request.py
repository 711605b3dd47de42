from pydantic import Field

from .base import CamelModel, UtcDatetime


class LoaRequestCreateIn(CamelModel):
    start_date: UtcDatetime
    end_date: UtcDatetime
    reason: str = Field(min_length=1)


class LoaRequestOut(CamelModel):
    id: int
    user_id: int
    start_date: UtcDatetime
    end_date: UtcDatetime
    reason: str
    status: str
    created_at: UtcDatetime | None = None
    reviewed_at: UtcDatetime | None = None
    reviewed_by: int | None = None
