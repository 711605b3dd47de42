from .base import CamelModel, UtcDatetime


class NotificationOut(CamelModel):
    id: int
    user_id: int
    message: str
    type: str
    request_id: int
    request_type: str
    read: bool
    created_at: UtcDatetime | None = None


class UnreadCountOut(CamelModel):
    count: int
