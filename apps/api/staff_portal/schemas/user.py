from .base import CamelModel, UtcDatetime


class UserOut(CamelModel):
    id: int
    roblox_username: str
    roblox_user_id: int
    rank: str
    rank_id: int
    department: str
    sub_department: str
    verified_at: UtcDatetime | None = None
    last_login: UtcDatetime | None = None
