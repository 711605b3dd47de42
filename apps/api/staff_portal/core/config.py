from pydantic import BaseModel
import os


def _database_url() -> str:
    url = os.getenv("DATABASE_URL", "sqlite:///./staff_portal.db")
    # Some hosts hand out postgres://; SQLAlchemy expects postgresql://
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


DEFAULT_SESSION_SECRET = "roblox-staff-portal-secret-key"


class Settings(BaseModel):
    database_url: str = _database_url()
    session_secret: str = os.getenv("SESSION_SECRET", DEFAULT_SESSION_SECRET)
    session_ttl_days: int = int(os.getenv("SESSION_TTL_DAYS", "30"))
    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "portal_sid")
    session_cookie_secure: bool = os.getenv("SESSION_COOKIE_SECURE", "false").lower() == "true"
    roblox_group_id: int = int(os.getenv("ROBLOX_GROUP_ID", "10260222"))
    roblox_users_api: str = os.getenv("ROBLOX_USERS_API", "https://users.roblox.com/v1")
    roblox_groups_api: str = os.getenv("ROBLOX_GROUPS_API", "https://groups.roblox.com/v1")
    roblox_http_timeout_seconds: float = float(os.getenv("ROBLOX_HTTP_TIMEOUT_SECONDS", "10"))
    verification_code_ttl_minutes: int = int(os.getenv("VERIFICATION_CODE_TTL_MINUTES", "10"))
    review_pending_only: bool = os.getenv("REVIEW_PENDING_ONLY", "false").lower() == "true"

    @property
    def uses_default_session_secret(self) -> bool:
        return self.session_secret == DEFAULT_SESSION_SECRET

settings = Settings()
