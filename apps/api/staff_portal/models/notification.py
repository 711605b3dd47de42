from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, func
from .user import Base


class Notification(Base):
    __tablename__ = "notifications"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True)
    message: Mapped[str] = mapped_column(Text)

    # e.g. "transfer_approved", "loa_rejected"
    type: Mapped[str] = mapped_column(String(32))
    request_id: Mapped[int] = mapped_column(Integer)
    request_type: Mapped[str] = mapped_column(String(16))  # transfer/loa

    read: Mapped[bool] = mapped_column(Boolean, default=False, server_default="0")
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())
