from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import BigInteger, Integer, String, DateTime, func

class Base(DeclarativeBase):
    pass

class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    roblox_username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    roblox_user_id: Mapped[int] = mapped_column(BigInteger, unique=True, nullable=False)

    # rank is always rank_label(rank_id); both refreshed on every login
    rank: Mapped[str] = mapped_column(String(64))
    rank_id: Mapped[int] = mapped_column(Integer)

    department: Mapped[str] = mapped_column(String(100))
    sub_department: Mapped[str] = mapped_column(String(100))

    verified_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    last_login: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())
