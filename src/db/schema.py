"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBSavedGame(Base):
    """At most one saved game per board size: saving again overwrites the earlier save."""

    __tablename__ = "saved_games"
    board_size: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    board: Mapped[str]
    step_count: Mapped[int]
    current_color: Mapped[Optional[int]]
    torus_mode: Mapped[bool] = mapped_column(default=False)
    diagonal_mode: Mapped[bool] = mapped_column(default=False)
    saved_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
