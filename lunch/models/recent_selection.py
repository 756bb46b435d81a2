"""Recent selection model for avoiding repeat picks."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, Integer, String

from lunch.database import Base


class RecentSelection(Base):
    """One rolled restaurant, kept for a bounded number of rolls.

    `name` is a soft reference; the restaurant may have been deleted since.
    Rolls are ordered by `id`, which only grows; `selected_at` is informational.
    """

    __tablename__ = "recent_selections"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    selected_at = Column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
