from datetime import datetime
from sqlalchemy import Integer, Boolean, Text, DateTime, ForeignKey, UniqueConstraint, Index, false
from sqlalchemy.orm import Mapped, mapped_column, relationship
from screenlist.database import Base
from screenlist.models.user import utcnow


class WatchlistEntry(Base):
    __tablename__ = "watchlist"
    __table_args__ = (
        UniqueConstraint("user_id", "content_id", name="uq_watchlist_user_content"),
        Index("ix_watchlist_user_id", "user_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    content_id: Mapped[int] = mapped_column(Integer, ForeignKey("content.id", ondelete="CASCADE"), nullable=False)
    watched: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false(), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    added_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    content: Mapped["Content"] = relationship("Content")
