from datetime import datetime
from sqlalchemy import Integer, DateTime, ForeignKey, UniqueConstraint, Index, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from screenlist.database import Base
from screenlist.models.user import utcnow


class WatchProgress(Base):
    __tablename__ = "watch_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "content_id", name="uq_watch_progress_user_content"),
        Index("idx_watch_progress_user", "user_id", text("last_watched DESC")),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    content_id: Mapped[int] = mapped_column(Integer, ForeignKey("content.id", ondelete="CASCADE"), nullable=False)
    progress_seconds: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    duration_seconds: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    last_watched: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    content: Mapped["Content"] = relationship("Content")
