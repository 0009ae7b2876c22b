from sqlalchemy import String, Integer, Text, CheckConstraint, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column
from screenlist.database import Base
import enum


class ContentType(str, enum.Enum):
    movie = "movie"
    tv_show = "tv_show"


class Content(Base):
    """Catalog title. Populated out of band by the catalog import; read-only here."""
    __tablename__ = "content"
    __table_args__ = (
        CheckConstraint("type IN ('movie', 'tv_show')", name="ck_content_type"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[ContentType] = mapped_column(
        SAEnum(ContentType, name="content_type", native_enum=False, length=16), nullable=False
    )
    poster_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    release_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    genre: Mapped[str | None] = mapped_column(String(255), nullable=True)  # comma-joined genre ids
    tmdb_id: Mapped[int | None] = mapped_column(Integer, unique=True, nullable=True)
    imdb_id: Mapped[str | None] = mapped_column(String(20), nullable=True)
