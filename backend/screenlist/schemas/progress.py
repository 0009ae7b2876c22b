from datetime import datetime
from pydantic import BaseModel, Field
from screenlist.database import INT4_MAX
from screenlist.models.content import ContentType


class ProgressSave(BaseModel):
    model_config = {"populate_by_name": True}

    content_id: int = Field(alias="contentId", ge=1, le=INT4_MAX)
    progress_seconds: int = Field(alias="progressSeconds", ge=0, le=INT4_MAX)
    duration_seconds: int = Field(alias="durationSeconds", ge=0, le=INT4_MAX)


class ProgressResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int | None = None
    user_id: int | None = None
    content_id: int | None = None
    progress_seconds: int
    duration_seconds: int
    last_watched: datetime | None = None


class ContinueWatchingItem(BaseModel):
    """In-progress entry joined with its catalog title."""
    id: int
    content_id: int
    progress_seconds: int
    duration_seconds: int
    last_watched: datetime
    title: str
    type: ContentType
    poster_url: str | None
    release_year: int | None
    genre: str | None
    tmdb_id: int | None
    imdb_id: str | None


class MessageResponse(BaseModel):
    message: str
