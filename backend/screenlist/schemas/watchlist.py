from datetime import datetime
from pydantic import BaseModel, Field
from screenlist.database import INT4_MAX
from screenlist.models.content import ContentType


class WatchlistCreate(BaseModel):
    model_config = {"populate_by_name": True}

    content_id: int = Field(alias="contentId", ge=1, le=INT4_MAX)
    notes: str | None = None


class WatchlistUpdate(BaseModel):
    watched: bool | None = None
    notes: str | None = None


class WatchlistEntryResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    user_id: int
    content_id: int
    watched: bool
    notes: str | None
    added_at: datetime
    updated_at: datetime


class WatchlistItemResponse(BaseModel):
    """Watchlist entry joined with its catalog title."""
    id: int
    watched: bool
    notes: str | None
    added_at: datetime
    updated_at: datetime
    content_id: int
    title: str
    type: ContentType
    poster_url: str | None
    release_year: int | None
    genre: str | None
    tmdb_id: int | None


class SuccessResponse(BaseModel):
    success: bool = True
