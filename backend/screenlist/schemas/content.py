from pydantic import BaseModel, Field
from screenlist.models.content import ContentType


class ContentResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    title: str
    type: ContentType
    poster_url: str | None
    release_year: int | None
    genre: str | None
    tmdb_id: int | None
    imdb_id: str | None


class ContentPage(BaseModel):
    model_config = {"populate_by_name": True}

    items: list[ContentResponse]
    page: int
    limit: int
    total_pages: int = Field(serialization_alias="totalPages")
    total: int
    search_term: str = Field("", serialization_alias="searchTerm")
