from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from screenlist.config import get_settings
from screenlist.database import INT4_MAX, get_db
from screenlist.schemas.content import ContentPage, ContentResponse
from screenlist.services import catalog

router = APIRouter(prefix="/api/content", tags=["content"])
settings = get_settings()


def _positive_int(raw: str | None, default: int) -> int:
    """Lenient query-param parsing: absent, non-numeric or < 1 falls back to default."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


@router.get("", response_model=ContentPage)
async def list_content(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    search: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    page_num = min(_positive_int(page, 1), INT4_MAX)
    page_size = min(
        _positive_int(limit, settings.content_page_size),
        settings.content_max_page_size,
    )
    search_term = (search or "").strip()

    result = await catalog.list_content(db, page_num, page_size, search_term or None)
    return ContentPage(
        items=[ContentResponse.model_validate(c) for c in result.items],
        page=page_num,
        limit=page_size,
        total_pages=result.total_pages,
        total=result.total,
        search_term=search_term,
    )
