"""Read path over the content catalog."""
from __future__ import annotations
import math
from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from screenlist.models.content import Content


def _contains_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


@dataclass
class CatalogPage:
    items: list[Content]
    total: int
    total_pages: int


async def list_content(
    db: AsyncSession,
    page: int,
    page_size: int,
    search: str | None = None,
) -> CatalogPage:
    """Return one page of the catalog, optionally filtered by title substring.

    Search results are ordered newest release first; the unfiltered listing is
    ordered by id.
    """
    query = select(Content)
    count_query = select(func.count()).select_from(Content)
    if search:
        condition = Content.title.ilike(_contains_pattern(search), escape="\\")
        query = query.where(condition).order_by(
            Content.release_year.desc().nulls_last(), Content.id
        )
        count_query = count_query.where(condition)
    else:
        query = query.order_by(Content.id)

    total = (await db.execute(count_query)).scalar_one()
    result = await db.execute(query.offset((page - 1) * page_size).limit(page_size))
    return CatalogPage(
        items=list(result.scalars().all()),
        total=total,
        total_pages=math.ceil(total / page_size),
    )


async def content_exists(db: AsyncSession, content_id: int) -> bool:
    result = await db.execute(select(Content.id).where(Content.id == content_id))
    return result.scalar_one_or_none() is not None
