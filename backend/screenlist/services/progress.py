"""Playback progress and the continue-watching ranking."""
from __future__ import annotations
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from screenlist.config import get_settings
from screenlist.database import upsert
from screenlist.errors import NotFoundError
from screenlist.models.content import Content
from screenlist.models.progress import WatchProgress
from screenlist.models.user import utcnow
from screenlist.services import catalog

logger = logging.getLogger(__name__)
settings = get_settings()


async def save_progress(
    db: AsyncSession,
    user_id: int,
    content_id: int,
    progress_seconds: int,
    duration_seconds: int,
) -> WatchProgress:
    """Upsert the (user, content) progress row.

    Always a full overwrite: both counters and ``last_watched`` are replaced,
    last write wins.
    """
    if not await catalog.content_exists(db, content_id):
        raise NotFoundError("Content not found")

    now = utcnow()
    stmt = upsert(db, WatchProgress).values(
        user_id=user_id,
        content_id=content_id,
        progress_seconds=progress_seconds,
        duration_seconds=duration_seconds,
        last_watched=now,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[WatchProgress.user_id, WatchProgress.content_id],
        set_={
            "progress_seconds": stmt.excluded.progress_seconds,
            "duration_seconds": stmt.excluded.duration_seconds,
            "last_watched": now,
        },
    ).returning(WatchProgress).execution_options(populate_existing=True)

    result = await db.execute(stmt)
    record = result.scalars().one()
    await db.commit()
    logger.debug(
        f"Progress user={user_id} content={content_id}: "
        f"{progress_seconds}/{duration_seconds}s"
    )
    return record


async def get_progress(db: AsyncSession, user_id: int, content_id: int) -> WatchProgress | None:
    result = await db.execute(
        select(WatchProgress).where(
            WatchProgress.user_id == user_id,
            WatchProgress.content_id == content_id,
        )
    )
    return result.scalar_one_or_none()


async def continue_watching(db: AsyncSession, user_id: int) -> list[dict]:
    """Started-but-unfinished titles, most recently watched first.

    A row qualifies when ``0 < progress < duration * threshold``; untouched
    and essentially finished titles are left out.
    """
    result = await db.execute(
        select(
            WatchProgress.id,
            WatchProgress.content_id,
            WatchProgress.progress_seconds,
            WatchProgress.duration_seconds,
            WatchProgress.last_watched,
            Content.title,
            Content.type,
            Content.poster_url,
            Content.release_year,
            Content.genre,
            Content.tmdb_id,
            Content.imdb_id,
        )
        .join(Content, WatchProgress.content_id == Content.id)
        .where(
            WatchProgress.user_id == user_id,
            WatchProgress.progress_seconds > 0,
            WatchProgress.progress_seconds
            < WatchProgress.duration_seconds * settings.completion_threshold,
        )
        .order_by(WatchProgress.last_watched.desc(), WatchProgress.id.desc())
        .limit(settings.continue_watching_limit)
    )
    return [dict(row._mapping) for row in result.all()]


async def remove_progress(db: AsyncSession, user_id: int, content_id: int) -> None:
    await db.execute(
        delete(WatchProgress).where(
            WatchProgress.user_id == user_id,
            WatchProgress.content_id == content_id,
        )
    )
    await db.commit()
