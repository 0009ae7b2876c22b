"""Per-user watchlist state.

One row per (user, content). Adding an existing title is an upsert that
replaces ``notes`` and leaves ``watched`` alone; ``update_entry`` is a
partial update where omitted fields keep their stored value.
"""
from __future__ import annotations
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from screenlist.database import upsert
from screenlist.errors import NotFoundError
from screenlist.models.content import Content
from screenlist.models.user import utcnow
from screenlist.models.watchlist import WatchlistEntry
from screenlist.services import catalog

logger = logging.getLogger(__name__)


async def add_or_update(
    db: AsyncSession,
    user_id: int,
    content_id: int,
    notes: str | None = None,
) -> WatchlistEntry:
    if not await catalog.content_exists(db, content_id):
        raise NotFoundError("Content not found")

    now = utcnow()
    stmt = upsert(db, WatchlistEntry).values(
        user_id=user_id,
        content_id=content_id,
        notes=notes,
        watched=False,
        added_at=now,
        updated_at=now,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[WatchlistEntry.user_id, WatchlistEntry.content_id],
        set_={"notes": stmt.excluded.notes, "updated_at": now},
    ).returning(WatchlistEntry).execution_options(populate_existing=True)

    result = await db.execute(stmt)
    entry = result.scalars().one()
    await db.commit()
    logger.debug(f"Watchlist upsert user={user_id} content={content_id} -> entry {entry.id}")
    return entry


async def list_for_user(db: AsyncSession, user_id: int) -> list[dict]:
    """Return the user's entries joined with their titles, newest added first."""
    result = await db.execute(
        select(
            WatchlistEntry.id,
            WatchlistEntry.watched,
            WatchlistEntry.notes,
            WatchlistEntry.added_at,
            WatchlistEntry.updated_at,
            Content.id.label("content_id"),
            Content.title,
            Content.type,
            Content.poster_url,
            Content.release_year,
            Content.genre,
            Content.tmdb_id,
        )
        .join(Content, WatchlistEntry.content_id == Content.id)
        .where(WatchlistEntry.user_id == user_id)
        .order_by(WatchlistEntry.added_at.desc(), WatchlistEntry.id.desc())
    )
    return [dict(row._mapping) for row in result.all()]


async def _get_owned(db: AsyncSession, user_id: int, entry_id: int) -> WatchlistEntry:
    result = await db.execute(
        select(WatchlistEntry).where(
            WatchlistEntry.id == entry_id,
            WatchlistEntry.user_id == user_id,
        )
    )
    entry = result.scalar_one_or_none()
    if entry is None:
        raise NotFoundError("Watchlist item not found")
    return entry


async def update_entry(
    db: AsyncSession,
    user_id: int,
    entry_id: int,
    watched: bool | None = None,
    notes: str | None = None,
) -> WatchlistEntry:
    entry = await _get_owned(db, user_id, entry_id)
    if watched is not None:
        entry.watched = watched
    if notes is not None:
        entry.notes = notes
    entry.updated_at = utcnow()
    await db.commit()
    await db.refresh(entry)
    return entry


async def remove_entry(db: AsyncSession, user_id: int, entry_id: int) -> None:
    entry = await _get_owned(db, user_id, entry_id)
    await db.delete(entry)
    await db.commit()
    logger.debug(f"Removed watchlist entry {entry_id} for user {user_id}")
