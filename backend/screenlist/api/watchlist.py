from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from screenlist.api.deps import get_current_user_id
from screenlist.database import INT4_MAX, get_db
from screenlist.schemas.watchlist import (
    SuccessResponse,
    WatchlistCreate,
    WatchlistEntryResponse,
    WatchlistItemResponse,
    WatchlistUpdate,
)
from screenlist.services import watchlist as watchlist_service

router = APIRouter(prefix="/api/watchlist", tags=["watchlist"])


@router.post("", response_model=WatchlistEntryResponse, status_code=201)
async def add_to_watchlist(
    data: WatchlistCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await watchlist_service.add_or_update(db, user_id, data.content_id, data.notes)


@router.get("", response_model=list[WatchlistItemResponse])
async def list_watchlist(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await watchlist_service.list_for_user(db, user_id)


@router.put("/{entry_id}", response_model=WatchlistEntryResponse)
async def update_watchlist_entry(
    data: WatchlistUpdate,
    entry_id: int = Path(ge=1, le=INT4_MAX),
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await watchlist_service.update_entry(
        db, user_id, entry_id, watched=data.watched, notes=data.notes
    )


@router.delete("/{entry_id}", response_model=SuccessResponse)
async def remove_watchlist_entry(
    entry_id: int = Path(ge=1, le=INT4_MAX),
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    await watchlist_service.remove_entry(db, user_id, entry_id)
    return SuccessResponse()
