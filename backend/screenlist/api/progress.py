from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from screenlist.api.deps import get_current_user_id
from screenlist.database import INT4_MAX, get_db
from screenlist.schemas.progress import (
    ContinueWatchingItem,
    MessageResponse,
    ProgressResponse,
    ProgressSave,
)
from screenlist.services import progress as progress_service

router = APIRouter(prefix="/api/progress", tags=["progress"])


@router.get("", response_model=list[ContinueWatchingItem])
async def continue_watching(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await progress_service.continue_watching(db, user_id)


@router.post("", response_model=ProgressResponse)
async def save_progress(
    data: ProgressSave,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await progress_service.save_progress(
        db, user_id, data.content_id, data.progress_seconds, data.duration_seconds
    )


@router.get("/{content_id}", response_model=ProgressResponse, response_model_exclude_none=True)
async def get_progress(
    content_id: int = Path(ge=1, le=INT4_MAX),
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    record = await progress_service.get_progress(db, user_id, content_id)
    if record is None:
        # Nothing saved yet: the player starts from zero.
        return ProgressResponse(progress_seconds=0, duration_seconds=0)
    return record


@router.delete("/{content_id}", response_model=MessageResponse)
async def remove_progress(
    content_id: int = Path(ge=1, le=INT4_MAX),
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    await progress_service.remove_progress(db, user_id, content_id)
    return MessageResponse(message="Progress removed")
