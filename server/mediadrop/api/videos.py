from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.deps import get_db_session
from ..schemas.video import VideoCreate, VideoRead
from ..services.video_service import VideoService

logger = logging.getLogger(__name__)


def get_video_service() -> VideoService:
    from ..app import get_app_state

    return get_app_state().video_service


router = APIRouter(prefix="/api/videos", tags=["videos"])


@router.get("", response_model=list[VideoRead])
async def list_videos(
    db: AsyncSession = Depends(get_db_session),
    video_service: VideoService = Depends(get_video_service),
) -> list[VideoRead]:
    return await video_service.list_videos(db)


@router.post("", response_model=VideoRead, status_code=status.HTTP_201_CREATED)
async def create_video(
    payload: VideoCreate,
    db: AsyncSession = Depends(get_db_session),
    video_service: VideoService = Depends(get_video_service),
) -> VideoRead:
    video = await video_service.create_video(db, payload)
    logger.info(f"[videos] Created video {video.id} ({video.title})")
    return video
