from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.video import Video
from ..schemas.video import Transformation, VideoCreate, VideoRead


def to_video_read(video: Video) -> VideoRead:
    return VideoRead(
        id=video.id,
        title=video.title,
        description=video.description,
        video_url=video.video_url,
        thumbnail_url=video.thumbnail_url,
        controls=video.controls,
        transformation=Transformation(
            height=video.transformation_height,
            width=video.transformation_width,
            quality=video.transformation_quality,
        ),
        created_at=video.created_at,
    )


class VideoService:
    async def list_videos(self, db: AsyncSession) -> list[VideoRead]:
        stmt = select(Video).order_by(Video.created_at.desc(), Video.id.desc())
        result = await db.execute(stmt)
        return [to_video_read(video) for video in result.scalars().all()]

    async def create_video(self, db: AsyncSession, payload: VideoCreate) -> VideoRead:
        video = Video(
            title=payload.title,
            description=payload.description,
            video_url=payload.video_url,
            thumbnail_url=payload.thumbnail_url,
            controls=payload.controls,
            transformation_height=payload.transformation.height,
            transformation_width=payload.transformation.width,
            transformation_quality=payload.transformation.quality,
        )
        db.add(video)
        await db.commit()
        await db.refresh(video)
        return to_video_read(video)
