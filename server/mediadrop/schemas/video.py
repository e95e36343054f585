from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import CamelModel


class Transformation(CamelModel):
    height: int = 1920
    width: int = 1080
    quality: int | None = Field(default=None, ge=1, le=100)


class VideoCreate(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    video_url: str = Field(min_length=1)
    thumbnail_url: str = Field(min_length=1)
    controls: bool = True
    transformation: Transformation = Field(default_factory=Transformation)


class VideoRead(CamelModel):
    id: int
    title: str
    description: str
    video_url: str
    thumbnail_url: str
    controls: bool
    transformation: Transformation
    created_at: datetime
