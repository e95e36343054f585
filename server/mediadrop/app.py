from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import cast

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import auth, videos
from .core.db import create_tables
from .services.auth_service import AuthService
from .services.imagekit_service import ImageKitService
from .services.video_service import VideoService

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    auth_service: AuthService
    imagekit_service: ImageKitService
    video_service: VideoService


def get_app_state() -> AppState:
    app = cast(FastAPI, app_instance)
    return cast(AppState, app.state.container)


def create_app() -> FastAPI:
    app = FastAPI(title="MediaDrop API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.container = AppState(
        auth_service=AuthService(),
        imagekit_service=ImageKitService(),
        video_service=VideoService(),
    )

    app.include_router(auth.router)
    app.include_router(videos.router)

    @app.on_event("startup")
    async def init_database() -> None:
        await create_tables()
        logger.info("Database tables ready")

    return app


app_instance = create_app()
app = app_instance

__all__ = ["app", "get_app_state"]
