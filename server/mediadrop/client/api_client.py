from __future__ import annotations

import logging
from typing import Any, Literal

import httpx
from pydantic import TypeAdapter

from ..schemas.video import VideoCreate, VideoRead
from .errors import GenericRequestError

logger = logging.getLogger(__name__)

Method = Literal["GET", "POST", "PUT", "DELETE"]

_video_list = TypeAdapter(list[VideoRead])


class ApiClient:
    """Thin JSON wrapper around the ``/api`` endpoints."""

    def __init__(self, base_url: str, client: httpx.AsyncClient | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = client

    async def fetch_data(
        self,
        endpoint: str,
        *,
        method: Method = "GET",
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        request_headers = {"Content-Type": "application/json", **(headers or {})}
        url = f"{self.base_url}/api{endpoint}"
        if self._client is not None:
            response = await self._client.request(method, url, json=body, headers=request_headers)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.request(method, url, json=body, headers=request_headers)

        if not response.is_success:
            logger.warning(f"[api] {method} {endpoint} answered {response.status_code}")
            raise GenericRequestError(response.text, response.status_code)
        return response.json()

    async def get_videos(self) -> list[VideoRead]:
        return _video_list.validate_python(await self.fetch_data("/videos"))

    async def create_video(self, video: VideoCreate) -> VideoRead:
        data = await self.fetch_data("/videos", method="POST", body=video.model_dump(mode="json", by_alias=True))
        return VideoRead.model_validate(data)
