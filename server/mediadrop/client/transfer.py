from __future__ import annotations

import io
import json
import logging
from dataclasses import dataclass
from typing import Any, BinaryIO, Callable, Optional

import httpx

from ..schemas.imagekit import UploadCredential
from .errors import UploadNetworkError, UploadServiceError
from .files import SelectedFile

logger = logging.getLogger(__name__)

ACCEPT_JSON = {"Accept": "application/json"}


@dataclass(frozen=True)
class ProgressEvent:
    loaded: int
    total: int
    length_computable: bool = True


ProgressCallback = Callable[[ProgressEvent], None]


@dataclass(frozen=True)
class TransferResult:
    url: str
    file_id: Optional[str] = None
    name: Optional[str] = None
    file_path: Optional[str] = None
    thumbnail_url: Optional[str] = None
    size: Optional[int] = None
    file_type: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    @classmethod
    def from_response(cls, payload: dict[str, Any]) -> "TransferResult":
        return cls(
            url=payload["url"],
            file_id=payload.get("fileId"),
            name=payload.get("name"),
            file_path=payload.get("filePath"),
            thumbnail_url=payload.get("thumbnailUrl"),
            size=payload.get("size"),
            file_type=payload.get("fileType"),
            width=payload.get("width"),
            height=payload.get("height"),
        )


class ProgressReader:
    """File wrapper that reports a ProgressEvent each time httpx reads a chunk of the file part."""

    def __init__(self, handle: BinaryIO, total: int, on_progress: ProgressCallback | None = None) -> None:
        self._handle = handle
        self.total = total
        self.on_progress = on_progress

    def read(self, size: int = -1) -> bytes:
        chunk = self._handle.read(size)
        if chunk and self.on_progress is not None:
            self.on_progress(ProgressEvent(loaded=self._handle.tell(), total=self.total))
        return chunk

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._handle.seek(offset, whence)

    def tell(self) -> int:
        return self._handle.tell()


class ImageKitUploader:
    """Sends a file straight to the media service using a signed credential."""

    def __init__(
        self,
        upload_url: str,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        use_unique_file_name: bool = True,
    ) -> None:
        self.upload_url = upload_url
        self.timeout = timeout
        self.use_unique_file_name = use_unique_file_name
        self._client = client

    async def upload(
        self,
        file: SelectedFile,
        *,
        file_name: str,
        public_key: str,
        credential: UploadCredential,
        on_progress: ProgressCallback | None = None,
    ) -> TransferResult:
        data = {
            "fileName": file_name,
            "publicKey": public_key,
            "signature": credential.signature,
            "expire": str(credential.expire),
            "token": credential.token,
            "useUniqueFileName": "true" if self.use_unique_file_name else "false",
        }
        logger.info(f"[upload] Sending {file_name} ({file.size} bytes) to {self.upload_url}")

        try:
            with file.open() as handle:
                files = {"file": (file_name, ProgressReader(handle, file.size, on_progress), file.content_type)}
                if self._client is not None:
                    response = await self._client.post(
                        self.upload_url, data=data, files=files, headers=ACCEPT_JSON, timeout=self.timeout
                    )
                else:
                    async with httpx.AsyncClient(timeout=self.timeout) as client:
                        response = await client.post(self.upload_url, data=data, files=files, headers=ACCEPT_JSON)
        except httpx.TransportError as exc:
            logger.warning(f"[upload] Transport failure for {file_name}: {exc!r}")
            raise UploadNetworkError(str(exc) or type(exc).__name__) from exc

        payload = self._parse_json(response)
        if not response.is_success:
            message = (payload or {}).get("message") or response.text or response.reason_phrase
            logger.warning(f"[upload] Service rejected {file_name} with {response.status_code}: {message}")
            raise UploadServiceError(str(message), status_code=response.status_code)

        if not payload or not payload.get("url"):
            raise UploadServiceError("Upload response did not include a URL", status_code=response.status_code)

        result = TransferResult.from_response(payload)
        logger.info(f"[upload] Stored {file_name} at {result.url}")
        return result

    @staticmethod
    def _parse_json(response: httpx.Response) -> dict[str, Any] | None:
        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        return payload if isinstance(payload, dict) else None
