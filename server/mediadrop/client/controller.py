from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Protocol

from ..core.config import DEFAULT_MAX_UPLOAD_BYTES
from ..models.enums import MediaKind, TransferErrorKind, UploadPhase
from ..schemas.imagekit import UploadCredential
from .errors import UploadNetworkError, UploadServiceError, ValidationError
from .files import SelectedFile
from .transfer import ProgressCallback, ProgressEvent, TransferResult
from .validation import validate_file

logger = logging.getLogger(__name__)

CREDENTIAL_ERROR_MESSAGE = "Failed to fetch upload credentials."
TRANSFER_ERROR_MESSAGES = {
    TransferErrorKind.network: "Network error during upload.",
    TransferErrorKind.service: "Server error during upload.",
    TransferErrorKind.unknown: "Unknown error occurred during upload.",
}


class CredentialSource(Protocol):
    async def fetch_credential(self) -> UploadCredential:
        ...


class Uploader(Protocol):
    async def upload(
        self,
        file: SelectedFile,
        *,
        file_name: str,
        public_key: str,
        credential: UploadCredential,
        on_progress: ProgressCallback | None = None,
    ) -> TransferResult:
        ...


@dataclass(frozen=True)
class UploadSession:
    session_id: int = 0
    file: Optional[SelectedFile] = None
    phase: UploadPhase = UploadPhase.idle
    progress: int = 0
    url: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[TransferErrorKind] = None
    result: Optional[TransferResult] = None


def progress_percent(event: ProgressEvent) -> int | None:
    if not event.length_computable or event.total <= 0:
        return None
    percent = math.floor(event.loaded / event.total * 100 + 0.5)
    return max(0, min(100, percent))


def classify_transfer_error(exc: BaseException) -> TransferErrorKind:
    if isinstance(exc, UploadNetworkError):
        return TransferErrorKind.network
    if isinstance(exc, UploadServiceError):
        return TransferErrorKind.service
    return TransferErrorKind.unknown


Listener = Callable[[UploadSession], None]


class UploadController:
    """Drives one selected file at a time through validation, credential fetch and transfer.

    Every asynchronous continuation is tagged with the id of the session that launched it;
    updates from a session that has since been replaced are dropped.
    """

    def __init__(
        self,
        fetcher: CredentialSource,
        uploader: Uploader,
        public_key: str,
        media_kind: MediaKind = MediaKind.image,
        max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
    ) -> None:
        self.fetcher = fetcher
        self.uploader = uploader
        self.public_key = public_key
        self.media_kind = media_kind
        self.max_bytes = max_bytes
        self._session = UploadSession()
        self._next_id = 0
        self._listeners: list[Listener] = []

    @property
    def session(self) -> UploadSession:
        return self._session

    @property
    def accept(self) -> str:
        return self.media_kind.accept

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._session)

    def _start(self, file: SelectedFile, **changes: Any) -> int:
        self._next_id += 1
        self._session = UploadSession(session_id=self._next_id, file=file, **changes)
        self._notify()
        return self._next_id

    def _apply(self, session_id: int, **changes: Any) -> bool:
        if session_id != self._session.session_id:
            logger.debug(f"[controller] Dropping update from stale session {session_id}: {sorted(changes)}")
            return False
        self._session = replace(self._session, **changes)
        self._notify()
        return True

    async def handle_selection(self, file: SelectedFile | None) -> UploadSession:
        if file is None:
            return self._session

        try:
            validate_file(file, self.media_kind, self.max_bytes)
        except ValidationError as exc:
            logger.info(f"[controller] Rejected {file.name}: {exc}")
            self._start(file, phase=UploadPhase.failed, error=str(exc))
            return self._session

        session_id = self._start(file, phase=UploadPhase.uploading)

        try:
            credential = await self.fetcher.fetch_credential()
        except Exception as exc:  # noqa: BLE001
            logger.error(f"[controller] Upload of {file.name} aborted, no credential: {exc}")
            self._apply(session_id, phase=UploadPhase.failed, error=CREDENTIAL_ERROR_MESSAGE)
            return self._session

        def on_progress(event: ProgressEvent) -> None:
            percent = progress_percent(event)
            if percent is not None:
                self._apply(session_id, progress=percent)

        try:
            result = await self.uploader.upload(
                file,
                file_name=file.name,
                public_key=self.public_key,
                credential=credential,
                on_progress=on_progress,
            )
        except Exception as exc:  # noqa: BLE001
            kind = classify_transfer_error(exc)
            logger.error(f"[controller] Upload of {file.name} failed ({kind.value}): {exc!r}")
            self._apply(
                session_id,
                phase=UploadPhase.failed,
                error=TRANSFER_ERROR_MESSAGES[kind],
                error_kind=kind,
            )
            return self._session

        self._apply(session_id, phase=UploadPhase.completed, url=result.url, result=result, progress=100)
        return self._session
