from __future__ import annotations

import enum


class MediaKind(str, enum.Enum):
    image = "image"
    video = "video"

    @property
    def mime_prefix(self) -> str:
        return f"{self.value}/"

    @property
    def accept(self) -> str:
        return f"{self.value}/*"


class UploadPhase(str, enum.Enum):
    idle = "idle"
    uploading = "uploading"
    completed = "completed"
    failed = "failed"


class TransferErrorKind(str, enum.Enum):
    network = "network"
    service = "service"
    unknown = "unknown"
