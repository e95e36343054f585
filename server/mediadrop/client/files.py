from __future__ import annotations

import io
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Callable

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class SelectedFile:
    """A file picked for upload: declared name, content type and size plus a way to read it."""

    name: str
    content_type: str
    size: int
    opener: Callable[[], BinaryIO]

    @classmethod
    def from_path(cls, path: Path | str, content_type: str | None = None) -> "SelectedFile":
        path = Path(path)
        if content_type is None:
            content_type = mimetypes.guess_type(path.name)[0] or DEFAULT_CONTENT_TYPE
        return cls(
            name=path.name,
            content_type=content_type,
            size=path.stat().st_size,
            opener=lambda: path.open("rb"),
        )

    @classmethod
    def from_bytes(cls, name: str, data: bytes, content_type: str) -> "SelectedFile":
        return cls(name=name, content_type=content_type, size=len(data), opener=lambda: io.BytesIO(data))

    def open(self) -> BinaryIO:
        return self.opener()
