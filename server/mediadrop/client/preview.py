from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from typing import Literal, Optional

from ..models.enums import MediaKind, UploadPhase
from .controller import UploadSession

IDLE_PROMPT = "Click or drag to upload file"
UPLOADING_PROMPT = "Uploading..."
FORMAT_HINTS = {MediaKind.image: "JPG, PNG, etc.", MediaKind.video: "MP4, MOV, etc."}


@dataclass(frozen=True)
class MediaElement:
    tag: Literal["img", "video"]
    src: str


@dataclass(frozen=True)
class PreviewAction:
    name: Literal["copy", "open"]
    label: str
    value: str


@dataclass(frozen=True)
class Preview:
    phase: UploadPhase
    media_kind: MediaKind
    prompt: Optional[str] = None
    progress: Optional[int] = None
    error: Optional[str] = None
    media: Optional[MediaElement] = None
    actions: list[PreviewAction] = field(default_factory=list)

    def to_html(self) -> str:
        parts: list[str] = []
        if self.prompt is not None:
            parts.append(f'<p class="upload-prompt">{escape(self.prompt)}</p>')
        if self.progress is not None:
            parts.append(f'<progress class="upload-progress" max="100" value="{self.progress}"></progress>')
        if self.error is not None:
            parts.append(f'<p class="upload-error">{escape(self.error)}</p>')
        if self.media is not None:
            src = escape(self.media.src, quote=True)
            if self.media.tag == "video":
                parts.append(f'<video src="{src}" controls></video>')
            else:
                parts.append(f'<img src="{src}" alt="Uploaded preview">')
        for action in self.actions:
            value = escape(action.value, quote=True)
            if action.name == "open":
                parts.append(f'<a href="{value}" target="_blank" rel="noopener noreferrer">{escape(action.label)}</a>')
            else:
                parts.append(f'<button type="button" data-copy="{value}">{escape(action.label)}</button>')
        return "\n".join(parts)

    def to_text(self, width: int = 30) -> str:
        if self.phase is UploadPhase.uploading:
            progress = self.progress or 0
            filled = width * progress // 100
            return f"{self.prompt} [{'#' * filled}{'.' * (width - filled)}] {progress:3d}%"
        if self.phase is UploadPhase.failed:
            return f"Error: {self.error}"
        if self.phase is UploadPhase.completed and self.media is not None:
            return f"Uploaded {self.media_kind.value}: {self.media.src}"
        return self.prompt or ""


def render_preview(session: UploadSession, media_kind: MediaKind) -> Preview:
    if session.phase is UploadPhase.uploading:
        return Preview(phase=session.phase, media_kind=media_kind, prompt=UPLOADING_PROMPT, progress=session.progress)

    if session.phase is UploadPhase.failed:
        return Preview(phase=session.phase, media_kind=media_kind, error=session.error)

    if session.phase is UploadPhase.completed and session.url:
        tag: Literal["img", "video"] = "video" if media_kind is MediaKind.video else "img"
        return Preview(
            phase=session.phase,
            media_kind=media_kind,
            media=MediaElement(tag=tag, src=session.url),
            actions=[
                PreviewAction(name="copy", label="Copy URL", value=session.url),
                PreviewAction(name="open", label="Open in new tab", value=session.url),
            ],
        )

    return Preview(
        phase=UploadPhase.idle,
        media_kind=media_kind,
        prompt=f"{IDLE_PROMPT} ({FORMAT_HINTS[media_kind]})",
    )
