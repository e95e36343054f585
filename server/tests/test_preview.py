from __future__ import annotations

from mediadrop.client.controller import UploadSession
from mediadrop.client.preview import render_preview
from mediadrop.models.enums import MediaKind, UploadPhase


def test_idle_shows_prompt_only() -> None:
    preview = render_preview(UploadSession(), MediaKind.video)
    assert preview.phase is UploadPhase.idle
    assert preview.prompt == "Click or drag to upload file (MP4, MOV, etc.)"
    assert preview.progress is None and preview.media is None and preview.actions == []


def test_uploading_shows_progress() -> None:
    preview = render_preview(UploadSession(session_id=1, phase=UploadPhase.uploading, progress=42), MediaKind.image)
    assert preview.prompt == "Uploading..."
    assert preview.progress == 42
    assert 'value="42"' in preview.to_html()
    assert preview.to_text(width=10).endswith("[####......]  42%")


def test_failed_shows_message_without_media() -> None:
    session = UploadSession(session_id=1, phase=UploadPhase.failed, error="Network error during upload.", progress=30)
    preview = render_preview(session, MediaKind.video)
    assert preview.error == "Network error during upload."
    assert preview.media is None and preview.actions == []
    assert preview.progress is None
    assert preview.to_text() == "Error: Network error during upload."


def test_completed_image_renders_img_with_actions() -> None:
    url = "https://cdn.example/img123.jpg"
    preview = render_preview(UploadSession(session_id=1, phase=UploadPhase.completed, progress=100, url=url), MediaKind.image)
    assert preview.media is not None
    assert (preview.media.tag, preview.media.src) == ("img", url)
    assert [(action.name, action.value) for action in preview.actions] == [("copy", url), ("open", url)]
    html = preview.to_html()
    assert f'<img src="{url}"' in html
    assert 'target="_blank"' in html


def test_completed_video_renders_video_and_escapes_url() -> None:
    url = 'https://cdn.example/v.mp4?a=1&b="2"'
    preview = render_preview(UploadSession(session_id=1, phase=UploadPhase.completed, url=url), MediaKind.video)
    html = preview.to_html()
    assert "<video" in html
    assert "&amp;" in html and "&quot;" in html
    assert '"2"' not in html
