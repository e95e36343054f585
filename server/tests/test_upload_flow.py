from __future__ import annotations

import httpx
import pytest

from mediadrop.app import app
from mediadrop.client.controller import UploadController
from mediadrop.client.credentials import CredentialFetcher
from mediadrop.client.files import SelectedFile
from mediadrop.client.preview import render_preview
from mediadrop.client.transfer import ImageKitUploader
from mediadrop.core.security import sign_upload
from mediadrop.models.enums import MediaKind, UploadPhase

UPLOAD_URL = "https://upload.test/api/v1/files/upload"


def _field(body: bytes, name: str) -> str:
    marker = f'name="{name}"\r\n\r\n'.encode()
    start = body.index(marker) + len(marker)
    return body[start:body.index(b"\r\n", start)].decode()


@pytest.mark.asyncio
async def test_upload_with_credential_from_server(tmp_path) -> None:
    image = tmp_path / "cat.png"
    image.write_bytes(b"\x89PNG" + b"\x00" * 4096)

    def cdn(request: httpx.Request) -> httpx.Response:
        body = request.content
        token, expire = _field(body, "token"), int(_field(body, "expire"))
        if _field(body, "signature") != sign_upload("private_test_key", token, expire):
            return httpx.Response(403, json={"message": "Invalid signature"})
        return httpx.Response(200, json={"url": f"https://cdn.example/{_field(body, 'fileName')}"})

    controller = UploadController(
        fetcher=CredentialFetcher(
            "http://testserver/api/auth/imagekit_auth",
            client=httpx.AsyncClient(transport=httpx.ASGITransport(app=app)),
        ),
        uploader=ImageKitUploader(UPLOAD_URL, client=httpx.AsyncClient(transport=httpx.MockTransport(cdn))),
        public_key="public_test_key",
        media_kind=MediaKind.image,
    )

    session = await controller.handle_selection(SelectedFile.from_path(image))

    assert session.phase is UploadPhase.completed, session.error
    assert session.url == "https://cdn.example/cat.png"
    assert session.progress == 100
    preview = render_preview(session, controller.media_kind)
    assert preview.media is not None and preview.media.tag == "img"


@pytest.mark.asyncio
async def test_credential_endpoint_error_stops_the_upload(tmp_path) -> None:
    video = tmp_path / "clip.mp4"
    video.write_bytes(b"\x00" * 128)
    transfers: list[httpx.Request] = []

    def auth(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="Internal Server Error")

    def cdn(request: httpx.Request) -> httpx.Response:
        transfers.append(request)
        return httpx.Response(200, json={"url": "https://cdn.example/clip.mp4"})

    controller = UploadController(
        fetcher=CredentialFetcher("http://api.test/api/auth/imagekit_auth", client=httpx.AsyncClient(transport=httpx.MockTransport(auth))),
        uploader=ImageKitUploader(UPLOAD_URL, client=httpx.AsyncClient(transport=httpx.MockTransport(cdn))),
        public_key="public_test_key",
        media_kind=MediaKind.video,
    )

    session = await controller.handle_selection(SelectedFile.from_path(video))

    assert session.phase is UploadPhase.failed
    assert session.error == "Failed to fetch upload credentials."
    assert transfers == []


@pytest.mark.asyncio
async def test_network_failure_during_video_transfer(tmp_path, credential) -> None:
    video = tmp_path / "clip.mp4"
    video.write_bytes(b"\x00" * 128)

    class StaticFetcher:
        async def fetch_credential(self):
            return credential

    def cdn(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadError("connection dropped", request=request)

    controller = UploadController(
        fetcher=StaticFetcher(),
        uploader=ImageKitUploader(UPLOAD_URL, client=httpx.AsyncClient(transport=httpx.MockTransport(cdn))),
        public_key="public_test_key",
        media_kind=MediaKind.video,
    )

    session = await controller.handle_selection(SelectedFile.from_path(video))

    assert session.phase is UploadPhase.failed
    assert session.error == "Network error during upload."
    # The whole body was streamed before the failure.
    assert session.progress == 100
