from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import webbrowser
from pathlib import Path

from .core.config import get_settings
from .models.enums import MediaKind, UploadPhase
from .client.api_client import ApiClient
from .client.controller import UploadController, UploadSession
from .client.credentials import CredentialFetcher
from .client.errors import GenericRequestError
from .client.files import SelectedFile
from .client.preview import render_preview
from .client.transfer import ImageKitUploader


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mediadrop", description="Upload images and videos to the media CDN.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    upload = commands.add_parser("upload", help="Upload a single file")
    upload.add_argument("path", type=Path)
    upload.add_argument("--kind", choices=[kind.value for kind in MediaKind], default=MediaKind.image.value)
    upload.add_argument("--api-url", help="Base URL of the MediaDrop server (defaults to API_BASE_URL)")
    upload.add_argument("--public-key", help="Upload service public key (defaults to IMAGEKIT_PUBLIC_KEY)")
    upload.add_argument("--max-bytes", type=int, help="Size ceiling (defaults to UPLOAD_MAX_BYTES)")
    upload.add_argument("--open", action="store_true", help="Open the uploaded file in a browser tab")
    upload.add_argument("--html", action="store_true", help="Print the preview as an HTML fragment")

    commands.add_parser("videos", help="List videos in the catalogue").add_argument("--api-url")

    serve = commands.add_parser("serve", help="Run the API server")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true")
    return parser


async def run_upload(args: argparse.Namespace) -> int:
    settings = get_settings()
    upload_settings = settings.upload()
    if args.api_url:
        upload_settings = upload_settings.model_copy(update={"api_base_url": args.api_url})

    public_key = args.public_key or settings.imagekit().public_key
    if not public_key:
        print("Error: no public key configured (set IMAGEKIT_PUBLIC_KEY or pass --public-key)", file=sys.stderr)
        return 2
    if not args.path.is_file():
        print(f"Error: {args.path} is not a file", file=sys.stderr)
        return 2

    kind = MediaKind(args.kind)
    controller = UploadController(
        fetcher=CredentialFetcher(upload_settings.auth_url, timeout=upload_settings.timeout_seconds),
        uploader=ImageKitUploader(settings.imagekit().upload_url, timeout=upload_settings.timeout_seconds),
        public_key=public_key,
        media_kind=kind,
        max_bytes=args.max_bytes or upload_settings.max_bytes,
    )

    def redraw(session: UploadSession) -> None:
        if session.phase is UploadPhase.uploading:
            print(f"\r{render_preview(session, kind).to_text()}", end="", flush=True)

    controller.subscribe(redraw)
    session = await controller.handle_selection(SelectedFile.from_path(args.path))
    if session.progress:
        print()

    preview = render_preview(session, kind)
    print(preview.to_html() if args.html else preview.to_text())
    if session.phase is not UploadPhase.completed:
        return 1
    if args.open and session.url:
        webbrowser.open_new_tab(session.url)
    return 0


async def run_videos(args: argparse.Namespace) -> int:
    client = ApiClient(args.api_url or get_settings().upload().api_base_url)
    try:
        videos = await client.get_videos()
    except GenericRequestError as exc:
        print(f"Error ({exc.status_code}): {exc.body}", file=sys.stderr)
        return 1
    for video in videos:
        print(f"{video.id}\t{video.title}\t{video.video_url}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        from .main import run

        run(host=args.host, port=args.port, reload=args.reload)
        return 0
    if args.command == "videos":
        return asyncio.run(run_videos(args))
    return asyncio.run(run_upload(args))


if __name__ == "__main__":
    sys.exit(main())
