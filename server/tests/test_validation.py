from __future__ import annotations

import pytest

from mediadrop.client.errors import FileTooLarge, WrongMediaType
from mediadrop.client.files import SelectedFile
from mediadrop.client.validation import validate_file
from mediadrop.core.config import MIB
from mediadrop.models.enums import MediaKind


def _file(content_type: str, size: int, name: str = "upload.bin") -> SelectedFile:
    return SelectedFile(name=name, content_type=content_type, size=size, opener=lambda: None)


def test_accepts_matching_kind_under_limit() -> None:
    validate_file(_file("image/jpeg", 10 * MIB), MediaKind.image)
    validate_file(_file("video/mp4", 100 * MIB), MediaKind.video)


@pytest.mark.parametrize(
    ("content_type", "kind", "message"),
    [
        ("video/mp4", MediaKind.image, "Please upload a valid image file"),
        ("image/png", MediaKind.video, "Please upload a valid video file"),
        ("application/pdf", MediaKind.image, "Please upload a valid image file"),
        ("", MediaKind.video, "Please upload a valid video file"),
    ],
)
def test_rejects_wrong_media_type(content_type: str, kind: MediaKind, message: str) -> None:
    with pytest.raises(WrongMediaType, match=message):
        validate_file(_file(content_type, 1), kind)


def test_rejects_files_over_the_default_ceiling() -> None:
    with pytest.raises(FileTooLarge, match="less than 100 MB"):
        validate_file(_file("video/mp4", 100 * MIB + 1), MediaKind.video)


def test_ceiling_is_configurable() -> None:
    with pytest.raises(FileTooLarge, match="less than 50 MB"):
        validate_file(_file("image/png", 60 * MIB), MediaKind.image, max_bytes=50 * MIB)


def test_type_is_checked_before_size() -> None:
    with pytest.raises(WrongMediaType):
        validate_file(_file("text/plain", 500 * MIB), MediaKind.image)


def test_selected_file_from_path_guesses_content_type(tmp_path) -> None:
    path = tmp_path / "clip.mp4"
    path.write_bytes(b"\x00" * 42)
    selected = SelectedFile.from_path(path)
    assert selected.name == "clip.mp4"
    assert selected.content_type == "video/mp4"
    assert selected.size == 42
    with selected.open() as handle:
        assert handle.read() == b"\x00" * 42
