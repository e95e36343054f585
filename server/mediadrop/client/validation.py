from __future__ import annotations

from ..core.config import DEFAULT_MAX_UPLOAD_BYTES, MIB
from ..models.enums import MediaKind
from .errors import FileTooLarge, WrongMediaType
from .files import SelectedFile


def format_size_limit(max_bytes: int) -> str:
    if max_bytes % MIB == 0:
        return f"{max_bytes // MIB} MB"
    return f"{max_bytes / MIB:.1f} MB"


def validate_file(file: SelectedFile, expected_kind: MediaKind, max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES) -> None:
    """Raise on the first rule ``file`` breaks; the media type is checked before the size."""
    if not file.content_type.startswith(expected_kind.mime_prefix):
        raise WrongMediaType(f"Please upload a valid {expected_kind.value} file")
    if file.size > max_bytes:
        raise FileTooLarge(f"File size should be less than {format_size_limit(max_bytes)}.")
