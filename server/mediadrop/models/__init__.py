from .enums import MediaKind, TransferErrorKind, UploadPhase
from .user import User
from .video import Video

__all__ = ["MediaKind", "TransferErrorKind", "UploadPhase", "User", "Video"]
