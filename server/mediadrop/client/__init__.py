from .api_client import ApiClient
from .controller import UploadController, UploadSession
from .credentials import CredentialFetcher
from .errors import (
    CredentialFetchFailed,
    FileTooLarge,
    GenericRequestError,
    MediaDropError,
    TransferError,
    UploadNetworkError,
    UploadServiceError,
    ValidationError,
    WrongMediaType,
)
from .files import SelectedFile
from .preview import Preview, render_preview
from .transfer import ImageKitUploader, ProgressEvent, TransferResult
from .validation import validate_file

__all__ = [
    "ApiClient",
    "CredentialFetchFailed",
    "CredentialFetcher",
    "FileTooLarge",
    "GenericRequestError",
    "ImageKitUploader",
    "MediaDropError",
    "Preview",
    "ProgressEvent",
    "SelectedFile",
    "TransferError",
    "TransferResult",
    "UploadController",
    "UploadNetworkError",
    "UploadServiceError",
    "UploadSession",
    "ValidationError",
    "WrongMediaType",
    "render_preview",
    "validate_file",
]
