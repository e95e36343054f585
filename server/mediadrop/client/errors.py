from __future__ import annotations


class MediaDropError(Exception):
    """Base class for upload client errors."""


class ValidationError(MediaDropError):
    pass


class WrongMediaType(ValidationError):
    pass


class FileTooLarge(ValidationError):
    pass


class CredentialFetchFailed(MediaDropError):
    pass


class TransferError(MediaDropError):
    pass


class UploadNetworkError(TransferError):
    """The transport failed while the file was being sent."""


class UploadServiceError(TransferError):
    """The upload service answered but rejected the upload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GenericRequestError(MediaDropError):
    """Non-2xx response from the JSON API; carries the raw body text."""

    def __init__(self, body: str, status_code: int) -> None:
        super().__init__(body)
        self.body = body
        self.status_code = status_code
