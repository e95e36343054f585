from __future__ import annotations

import logging

from fastapi import HTTPException, status

from ..core.config import get_settings
from ..core.security import create_upload_signature
from ..schemas.imagekit import UploadCredential

logger = logging.getLogger(__name__)


class ImageKitService:
    """Issues signed upload credentials for direct-from-client uploads."""

    def __init__(self) -> None:
        settings = get_settings().imagekit()
        self.private_key = settings.private_key
        self.token_ttl_seconds = settings.token_ttl_seconds

    def issue_credential(self) -> UploadCredential:
        if not self.private_key:
            logger.error("[imagekit-auth] IMAGEKIT_PRIVATE_KEY is not configured")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Upload authentication is not configured.",
            )
        signed = create_upload_signature(self.private_key, self.token_ttl_seconds)
        logger.info(f"[imagekit-auth] Issued upload credential expiring at {signed['expire']}")
        return UploadCredential(**signed)
