from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from ..schemas.imagekit import UploadCredential
from .errors import CredentialFetchFailed

logger = logging.getLogger(__name__)


class CredentialFetcher:
    """Fetches a fresh upload credential for every attempt. Nothing is cached or retried."""

    def __init__(self, auth_url: str, client: httpx.AsyncClient | None = None, timeout: float | None = None) -> None:
        self.auth_url = auth_url
        self.timeout = timeout
        self._client = client

    async def fetch_credential(self) -> UploadCredential:
        try:
            if self._client is not None:
                response = await self._client.get(self.auth_url, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(self.auth_url)
        except httpx.HTTPError as exc:
            logger.warning(f"[credentials] Request to {self.auth_url} failed: {exc}")
            raise CredentialFetchFailed("Could not reach the upload authentication endpoint") from exc

        if not response.is_success:
            logger.warning(f"[credentials] Authentication endpoint answered {response.status_code}")
            raise CredentialFetchFailed(f"Authentication endpoint answered {response.status_code}")

        try:
            return UploadCredential.model_validate_json(response.content)
        except ValidationError as exc:
            logger.warning(f"[credentials] Malformed credential payload: {exc}")
            raise CredentialFetchFailed("Malformed upload credential payload") from exc
