from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MIB = 1024 * 1024
DEFAULT_MAX_UPLOAD_BYTES = 100 * MIB


class ImageKitSettings(BaseModel):
    public_key: Optional[str] = None
    private_key: Optional[str] = None
    upload_url: str = "https://upload.imagekit.io/api/v1/files/upload"
    token_ttl_seconds: int = Field(default=1800, ge=1, lt=3600)


class UploadSettings(BaseModel):
    max_bytes: int = Field(default=DEFAULT_MAX_UPLOAD_BYTES, ge=1)
    timeout_seconds: Optional[float] = None
    api_base_url: str = "http://localhost:8000"

    @property
    def auth_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/api/auth/imagekit_auth"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(".env",),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    database_url: str = Field(default="sqlite+aiosqlite:///./mediadrop.db", alias="DATABASE_URL")
    imagekit_public_key: Optional[str] = Field(default=None, alias="IMAGEKIT_PUBLIC_KEY")
    imagekit_private_key: Optional[str] = Field(default=None, alias="IMAGEKIT_PRIVATE_KEY")
    imagekit_upload_url: str = Field(
        default="https://upload.imagekit.io/api/v1/files/upload",
        alias="IMAGEKIT_UPLOAD_URL",
    )
    # The upload API rejects credentials expiring more than an hour ahead.
    imagekit_token_ttl_seconds: int = Field(default=1800, ge=1, lt=3600, alias="IMAGEKIT_TOKEN_TTL_SECONDS")
    upload_max_bytes: int = Field(default=DEFAULT_MAX_UPLOAD_BYTES, ge=1, alias="UPLOAD_MAX_BYTES")
    upload_timeout_seconds: Optional[float] = Field(default=None, alias="UPLOAD_TIMEOUT_SECONDS")
    api_base_url: str = Field(default="http://localhost:8000", alias="API_BASE_URL")

    def imagekit(self) -> ImageKitSettings:
        return ImageKitSettings(
            public_key=self.imagekit_public_key,
            private_key=self.imagekit_private_key,
            upload_url=self.imagekit_upload_url,
            token_ttl_seconds=self.imagekit_token_ttl_seconds,
        )

    def upload(self) -> UploadSettings:
        return UploadSettings(
            max_bytes=self.upload_max_bytes,
            timeout_seconds=self.upload_timeout_seconds,
            api_base_url=self.api_base_url,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
