from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import EmailStr, field_validator

from .base import CamelModel


class RegisterRequest(CamelModel):
    # Optional so that missing fields map to a 400 rather than a validation error.
    email: EmailStr | None = None
    password: str | None = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class UserRead(CamelModel):
    id: int
    email: EmailStr
    created_at: datetime


class RegisterResponse(CamelModel):
    message: str
    user: UserRead
