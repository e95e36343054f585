from __future__ import annotations

import hashlib
import hmac
import time
from typing import TypedDict
from uuid import uuid4

from passlib.context import CryptContext


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class UploadSignature(TypedDict):
    token: str
    expire: int
    signature: str


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def sign_upload(private_key: str, token: str, expire: int) -> str:
    """HMAC-SHA1 of ``token + expire`` keyed with the private key, hex encoded."""
    message = f"{token}{expire}".encode("utf-8")
    return hmac.new(private_key.encode("utf-8"), message, hashlib.sha1).hexdigest()


def create_upload_signature(private_key: str, ttl_seconds: int, now: float | None = None) -> UploadSignature:
    issued_at = time.time() if now is None else now
    token = str(uuid4())
    expire = int(issued_at) + ttl_seconds
    return UploadSignature(token=token, expire=expire, signature=sign_upload(private_key, token, expire))
