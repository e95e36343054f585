from __future__ import annotations

import hashlib
import hmac
import time

import pytest

from mediadrop.app import get_app_state
from mediadrop.core.security import create_upload_signature, sign_upload


def test_sign_upload_matches_hmac_sha1_of_token_and_expire() -> None:
    expected = hmac.new(b"secret", b"tok1700000000", hashlib.sha1).hexdigest()
    assert sign_upload("secret", "tok", 1700000000) == expected


def test_create_upload_signature_uses_fresh_tokens() -> None:
    first = create_upload_signature("secret", 600, now=1000.0)
    second = create_upload_signature("secret", 600, now=1000.0)
    assert first["expire"] == 1600
    assert first["token"] != second["token"]
    assert first["signature"] == sign_upload("secret", first["token"], 1600)


@pytest.mark.asyncio
async def test_imagekit_auth_returns_signed_credential(async_client) -> None:
    before = int(time.time())
    resp = await async_client.get("/api/auth/imagekit_auth")
    assert resp.status_code == 200
    data = resp.json()
    assert set(data) == {"signature", "expire", "token"}
    assert before + 1800 <= data["expire"] <= int(time.time()) + 1800
    assert data["signature"] == sign_upload("private_test_key", data["token"], data["expire"])


@pytest.mark.asyncio
async def test_imagekit_auth_fails_without_private_key(async_client, monkeypatch) -> None:
    monkeypatch.setattr(get_app_state().imagekit_service, "private_key", None)
    resp = await async_client.get("/api/auth/imagekit_auth")
    assert resp.status_code == 500
