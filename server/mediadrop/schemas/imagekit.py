from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr


class UploadCredential(BaseModel):
    """Signed, single-use authorization for one direct upload."""

    model_config = ConfigDict(frozen=True)

    signature: StrictStr
    expire: StrictInt
    token: StrictStr
