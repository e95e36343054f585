from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.deps import get_db_session
from ..schemas.auth import RegisterRequest, RegisterResponse, UserRead
from ..schemas.imagekit import UploadCredential
from ..services.auth_service import AuthService
from ..services.imagekit_service import ImageKitService


def get_auth_service() -> AuthService:
    from ..app import get_app_state

    return get_app_state().auth_service


def get_imagekit_service() -> ImageKitService:
    from ..app import get_app_state

    return get_app_state().imagekit_service


router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    db: AsyncSession = Depends(get_db_session),
    auth_service: AuthService = Depends(get_auth_service),
) -> RegisterResponse:
    user = await auth_service.register(db, payload.email, payload.password)
    return RegisterResponse(message="User registered successfully.", user=UserRead.model_validate(user))


@router.get("/imagekit_auth", response_model=UploadCredential)
async def imagekit_auth(
    imagekit_service: ImageKitService = Depends(get_imagekit_service),
) -> UploadCredential:
    return imagekit_service.issue_credential()
