from __future__ import annotations

import logging

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.security import hash_password
from ..models.user import User

logger = logging.getLogger(__name__)


class AuthService:
    async def register(self, session: AsyncSession, email: str | None, password: str | None) -> User:
        if not email or not password:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email and Password are required.")

        email = email.lower()
        try:
            existing = await session.execute(select(User).where(User.email == email))
            if existing.scalar_one_or_none():
                logger.info(f"[register] Rejected duplicate registration for {email}")
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User Already Registered.")

            user = User(email=email, password_hash=hash_password(password))
            session.add(user)
            await session.commit()
            await session.refresh(user)
        except HTTPException:
            raise
        except IntegrityError as exc:
            # Lost a race against a concurrent registration for the same email.
            await session.rollback()
            logger.warning(f"[register] Integrity error for {email}: {exc}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User Already Registered.") from exc
        except Exception as exc:
            await session.rollback()
            logger.error(f"[register] Unexpected error for {email}: {exc}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to register user.",
            ) from exc

        logger.info(f"[register] Registered user {user.id}")
        return user
