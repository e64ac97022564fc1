"""Authentication service implementation."""

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ...security import blacklist_token, create_access_token, hash_password, verify_password
from ..models.user import User
from ..repositories.user_repository import UserRepository
from ..schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from .interfaces import IAuthService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)
        self.settings = get_settings()

    async def register_user(self, request: RegisterRequest) -> UserResponse:
        """Register new user."""
        if await self.user_repo.is_username_taken(request.username):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Username already taken"
            )

        user = await self.user_repo.create_user(
            {
                "username": request.username,
                "password_hash": hash_password(request.password),
                "full_name": request.full_name,
                "is_active": True,
            }
        )
        logger.info(f"Registered user {user.id}")
        return self._to_response(user)

    async def authenticate_user(self, request: LoginRequest) -> TokenResponse:
        """Login user and return a JWT access token."""
        user = await self.user_repo.get_by_username(request.username)
        if not user or not user.can_login():
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
            )

        if not verify_password(request.password, user.password_hash):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
            )

        access_token = create_access_token(data={"sub": str(user.id)})
        return TokenResponse(
            access_token=access_token,
            token_type="bearer",
            expires_in=self.settings.access_token_expire_minutes * 60,
            user=self._to_response(user),
        )

    async def get_current_user(self, user_id: UUID) -> UserResponse:
        """Get user by ID."""
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return self._to_response(user)

    async def logout_user(self, user_id: UUID, access_token: str) -> bool:
        """Blacklist the presented token. Returns False if Redis did not record it."""
        revoked = await blacklist_token(access_token)
        if not revoked:
            logger.warning(f"Token for user {user_id} was not blacklisted; Redis unavailable?")
        return revoked

    @staticmethod
    def _to_response(user: User) -> UserResponse:
        return UserResponse(
            id=user.id,
            username=user.username,
            full_name=user.full_name,
            is_active=user.is_active,
            created_at=user.created_at,
        )
