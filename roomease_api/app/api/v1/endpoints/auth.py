"""
Authentication endpoints for API v1.

Registration and login both answer with a signed access token and the
public user record.  Clients send the token back as
``Authorization: Bearer <token>`` on protected routes.
"""

from fastapi import APIRouter, Depends, status

from roomease_api.app.api.deps import get_settings, get_user_service
from roomease_api.app.core.config import Settings
from roomease_api.app.core.security import issue_token
from roomease_api.app.schemas.user import AuthResponse, Identity, UserCreate, UserLogin, UserRead
from roomease_api.app.services.user_service import UserService


router = APIRouter()


def _token_for(user: UserRead, settings: Settings) -> str:
    identity = Identity(id=user.id, email=user.email, role=user.role)
    return issue_token(
        identity,
        secret_key=settings.secret_key,
        expires_delta=settings.access_token_expire_minutes * 60,
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
) -> AuthResponse:
    """Register a new user and return a token.

    Missing fields or an already registered email give 400.
    """
    user = await service.register(data)
    return AuthResponse(
        message="User registered successfully",
        token=_token_for(user, settings),
        user=user,
    )


@router.post("/login", response_model=AuthResponse)
async def login_user(
    data: UserLogin,
    service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
) -> AuthResponse:
    """Check the credentials and return a fresh token, or 401."""
    user = await service.authenticate(data)
    return AuthResponse(
        message="Login successful",
        token=_token_for(user, settings),
        user=user,
    )
