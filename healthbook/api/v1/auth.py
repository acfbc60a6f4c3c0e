from fastapi import APIRouter, Depends, status

from ...api.deps import get_auth_service, get_current_identity
from ...core.security import TokenClaims
from ...services.auth_service import AuthService
from ...schemas.auth import (
    UserLogin, UserRegister, TokenResponse, UserResponse, MessageResponse
)

router = APIRouter(prefix="/auth", tags=["Authentication"])

@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Register a new user."""
    auth_service.register(user_data.email, user_data.password, user_data.role)
    return MessageResponse(message="User created")

@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: UserLogin,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Authenticate user and return a bearer token."""
    return auth_service.login(login_data.email, login_data.password, login_data.role)

@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    identity: TokenClaims = Depends(get_current_identity),
    auth_service: AuthService = Depends(get_auth_service)
):
    """Get current user information."""
    return auth_service.get_profile(identity)
