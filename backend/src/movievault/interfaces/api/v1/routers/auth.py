"""Auth router: register, login, me."""
from fastapi import APIRouter, status

from movievault.application.identity.commands import LoginUser, RegisterUser
from movievault.interfaces.api.v1.outcomes import unwrap
from movievault.interfaces.api.v1.schemas.identity import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from movievault.interfaces.dependencies import CurrentUserId, Facade

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(body: RegisterRequest, facade: Facade):
    result = unwrap(await facade.register(
        RegisterUser(username=body.username, email=body.email, password=body.password)
    ))
    return AuthResponse(
        token=result.token, expires_at=result.expires_at,
        username=result.username, email=result.email,
    )


@router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest, facade: Facade):
    result = unwrap(await facade.login(LoginUser(email=body.email, password=body.password)))
    return AuthResponse(
        token=result.token, expires_at=result.expires_at,
        username=result.username, email=result.email,
    )


@router.get("/me", response_model=UserResponse)
async def me(facade: Facade, current_user_id: CurrentUserId):
    user = unwrap(await facade.get_current_user(current_user_id))
    return UserResponse(
        id=user.id,
        username=str(user.username),
        email=str(user.email),
        created_at=user.created_at,
    )
