"""Auth routes: register, login, refresh, logout, me."""
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from mindease.core.deps import AuthUser, get_auth_service
from mindease.core.security import create_access_token
from mindease.schemas.auth import (
    AccessTokenOutSchema,
    LoginOutSchema,
    LoginSchema,
    LoginUserSchema,
    MessageSchema,
    RefreshTokenSchema,
    RegisterOutSchema,
    RegisterSchema,
    UserOutSchema,
)
from mindease.services.auth import AuthService

router = APIRouter(tags=["auth"])

Service = Annotated[AuthService, Depends(get_auth_service)]


@router.post("/auth/register", response_model=RegisterOutSchema, status_code=status.HTTP_201_CREATED)
def register(body: RegisterSchema, service: Service):
    """Register a user, create default settings, return both tokens."""
    user = service.register(body.name, body.email, body.password)
    return RegisterOutSchema(
        user=UserOutSchema.model_validate(user),
        access_token=create_access_token(user.id, user.email),
        refresh_token=service.create_refresh_token(user.id),
    )


@router.post("/auth/login", response_model=LoginOutSchema)
def login(body: LoginSchema, service: Service):
    user = service.login(body.email, body.password)
    return LoginOutSchema(
        user=LoginUserSchema(user_id=user.id, email=user.email, name=user.name),
        access_token=create_access_token(user.id, user.email),
        refresh_token=service.create_refresh_token(user.id),
    )


@router.post("/auth/refresh", response_model=AccessTokenOutSchema)
def refresh(body: RefreshTokenSchema, service: Service):
    """Exchange a refresh token for a new access token."""
    user = service.validate_refresh_token(body.refresh_token)
    return AccessTokenOutSchema(access_token=create_access_token(user.id, user.email))


@router.post("/auth/logout", response_model=MessageSchema)
def logout(body: RefreshTokenSchema, service: Service):
    service.revoke_refresh_token(body.refresh_token)
    return MessageSchema(message="Logged out successfully")


@router.post("/auth/logout-all", status_code=status.HTTP_204_NO_CONTENT)
def logout_all(current_user: AuthUser, service: Service):
    """Revoke every refresh token of the caller."""
    service.revoke_all_user_tokens(current_user.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=UserOutSchema)
def me(current_user: AuthUser, service: Service):
    return service.get_me(current_user.user_id)
