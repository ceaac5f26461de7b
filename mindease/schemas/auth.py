"""Pydantic schemas for registration, login and tokens."""
from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from mindease.schemas.base import CamelSchema


def _password_max_bytes(v: str) -> str:
    # bcrypt hard limit: 72 bytes (UTF-8)
    if len(v.encode("utf-8")) > 72:
        raise ValueError("password too long: must be at most 72 bytes when UTF-8 encoded")
    return v


class RegisterSchema(CamelSchema):
    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(min_length=6, max_length=100)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name cannot be empty")
        return v.strip()

    @field_validator("password")
    @classmethod
    def password_max_bytes(cls, v: str) -> str:
        return _password_max_bytes(v)


class LoginSchema(CamelSchema):
    email: EmailStr
    password: str


class RefreshTokenSchema(CamelSchema):
    refresh_token: str = Field(min_length=1)


class UserOutSchema(CamelSchema):
    id: str
    name: str
    email: str
    created_at: datetime


class LoginUserSchema(CamelSchema):
    user_id: str
    email: str
    name: str


class RegisterOutSchema(CamelSchema):
    user: UserOutSchema
    access_token: str
    refresh_token: str


class LoginOutSchema(CamelSchema):
    user: LoginUserSchema
    access_token: str
    refresh_token: str


class AccessTokenOutSchema(CamelSchema):
    access_token: str


class MessageSchema(CamelSchema):
    message: str
