from typing import Optional
from pydantic import EmailStr, Field, field_validator
from homestay.schemas.common import CamelModel


def normalise_email(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


class UserCreate(CamelModel):
    full_name: str = Field(min_length=2)
    email: EmailStr
    password: str = Field(min_length=6)

    @field_validator("full_name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("email", mode="before")
    @classmethod
    def lower_email(cls, value):
        return normalise_email(value)


class LoginRequest(CamelModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def lower_email(cls, value):
        return normalise_email(value)


class UserPublic(CamelModel):
    id: int
    email: str
    full_name: str


class UserAccount(UserPublic):
    """Stored user including the password hash. Never returned by a route."""

    hashed_password: str


class AuthResponse(CamelModel):
    message: str
    user: UserPublic


class CurrentUserResponse(CamelModel):
    user: Optional[UserPublic] = None
