# mediarating/schemas/user.py

from typing import Optional
from pydantic import Field
from mediarating.schemas.base import CamelModel


class User(CamelModel):
    user_id: int = Field(description="User ID")
    username: str = Field(description="Unique login name")
    email: Optional[str] = Field(default=None, description="Email address")
    favorite_genre: Optional[str] = Field(default=None, description="Favorite genre")


class UserCredentials(CamelModel):
    username: str = Field(description="Login name")
    password: str = Field(description="Plain password")


class RegisterResponse(CamelModel):
    id: int = Field(description="ID of the new user")
    username: str = Field(description="Login name")
    status: str = Field(default="created")


class TokenResponse(CamelModel):
    token: str = Field(description="Bearer token, valid for a fixed window")


class UserProfileUpdate(CamelModel):
    """Profile update; fields left out keep their current value"""

    email: Optional[str] = Field(default=None, description="New email address")
    favorite_genre: Optional[str] = Field(default=None, description="New favorite genre")
