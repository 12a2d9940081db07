"""
Pydantic models for registration, login and user data.

The password hash never leaves the service layer; ``UserRead`` is the
public shape of a user.
"""

from typing import Optional

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Body of ``POST /api/auth/register``."""

    name: Optional[str] = Field(None, examples=["Asha Verma"])
    email: Optional[str] = Field(None, examples=["asha@example.com"])
    password: Optional[str] = Field(None, examples=["strongpassword"])
    phone: Optional[str] = Field(None, examples=["+91 98765 43210"])


class LoginRequest(BaseModel):
    """Body of ``POST /api/auth/login``."""

    email: Optional[str] = Field(None, examples=["asha@example.com"])
    password: Optional[str] = Field(None, examples=["strongpassword"])


class UserRead(BaseModel):
    id: int
    name: Optional[str] = ""
    email: str
    phone: Optional[str] = ""


class AuthResponse(BaseModel):
    """Returned by both register and login."""

    user: UserRead
    token: str
