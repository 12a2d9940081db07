"""
Authentication endpoints.

Registration and login both answer with ``{"user": ..., "token": ...}``.
Errors raised by ``AuthService`` are turned into JSON responses by the
application's exception handlers.
"""

from typing import Optional

from fastapi import APIRouter

from cityease_api.app.schemas.user import AuthResponse, LoginRequest, RegisterRequest
from cityease_api.app.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=AuthResponse)
async def register(payload: Optional[RegisterRequest] = None) -> AuthResponse:
    """Register a new user.

    Returns 400 if e‑mail or password is missing and 409 if the e‑mail
    is already taken.
    """
    # An empty body is treated like `{}` so the presence check reports it.
    payload = payload or RegisterRequest()
    return await AuthService.register(payload.name, payload.email, payload.password, payload.phone)


@router.post("/login", response_model=AuthResponse)
async def login(payload: Optional[LoginRequest] = None) -> AuthResponse:
    """Log in with e‑mail and password.  Returns 401 on bad credentials."""
    payload = payload or LoginRequest()
    return await AuthService.login(payload.email, payload.password)
