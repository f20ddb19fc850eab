# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from intranet.api.deps import get_access, get_session_token, get_store
from intranet.config import get_settings
from intranet.schemas.auth import AuthResponse, LoginRequest
from intranet.schemas.common import MessageResponse
from intranet.schemas.user import UserResponse
from intranet.services import auth_service
from intranet.services.access_service import AccessContext, build_access_context
from intranet.store import DocumentStore


def build_user_response(access: AccessContext) -> UserResponse:
    """Build UserResponse with the effective permissions of the user."""
    user = access.user
    return UserResponse(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        rank=user.rank,
        badge_number=user.badge_number,
        role=user.role,
        special_roles=user.special_roles,
        is_admin=user.is_admin,
        is_locked=user.is_locked,
        has_password=user.has_password,
        permissions=user.permissions,
        effective_permissions=access.permission_list(),
    )


router = APIRouter()


@router.post("/login", response_model=AuthResponse)
def login(
    data: LoginRequest,
    response: Response,
    store: DocumentStore = Depends(get_store),
) -> AuthResponse:
    """Login with badge number and password.

    An account without a password adopts the supplied one.
    """
    user = auth_service.authenticate(store, data.badge_number, data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login fehlgeschlagen",
        )

    settings = get_settings()
    token = auth_service.create_session(store, user.id)
    # No max_age: the cookie lives as long as the browser session
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )

    return AuthResponse(user=build_user_response(build_access_context(store, user)))


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    store: DocumentStore = Depends(get_store),
    token: str | None = Depends(get_session_token),
) -> MessageResponse:
    """Logout and invalidate session."""
    if token:
        auth_service.delete_session(store, token)

    response.delete_cookie(key=get_settings().session_cookie_name)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserResponse)
def get_me(access: AccessContext = Depends(get_access)) -> UserResponse:
    """Get current user info."""
    return build_user_response(access)
