# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from intranet.config import get_settings
from intranet.database import get_db
from intranet.rbac.permissions import Permission
from intranet.schemas.user import UserDocument
from intranet.services import auth_service
from intranet.services.access_service import AccessContext, build_access_context
from intranet.store import DocumentStore, SqlDocumentStore, change_feed


def get_store(db: Session = Depends(get_db)) -> DocumentStore:
    """Get the document store bound to the request's database session."""
    return SqlDocumentStore(db, change_feed)


def get_session_token(request: Request) -> str | None:
    return request.cookies.get(get_settings().session_cookie_name)


def get_current_user(
    store: DocumentStore = Depends(get_store),
    token: str | None = Depends(get_session_token),
) -> UserDocument:
    """Get current authenticated user from session cookie."""
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    user = auth_service.restore_user(store, token)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
        )

    return user


def get_access(
    store: DocumentStore = Depends(get_store),
    current_user: UserDocument = Depends(get_current_user),
) -> AccessContext:
    """Access context of the current user against the current role set."""
    return build_access_context(store, current_user)


def require_permission(*permissions: Permission):
    """Dependency for permission-based authorization.

    Passes when the user holds any of the given permissions.
    """

    def dependency(access: AccessContext = Depends(get_access)) -> AccessContext:
        if not any(access.check_permission(p) for p in permissions):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: {permissions[0].value}",
            )
        return access

    return dependency
