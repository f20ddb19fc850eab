# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Admin panel API endpoints: users, roles and law references."""

from fastapi import APIRouter, Depends, HTTPException, status

from intranet.api.deps import get_store, require_permission
from intranet.api.v1.auth import build_user_response
from intranet.rbac.laws import LAW_CATEGORIES
from intranet.rbac.permissions import Permission
from intranet.schemas.common import MessageResponse
from intranet.schemas.law import LawCategory, LawDocument, LawUpsert
from intranet.schemas.role import RoleDocument, RoleUpsert
from intranet.schemas.user import UserCreate, UserResponse, UserUpdate
from intranet.services import admin_service
from intranet.services.access_service import AccessContext
from intranet.store import DocumentNotFoundError, DocumentStore

router = APIRouter()

manage_users = require_permission(Permission.MANAGE_USERS)
admin_access = require_permission(Permission.ADMIN_ACCESS)
manage_laws = require_permission(Permission.ADMIN_ACCESS, Permission.MANAGE_LAWS)


def _user_response(access: AccessContext, user) -> UserResponse:
    return build_user_response(AccessContext(user=user, roles=access.roles))


# Users


@router.get("/users", response_model=list[UserResponse], summary="List all users")
def list_users(
    search: str | None = None,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(manage_users),
) -> list[UserResponse]:
    """List users sorted by last name.

    Requires MANAGE_USERS permission.
    """
    users = admin_service.list_users(store, search)
    return [_user_response(access, user) for user in users]


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
)
def create_user(
    data: UserCreate,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(manage_users),
) -> UserResponse:
    """Create a user. The account has no password until its first login.

    Setting the admin flag, direct permissions or special roles, or assigning
    a role with permissions the caller lacks, requires ADMIN_ACCESS.
    """
    try:
        user = admin_service.create_user(store, data, access)
    except admin_service.DuplicateBadgeError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except admin_service.PrivilegeError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return _user_response(access, user)


@router.put("/users/{user_id}", response_model=UserResponse, summary="Update a user")
def update_user(
    user_id: str,
    data: UserUpdate,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(manage_users),
) -> UserResponse:
    try:
        user = admin_service.update_user(store, user_id, data, access)
    except admin_service.DuplicateBadgeError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except admin_service.PrivilegeError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return _user_response(access, user)


@router.post(
    "/users/{user_id}/toggle-lock",
    response_model=UserResponse,
    summary="Lock or unlock a user",
)
def toggle_user_lock(
    user_id: str,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(manage_users),
) -> UserResponse:
    try:
        user = admin_service.toggle_user_lock(store, user_id, access)
    except admin_service.PrivilegeError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return _user_response(access, user)


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
)
def delete_user(
    user_id: str,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(manage_users),
) -> None:
    """Delete a user. The default administrator cannot be deleted."""
    try:
        deleted = admin_service.delete_user(store, user_id, access)
    except (
        admin_service.ProtectedAccountError,
        admin_service.PrivilegeError,
    ) as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="User not found")


# Roles


@router.get("/roles", response_model=list[RoleDocument], summary="List roles")
def list_roles(
    special: bool | None = None,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(admin_access),
) -> list[RoleDocument]:
    return admin_service.list_roles(store, special)


@router.put("/roles", response_model=RoleDocument, summary="Create or update a role")
def save_role(
    data: RoleUpsert,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(admin_access),
) -> RoleDocument:
    """Create or update a role.

    Without an explicit id, the id is derived from the role name. Unknown
    permission tokens are dropped.
    """
    return admin_service.save_role(store, data)


@router.get("/permissions", response_model=list[str], summary="List permissions")
def list_permissions(
    access: AccessContext = Depends(admin_access),
) -> list[str]:
    """All assignable permissions, in display order."""
    return [p.value for p in Permission]


# Laws


@router.get(
    "/laws/categories", response_model=list[str], summary="List law categories"
)
def list_law_categories(
    access: AccessContext = Depends(manage_laws),
) -> list[str]:
    """Categories offered when creating a law."""
    return LAW_CATEGORIES


@router.get("/laws", response_model=list[LawCategory], summary="List laws")
def list_laws(
    search: str | None = None,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(manage_laws),
) -> list[LawCategory]:
    """Laws grouped by category, sorted by paragraph."""
    return admin_service.group_laws(admin_service.list_laws(store, search))


@router.post(
    "/laws",
    response_model=LawDocument,
    status_code=status.HTTP_201_CREATED,
    summary="Create a law",
)
def create_law(
    data: LawUpsert,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(manage_laws),
) -> LawDocument:
    return admin_service.save_law(store, data)


@router.put("/laws/{law_id}", response_model=LawDocument, summary="Update a law")
def update_law(
    law_id: str,
    data: LawUpsert,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(manage_laws),
) -> LawDocument:
    try:
        return admin_service.save_law(store, data, law_id)
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail="Law not found")


@router.delete("/laws/{law_id}", response_model=MessageResponse, summary="Delete a law")
def delete_law(
    law_id: str,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(manage_laws),
) -> MessageResponse:
    if not admin_service.delete_law(store, law_id):
        raise HTTPException(status_code=404, detail="Law not found")
    return MessageResponse(message="Law deleted")
