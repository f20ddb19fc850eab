# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User schemas."""

from pydantic import Field, field_validator

from intranet.schemas.common import CamelModel, none_to_list


class UserDocument(CamelModel):
    """A user as persisted in the users collection.

    ``password`` only exists on documents written by older deployments and is
    replaced by ``password_hash`` on the first successful login.
    """

    id: str
    first_name: str = ""
    last_name: str = ""
    rank: str = ""
    badge_number: str
    role: str = ""
    special_roles: list[str] = Field(default_factory=list)
    is_admin: bool = False
    permissions: list[str] = Field(default_factory=list)
    is_locked: bool = False
    password_hash: str | None = None
    password: str | None = None

    @field_validator("special_roles", "permissions", mode="before")
    @classmethod
    def default_lists(cls, v):
        return none_to_list(v)

    @property
    def has_password(self) -> bool:
        return bool(self.password_hash or self.password)

    @property
    def display_name(self) -> str:
        """Rank and last name, as shown on reports."""
        return f"{self.rank} {self.last_name}".strip()


class UserBase(CamelModel):
    """Fields an administrator can edit."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    rank: str = Field("", max_length=100)
    badge_number: str = Field(..., min_length=1, max_length=50)
    role: str = Field(..., min_length=1)
    special_roles: list[str] = Field(default_factory=list)
    is_admin: bool = False
    permissions: list[str] = Field(default_factory=list)
    is_locked: bool = False

    @field_validator("badge_number")
    @classmethod
    def validate_badge(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Badge number must not be blank")
        return v.strip()


class UserCreate(UserBase):
    """Schema for creating a user. New accounts start without a password."""


class UserUpdate(UserBase):
    """Schema for replacing a user's profile. Credentials are kept."""


class UserResponse(CamelModel):
    """Schema for user response. Never includes credentials."""

    id: str
    first_name: str
    last_name: str
    rank: str
    badge_number: str
    role: str
    special_roles: list[str]
    is_admin: bool
    is_locked: bool
    has_password: bool
    permissions: list[str]
    effective_permissions: list[str] = Field(default_factory=list)
