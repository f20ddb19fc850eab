# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role schemas."""

from pydantic import Field, field_validator

from intranet.schemas.common import CamelModel, none_to_list


class RoleDocument(CamelModel):
    """A role as persisted in the roles collection.

    ``permissions`` holds raw tokens, which may use legacy spellings.
    """

    id: str
    name: str = ""
    is_special: bool = False
    permissions: list[str] = Field(default_factory=list)

    @field_validator("permissions", mode="before")
    @classmethod
    def default_permissions(cls, v):
        return none_to_list(v)


class RoleUpsert(CamelModel):
    """Schema for creating or updating a role from the admin panel."""

    id: str | None = Field(None, max_length=64)
    name: str = Field(..., min_length=1, max_length=100)
    is_special: bool = False
    permissions: list[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Role name must not be blank")
        return v.strip()
