# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Schemas for the organisation chart."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from intranet.schemas.common import CamelModel

RankGroup = Literal["Top", "Middle", "Operational"]


class OrgNodeUpsert(CamelModel):
    """Schema for creating or replacing a position in the chart."""

    short_name: str = Field(..., min_length=1, max_length=50)
    full_name: str = Field(..., min_length=1, max_length=200)
    parent_id: str | None = None
    rank_group: RankGroup = "Operational"
    assigned_user_id: str | None = None
    special_function: str | None = Field(None, max_length=200)

    @field_validator("short_name", "full_name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be blank")
        return v.strip()

    @field_validator("parent_id", "assigned_user_id")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        return v or None


class OrgNodeDocument(OrgNodeUpsert):
    """A stored position. Unknown fields from older documents are kept."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    id: str


class OrgHolder(CamelModel):
    """The officer holding a position."""

    id: str
    display_name: str
    badge_number: str


class OrgTreeNode(OrgNodeDocument):
    """A position with its holder and its subordinate positions."""

    assigned_user: OrgHolder | None = None
    children: list["OrgTreeNode"] = Field(default_factory=list)


class RankResponse(BaseModel):
    """One step of the rank ladder."""

    name: str
    level: int
