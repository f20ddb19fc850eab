# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Law reference schemas."""

from pydantic import Field, field_validator

from intranet.schemas.common import CamelModel


class LawDocument(CamelModel):
    """A statute reference entry."""

    id: str
    paragraph: str
    title: str
    category: str
    description: str | None = None


class LawUpsert(CamelModel):
    """Schema for creating or updating a statute entry."""

    paragraph: str = Field(..., max_length=50)
    title: str = Field(..., max_length=300)
    category: str = Field(..., max_length=50)
    description: str | None = None

    @field_validator("paragraph")
    @classmethod
    def validate_paragraph(cls, v: str) -> str:
        v = v.strip()
        if not v or v == "§":
            raise ValueError("Paragraph is required")
        return v

    @field_validator("title", "category")
    @classmethod
    def validate_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Field is required")
        return v


class LawCategory(CamelModel):
    """Laws of one category, sorted by paragraph."""

    category: str
    laws: list[LawDocument]
