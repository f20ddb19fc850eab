# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Common schema types."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model for documents stored with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def none_to_list(v: Any) -> Any:
    """Treat a missing/null list field in persisted data as empty."""
    if v is None:
        return []
    return v


class StatusChange(CamelModel):
    """One entry of a document's embedded status history."""

    status: str
    changed_by: str
    timestamp: str
    note: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str
