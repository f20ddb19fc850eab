# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication schemas."""

from pydantic import BaseModel, Field

from intranet.schemas.common import CamelModel
from intranet.schemas.user import UserResponse


class LoginRequest(CamelModel):
    """Badge number and password. On first login the password is adopted."""

    badge_number: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)


class AuthResponse(BaseModel):
    """Response carrying the authenticated user."""

    user: UserResponse
