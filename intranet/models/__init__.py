# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from intranet.models.base import Base, TimestampMixin
from intranet.models.document import Document

__all__ = [
    "Base",
    "Document",
    "TimestampMixin",
]
