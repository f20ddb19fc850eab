# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Document store package."""

from intranet.store.base import (
    DocumentData,
    DocumentNotFoundError,
    DocumentStore,
    StoreError,
    StoreWriteError,
    Unsubscribe,
)
from intranet.store.events import ChangeFeed, change_feed
from intranet.store.sql import SqlDocumentStore

__all__ = [
    "ChangeFeed",
    "DocumentData",
    "DocumentNotFoundError",
    "DocumentStore",
    "SqlDocumentStore",
    "StoreError",
    "StoreWriteError",
    "Unsubscribe",
    "change_feed",
]
