# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Document store contract used by the services."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

DocumentData = dict[str, Any]
SnapshotHandler = Callable[[list[DocumentData]], Any]
DocumentHandler = Callable[[DocumentData | None], Any]
Unsubscribe = Callable[[], None]


class StoreError(Exception):
    """Base class for document store failures."""


class StoreWriteError(StoreError):
    """A write against the store was rejected."""


class DocumentNotFoundError(StoreError):
    """The addressed document does not exist."""

    def __init__(self, collection: str, doc_id: str) -> None:
        super().__init__(f"Document {collection}/{doc_id} not found")
        self.collection = collection
        self.doc_id = doc_id


class DocumentStore(ABC):
    """Minimal read/write/subscribe interface over named collections.

    Documents are plain dicts. Documents returned by the store always carry
    their id under the ``"id"`` key; the key is ignored when writing.
    """

    @abstractmethod
    def fetch_all(self, collection: str) -> list[DocumentData]:
        """Read every document in a collection."""

    @abstractmethod
    def get(self, collection: str, doc_id: str) -> DocumentData | None:
        """Read a single document, or None if it does not exist."""

    @abstractmethod
    def subscribe(self, collection: str, on_change: SnapshotHandler) -> Unsubscribe:
        """Receive the full collection snapshot now and after every change."""

    @abstractmethod
    def subscribe_document(
        self, collection: str, doc_id: str, on_change: DocumentHandler
    ) -> Unsubscribe:
        """Receive a single document (or None) now and after every change."""

    @abstractmethod
    def create_or_replace(
        self, collection: str, doc_id: str, data: DocumentData
    ) -> None:
        """Write a document under an explicit id, replacing any previous one."""

    @abstractmethod
    def append_new(self, collection: str, data: DocumentData) -> str:
        """Insert a document under a generated id and return the id."""

    @abstractmethod
    def patch(self, collection: str, doc_id: str, data: DocumentData) -> None:
        """Merge the given fields into an existing document."""

    @abstractmethod
    def remove(self, collection: str, doc_id: str) -> None:
        """Delete a document. Deleting a missing document is a no-op."""
