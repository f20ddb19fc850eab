# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Document store backed by a single SQLAlchemy table."""

import copy
import logging
import uuid
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from intranet.models import Document
from intranet.store.base import (
    DocumentData,
    DocumentHandler,
    DocumentNotFoundError,
    DocumentStore,
    SnapshotHandler,
    StoreError,
    StoreWriteError,
    Unsubscribe,
)
from intranet.store.events import ChangeFeed, change_feed

logger = logging.getLogger(__name__)


def _to_dict(document: Document) -> DocumentData:
    return {**copy.deepcopy(document.data), "id": document.id}


def _strip_id(data: DocumentData) -> dict[str, Any]:
    return {key: copy.deepcopy(value) for key, value in data.items() if key != "id"}


class SqlDocumentStore(DocumentStore):
    """DocumentStore implementation on top of a SQLAlchemy session.

    Every write is committed immediately. Subscribers registered on the
    change feed are notified after the commit succeeded.
    """

    def __init__(self, db: Session, feed: ChangeFeed | None = None) -> None:
        self.db = db
        self.feed = feed if feed is not None else change_feed

    def fetch_all(self, collection: str) -> list[DocumentData]:
        documents = (
            self.db.query(Document)
            .filter(Document.collection == collection)
            .order_by(Document.created_at, Document.id)
            .all()
        )
        return [_to_dict(document) for document in documents]

    def get(self, collection: str, doc_id: str) -> DocumentData | None:
        document = self.db.get(Document, (collection, doc_id))
        return _to_dict(document) if document else None

    def subscribe(self, collection: str, on_change: SnapshotHandler) -> Unsubscribe:
        unsubscribe = self.feed.subscribe(collection, on_change)
        on_change(self.fetch_all(collection))
        return unsubscribe

    def subscribe_document(
        self, collection: str, doc_id: str, on_change: DocumentHandler
    ) -> Unsubscribe:
        unsubscribe = self.feed.subscribe_document(collection, doc_id, on_change)
        on_change(self.get(collection, doc_id))
        return unsubscribe

    def create_or_replace(
        self, collection: str, doc_id: str, data: DocumentData
    ) -> None:
        document = self.db.get(Document, (collection, doc_id))
        if document:
            document.data = _strip_id(data)
        else:
            self.db.add(
                Document(collection=collection, id=doc_id, data=_strip_id(data))
            )
        self._commit(collection, doc_id)

    def append_new(self, collection: str, data: DocumentData) -> str:
        doc_id = uuid.uuid4().hex
        self.db.add(Document(collection=collection, id=doc_id, data=_strip_id(data)))
        self._commit(collection, doc_id)
        return doc_id

    def patch(self, collection: str, doc_id: str, data: DocumentData) -> None:
        document = self.db.get(Document, (collection, doc_id))
        if not document:
            raise DocumentNotFoundError(collection, doc_id)
        # Reassign so the JSON column is flagged as modified
        document.data = {**document.data, **_strip_id(data)}
        self._commit(collection, doc_id)

    def remove(self, collection: str, doc_id: str) -> None:
        document = self.db.get(Document, (collection, doc_id))
        if not document:
            return
        self.db.delete(document)
        self._commit(collection, doc_id)

    def _commit(self, collection: str, doc_id: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Write to {collection}/{doc_id} failed: {e}")
            raise StoreWriteError(f"Write to {collection}/{doc_id} failed") from e
        self._notify(collection, doc_id)

    def _notify(self, collection: str, doc_id: str) -> None:
        try:
            if self.feed.has_collection_subscribers(collection):
                self.feed.publish(collection, self.fetch_all(collection))
            if self.feed.has_document_subscribers(collection, doc_id):
                self.feed.publish_document(
                    collection, doc_id, self.get(collection, doc_id)
                )
        except SQLAlchemyError as e:
            raise StoreError(f"Reading {collection} after write failed") from e
