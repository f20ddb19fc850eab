# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Change feed delivering live snapshots to subscribers."""

import logging
from collections import defaultdict

from intranet.store.base import (
    DocumentData,
    DocumentHandler,
    SnapshotHandler,
    Unsubscribe,
)

logger = logging.getLogger(__name__)


class ChangeFeed:
    """Push-based subscription registry for collections and single documents.

    Subscribers always receive the complete current state, never a diff.
    A failing handler is logged and does not affect the other subscribers.
    """

    def __init__(self) -> None:
        """Initialize the change feed."""
        self._collection_handlers: dict[str, list[SnapshotHandler]] = defaultdict(
            list
        )
        self._document_handlers: dict[tuple[str, str], list[DocumentHandler]] = (
            defaultdict(list)
        )

    def subscribe(self, collection: str, handler: SnapshotHandler) -> Unsubscribe:
        """Subscribe to every change of a collection.

        Args:
            collection: Collection name
            handler: Called with the full list of documents

        Returns:
            Function that removes the subscription
        """
        self._collection_handlers[collection].append(handler)
        logger.debug(f"Subscribed to collection {collection}")

        def unsubscribe() -> None:
            handlers = self._collection_handlers.get(collection, [])
            if handler in handlers:
                handlers.remove(handler)
                logger.debug(f"Unsubscribed from collection {collection}")

        return unsubscribe

    def subscribe_document(
        self, collection: str, doc_id: str, handler: DocumentHandler
    ) -> Unsubscribe:
        """Subscribe to changes of one document.

        Args:
            collection: Collection name
            doc_id: Document id
            handler: Called with the document, or None once it is deleted

        Returns:
            Function that removes the subscription
        """
        key = (collection, doc_id)
        self._document_handlers[key].append(handler)
        logger.debug(f"Subscribed to document {collection}/{doc_id}")

        def unsubscribe() -> None:
            handlers = self._document_handlers.get(key, [])
            if handler in handlers:
                handlers.remove(handler)
                logger.debug(f"Unsubscribed from document {collection}/{doc_id}")

        return unsubscribe

    def has_collection_subscribers(self, collection: str) -> bool:
        return bool(self._collection_handlers.get(collection))

    def has_document_subscribers(self, collection: str, doc_id: str) -> bool:
        return bool(self._document_handlers.get((collection, doc_id)))

    def publish(self, collection: str, snapshot: list[DocumentData]) -> None:
        """Deliver a collection snapshot to its subscribers."""
        for handler in list(self._collection_handlers.get(collection, [])):
            try:
                handler(snapshot)
            except Exception as e:
                logger.error(f"Error in snapshot handler for {collection}: {e}")

    def publish_document(
        self, collection: str, doc_id: str, document: DocumentData | None
    ) -> None:
        """Deliver the current state of one document to its subscribers."""
        for handler in list(self._document_handlers.get((collection, doc_id), [])):
            try:
                handler(document)
            except Exception as e:
                logger.error(
                    f"Error in document handler for {collection}/{doc_id}: {e}"
                )

    def get_subscriber_count(self, collection: str) -> int:
        """Get the number of collection and document subscribers of a collection.

        Args:
            collection: Collection name

        Returns:
            Number of subscribers
        """
        count = len(self._collection_handlers.get(collection, []))
        for (name, _), handlers in self._document_handlers.items():
            if name == collection:
                count += len(handlers)
        return count


# Global change feed singleton
change_feed = ChangeFeed()
