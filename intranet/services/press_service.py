# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Press releases."""

from intranet.schemas.records import PressReleaseCreate, PressReleaseUpdate
from intranet.schemas.user import UserDocument
from intranet.services import record_service
from intranet.store import DocumentData, DocumentStore
from intranet.store.collections import NEWS


def list_releases(store: DocumentStore) -> list[DocumentData]:
    return record_service.list_records(store, NEWS)


def publish_release(
    store: DocumentStore, data: PressReleaseCreate, author: UserDocument
) -> DocumentData:
    document = data.model_dump(by_alias=True)
    document["author"] = author.display_name
    return record_service.create_record(store, NEWS, document)


def edit_release(
    store: DocumentStore,
    release_id: str,
    data: PressReleaseUpdate,
    editor: UserDocument,
) -> DocumentData | None:
    """Apply changes and stamp the editor. The original author is kept."""
    changes = data.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)
    changes.update(
        lastEditedBy=editor.display_name, lastEditedAt=record_service.now_iso()
    )
    return record_service.update_record(store, NEWS, release_id, changes)
