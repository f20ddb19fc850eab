# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Organisation chart: positions arranged by parent links."""

import logging

from pydantic import ValidationError

from intranet.rbac.ranks import rank_level
from intranet.schemas.org import OrgHolder, OrgNodeDocument, OrgNodeUpsert, OrgTreeNode
from intranet.services.auth_service import get_user_by_id, load_user
from intranet.store import DocumentStore
from intranet.store.collections import ORG_NODES, USERS

logger = logging.getLogger(__name__)


class InvalidOrgNodeError(Exception):
    """The position cannot be stored as requested."""


def load_node(data: dict) -> OrgNodeDocument | None:
    """Parse a stored position, skipping malformed ones."""
    try:
        return OrgNodeDocument.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Ignoring malformed org node {data.get('id')}: {e}")
        return None


def list_nodes(store: DocumentStore) -> list[OrgNodeDocument]:
    nodes = (load_node(data) for data in store.fetch_all(ORG_NODES))
    return [node for node in nodes if node]


def build_tree(
    nodes: list[OrgNodeDocument], holders: dict[str, OrgHolder] | None = None
) -> list[OrgTreeNode]:
    """Arrange positions as a forest.

    A position whose parent is unset or unknown becomes a root. Siblings are
    ordered by the rank level of their full name, highest rank first.
    Positions caught in a parent cycle are not reachable from any root and
    are left out.
    """
    holders = holders or {}
    tree = {
        node.id: OrgTreeNode(
            **node.model_dump(),
            assigned_user=holders.get(node.assigned_user_id or ""),
        )
        for node in nodes
    }

    roots = []
    for node in tree.values():
        parent = tree.get(node.parent_id or "")
        if parent is not None and parent is not node:
            parent.children.append(node)
        else:
            roots.append(node)

    def sort_level(level: list[OrgTreeNode]) -> None:
        level.sort(key=lambda n: (rank_level(n.full_name), n.short_name))
        for child in level:
            sort_level(child.children)

    sort_level(roots)
    return roots


def get_tree(store: DocumentStore) -> list[OrgTreeNode]:
    """The chart with the current holder of each position."""
    holders = {}
    for data in store.fetch_all(USERS):
        user = load_user(data)
        if user:
            holders[user.id] = OrgHolder(
                id=user.id,
                display_name=f"{user.first_name} {user.last_name}",
                badge_number=user.badge_number,
            )
    return build_tree(list_nodes(store), holders)


def _check_parent(store: DocumentStore, node_id: str, parent_id: str | None) -> None:
    """Reject a parent link that would place a position below itself."""
    seen = set()
    current = parent_id
    while current and current not in seen:
        if current == node_id:
            raise InvalidOrgNodeError("A position cannot be placed below itself")
        seen.add(current)
        parent = store.get(ORG_NODES, current)
        current = parent.get("parentId") if parent else None


def _check_holder(store: DocumentStore, user_id: str | None) -> None:
    if user_id and not get_user_by_id(store, user_id):
        raise InvalidOrgNodeError(f"Unknown user {user_id}")


def create_node(store: DocumentStore, data: OrgNodeUpsert) -> OrgNodeDocument:
    """Add a position. Without a parent it becomes a root."""
    _check_holder(store, data.assigned_user_id)
    document = data.model_dump(by_alias=True)
    node_id = store.append_new(ORG_NODES, document)
    logger.info(f"Created org node {node_id} ({data.short_name})")
    return OrgNodeDocument.model_validate({**document, "id": node_id})


def update_node(
    store: DocumentStore, node_id: str, data: OrgNodeUpsert
) -> OrgNodeDocument | None:
    """Replace a position. Returns None if it does not exist."""
    if not store.get(ORG_NODES, node_id):
        return None
    _check_parent(store, node_id, data.parent_id)
    _check_holder(store, data.assigned_user_id)
    document = data.model_dump(by_alias=True)
    store.create_or_replace(ORG_NODES, node_id, document)
    return OrgNodeDocument.model_validate({**document, "id": node_id})


def delete_node(store: DocumentStore, node_id: str) -> bool:
    """Delete a position. Its direct subordinates become roots."""
    if not store.get(ORG_NODES, node_id):
        return False
    for data in store.fetch_all(ORG_NODES):
        if data.get("parentId") == node_id:
            store.patch(ORG_NODES, data["id"], {"parentId": None})
    store.remove(ORG_NODES, node_id)
    logger.info(f"Deleted org node {node_id}")
    return True
