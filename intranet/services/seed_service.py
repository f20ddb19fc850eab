# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""First-run seeding of roles, the default administrator and law references."""

import logging

from intranet.rbac.laws import DEFAULT_LAWS
from intranet.rbac.roles import DEFAULT_ADMIN, DEFAULT_ADMIN_BADGE, DEFAULT_ROLES
from intranet.store import DocumentStore
from intranet.store.collections import LAWS, ROLES, USERS

logger = logging.getLogger(__name__)


def seed_roles(store: DocumentStore) -> int:
    """Create the default roles if the roles collection is empty.

    Returns the number of roles written.
    """
    if store.fetch_all(ROLES):
        return 0

    for role_data in DEFAULT_ROLES:
        store.create_or_replace(ROLES, role_data["id"], dict(role_data))
    logger.info(f"Seeded {len(DEFAULT_ROLES)} default roles")
    return len(DEFAULT_ROLES)


def seed_default_admin(store: DocumentStore) -> bool:
    """Create the default administrator unless its badge number is taken.

    Returns True if the account was created.
    """
    reserved = DEFAULT_ADMIN_BADGE.lower()
    for user in store.fetch_all(USERS):
        if str(user.get("badgeNumber", "")).lower() == reserved:
            return False

    store.create_or_replace(USERS, DEFAULT_ADMIN["id"], dict(DEFAULT_ADMIN))
    logger.info(f"Created default administrator {DEFAULT_ADMIN_BADGE}")
    return True


def seed_laws(store: DocumentStore) -> int:
    """Populate the law references if the laws collection is empty.

    Returns the number of laws written.
    """
    if store.fetch_all(LAWS):
        return 0

    for law_data in DEFAULT_LAWS:
        store.append_new(LAWS, dict(law_data))
    logger.info(f"Seeded {len(DEFAULT_LAWS)} law references")
    return len(DEFAULT_LAWS)


def run_bootstrap(store: DocumentStore) -> None:
    """Seed all reference data.

    This function is idempotent: existing roles, users and laws are never
    overwritten. A failing step is logged and the remaining steps still run,
    so a partially seeded store is completed on the next start.
    """
    for step in (seed_roles, seed_default_admin, seed_laws):
        try:
            step(store)
        except Exception:
            logger.exception(f"Bootstrap step {step.__name__} failed")
