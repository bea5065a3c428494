"""Seed the default navigation modules.

Creates each default module by name if missing and restores it if it was
soft deleted. Safe to run repeatedly.

Usage:
    python -m scripts.seed_modules
Requires: DATABASE_URL (Postgres) and existing tables
(DATABASE_CREATE_TABLES=true on first app start creates them).
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from rbac_admin.application.dtos.module import ModuleCreate
from rbac_admin.core.config import get_settings
from rbac_admin.infrastructure.persistence import database
from rbac_admin.infrastructure.persistence.repositories import ModuleRepository
from rbac_admin.shared.logging import setup_logging

logger = logging.getLogger("scripts.seed_modules")

DEFAULT_MODULES: tuple[ModuleCreate, ...] = (
    ModuleCreate(
        name="Dashboard",
        description="Welcome to your dashboard",
        order=1,
        available_actions=("can_view",),
    ),
    ModuleCreate(name="Programs", order=2, available_actions=("can_view",)),
    ModuleCreate(name="Programs 1", order=2, available_actions=("can_view",)),
    ModuleCreate(
        name="Users",
        description="Manage the users of this system",
        order=3,
        available_actions=("can_view",),
    ),
    ModuleCreate(
        name="Roles",
        description="Manage the roles and permissions for your users",
        order=4,
        available_actions=("can_view",),
    ),
    ModuleCreate(
        name="Modules",
        description="Manage the modules of the system.",
        path="/modules",
        order=5,
        available_actions=("can_view",),
    ),
)


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL."""
    load_dotenv(Path(__file__).resolve().parent.parent / ".env", override=True)


async def seed_modules(repo: ModuleRepository) -> tuple[int, int]:
    """Create missing default modules and restore deleted ones.

    Returns:
        (created, restored) counts.
    """
    created = restored = 0
    for data in DEFAULT_MODULES:
        if await repo.get_by_name(data.name) is not None:
            continue
        deleted = await repo.get_by_name(data.name, include_deleted=True)
        if deleted is None:
            await repo.create_module(data)
            created += 1
        else:
            await repo.restore(deleted.id)
            restored += 1
    return created, restored


async def main() -> None:
    _load_env()
    get_settings()
    setup_logging()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("AsyncSessionLocal not configured", file=sys.stderr)
        sys.exit(1)

    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            created, restored = await seed_modules(ModuleRepository(session))
    logger.info("Modules seeded: %d created, %d restored", created, restored)
    await database.engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
