"""Admin provisioning script

Creates the admin account or rotates its password. This is the only way
admins are created; the API has no registration endpoint.

Usage:
    python -m src.scripts.create_admin <username> <password>
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories.admin_repository import SqlAlchemyAdminRepository
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.auth import ProvisionAdmin, ProvisionAdminCommandDTO, AdminDTO
from src.domain import Admin  # noqa: F401

logger = logging.getLogger(__name__)


async def create_admin(
    username: str,
    password: str,
    db_uri: Optional[str] = None,
) -> AdminDTO:
    """
    Upsert an admin in the configured database

    Args:
        username: Login name
        password: Plaintext password (stored as a bcrypt hash)
        db_uri: Database URI (defaults to ApplicationConfig.DB_URI)

    Returns:
        AdminDTO describing the created or updated admin

    Raises:
        ValueError: If provisioning fails
    """
    engine = create_async_engine(db_uri or ApplicationConfig.DB_URI, echo=False, future=True)
    session_factory = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )

    try:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

        async with session_factory() as session:
            use_case = ProvisionAdmin(
                uow=SqlAlchemyUnitOfWork(session),
                admin_repo=SqlAlchemyAdminRepository(session),
                password_hasher=BcryptPasswordHasher(),
            )
            result = await use_case.execute(
                ProvisionAdminCommandDTO(username=username, password=password)
            )
    finally:
        await engine.dispose()

    if result.is_err():
        raise ValueError(result.error.message)

    return result.value


async def main(argv=None) -> int:
    logging.basicConfig(
        level=getattr(logging, ApplicationConfig.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    parser = argparse.ArgumentParser(description="Create or update the admin account")
    parser.add_argument("username", help="Admin username")
    parser.add_argument("password", help="Admin password")
    parser.add_argument("--db-uri", default=None, help="Override ApplicationConfig.DB_URI")
    args = parser.parse_args(argv)

    try:
        admin = await create_admin(args.username, args.password, db_uri=args.db_uri)
    except ValueError as e:
        logger.error(f"Admin provisioning failed: {e}")
        return 1

    print(f"Admin {'created' if admin.created else 'updated'}: {admin.username}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
