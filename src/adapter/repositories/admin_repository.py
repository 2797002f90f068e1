"""SQLAlchemy Admin Repository Implementation"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.admin_repository import AdminRepository
from src.domain.admin import Admin
from src.domain.base import utcnow


class SqlAlchemyAdminRepository(AdminRepository):
    """SQLAlchemy implementation of AdminRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_username(self, username: str) -> Optional[Admin]:
        statement = select(Admin).where(Admin.username == username)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def create(self, admin: Admin) -> Admin:
        self.session.add(admin)
        await self.session.flush()
        await self.session.refresh(admin)
        return admin

    async def update(self, admin: Admin) -> Admin:
        admin.updated_at = utcnow()
        self.session.add(admin)
        await self.session.flush()
        await self.session.refresh(admin)
        return admin
