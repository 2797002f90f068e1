"""ProvisionAdmin Use Case

Creates the admin account, or rotates its password if it already exists.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.admin_repository import AdminRepository
from src.app.services.password_hasher import PasswordHasher
from src.app.use_cases.errors import validation_error
from src.domain.admin import Admin
from .dtos import ProvisionAdminCommandDTO, AdminDTO

logger = logging.getLogger(__name__)


class ProvisionAdmin:
    """
    Use Case: Upsert admin credentials (out-of-band provisioning)

    Business Rules:
    1. username and password are required
    2. Existing username: password hash is replaced
    3. New username: admin is created
    """

    def __init__(
        self,
        uow: UnitOfWork,
        admin_repo: AdminRepository,
        password_hasher: PasswordHasher,
    ):
        self.uow = uow
        self.admin_repo = admin_repo
        self.password_hasher = password_hasher

    async def execute(self, command: ProvisionAdminCommandDTO) -> Result[AdminDTO]:
        username = (command.username or "").strip()
        if not username or not command.password:
            return Return.err(validation_error("username and password are required"))

        try:
            password_hash = self.password_hasher.hash(command.password)
            admin = await self.admin_repo.get_by_username(username)

            if admin:
                admin.password_hash = password_hash
                admin = await self.admin_repo.update(admin)
                created = False
            else:
                admin = await self.admin_repo.create(
                    Admin(username=username, password_hash=password_hash)
                )
                created = True

            await self.uow.commit()
            logger.info(f"Admin {'created' if created else 'updated'}: {username}")

            return Return.ok(AdminDTO(id=admin.id, username=admin.username, created=created))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="PROVISION_ADMIN_FAILED",
                    message="Failed to provision admin",
                    reason=str(e),
                )
            )
