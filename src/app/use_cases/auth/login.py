"""Login Use Case

Exchanges admin credentials for a signed, expiring token.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.admin_repository import AdminRepository
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
from src.app.use_cases.errors import ErrorCode, validation_error
from .dtos import LoginCommandDTO, TokenResponseDTO

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


class Login:
    """
    Use Case: Admin login

    Business Rules:
    1. username and password are both required; nothing is looked up otherwise
    2. Unknown username and wrong password give the same error
    3. Token binds the admin id and username and expires after a fixed period
    4. Stateless: no session is stored
    """

    def __init__(
        self,
        admin_repo: AdminRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self.admin_repo = admin_repo
        self.password_hasher = password_hasher
        self.token_service = token_service

    def _invalid_credentials(self, reason: str) -> Error:
        return Error(
            code=ErrorCode.INVALID_CREDENTIALS,
            message=INVALID_CREDENTIALS_MESSAGE,
            reason=reason,
        )

    async def execute(self, command: LoginCommandDTO) -> Result[TokenResponseDTO]:
        """
        Execute login

        Args:
            command: LoginCommandDTO with username and password

        Returns:
            Result[TokenResponseDTO]: Token or error
        """
        if not command.username or not command.password:
            return Return.err(validation_error("username and password are required"))

        admin = await self.admin_repo.get_by_username(command.username)
        if not admin:
            logger.warning("Login failed: unknown username")
            return Return.err(self._invalid_credentials("Unknown username"))

        if not self.password_hasher.verify(command.password, admin.password_hash):
            logger.warning(f"Login failed: wrong password for {admin.username}")
            return Return.err(self._invalid_credentials("Password mismatch"))

        issued = self.token_service.issue(admin)
        logger.info(f"Admin {admin.username} logged in")

        return Return.ok(TokenResponseDTO(token=issued.token))
