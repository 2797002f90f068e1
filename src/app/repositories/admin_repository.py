"""Admin Repository Interface

Defines the contract for admin credential persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.admin import Admin


class AdminRepository(ABC):
    """Repository interface for Admin persistence"""

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[Admin]:
        """
        Retrieve admin by exact username

        Args:
            username: Login name

        Returns:
            Admin if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, admin: Admin) -> Admin:
        """Persist a new admin"""
        pass

    @abstractmethod
    async def update(self, admin: Admin) -> Admin:
        """Persist changes to an existing admin"""
        pass
