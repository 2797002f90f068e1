"""Token Service Interface

Issues and verifies the signed, expiring bearer tokens used by the API.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from src.domain.admin import Admin


class InvalidTokenError(Exception):
    """Token is missing, malformed, badly signed or expired"""
    pass


@dataclass(frozen=True)
class IssuedToken:
    token: str
    expires_at: datetime


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified token"""
    subject: str
    username: str


class TokenService(ABC):

    @abstractmethod
    def issue(self, admin: Admin) -> IssuedToken:
        """
        Issue a token bound to an admin

        Args:
            admin: Authenticated admin

        Returns:
            IssuedToken with the encoded token and its expiry
        """
        pass

    @abstractmethod
    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token and return its claims

        Raises:
            InvalidTokenError: If the token cannot be trusted
        """
        pass
