"""Password Hasher Interface"""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Salted slow hash for admin passwords"""

    @abstractmethod
    def hash(self, password: str) -> str:
        """
        Hash a plaintext password

        Args:
            password: Plaintext password

        Returns:
            Encoded hash including its salt
        """
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check a plaintext password against a stored hash

        Returns:
            True if the password matches, False otherwise
        """
        pass
