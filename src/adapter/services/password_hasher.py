"""bcrypt Password Hasher Implementation"""

import bcrypt

from src.app.services.password_hasher import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """
    bcrypt implementation of PasswordHasher

    bcrypt only reads the first 72 bytes of a password; longer input is
    truncated before hashing and verification so both sides agree.
    """

    MAX_PASSWORD_BYTES = 72

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def _encode(self, password: str) -> bytes:
        return password.encode("utf-8")[: self.MAX_PASSWORD_BYTES]

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._encode(password), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        if not password_hash:
            return False
        try:
            return bcrypt.checkpw(self._encode(password), password_hash.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
