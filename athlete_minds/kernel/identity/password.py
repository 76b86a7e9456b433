"""
Password hashing utilities using bcrypt.
"""

import bcrypt

# bcrypt only looks at the first 72 bytes of input
_BCRYPT_MAX_BYTES = 72
DEFAULT_ROUNDS = 12


class PasswordHasher:
    """Password hashing service."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.rounds = rounds

    @staticmethod
    def _encode(password: str) -> bytes:
        return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]

    def hash(self, password: str) -> str:
        """
        Hash a password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Hashed password string ($2b$...)
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._encode(password), salt).decode("utf-8")

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against its hash.

        Returns False for a mismatch and for a malformed hash.
        """
        try:
            return bcrypt.checkpw(self._encode(plain_password), hashed_password.encode("utf-8"))
        except ValueError:
            return False


# Convenience functions
def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a password."""
    return PasswordHasher(rounds).hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password."""
    return PasswordHasher().verify(plain_password, hashed_password)
