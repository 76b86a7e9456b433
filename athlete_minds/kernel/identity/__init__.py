"""
Identity Core - user accounts and password hashing.
"""

from athlete_minds.kernel.identity.password import PasswordHasher, verify_password, hash_password
from athlete_minds.kernel.identity.identity_service import IdentityService

__all__ = [
    "PasswordHasher",
    "verify_password",
    "hash_password",
    "IdentityService",
]
