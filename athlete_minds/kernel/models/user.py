"""
User account record.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """User account. ``password`` holds a bcrypt hash when created via IdentityService."""

    id: int
    username: str
    password: str

    def __repr__(self) -> str:
        return f"<User {self.username}>"
