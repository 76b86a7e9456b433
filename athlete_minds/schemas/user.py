"""
User schemas.
"""

from athlete_minds.schemas.common import InputModel


class UserCreate(InputModel):
    """User creation payload. ``password`` is the plain text on input to IdentityService."""

    username: str
    password: str
