"""
Identity service for user account operations.
"""

from typing import Optional

from athlete_minds.kernel.events.event_store import EventStore
from athlete_minds.kernel.identity.password import DEFAULT_ROUNDS, PasswordHasher
from athlete_minds.kernel.models import EventType, User
from athlete_minds.kernel.store import RecordStore
from athlete_minds.kernel.validation import validate_payload
from athlete_minds.logging_config import get_logger

logger = get_logger(__name__)


class IdentityService:
    """
    Service for user identity operations.

    Owns password hashing so the store only ever sees bcrypt hashes.
    """

    def __init__(
        self,
        store: RecordStore,
        event_store: EventStore,
        bcrypt_rounds: int = DEFAULT_ROUNDS,
    ):
        self.store = store
        self.event_store = event_store
        self.hasher = PasswordHasher(bcrypt_rounds)

    def register_user(
        self,
        username: str,
        password: str,
        ip_address: Optional[str] = None,
    ) -> User:
        """
        Register a new user.

        Args:
            username: Unique login name
            password: Plain text password
            ip_address: Client IP for audit

        Returns:
            The created User

        Raises:
            ValidationFailed: If username or password are not strings
            DuplicateUsernameError: If the username is taken
        """
        data = validate_payload("user", {"username": username, "password": password})
        data = data.model_copy(update={"password": self.hasher.hash(data.password)})

        user = self.store.create_user(data)

        self.event_store.log(
            event_type=EventType.USER_REGISTERED,
            entity_type="user",
            entity_id=user.id,
            payload={"username": user.username},
            ip_address=ip_address,
        )
        logger.info("User registered", extra={"user_id": user.id})
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        return self.store.get_user(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.store.get_user_by_username(username)

    def check_password(self, user: User, password: str) -> bool:
        """Compare a plain text password with the user's stored hash."""
        return self.hasher.verify(password, user.password)
