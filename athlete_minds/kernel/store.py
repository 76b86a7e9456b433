"""
In-memory record store for users, resources, stories and contacts.

Each entity kind lives in its own collection: an id -> record dict, a
monotonic id counter starting at 1 and a lock. Ids are never reused, even
after a story is rejected. Records are frozen dataclasses, so what callers
receive is a value they cannot use to mutate the store.
"""

import dataclasses
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from athlete_minds.kernel.errors import DuplicateUsernameError
from athlete_minds.kernel.models import Contact, Resource, Story, User
from athlete_minds.schemas.contact import ContactCreate
from athlete_minds.schemas.resource import ResourceCreate
from athlete_minds.schemas.story import StoryCreate
from athlete_minds.schemas.user import UserCreate

R = TypeVar("R")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class _Collection(Generic[R]):
    """Records of one kind plus their id counter. All access goes through the lock."""

    def __init__(self) -> None:
        self._records: Dict[int, R] = {}
        self._next_id = 1
        self.lock = threading.Lock()

    def insert(self, build: Callable[[int], R]) -> R:
        """Allocate the next id and store ``build(id)``. Caller holds the lock."""
        record = build(self._next_id)
        self._records[self._next_id] = record
        self._next_id += 1
        return record

    def exists(self, predicate: Callable[[R], bool]) -> bool:
        """True if any record matches. Caller holds the lock."""
        return any(predicate(r) for r in self._records.values())

    def get(self, record_id: int) -> Optional[R]:
        with self.lock:
            return self._records.get(record_id)

    def values(self, predicate: Optional[Callable[[R], bool]] = None) -> List[R]:
        with self.lock:
            # dicts keep insertion order, which is creation order here
            if predicate is None:
                return list(self._records.values())
            return [r for r in self._records.values() if predicate(r)]

    def replace(self, record_id: int, **changes) -> Optional[R]:
        with self.lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            updated = dataclasses.replace(current, **changes)
            self._records[record_id] = updated
            return updated

    def remove(self, record_id: int) -> bool:
        with self.lock:
            return self._records.pop(record_id, None) is not None

    def __len__(self) -> int:
        with self.lock:
            return len(self._records)


class RecordStore:
    """
    Process-lifetime storage for the four entity kinds.

    Lookups return ``None`` for unknown ids; only user creation can fail
    (duplicate username).
    """

    def __init__(self) -> None:
        self._users: _Collection[User] = _Collection()
        self._resources: _Collection[Resource] = _Collection()
        self._stories: _Collection[Story] = _Collection()
        self._contacts: _Collection[Contact] = _Collection()

    # ---- users -----------------------------------------------------------

    def create_user(self, data: UserCreate) -> User:
        with self._users.lock:
            if self._users.exists(lambda u: u.username == data.username):
                raise DuplicateUsernameError(data.username)
            return self._users.insert(
                lambda uid: User(id=uid, username=data.username, password=data.password)
            )

    def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        matches = self._users.values(lambda u: u.username == username)
        return matches[0] if matches else None

    def get_users(self) -> List[User]:
        return self._users.values()

    # ---- resources -------------------------------------------------------

    def create_resource(self, data: ResourceCreate) -> Resource:
        with self._resources.lock:
            return self._resources.insert(
                lambda rid: Resource(
                    id=rid,
                    title=data.title,
                    description=data.description,
                    category=data.category,
                    icon=data.icon,
                    url=data.url or None,
                    rating=data.rating,
                    likes=data.likes,
                )
            )

    def get_resource(self, resource_id: int) -> Optional[Resource]:
        return self._resources.get(resource_id)

    def get_resources(self) -> List[Resource]:
        return self._resources.values()

    def get_resources_by_category(self, category: str) -> List[Resource]:
        return self._resources.values(lambda r: r.category == category)

    def update_resource_likes(self, resource_id: int, likes: int) -> Optional[Resource]:
        """Set the like count to exactly ``likes``. No clamping; negatives are stored as given."""
        return self._resources.replace(resource_id, likes=likes)

    # ---- stories ---------------------------------------------------------

    def create_story(
        self,
        data: StoryCreate,
        *,
        approved: bool = False,
        submitted_at: Optional[datetime] = None,
    ) -> Story:
        """
        Store a new story.

        ``approved`` and ``submitted_at`` exist for loading sample data;
        submissions always come in unapproved and stamped with the current time.
        """
        stamp = submitted_at or utcnow()
        with self._stories.lock:
            return self._stories.insert(
                lambda sid: Story(
                    id=sid,
                    first_name=data.first_name,
                    last_name=data.last_name,
                    sport=data.sport,
                    injury_type=data.injury_type,
                    email=data.email,
                    title=data.title,
                    content=data.content,
                    submitted_at=stamp,
                    approved=approved,
                )
            )

    def get_story(self, story_id: int) -> Optional[Story]:
        return self._stories.get(story_id)

    def get_stories(self) -> List[Story]:
        return self._stories.values()

    def get_approved_stories(self) -> List[Story]:
        return self._stories.values(lambda s: s.approved)

    def get_pending_stories(self) -> List[Story]:
        return self._stories.values(lambda s: not s.approved)

    def approve_story(self, story_id: int) -> Optional[Story]:
        return self._stories.replace(story_id, approved=True)

    def reject_story(self, story_id: int) -> bool:
        """Remove the story. Returns False if there was nothing to remove."""
        return self._stories.remove(story_id)

    # ---- contacts --------------------------------------------------------

    def create_contact(self, data: ContactCreate) -> Contact:
        stamp = utcnow()
        with self._contacts.lock:
            return self._contacts.insert(
                lambda cid: Contact(
                    id=cid,
                    name=data.name,
                    email=data.email,
                    inquiry_type=data.inquiry_type,
                    message=data.message,
                    submitted_at=stamp,
                )
            )

    def get_contact(self, contact_id: int) -> Optional[Contact]:
        return self._contacts.get(contact_id)

    def get_contacts(self) -> List[Contact]:
        return self._contacts.values()

    # ---- misc ------------------------------------------------------------

    def counts(self) -> Dict[str, int]:
        """Number of stored records per kind."""
        return {
            "users": len(self._users),
            "resources": len(self._resources),
            "stories": len(self._stories),
            "contacts": len(self._contacts),
        }
