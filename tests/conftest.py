"""
Pytest fixtures for Athlete Minds tests.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from athlete_minds.config import Settings
from athlete_minds.kernel.events.event_store import EventStore
from athlete_minds.kernel.store import RecordStore
from athlete_minds.main import create_app
from athlete_minds.orchestration.moderation import ModerationWorkflow
from athlete_minds.schemas.contact import ContactCreate
from athlete_minds.schemas.resource import ResourceCreate
from athlete_minds.schemas.story import StoryCreate


@pytest.fixture
def test_settings() -> Settings:
    """Settings for tests: no sample data, no admin, cheap bcrypt."""
    return Settings(
        seed_sample_data=False,
        admin_username="",
        admin_password="",
        bcrypt_rounds=4,
        _env_file=None,
    )


@pytest.fixture
def store() -> RecordStore:
    """A fresh, empty record store."""
    return RecordStore()


@pytest.fixture
def event_store() -> EventStore:
    return EventStore()


@pytest.fixture
def moderation(store: RecordStore, event_store: EventStore) -> ModerationWorkflow:
    return ModerationWorkflow(store, event_store)


@pytest.fixture
def app(test_settings: Settings, store: RecordStore, event_store: EventStore):
    """Application wired to the per-test stores."""
    return create_app(settings=test_settings, store=store, event_store=event_store)


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client talking to the app in-process."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# Sample payloads

@pytest.fixture
def story_payload() -> dict:
    """Wire-format story submission."""
    return {
        "firstName": "Ana",
        "lastName": "Lee",
        "sport": "Swimming",
        "injuryType": "Shoulder",
        "email": "a@x.com",
        "title": "T",
        "content": "C",
    }


@pytest.fixture
def contact_payload() -> dict:
    """Wire-format contact submission."""
    return {
        "name": "Jordan Park",
        "email": "jordan@example.com",
        "inquiryType": "partnership",
        "message": "We run a physio clinic and would like to share your resources.",
    }


@pytest.fixture
def story_data(story_payload: dict) -> StoryCreate:
    return StoryCreate.model_validate(story_payload)


@pytest.fixture
def contact_data(contact_payload: dict) -> ContactCreate:
    return ContactCreate.model_validate(contact_payload)


@pytest.fixture
def make_resource():
    """Factory for resource payloads with sensible defaults."""

    def _make(category: str = "mindfulness", **overrides) -> ResourceCreate:
        fields = {
            "title": f"{category.title()} Guide",
            "description": "Something helpful.",
            "category": category,
            "icon": "brain",
        }
        fields.update(overrides)
        return ResourceCreate.model_validate(fields)

    return _make
