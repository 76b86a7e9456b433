"""
API routes.
"""

from fastapi import APIRouter

from athlete_minds.api.routes import contacts, resources, stories

router = APIRouter()

router.include_router(resources.router, prefix="/resources", tags=["Resources"])
router.include_router(stories.router, prefix="/stories", tags=["Stories"])
router.include_router(contacts.router, prefix="/contacts", tags=["Contacts"])
