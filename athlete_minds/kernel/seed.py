"""
Sample content loaded into a fresh store at startup.

Six library resources and two already-published stories, so the public
pages have something to show before any visitor submits.
"""

from datetime import timedelta
from typing import Any, Dict, List

from athlete_minds.kernel.store import RecordStore, utcnow
from athlete_minds.kernel.validation import validate_payload
from athlete_minds.logging_config import get_logger

logger = get_logger(__name__)


SAMPLE_RESOURCES: List[Dict[str, Any]] = [
    {
        "title": "Mindfulness Techniques",
        "description": "Guided breathing exercises, meditation practices, and visualization techniques to help manage anxiety and stress during recovery.",
        "category": "mindfulness",
        "icon": "brain",
        "url": "https://www.headspace.com/meditation/sport",
        "rating": 4,
        "likes": 24,
    },
    {
        "title": "Crisis Helplines",
        "description": "24/7 support lines including NAMI (1-800-950-NAMI), Crisis Text Line (Text HOME to 741741), and National Suicide Prevention Lifeline.",
        "category": "crisis",
        "icon": "phone",
        "url": "https://www.nami.org/help",
        "rating": 5,
        "likes": 45,
    },
    {
        "title": "Recommended Reading",
        "description": "\"The Champion's Comeback\" by Jim Afremow, \"Mind Gym\" by Gary Mack, and other books focused on sports psychology and mental resilience.",
        "category": "education",
        "icon": "book",
        "url": "https://www.amazon.com/Champions-Comeback-Great-Athletes-Recover/dp/054423142X",
        "rating": 4,
        "likes": 18,
    },
    {
        "title": "Recovery Journals",
        "description": "Structured journaling templates and prompts designed specifically for athletes dealing with injury recovery and mental health challenges.",
        "category": "tools",
        "icon": "edit",
        "url": "https://bulletjournal.com/pages/learn",
        "rating": 4,
        "likes": 31,
    },
    {
        "title": "Visualization Exercises",
        "description": "Mental training techniques to help athletes visualize successful recovery and return to sport performance.",
        "category": "mindfulness",
        "icon": "eye",
        "url": "https://www.psychologytoday.com/us/blog/sport-psychology/201210/visualization-techniques-athletes",
        "rating": 4,
        "likes": 22,
    },
    {
        "title": "Support Groups",
        "description": "Information about local and online support groups for injured athletes, including peer mentorship programs.",
        "category": "crisis",
        "icon": "users",
        "url": "https://www.mentalhealthamerica.net/finding-help",
        "rating": 5,
        "likes": 38,
    },
]

# (payload, days before startup it was submitted)
SAMPLE_STORIES: List[tuple] = [
    (
        {
            "firstName": "Marcus",
            "lastName": "Rodriguez",
            "sport": "Soccer",
            "injuryType": "ACL Recovery",
            "email": "marcus.r@example.com",
            "title": "From Setback to Comeback: My ACL Journey",
            "content": "The mental battle was harder than the physical rehab. Learning to trust my knee again took months, but the mindfulness techniques helped me stay positive and eventually return stronger than before. The journey taught me that recovery isn't just about the body - it's about rebuilding confidence and mental strength.",
        },
        90,
    ),
    (
        {
            "firstName": "Sarah",
            "lastName": "Chen",
            "sport": "Basketball",
            "injuryType": "Ankle Injury",
            "email": "sarah.c@example.com",
            "title": "Finding Hope After My Basketball Injury",
            "content": "I thought my basketball career was over. The depression hit hard, but connecting with other athletes going through similar experiences made all the difference in my recovery journey. This platform helped me realize I wasn't alone and that comeback stories are possible.",
        },
        30,
    ),
]


def seed_sample_data(store: RecordStore) -> None:
    """Load the sample resources and published stories into ``store``."""
    for raw in SAMPLE_RESOURCES:
        store.create_resource(validate_payload("resource", raw))

    now = utcnow()
    for raw, days_ago in SAMPLE_STORIES:
        store.create_story(
            validate_payload("story", raw),
            approved=True,
            submitted_at=now - timedelta(days=days_ago),
        )

    logger.info(
        "Sample data loaded",
        extra={"resources": len(SAMPLE_RESOURCES), "stories": len(SAMPLE_STORIES)},
    )
