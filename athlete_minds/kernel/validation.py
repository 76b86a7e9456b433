"""
Shape validation for inbound write payloads.

Each entity kind has a declarative pydantic shape (see ``athlete_minds.schemas``).
``validate_payload`` turns a raw JSON-like value into the normalized model or
raises ``ValidationFailed`` listing every offending field. Checks are purely
syntactic: presence, primitive type and the few declared ranges.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Type

from pydantic import BaseModel, ValidationError

from athlete_minds.kernel.errors import ValidationFailed
from athlete_minds.schemas.contact import ContactCreate
from athlete_minds.schemas.resource import LikesUpdate, ResourceCreate
from athlete_minds.schemas.story import StoryCreate
from athlete_minds.schemas.user import UserCreate


SCHEMAS: Dict[str, Type[BaseModel]] = {
    "user": UserCreate,
    "resource": ResourceCreate,
    "story": StoryCreate,
    "contact": ContactCreate,
    "likes": LikesUpdate,
}

# Location prefixes FastAPI puts in front of the field path
_LOCATION_PREFIXES = ("body", "query", "path", "header", "cookie")


@dataclass(frozen=True)
class FieldError:
    """A single failed check: which field, what went wrong, pydantic error type."""

    field: str
    message: str
    type: str

    def as_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message, "type": self.type}


def _field_path(error: Mapping[str, Any]) -> str:
    # Unparseable JSON is located at a character offset, not a field
    if error.get("type") == "json_invalid":
        return "body"
    loc = error.get("loc", ())
    parts = [str(p) for p in loc]
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "body"


def field_errors(errors: Iterable[Mapping[str, Any]]) -> List[FieldError]:
    """Convert pydantic (or FastAPI request) error dicts into FieldErrors."""
    return [
        FieldError(
            field=_field_path(error),
            message=error.get("msg", "Invalid value"),
            type=error.get("type", "value_error"),
        )
        for error in errors
    ]


def validate_payload(kind: str, raw: Any) -> BaseModel:
    """
    Validate ``raw`` against the shape registered for ``kind``.

    Args:
        kind: One of "user", "resource", "story", "contact", "likes"
        raw: Decoded JSON body

    Returns:
        The normalized payload model (unknown and server-assigned keys dropped)

    Raises:
        KeyError: If no shape is registered for ``kind``
        ValidationFailed: If the payload does not match the shape
    """
    schema = SCHEMAS[kind]
    try:
        return schema.model_validate(raw)
    except ValidationError as exc:
        raise ValidationFailed(
            field_errors(exc.errors()),
            message=f"Invalid {kind} data",
        ) from exc
