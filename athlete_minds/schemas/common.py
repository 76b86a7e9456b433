"""
Common schema types used across the API.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for API models: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class InputModel(CamelModel):
    """
    Base for write payloads.

    Strict primitive types (no "5" -> 5 coercion) and unknown keys ignored,
    which also drops server-assigned fields such as id or submittedAt.
    """

    model_config = ConfigDict(strict=True, extra="ignore")


class FieldErrorResponse(BaseModel):
    """One offending field in a rejected payload."""

    field: str
    message: str
    type: str


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
    errors: Optional[List[FieldErrorResponse]] = None
    request_id: Optional[str] = None


class SuccessResponse(BaseModel):
    """Standard success response."""

    message: str
    data: Optional[Any] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str
    records: Dict[str, int] = {}
