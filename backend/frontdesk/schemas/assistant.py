"""Assistant schemas."""

from typing import Optional

from pydantic import Field

from frontdesk.schemas.base import BaseSchema


class AskRequest(BaseSchema):
    question: str = Field(..., min_length=1, max_length=2000)
    asked_by: Optional[str] = None


class AskResponse(BaseSchema):
    answer: str
    is_fallback: bool
    model: str
    processing_time_ms: int


class SnapshotResponse(BaseSchema):
    snapshot: str
