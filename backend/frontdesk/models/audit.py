"""AssistantLog model."""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import String, DateTime, Text, Boolean, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from frontdesk.core.database import Base


class AssistantLog(Base):
    """Log of assistant exchanges (question, context sent, answer shown)."""

    __tablename__ = "assistant_logs"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    asked_by: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    question: Mapped[str] = mapped_column(Text, nullable=False)

    # Snapshot of hotel state sent as context
    context_snapshot: Mapped[str] = mapped_column(Text, nullable=False)

    answer: Mapped[str] = mapped_column(Text, nullable=False)
    model: Mapped[str] = mapped_column(String(100), nullable=False)

    # True when the fixed fallback message was returned
    is_fallback: Mapped[bool] = mapped_column(Boolean, default=False)

    # Processing time (ms)
    processing_time_ms: Mapped[Optional[int]] = mapped_column(nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
