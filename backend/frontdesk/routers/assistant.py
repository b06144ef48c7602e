"""Assistant router - questions about the live hotel state."""

from typing import Optional

import httpx
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from frontdesk.core.config import Settings
from frontdesk.core.database import get_db
from frontdesk.core.deps import get_app_settings, get_assistant_transport, get_front_desk
from frontdesk.schemas.assistant import AskRequest, AskResponse, SnapshotResponse
from frontdesk.services.assistant import AssistantService, build_snapshot
from frontdesk.services.front_desk import FrontDesk

router = APIRouter(prefix="/assistant", tags=["assistant"])


@router.get("/snapshot", response_model=SnapshotResponse)
async def get_snapshot(desk: FrontDesk = Depends(get_front_desk)):
    """Context text the assistant receives."""
    return SnapshotResponse(snapshot=build_snapshot(desk.lifecycle, desk.clock()))


@router.post("/ask", response_model=AskResponse)
async def ask_assistant(
    data: AskRequest,
    db: AsyncSession = Depends(get_db),
    desk: FrontDesk = Depends(get_front_desk),
    settings: Settings = Depends(get_app_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_assistant_transport),
):
    """
    Ask the assistant a question.

    Upstream failures return a fallback answer with is_fallback=true,
    never an error status.
    """
    snapshot = build_snapshot(desk.lifecycle, desk.clock())
    service = AssistantService(settings, db=db, transport=transport)
    reply = await service.ask(data.question, snapshot, asked_by=data.asked_by)
    await db.commit()

    return AskResponse(
        answer=reply.answer,
        is_fallback=reply.is_fallback,
        model=reply.model,
        processing_time_ms=reply.processing_time_ms,
    )
