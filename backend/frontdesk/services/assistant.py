"""Front-desk assistant - Gemini-backed Q&A over a read-only hotel snapshot.

GUARDRAILS:
- The assistant only reads a text snapshot; it never mutates rooms, stays or tickets
- Any failure returns a fixed fallback message
- Every exchange is logged to assistant_logs
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from frontdesk.core.config import Settings
from frontdesk.models.audit import AssistantLog
from frontdesk.models.enums import RoomStatus
from frontdesk.services.lifecycle import LifecycleController

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = (
    "The assistant could not be reached. Check your connection or API key and try again."
)
EMPTY_ANSWER_MESSAGE = "Sorry, I could not process your request right now."

BASE_INSTRUCTION = """You are the virtual assistant of {hotel}, helping the front-desk team
(receptionists and managers) with day-to-day operations.

RULES:
1. You have the hotel's live data in the context below. Use it to answer.
2. Be professional, helpful and direct.
3. For availability questions, check the available rooms in the data.
4. For guest questions, check the occupied rooms.
5. For maintenance questions, list the active tickets.
6. You cannot change any data. For check-ins, payments or checkouts, tell the
   user to use the Rooms screen."""


def build_snapshot(controller: LifecycleController, now: Optional[datetime] = None) -> str:
    """Text summary of rooms grouped by status plus the active tickets."""
    now = now or datetime.now()
    rooms = controller.registry.list()
    lines = [f"Snapshot taken {now:%Y-%m-%d %H:%M}", f"Total rooms: {len(rooms)}"]

    for status in RoomStatus:
        group = [r for r in rooms if r.status == status]
        lines.append("")
        lines.append(f"{status.value.upper()} ({len(group)}):")
        if not group:
            lines.append("  none")
            continue
        if status == RoomStatus.OCCUPIED:
            for room in group:
                guest = controller.guest_label(room.id)
                lines.append(f"  Room {room.number} ({room.category.value}) - guest: {guest}")
        else:
            lines.append("  " + ", ".join(r.number for r in group))

    active = controller.tickets.active()
    lines.append("")
    lines.append(f"ACTIVE MAINTENANCE TICKETS ({len(active)}):")
    if not active:
        lines.append("  none")
    for ticket in active:
        lines.append(
            f"  Room {ticket.room_number}: {ticket.issue} "
            f"[{ticket.priority.value}, {ticket.status.value}]"
        )
    return "\n".join(lines)


@dataclass(frozen=True)
class AssistantReply:
    answer: str
    is_fallback: bool
    model: str
    processing_time_ms: int


class AssistantService:
    """Sends questions to the Gemini generateContent REST endpoint."""

    def __init__(
        self,
        settings: Settings,
        db: Optional[AsyncSession] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.db = db
        self._transport = transport

    @property
    def available(self) -> bool:
        return self.settings.assistant_enabled and bool(self.settings.gemini_api_key)

    def _system_instruction(self, snapshot: str) -> str:
        return (
            BASE_INSTRUCTION.format(hotel=self.settings.hotel_name)
            + "\n\n=== LIVE HOTEL DATA ===\n"
            + snapshot
            + "\n======================="
        )

    async def _generate(self, question: str, snapshot: str) -> Optional[str]:
        url = f"{self.settings.gemini_base_url}/models/{self.settings.gemini_model}:generateContent"
        payload = {
            "systemInstruction": {"parts": [{"text": self._system_instruction(snapshot)}]},
            "contents": [{"role": "user", "parts": [{"text": question}]}],
        }
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    url,
                    json=payload,
                    headers={"x-goog-api-key": self.settings.gemini_api_key},
                    timeout=self.settings.assistant_timeout_seconds,
                )

                if response.status_code != 200:
                    logger.warning(f"[ASSISTANT] Gemini request failed: {response.status_code}")
                    return None

                data = response.json()
        except Exception as e:
            logger.error(f"[ASSISTANT] Gemini request error: {e}")
            return None

        candidates = data.get("candidates") or []
        if not candidates:
            return EMPTY_ANSWER_MESSAGE
        parts = (candidates[0].get("content") or {}).get("parts") or []
        text = "".join(p.get("text", "") for p in parts).strip()
        return text or EMPTY_ANSWER_MESSAGE

    async def ask(self, question: str, snapshot: str, asked_by: Optional[str] = None) -> AssistantReply:
        """Answer a question. Never raises for upstream failures."""
        start_time = datetime.utcnow()

        answer = None
        if self.available:
            answer = await self._generate(question, snapshot)
        else:
            logger.info("[ASSISTANT] Disabled or no API key configured; returning fallback")

        is_fallback = answer is None
        if is_fallback:
            answer = FALLBACK_MESSAGE

        processing_time_ms = int((datetime.utcnow() - start_time).total_seconds() * 1000)
        reply = AssistantReply(
            answer=answer,
            is_fallback=is_fallback,
            model=self.settings.gemini_model,
            processing_time_ms=processing_time_ms,
        )

        if self.db is not None:
            self.db.add(AssistantLog(
                asked_by=asked_by,
                question=question,
                context_snapshot=snapshot,
                answer=reply.answer,
                model=reply.model,
                is_fallback=reply.is_fallback,
                processing_time_ms=processing_time_ms,
            ))
        return reply
