"""FastAPI dependencies for the process-wide front desk state."""

from typing import Optional

import httpx
from fastapi import Request

from frontdesk.core.config import Settings
from frontdesk.services.front_desk import FrontDesk


def get_front_desk(request: Request) -> FrontDesk:
    """The FrontDesk built at startup."""
    return request.app.state.front_desk


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_assistant_transport(request: Request) -> Optional[httpx.AsyncBaseTransport]:
    """Transport override for the assistant's HTTP client (None means the network)."""
    return getattr(request.app.state, "assistant_transport", None)
