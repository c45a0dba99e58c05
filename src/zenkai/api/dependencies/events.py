"""Event sender dependency."""

from typing import Annotated

from fastapi import Depends

from src.zenkai.core.config import get_settings
from src.zenkai.temporal.client import get_temporal_client
from src.zenkai.temporal.events import EventSender


async def get_event_sender() -> EventSender:
    """Event sender bound to the process-wide Temporal client."""
    settings = get_settings()
    client = await get_temporal_client()
    return EventSender(client, settings.temporal_task_queue)


Events = Annotated[EventSender, Depends(get_event_sender)]
