"""Broadcast-only real-time channel for dashboard clients.

Every connected WebSocket receives every event as a JSON frame
``{"event": <name>, "data": <payload>}``. Events only tell clients that some
aggregate changed so they re-fetch it; nothing is replayed or acknowledged.
"""

import asyncio
from typing import Any, Protocol

from fastapi import Request, WebSocket
from loguru import logger


class CampaignEvent:
    """Names of events emitted on the channel."""

    UPDATED = "campaign:updated"


class EventPublisher(Protocol):
    async def publish(self, event: str, payload: dict[str, Any]) -> None: ...


class BroadcastChannel:
    """Holds the open dashboard connections and fans events out to all of them."""

    def __init__(self) -> None:
        self._connections: set[WebSocket] = set()

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        # Only accepted sockets are registered; publish never sends to a pending handshake
        self._connections.add(websocket)
        logger.info(f"Realtime client connected ({self.connection_count} open)")

    def disconnect(self, websocket: WebSocket) -> None:
        self._connections.discard(websocket)
        logger.info(f"Realtime client disconnected ({self.connection_count} open)")

    async def _send(self, websocket: WebSocket, message: dict[str, Any]) -> bool:
        try:
            await websocket.send_json(message)
            return True
        except Exception as e:
            logger.warning(f"Dropping realtime client after failed send: {e}")
            return False

    async def publish(self, event: str, payload: dict[str, Any]) -> None:
        """
        Send an event to every connected client.

        Delivery is best effort: a client whose send fails is dropped and the
        failure is never reported to the caller.

        Parameters:
            event (str): Event name, e.g. ``campaign:updated``.
            payload (dict): JSON-serialisable event data.
        """
        if not self._connections:
            return
        message = {"event": event, "data": payload}
        targets = list(self._connections)
        results = await asyncio.gather(*(self._send(ws, message) for ws in targets))
        for websocket, delivered in zip(targets, results):
            if not delivered:
                self._connections.discard(websocket)
        logger.debug(f"Broadcast {event} to {sum(results)}/{len(targets)} clients")


def get_channel(request: Request) -> BroadcastChannel:
    """FastAPI dependency returning the channel created in the app lifespan."""
    return request.app.state.channel
