"""WebSocket endpoint for dashboard invalidation events."""

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from app.services.realtime import BroadcastChannel

router = APIRouter(tags=["realtime"])


@router.websocket("/ws")
async def dashboard_events(websocket: WebSocket):
    """
    Subscribe to dashboard events.

    Connect with: ws://host/ws

    Frames sent: `{"event": "campaign:updated", "data": {...}}`. Clients should
    treat them as a cue to re-fetch the matching report. Messages sent by the
    client are read and discarded.
    """
    channel: BroadcastChannel = websocket.app.state.channel
    await channel.connect(websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        channel.disconnect(websocket)
