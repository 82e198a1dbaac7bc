import asyncio
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from ...errors import SessionNotFound

router = APIRouter()
logger = logging.getLogger(__name__)


async def _drain(websocket: WebSocket) -> None:
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass


@router.websocket("/ws/drafts/{session_id}")
async def ws_draft(websocket: WebSocket, session_id: str):
    """
    Push timer ticks and board updates for one draft.

    Sends the current state on connect, then whatever the session
    publishes. Client messages are ignored; the socket only listens so it
    notices disconnects. When the session exits, clients get an "exited"
    message and the socket is closed.
    """
    manager = websocket.app.state.sessions

    try:
        session = manager.get(session_id)
    except SessionNotFound:
        await websocket.close(code=4404)
        return

    await websocket.accept()

    exited = asyncio.Event()

    async def listener(message: dict):
        await websocket.send_json(message)
        if message["type"] == "exited":
            exited.set()

    manager.subscribe(session_id, listener)

    try:
        await websocket.send_json({"type": "state", "data": session.snapshot()})

        receiver = asyncio.ensure_future(_drain(websocket))
        exit_wait = asyncio.ensure_future(exited.wait())
        await asyncio.wait({receiver, exit_wait}, return_when=asyncio.FIRST_COMPLETED)
        exit_wait.cancel()

        if receiver.done():
            logger.info(f"Client disconnected from session {session_id}")
        else:
            receiver.cancel()
            await websocket.close(code=1000)
            logger.info(f"Closed socket for exited session {session_id}")

    except WebSocketDisconnect:
        logger.info(f"Client disconnected from session {session_id}")
    finally:
        manager.unsubscribe(session_id, listener)
