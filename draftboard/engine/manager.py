"""
In-memory registry of draft sessions.

Sessions live only as long as the process. Exiting a session discards its
turn state, timer and order assignment; nothing is resumed later.
"""

import logging
import random
import uuid
from typing import Awaitable, Callable, Dict, Optional, Set

from ..datamodels.draft_config import DraftConfig
from ..errors import SessionNotFound
from .session import DraftSession
from .ticker import TimerTicker

logger = logging.getLogger(__name__)

Listener = Callable[[dict], Awaitable[None]]


class SessionManager:
    """
    Holds DraftSession objects keyed by session_id, plus their tickers and
    websocket listeners.
    """

    def __init__(self, tick_interval: float = 1.0, seed: Optional[int] = None):
        self.tick_interval = tick_interval
        self._seed_rng = random.Random(seed) if seed is not None else None
        self._sessions: Dict[str, DraftSession] = {}
        self._tickers: Dict[str, TimerTicker] = {}
        self._listeners: Dict[str, Set[Listener]] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, config: DraftConfig) -> DraftSession:
        session_id = str(uuid.uuid4())
        rng = random.Random(self._seed_rng.random()) if self._seed_rng else None
        session = DraftSession(session_id, config, rng)
        self._sessions[session_id] = session
        logger.info(
            f"Created session {session_id} for '{config.draft_title}' "
            f"({config.participant_count} teams, {config.round_count} rounds)"
        )
        return session

    def get(self, session_id: str) -> DraftSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        return session

    def start_ticker(self, session: DraftSession) -> TimerTicker:
        ticker = self._tickers.get(session.session_id)
        if ticker is None:
            ticker = TimerTicker(session, self.tick_interval, self._publish_timer)
            self._tickers[session.session_id] = ticker
        ticker.start()
        return ticker

    def ticker_for(self, session_id: str) -> Optional[TimerTicker]:
        return self._tickers.get(session_id)

    def running_timers(self) -> int:
        return sum(1 for ticker in self._tickers.values() if ticker.running)

    async def exit(self, session_id: str) -> None:
        session = self.get(session_id)
        ticker = self._tickers.pop(session_id, None)
        if ticker is not None:
            await ticker.stop()
        await self.publish(session_id, {"type": "exited", "data": {"session_id": session_id}})
        self._listeners.pop(session_id, None)
        del self._sessions[session_id]
        logger.info(f"Session {session_id} exited in phase {session.phase.value}")

    async def close(self) -> None:
        """Stop every ticker and drop all sessions (app shutdown)."""
        for session_id in list(self._sessions):
            await self.exit(session_id)

    # Listeners

    def subscribe(self, session_id: str, listener: Listener) -> None:
        self.get(session_id)
        self._listeners.setdefault(session_id, set()).add(listener)

    def unsubscribe(self, session_id: str, listener: Listener) -> None:
        listeners = self._listeners.get(session_id)
        if listeners:
            listeners.discard(listener)

    async def publish(self, session_id: str, message: dict) -> None:
        dead = []
        for listener in list(self._listeners.get(session_id, ())):
            try:
                await listener(message)
            except Exception as e:
                logger.warning(f"Dropping listener for session {session_id}: {e}")
                dead.append(listener)
        for listener in dead:
            self.unsubscribe(session_id, listener)

    async def _publish_timer(self, session: DraftSession) -> None:
        await self.publish(session.session_id, {"type": "timer", "data": session.timer.to_dict()})

    async def publish_state(self, session: DraftSession) -> None:
        await self.publish(session.session_id, {"type": "state", "data": session.snapshot()})
