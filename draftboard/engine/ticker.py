"""
Background countdown task for a drafting session.

One ticker per session is the only recurring job in the app. It must be
cancelled when the session exits so nothing mutates a discarded session.
The interval restarts whenever the round timer is reset, so a new turn
always gets its first second in full.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from ..datamodels.draft_state import SessionPhase
from .session import DraftSession

logger = logging.getLogger(__name__)

TickCallback = Callable[[DraftSession], Awaitable[None]]


class TimerTicker:

    def __init__(self,
                 session: DraftSession,
                 interval: float = 1.0,
                 on_tick: Optional[TickCallback] = None):
        self.session = session
        self.interval = interval
        self.on_tick = on_tick
        self._task: Optional[asyncio.Task] = None
        self._reset: Optional[asyncio.Event] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._reset = asyncio.Event()
        self.session.remove_timer_reset_hook(self._restart)
        self.session.on_timer_reset(self._restart)
        self._task = asyncio.create_task(self._run(), name=f"ticker-{self.session.session_id}")

    def _restart(self) -> None:
        """Start a full interval again; the timer was just reset for a new turn."""
        if self._reset is not None:
            self._reset.set()

    async def _run(self) -> None:
        while self.session.phase == SessionPhase.DRAFTING:
            try:
                await asyncio.wait_for(self._reset.wait(), self.interval)
            except asyncio.TimeoutError:
                pass
            else:
                self._reset.clear()
                continue

            self.session.tick()
            if self.on_tick is not None:
                try:
                    await self.on_tick(self.session)
                except Exception as e:
                    logger.warning(f"Tick listener failed for session {self.session.session_id}: {e}")
        logger.debug(f"Ticker for session {self.session.session_id} finished")

    async def stop(self) -> None:
        if self._task is None:
            return
        self.session.remove_timer_reset_hook(self._restart)
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
