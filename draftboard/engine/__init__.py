from .turn_controller import TurnController
from .round_timer import RoundTimer, format_time
from .board import Board
from .session import DraftSession
from .ticker import TimerTicker
from .manager import SessionManager

__all__ = [
    "TurnController",
    "RoundTimer",
    "format_time",
    "Board",
    "DraftSession",
    "TimerTicker",
    "SessionManager"
]
