"""
Data models for the draft board.

This module exports all the core data structures used throughout the application.
Keeping exports centralized here allows for easy imports and future refactoring.
"""

from .participant import Participant
from .draft_config import DraftConfig, DraftSettings, TeamEntry
from .draft_state import (
    Cell, CellContent, OrderAssignment, PickDirection, PickPosition,
    SessionPhase, TurnPhase, TurnState
)

__all__ = [
    "Participant",
    "DraftConfig",
    "DraftSettings",
    "TeamEntry",

    "Cell",
    "CellContent",
    "OrderAssignment",
    "PickDirection",
    "PickPosition",
    "SessionPhase",
    "TurnPhase",
    "TurnState"
]
