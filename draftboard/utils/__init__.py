"""
Utility functions for draft order calculations.

This package provides the snake draft index math and the randomized
draft-order assigner used before a draft starts.
"""

from .snake_draft import SnakeDraftCalculator, locate
from .order_assigner import RandomOrderAssigner

__all__ = [
    "SnakeDraftCalculator",
    "locate",
    "RandomOrderAssigner"
]
