"""Snake draft board: randomized order reveal, turn progression and timers."""

__version__ = "1.0.0"
