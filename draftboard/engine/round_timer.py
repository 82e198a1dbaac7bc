"""Per-turn countdown timer."""


def reset(duration_seconds: int) -> int:
    return duration_seconds


def tick(remaining: int) -> int:
    return max(0, remaining - 1)


def format_time(remaining: int) -> str:
    """Render seconds as zero-padded MM:SS, clamping negatives to 00:00."""
    remaining = max(0, int(remaining))
    minutes, seconds = divmod(remaining, 60)
    return f"{minutes:02d}:{seconds:02d}"


class RoundTimer:
    """
    Countdown bound to the pick on the clock.

    Reset whenever the turn advances. Hitting zero is only a visual cue;
    the pick is never skipped.
    """

    def __init__(self, duration_seconds: int):
        if duration_seconds < 1:
            raise ValueError("Timer duration must be >= 1 second")
        self.duration = duration_seconds
        self.remaining = reset(duration_seconds)

    def reset(self) -> int:
        self.remaining = reset(self.duration)
        return self.remaining

    def tick(self) -> int:
        self.remaining = tick(self.remaining)
        return self.remaining

    @property
    def expired(self) -> bool:
        return self.remaining == 0

    @property
    def display(self) -> str:
        return format_time(self.remaining)

    def to_dict(self) -> dict:
        return {
            "duration_seconds": self.duration,
            "remaining_seconds": self.remaining,
            "display": self.display,
            "expired": self.expired,
        }
