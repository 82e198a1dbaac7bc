"""
Tests for the per-turn countdown.
"""

import pytest

from draftboard.engine import round_timer
from draftboard.engine.round_timer import RoundTimer, format_time


class TestRoundTimer:

    def test_five_minute_timer_display(self):
        timer = RoundTimer(300)
        assert timer.display == "05:00"

        for _ in range(65):
            timer.tick()

        assert timer.remaining == 235
        assert timer.display == "03:55"

    @pytest.mark.parametrize("ticks", [0, 1, 59, 60, 61, 200])
    def test_remaining_after_ticks(self, ticks):
        timer = RoundTimer(60)
        for _ in range(ticks):
            timer.tick()
        assert timer.remaining == max(0, 60 - ticks)

    def test_expiry_is_only_a_flag(self):
        timer = RoundTimer(2)
        timer.tick()
        timer.tick()
        timer.tick()
        assert timer.expired
        assert timer.display == "00:00"

    def test_reset(self):
        timer = RoundTimer(90)
        timer.tick()
        assert timer.reset() == 90
        assert not timer.expired

    def test_duration_must_be_positive(self):
        with pytest.raises(ValueError):
            RoundTimer(0)

    def test_pure_functions(self):
        assert round_timer.reset(42) == 42
        assert round_timer.tick(1) == 0
        assert round_timer.tick(0) == 0

    @pytest.mark.parametrize("seconds,expected", [
        (0, "00:00"),
        (9, "00:09"),
        (61, "01:01"),
        (6000, "100:00"),
        (-5, "00:00"),
    ])
    def test_format_time(self, seconds, expected):
        assert format_time(seconds) == expected

    def test_to_dict(self):
        assert RoundTimer(300).to_dict() == {
            "duration_seconds": 300,
            "remaining_seconds": 300,
            "display": "05:00",
            "expired": False,
        }
