"""Pytest configuration and fixtures for tests."""
import random

import pytest
from fastapi.testclient import TestClient

from draftboard.api.main import create_app
from draftboard.datamodels import DraftConfig, Participant
from draftboard.engine.session import DraftSession


def make_config(team_count: int = 3, round_count: int = 2, turn_duration_seconds: int = 300,
                draft_title: str = "Mock Draft") -> DraftConfig:
    return DraftConfig(
        participants=[
            Participant(display_name=f"Team {i}", owner_name=f"Owner {i}")
            for i in range(team_count)
        ],
        round_count=round_count,
        turn_duration_seconds=turn_duration_seconds,
        draft_title=draft_title,
    )


def place_everyone(session: DraftSession) -> None:
    """Fill every draft position in slot order."""
    session.reveal_candidate()
    for slot in range(session.entry_config.participant_count):
        session.place_candidate(slot)


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def session(config):
    """A seeded session still in the order-picking phase."""
    return DraftSession("test-session", config, random.Random(1234))


@pytest.fixture
def drafting_session(session):
    """A seeded session with the order placed and the draft started."""
    place_everyone(session)
    session.start_drafting()
    return session


@pytest.fixture
def app(tmp_path):
    return create_app({
        "validate_images": False,
        "settings_dir": str(tmp_path / "settings"),
        # Long interval so background ticks never race the assertions
        "tick_interval": 3600,
        "seed": 7,
    })


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def draft_form():
    return {
        "draft_title": "League Draft",
        "round_count": 2,
        "timer_minutes": 5,
        "teams": [
            {"team_name": "Sharks", "team_owner": "Ana"},
            {"team_name": "Bears", "team_owner": "Ben"},
            {"team_name": "Hawks", "team_owner": "Cy"},
        ],
    }
