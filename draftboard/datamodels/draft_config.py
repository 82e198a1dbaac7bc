"""
Draft configuration models.

``DraftConfig`` is the validated, immutable input to a draft session.
``DraftSettings`` is the looser form-level shape that gets cached between
sessions: it tolerates blank team rows and carries the timer in minutes, the
unit organizers pick it in.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .participant import Participant

MIN_PARTICIPANTS = 2
MIN_ROUNDS = 1
MAX_ROUNDS = 100
MIN_TIMER_MINUTES = 1
MAX_TIMER_MINUTES = 100

DEFAULT_ROUND_COUNT = 5
DEFAULT_TIMER_MINUTES = 5


def clamp_round_count(value: int) -> int:
    return max(MIN_ROUNDS, min(value, MAX_ROUNDS))


def clamp_timer_minutes(value: int) -> int:
    return max(MIN_TIMER_MINUTES, min(value, MAX_TIMER_MINUTES))


class DraftConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    participants: List[Participant] = Field(..., min_length=MIN_PARTICIPANTS,
                                            description="Participants in entry order")
    round_count: int = Field(..., ge=MIN_ROUNDS, le=MAX_ROUNDS)
    turn_duration_seconds: int = Field(..., ge=1, description="Length of one turn timer")
    draft_title: str = Field(..., description="Name shown above the board")

    @field_validator('draft_title')
    def title_required(cls, v: str):
        v = v.strip()
        if not v:
            raise ValueError('Name is required')
        return v

    @property
    def participant_count(self) -> int:
        return len(self.participants)

    @property
    def total_picks(self) -> int:
        return self.round_count * self.participant_count

    def with_participants(self, participants: List[Participant]) -> 'DraftConfig':
        """Return a copy using a reordered participant list."""
        def key(p: Participant):
            return (p.display_name, p.owner_name)

        if sorted(map(key, participants)) != sorted(map(key, self.participants)):
            raise ValueError("Reordered participants must be the same teams")
        return self.model_copy(update={"participants": list(participants)})


class TeamEntry(BaseModel):
    """One row of the team form; may be blank while being edited."""
    team_name: str = ""
    team_owner: str = ""


def _default_teams() -> List[TeamEntry]:
    return [TeamEntry(), TeamEntry()]


class DraftSettings(BaseModel):
    draft_title: str = ""
    round_count: int = DEFAULT_ROUND_COUNT
    timer_minutes: int = DEFAULT_TIMER_MINUTES
    teams: List[TeamEntry] = Field(default_factory=_default_teams)

    @field_validator('round_count')
    def clamp_rounds(cls, v: int):
        return clamp_round_count(v)

    @field_validator('timer_minutes')
    def clamp_timer(cls, v: int):
        return clamp_timer_minutes(v)

    def to_config(self) -> DraftConfig:
        """
        Validate the form into a DraftConfig.

        Raises pydantic.ValidationError when a team row is blank, fewer than
        two teams are present, or the title is empty.
        """
        return DraftConfig(
            participants=[
                {"display_name": team.team_name, "owner_name": team.team_owner}
                for team in self.teams
            ],
            round_count=self.round_count,
            turn_duration_seconds=self.timer_minutes * 60,
            draft_title=self.draft_title,
        )

    @classmethod
    def from_config(cls, config: DraftConfig) -> 'DraftSettings':
        return cls(
            draft_title=config.draft_title,
            round_count=config.round_count,
            timer_minutes=max(MIN_TIMER_MINUTES, config.turn_duration_seconds // 60),
            teams=[TeamEntry(team_name=p.display_name, team_owner=p.owner_name)
                   for p in config.participants],
        )
