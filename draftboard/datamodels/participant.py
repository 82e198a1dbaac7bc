"""
Participant data model.

A participant is one drafting team. Its identity in a draft is its position
in the ordered participant list, so the model itself carries no id and is
immutable once the draft begins.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Participant(BaseModel):
    model_config = ConfigDict(frozen=True)

    display_name: str = Field(..., description="Team name shown on the board")
    owner_name: str = Field(..., description="Person drafting for this team")

    @field_validator('display_name', 'owner_name')
    def required_text(cls, v: str, info):
        v = v.strip()
        if not v:
            label = "Team name" if info.field_name == 'display_name' else "Team owner"
            raise ValueError(f'{label} is required')
        return v

    def __str__(self) -> str:
        return f'{self.display_name} ({self.owner_name})'
