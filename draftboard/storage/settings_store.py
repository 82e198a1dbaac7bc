"""
Local cache of the draft setup form.

Stores the last-used draft name, round count, timer length and team list
so the next session starts pre-filled. Each key is one JSON file. The
cache is a convenience only: a missing or unreadable file means defaults.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from ..datamodels.draft_config import DraftSettings, TeamEntry

logger = logging.getLogger(__name__)

KEY_DRAFT_NAME = "draftName"
KEY_ROUND_COUNT = "roundCount"
KEY_ROUND_TIMER = "roundTimer"
KEY_TEAMS = "teams"


class SettingsStore:

    def __init__(self, data_dir: Union[str, Path, None] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else None

    def _path(self, key: str) -> Optional[Path]:
        if self.data_dir is None:
            return None
        return self.data_dir / f"{key}.json"

    def get(self, key: str, default: Any = None) -> Any:
        path = self._path(key)
        if path is None or not path.exists():
            return default
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable setting {key}: {e}")
            return default

    def set(self, key: str, value: Any) -> None:
        path = self._path(key)
        if path is None:
            return
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(value, f, indent=2)

    def load(self) -> DraftSettings:
        defaults = DraftSettings()
        teams_raw = self.get(KEY_TEAMS)

        teams = defaults.teams
        if isinstance(teams_raw, list):
            try:
                teams = [
                    TeamEntry(team_name=t.get("teamName", ""), team_owner=t.get("teamOwner", ""))
                    for t in teams_raw
                ]
            except (AttributeError, ValidationError) as e:
                logger.warning(f"Ignoring cached teams: {e}")

        try:
            return DraftSettings(
                draft_title=self.get(KEY_DRAFT_NAME, defaults.draft_title),
                round_count=self.get(KEY_ROUND_COUNT, defaults.round_count),
                timer_minutes=self.get(KEY_ROUND_TIMER, defaults.timer_minutes),
                teams=teams,
            )
        except ValidationError as e:
            logger.warning(f"Cached settings invalid, using defaults: {e}")
            return defaults

    def save(self, settings: DraftSettings) -> None:
        try:
            self.set(KEY_DRAFT_NAME, settings.draft_title)
            self.set(KEY_ROUND_COUNT, settings.round_count)
            self.set(KEY_ROUND_TIMER, settings.timer_minutes)
            self.set(KEY_TEAMS, [
                {"teamName": t.team_name, "teamOwner": t.team_owner}
                for t in settings.teams
            ])
        except OSError as e:
            logger.warning(f"Could not cache settings in {self.data_dir}: {e}")
