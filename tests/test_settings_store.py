"""
Tests for the cached setup form.
"""

import json

import pytest

from draftboard.datamodels import DraftSettings, TeamEntry
from draftboard.storage.settings_store import SettingsStore


class TestSettingsStore:

    @pytest.fixture
    def store(self, tmp_path):
        return SettingsStore(tmp_path / "cache")

    def test_empty_store_gives_defaults(self, store):
        settings = store.load()
        assert settings.draft_title == ""
        assert settings.round_count == 5
        assert settings.timer_minutes == 5
        assert len(settings.teams) == 2
        assert all(t.team_name == "" and t.team_owner == "" for t in settings.teams)

    def test_save_then_load(self, store):
        saved = DraftSettings(
            draft_title="Office League",
            round_count=12,
            timer_minutes=2,
            teams=[TeamEntry(team_name="Sharks", team_owner="Ana"),
                   TeamEntry(team_name="Bears", team_owner="Ben")],
        )
        store.save(saved)
        assert store.load() == saved

    def test_files_use_form_keys(self, store, tmp_path):
        store.save(DraftSettings(draft_title="X", teams=[TeamEntry(team_name="A", team_owner="B")]))

        cache = tmp_path / "cache"
        assert json.loads((cache / "draftName.json").read_text()) == "X"
        assert json.loads((cache / "roundCount.json").read_text()) == 5
        assert json.loads((cache / "roundTimer.json").read_text()) == 5
        assert json.loads((cache / "teams.json").read_text()) == [{"teamName": "A", "teamOwner": "B"}]

    def test_corrupt_file_falls_back(self, store, tmp_path):
        store.save(DraftSettings(draft_title="Kept"))
        (tmp_path / "cache" / "roundCount.json").write_text("{not json")

        settings = store.load()
        assert settings.draft_title == "Kept"
        assert settings.round_count == 5

    def test_bad_teams_value_falls_back(self, store, tmp_path):
        store.save(DraftSettings(draft_title="Kept"))
        (tmp_path / "cache" / "teams.json").write_text(json.dumps(["not a team"]))

        assert len(store.load().teams) == 2

    def test_out_of_range_values_are_clamped(self, store):
        store.set("roundCount", 500)
        store.set("roundTimer", 0)
        settings = store.load()
        assert settings.round_count == 100
        assert settings.timer_minutes == 1

    def test_without_directory_nothing_is_written(self):
        store = SettingsStore()
        store.save(DraftSettings(draft_title="Ignored"))
        assert store.load().draft_title == ""
