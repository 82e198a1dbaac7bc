from .settings_store import SettingsStore

__all__ = [
    "SettingsStore"
]
