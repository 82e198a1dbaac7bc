"""
Cached draft setup endpoints.

The setup form is pre-filled from the last draft that was started.
"""

import asyncio

from fastapi import APIRouter, Depends, Request

from ...datamodels.draft_config import DraftSettings
from ...storage.settings_store import SettingsStore


router = APIRouter()


async def get_settings_store(request: Request) -> SettingsStore:
    """Dependency to provide the settings cache."""
    return request.app.state.settings_store


async def save_settings(store: SettingsStore, settings: DraftSettings) -> None:
    """Write the cache off the event loop; it is plain file I/O."""
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, store.save, settings)


@router.get("/settings", response_model=DraftSettings)
async def read_settings(store: SettingsStore = Depends(get_settings_store)):
    """Return cached setup values, or defaults when nothing is cached."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, store.load)


@router.put("/settings", response_model=DraftSettings)
async def write_settings(settings: DraftSettings,
                         store: SettingsStore = Depends(get_settings_store)):
    await save_settings(store, settings)
    return settings
