"""
Draft session endpoints.

Covers the whole life of a draft: create from the setup form, reveal and
place the draft order, start, fill the board pick by pick, and exit.
Rejected actions come back as 409 with the session unchanged.
"""

import logging
from typing import Any, Dict, List, Tuple

from fastapi import APIRouter, Body, Depends, Request
from pydantic import BaseModel, Field

from ...datamodels.draft_config import DraftConfig, DraftSettings
from ...datamodels.draft_state import CellContent, SessionPhase
from ...engine.manager import SessionManager
from ...engine.session import DraftSession
from ...errors import PhaseError, PickRejected
from ...storage.settings_store import SettingsStore
from .settings import get_settings_store, save_settings


router = APIRouter()
logger = logging.getLogger(__name__)


class PickRequest(BaseModel):
    image_url: str = Field(..., description="Image link pasted into the cell")
    caption: str = Field("", description="Title shown with the image")


class PickResponse(BaseModel):
    overall_pick: int
    advanced: bool
    state: Dict[str, Any]


class CandidateResponse(BaseModel):
    participant_index: int
    display_name: str
    owner_name: str


class PickOrderEntry(BaseModel):
    overall_pick: int
    round: int
    pick_in_round: int
    slot: int
    direction: str
    display_name: str


async def get_session_manager(request: Request) -> SessionManager:
    """Dependency to get the in-memory session registry."""
    return request.app.state.sessions


async def get_session(session_id: str,
                      manager: SessionManager = Depends(get_session_manager)) -> DraftSession:
    return manager.get(session_id)


def _read_draft_body(payload: Dict[str, Any]) -> Tuple[DraftConfig, DraftSettings]:
    """A body with participants is a DraftConfig; anything else is the setup form."""
    if "participants" in payload:
        config = DraftConfig.model_validate(payload)
        return config, DraftSettings.from_config(config)

    settings = DraftSettings.model_validate(payload)
    return settings.to_config(), settings


@router.post("/drafts", status_code=201)
async def create_draft(payload: Dict[str, Any] = Body(...),
                       manager: SessionManager = Depends(get_session_manager),
                       store: SettingsStore = Depends(get_settings_store)):
    """
    Start a draft from the setup form or a ready DraftConfig.

    The form is validated into a DraftConfig (at least two complete team
    rows, a title, round count and timer of at least one) and cached for
    next time. The new session begins in the order-picking phase with the
    first participant already revealed.
    """
    config, settings = _read_draft_body(payload)
    await save_settings(store, settings)

    session = manager.create(config)
    session.reveal_candidate()
    return session.snapshot()


@router.get("/drafts/{session_id}")
async def read_draft(session: DraftSession = Depends(get_session)):
    return session.snapshot()


@router.delete("/drafts/{session_id}", status_code=204)
async def exit_draft(session_id: str,
                     manager: SessionManager = Depends(get_session_manager)):
    """Leave a draft. Its order, picks and timer are discarded."""
    await manager.exit(session_id)


@router.post("/drafts/{session_id}/order/candidate", response_model=CandidateResponse)
async def reveal_candidate(session: DraftSession = Depends(get_session)):
    """Return the participant waiting to be placed in the draft order."""
    index = session.reveal_candidate()
    participant = session.entry_config.participants[index]
    return CandidateResponse(
        participant_index=index,
        display_name=participant.display_name,
        owner_name=participant.owner_name,
    )


@router.post("/drafts/{session_id}/order/slots/{slot}")
async def place_candidate(slot: int, session: DraftSession = Depends(get_session)):
    """Place the revealed participant at a draft position (0-based)."""
    session.place_candidate(slot)
    return session.order_view()


@router.post("/drafts/{session_id}/start")
async def start_draft(session: DraftSession = Depends(get_session),
                      manager: SessionManager = Depends(get_session_manager),
                      store: SettingsStore = Depends(get_settings_store)):
    """
    Lock in the draft order and put the first pick on the clock.

    The cached team list is rewritten in the placed order.
    """
    session.start_drafting()
    await save_settings(store, DraftSettings.from_config(session.config))
    manager.start_ticker(session)
    await manager.publish_state(session)
    return session.snapshot()


def _require_board(session: DraftSession) -> None:
    if session.phase == SessionPhase.ORDER_PICKING:
        raise PhaseError("The board does not exist until the draft starts")


@router.get("/drafts/{session_id}/board")
async def read_board(session: DraftSession = Depends(get_session)):
    _require_board(session)
    return {
        "session_id": session.session_id,
        "current_pick": session.turn_state.current_pick,
        "participants": session.participants_view(),
        "rounds": session.board.rows(session.turn_state),
    }


@router.get("/drafts/{session_id}/order", response_model=List[PickOrderEntry])
async def read_pick_order(session: DraftSession = Depends(get_session)):
    """Every pick of the draft in snake order."""
    _require_board(session)
    config = session.config
    entries = []
    for overall_pick in range(config.total_picks):
        position = session.calculator.locate(overall_pick, config.participant_count)
        entries.append(PickOrderEntry(
            overall_pick=overall_pick,
            round=position.round_number,
            pick_in_round=position.pick_in_round,
            slot=position.participant_slot,
            direction=position.direction.value,
            display_name=config.participants[position.participant_slot].display_name,
        ))
    return entries


@router.put("/drafts/{session_id}/cells/{overall_pick}", response_model=PickResponse)
async def submit_pick(overall_pick: int,
                      pick: PickRequest,
                      request: Request,
                      session: DraftSession = Depends(get_session),
                      manager: SessionManager = Depends(get_session_manager)):
    """
    Fill the cell on the clock with an image and advance the draft.

    The image is checked before the pick counts. If another request filled
    the cell while the check was running, this one is rejected.
    """
    _require_board(session)
    if not session.controller.is_active(session.turn_state, overall_pick):
        raise PickRejected(f"Pick {overall_pick + 1} is not on the clock")

    image_url = await request.app.state.image_client.validate(pick.image_url)

    advanced = session.submit_pick(overall_pick, CellContent(image_url=image_url, caption=pick.caption))
    logger.info(f"Session {session.session_id}: pick {overall_pick + 1} filled, advanced={advanced}")
    await manager.publish_state(session)

    return PickResponse(overall_pick=overall_pick, advanced=advanced, state=session.snapshot())


@router.delete("/drafts/{session_id}/cells/{overall_pick}")
async def clear_cell(overall_pick: int,
                     session: DraftSession = Depends(get_session),
                     manager: SessionManager = Depends(get_session_manager)):
    """Remove an image from a cell. The pick stays made."""
    session.clear_cell(overall_pick)
    await manager.publish_state(session)
    return session.snapshot()


@router.get("/drafts/{session_id}/timer")
async def read_timer(session: DraftSession = Depends(get_session)):
    _require_board(session)
    return session.timer.to_dict()
