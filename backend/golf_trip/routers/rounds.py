import logging
import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import SYNC_RETRY_ATTEMPTS
from ..db import get_session
from ..exceptions import ProblemDetail, http_problem
from ..models import Press
from ..schemas import MatchSyncOut, PressCreate, PressOut
from ..scoring.match_play import hole_match_info
from ..scoring.types import FormatState, HoleMatchInfo, MatchState, NassauState, SkinsState, WolfState
from ..services.round_inputs import (
    build_format_state,
    build_match_state,
    build_nassau_state,
    build_skins_state,
    build_wolf_state,
    get_match_row,
    load_holes,
    get_round,
)
from ..services.sync import sync_match_with_retry
from ..services.validation import validate_press_window

logger = logging.getLogger(__name__)

# Resource-only prefix; versioning is added in main.py
router = APIRouter(
    prefix="/rounds",
    tags=["rounds"],
    responses={404: {"model": ProblemDetail}},
)


@router.get("/{round_id}/match", response_model=MatchState)
async def get_match_state(
    round_id: str, session: AsyncSession = Depends(get_session)
) -> MatchState:
    return await build_match_state(session, round_id)


@router.post(
    "/{round_id}/match/presses",
    response_model=PressOut,
    status_code=status.HTTP_201_CREATED,
)
async def create_press(
    round_id: str,
    body: PressCreate,
    session: AsyncSession = Depends(get_session),
) -> PressOut:
    round = await get_round(session, round_id)
    match = await get_match_row(session, round_id)
    holes = await load_holes(session, round)
    validate_press_window(body.starting_hole, body.ending_hole, last_hole=holes[-1].number)
    if match.status != "in_progress":
        raise http_problem(
            status_code=409,
            detail="cannot press a match that is not in progress",
            code="match_not_in_progress",
        )

    # The stake is copied from the match and frozen for the life of the press.
    press = Press(
        id=uuid.uuid4().hex,
        match_id=match.id,
        starting_hole=body.starting_hole,
        ending_hole=body.ending_hole,
        stake_per_hole=match.stake_per_hole,
        status="in_progress",
        current_lead=0,
        holes_played=0,
    )
    session.add(press)
    await session.commit()
    logger.info(
        "Created press %s on match %s (holes %d-%d)",
        press.id,
        match.id,
        press.starting_hole,
        press.ending_hole,
    )
    return PressOut.model_validate(press)


@router.post("/{round_id}/match/sync", response_model=MatchSyncOut)
async def sync_match_route(
    round_id: str, session: AsyncSession = Depends(get_session)
) -> MatchSyncOut:
    row = await sync_match_with_retry(session, round_id, attempts=SYNC_RETRY_ATTEMPTS)
    return MatchSyncOut.model_validate(row)


@router.get("/{round_id}/match/holes/{hole_number}", response_model=HoleMatchInfo)
async def get_hole_match_info(
    round_id: str,
    hole_number: int,
    session: AsyncSession = Depends(get_session),
) -> HoleMatchInfo:
    state = await build_match_state(session, round_id)
    if hole_number not in {r.hole_number for r in state.hole_results}:
        raise http_problem(
            status_code=404,
            detail=f"hole {hole_number} is not part of round '{round_id}'",
            code="hole_not_found",
        )
    return hole_match_info(state, hole_number)


@router.get("/{round_id}/nassau", response_model=NassauState)
async def get_nassau_state(
    round_id: str, session: AsyncSession = Depends(get_session)
) -> NassauState:
    return await build_nassau_state(session, round_id)


@router.get("/{round_id}/skins", response_model=SkinsState)
async def get_skins_state(
    round_id: str, session: AsyncSession = Depends(get_session)
) -> SkinsState:
    return await build_skins_state(session, round_id)


@router.get("/{round_id}/wolf", response_model=WolfState)
async def get_wolf_state(
    round_id: str, session: AsyncSession = Depends(get_session)
) -> WolfState:
    return await build_wolf_state(session, round_id)


@router.get("/{round_id}/format", response_model=FormatState)
async def get_format_state(
    round_id: str, session: AsyncSession = Depends(get_session)
) -> FormatState:
    return await build_format_state(session, round_id)
