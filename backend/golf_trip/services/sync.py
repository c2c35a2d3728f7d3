"""Write computed match and press state back to their cached columns."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import SYNC_RETRY_ATTEMPTS
from ..models import Match as MatchRow
from ..scoring.match_play import compute_match_state
from ..scoring.types import MatchState
from .round_inputs import get_match_row, load_round_inputs, match_from_row

logger = logging.getLogger(__name__)


def apply_match_state(row: MatchRow, state: MatchState) -> bool:
    """Copy ``state`` onto ``row`` and its presses; return whether anything changed.

    The lead written for a finished match or press is the frozen final lead,
    so re-running after later holes leaves the cached outcome untouched.
    """
    changed = False

    def put(target, **values) -> None:
        nonlocal changed
        for name, value in values.items():
            if getattr(target, name) != value:
                setattr(target, name, value)
                changed = True

    completed = state.status == "completed"
    put(
        row,
        status=state.status,
        winner=state.winner,
        final_result=state.final_result,
        current_lead=state.final_lead if completed else state.current_lead,
        holes_played=state.holes_played,
    )

    by_id = {p.id: p for p in state.presses}
    for press in row.presses:
        press_state = by_id.get(press.id)
        if press_state is None:
            continue
        press_completed = press_state.status == "completed"
        put(
            press,
            status=press_state.status,
            winner=press_state.winner,
            final_result=press_state.final_result,
            current_lead=press_state.final_lead if press_completed else press_state.current_lead,
            holes_played=press_state.holes_played,
        )
    return changed


async def sync_match(session: AsyncSession, round_id: str) -> MatchRow:
    """Recompute the round's match from scores and commit it with its presses."""
    inputs = await load_round_inputs(session, round_id)
    row = await get_match_row(session, round_id)
    state = compute_match_state(match_from_row(row, inputs), inputs.scores, inputs.holes)
    if apply_match_state(row, state):
        await session.commit()
        logger.info(
            "Synced match %s for round %s: %s (%s)",
            row.id,
            round_id,
            state.status,
            state.status_label,
        )
    return row


async def sync_match_with_retry(
    session: AsyncSession, round_id: str, attempts: int = SYNC_RETRY_ATTEMPTS
) -> MatchRow:
    """Run :func:`sync_match`, rolling back and recomputing on database errors."""
    if attempts < 1:
        raise ValueError("attempts must be positive")
    for attempt in range(1, attempts + 1):
        try:
            return await sync_match(session, round_id)
        except SQLAlchemyError:
            await session.rollback()
            if attempt == attempts:
                logger.exception(
                    "Match sync for round %s failed after %d attempts", round_id, attempts
                )
                raise
            logger.warning(
                "Match sync for round %s failed (attempt %d/%d); retrying",
                round_id,
                attempt,
                attempts,
            )
