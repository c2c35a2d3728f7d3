from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..db import get_session
from ..exceptions import ProblemDetail, TripNotFound
from ..models import Trip
from ..schemas import (
    PaymentOut,
    PlayerFormatStandingOut,
    PlayerSettlementOut,
    TripFormatStandingsOut,
    TripSettlementOut,
)
from ..services.round_inputs import load_trip_round_bets, trip_player_names
from ..services.settlement import settle_trip, simplify_payments, trip_format_standings

router = APIRouter(
    prefix="/trips",
    tags=["trips"],
    responses={404: {"model": ProblemDetail}},
)


async def _get_trip(session: AsyncSession, trip_id: str) -> Trip:
    trip = await session.get(Trip, trip_id)
    if trip is None:
        raise TripNotFound(trip_id)
    return trip


@router.get("/{trip_id}/settlement", response_model=TripSettlementOut)
async def get_trip_settlement(
    trip_id: str, session: AsyncSession = Depends(get_session)
) -> TripSettlementOut:
    await _get_trip(session, trip_id)
    rounds = await load_trip_round_bets(session, trip_id)
    names = await trip_player_names(session, trip_id)
    players = settle_trip(rounds, names)
    return TripSettlementOut(
        trip_id=trip_id,
        players=[PlayerSettlementOut.model_validate(p) for p in players],
        payments=[PaymentOut.model_validate(p) for p in simplify_payments(players)],
    )


@router.get("/{trip_id}/format-standings", response_model=TripFormatStandingsOut)
async def get_trip_format_standings(
    trip_id: str, session: AsyncSession = Depends(get_session)
) -> TripFormatStandingsOut:
    await _get_trip(session, trip_id)
    standings = trip_format_standings(await load_trip_round_bets(session, trip_id))
    return TripFormatStandingsOut(
        trip_id=trip_id,
        points_hilo=[PlayerFormatStandingOut.model_validate(s) for s in standings.points_hilo],
        points_hilo_round_count=standings.points_hilo_round_count,
        stableford=[PlayerFormatStandingOut.model_validate(s) for s in standings.stableford],
        stableford_round_count=standings.stableford_round_count,
    )
