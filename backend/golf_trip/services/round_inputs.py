"""Load persisted rounds and turn them into scoring engine inputs."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import DEFAULT_HOLE_COUNT
from ..exceptions import BetNotFound, MatchNotFound, RoundNotFound
from ..models import (
    Hole as HoleRow,
    JunkBet as JunkBetRow,
    Match as MatchRow,
    NassauBet as NassauBetRow,
    Player,
    Round,
    RoundPlayer,
    Score,
    SkinsBet as SkinsBetRow,
    WolfBet as WolfBetRow,
)
from ..scoring import junk, match_play, nassau, skins, team_formats, wolf
from ..scoring.common import build_handicap_map, build_score_map, default_holes
from ..scoring.types import (
    FormatState,
    Hole,
    JunkClaim,
    Match,
    MatchState,
    MatchTeam,
    NassauBet,
    NassauState,
    PlayerHandicapContext,
    Press,
    RoundJunkConfig,
    RoundJunkSettlement,
    ScoreMap,
    SkinsBet,
    SkinsState,
    TeamFormatBet,
    WolfBet,
    WolfDecision,
    WolfState,
)
from .settlement import RoundBets
from .validation import (
    ValidationError,
    validate_holes,
    validate_match_teams,
    validate_stake,
    validate_tee_order,
    validate_team_format_teams,
)

logger = logging.getLogger(__name__)

TEAM_FORMATS = ("points_hilo", "stableford")


class RoundInputs:
    """Holes, scores and player handicaps for one round."""

    def __init__(
        self,
        round: Round,
        holes: List[Hole],
        scores: ScoreMap,
        players: List[RoundPlayer],
    ) -> None:
        self.round = round
        self.holes = holes
        self.scores = scores
        self.players = players
        self.names: Dict[str, str] = {rp.player_id: rp.player.name for rp in players}
        # default handicap -> player_id -> playing handicap
        self._handicap_maps: Dict[Optional[int], Dict[str, Optional[int]]] = {}

    def handicaps(self, default: Optional[int] = None) -> Dict[str, Optional[int]]:
        if default not in self._handicap_maps:
            self._handicap_maps[default] = build_handicap_map(self.players, default=default)
        return self._handicap_maps[default]

    def context(
        self, player_id: Optional[str], *, default_handicap: Optional[int] = None
    ) -> Optional[PlayerHandicapContext]:
        if not player_id:
            return None
        handicaps = self.handicaps(default_handicap)
        return PlayerHandicapContext(
            player_id=player_id,
            playing_handicap=handicaps.get(player_id, default_handicap),
            name=self.names.get(player_id, "Unknown"),
        )

    def contexts(self, player_ids, **kwargs) -> List[PlayerHandicapContext]:
        return [c for c in (self.context(pid, **kwargs) for pid in player_ids) if c]


async def get_round(session: AsyncSession, round_id: str) -> Round:
    round = await session.get(Round, round_id)
    if round is None:
        raise RoundNotFound(round_id)
    return round


async def load_holes(session: AsyncSession, round: Round) -> List[Hole]:
    """Hole table of the round's tee, or default par-4 holes without one."""
    if round.tee_id:
        rows = (
            await session.execute(
                select(HoleRow)
                .where(HoleRow.tee_id == round.tee_id)
                .order_by(HoleRow.hole_number)
            )
        ).scalars().all()
        if rows:
            holes = [
                Hole(number=r.hole_number, par=r.par, stroke_index=r.stroke_index or r.hole_number)
                for r in rows
            ]
            validate_holes(holes)
            return holes
        logger.warning("Tee %s has no holes; using default holes", round.tee_id)
    return default_holes(DEFAULT_HOLE_COUNT)


async def load_round_inputs(session: AsyncSession, round_id: str) -> RoundInputs:
    round = await get_round(session, round_id)
    holes = await load_holes(session, round)
    score_rows = (
        await session.execute(select(Score).where(Score.round_id == round_id))
    ).scalars().all()
    players = (
        await session.execute(
            select(RoundPlayer).where(RoundPlayer.round_id == round_id)
        )
    ).scalars().all()
    return RoundInputs(round, holes, build_score_map(score_rows), list(players))


# ---------------------------------------------------------------------------
# Match play
# ---------------------------------------------------------------------------


async def get_match_row(session: AsyncSession, round_id: str) -> MatchRow:
    row = (
        await session.execute(select(MatchRow).where(MatchRow.round_id == round_id))
    ).scalar_one_or_none()
    if row is None:
        raise MatchNotFound(round_id)
    return row


def match_from_row(row: MatchRow, inputs: RoundInputs) -> Match:
    validate_match_teams(
        row.match_type,
        [row.team_a_player1_id, row.team_a_player2_id],
        [row.team_b_player1_id, row.team_b_player2_id],
    )

    # A missing handicap plays off scratch in match play.
    def team(p1, p2) -> MatchTeam:
        return MatchTeam(
            player1=inputs.context(p1, default_handicap=0),
            player2=inputs.context(p2, default_handicap=0),
        )

    return Match(
        id=row.id,
        round_id=row.round_id,
        match_type=row.match_type,
        stake_per_hole=validate_stake(row.stake_per_hole, field="stake_per_hole"),
        team_a=team(row.team_a_player1_id, row.team_a_player2_id),
        team_b=team(row.team_b_player1_id, row.team_b_player2_id),
        presses=[
            Press(
                id=p.id,
                starting_hole=p.starting_hole,
                ending_hole=p.ending_hole,
                stake_per_hole=p.stake_per_hole,
            )
            for p in row.presses
        ],
    )


async def build_match_state(session: AsyncSession, round_id: str) -> MatchState:
    inputs = await load_round_inputs(session, round_id)
    row = await get_match_row(session, round_id)
    return match_play.compute_match_state(match_from_row(row, inputs), inputs.scores, inputs.holes)


# ---------------------------------------------------------------------------
# Nassau, Skins, Wolf, team formats
# ---------------------------------------------------------------------------


async def _bet_row(session: AsyncSession, model, round_id: str):
    return (
        await session.execute(select(model).where(model.round_id == round_id))
    ).scalar_one_or_none()


async def build_nassau_state(
    session: AsyncSession, round_id: str, inputs: Optional[RoundInputs] = None
) -> NassauState:
    inputs = inputs or await load_round_inputs(session, round_id)
    row = await _bet_row(session, NassauBetRow, round_id)
    if row is None:
        raise BetNotFound(round_id, "nassau")
    bet = NassauBet(
        round_id=round_id,
        stake_per_man=row.stake_per_man,
        auto_press=row.auto_press,
        auto_press_threshold=row.auto_press_threshold,
        team_a=inputs.contexts([row.team_a_player1_id, row.team_a_player2_id]),
        team_b=inputs.contexts([row.team_b_player1_id, row.team_b_player2_id]),
    )
    return nassau.compute_nassau_state(bet, inputs.scores, inputs.holes)


async def build_skins_state(
    session: AsyncSession, round_id: str, inputs: Optional[RoundInputs] = None
) -> SkinsState:
    inputs = inputs or await load_round_inputs(session, round_id)
    row = await _bet_row(session, SkinsBetRow, round_id)
    if row is None:
        raise BetNotFound(round_id, "skins")
    bet = SkinsBet(
        round_id=round_id,
        skin_value=row.skin_value,
        carryover=row.carryover,
        players=inputs.contexts(rp.player_id for rp in inputs.players),
    )
    return skins.compute_skins_state(bet, inputs.scores, inputs.holes)


async def build_wolf_state(
    session: AsyncSession, round_id: str, inputs: Optional[RoundInputs] = None
) -> WolfState:
    inputs = inputs or await load_round_inputs(session, round_id)
    row = await _bet_row(session, WolfBetRow, round_id)
    if row is None:
        raise BetNotFound(round_id, "wolf")
    tee_order = validate_tee_order(row.tee_order or [])
    bet = WolfBet(
        round_id=round_id,
        stake_per_hole=row.stake_per_hole,
        lone_wolf_multiplier=row.lone_wolf_multiplier,
        tee_order=inputs.contexts(tee_order),
        decisions=[
            WolfDecision(
                hole_number=d.hole_number,
                partner_id=d.partner_player_id,
                is_lone_wolf=d.is_lone_wolf,
            )
            for d in row.decisions
        ],
    )
    return wolf.compute_wolf_state(bet, inputs.scores, inputs.holes)


async def build_format_state(
    session: AsyncSession, round_id: str, inputs: Optional[RoundInputs] = None
) -> FormatState:
    inputs = inputs or await load_round_inputs(session, round_id)
    if inputs.round.format not in TEAM_FORMATS:
        raise BetNotFound(round_id, "team format")
    team1 = [rp.player_id for rp in inputs.players if rp.team == "team1"]
    team2 = [rp.player_id for rp in inputs.players if rp.team == "team2"]
    validate_team_format_teams(team1, team2)
    bet = TeamFormatBet(
        round_id=round_id,
        format=inputs.round.format,
        team1=inputs.contexts(team1),
        team2=inputs.contexts(team2),
    )
    return team_formats.compute_format_state(bet, inputs.scores, inputs.holes)


async def build_junk_settlement(
    session: AsyncSession, round_id: str, inputs: Optional[RoundInputs] = None
) -> Optional[RoundJunkSettlement]:
    inputs = inputs or await load_round_inputs(session, round_id)
    if not inputs.round.junk_config:
        return None
    config = RoundJunkConfig.model_validate(inputs.round.junk_config)
    if not config.enabled:
        return None
    rows = (
        await session.execute(select(JunkBetRow).where(JunkBetRow.round_id == round_id))
    ).scalars().all()
    claims = [
        JunkClaim(
            player_id=r.player_id,
            hole_number=r.hole_number,
            junk_type=r.junk_type,
            value=r.value,
        )
        for r in rows
    ]
    return junk.calculate_junk_settlement(
        claims,
        [rp.player_id for rp in inputs.players],
        inputs.names,
        config,
        round_id=round_id,
    )


# ---------------------------------------------------------------------------
# Trip settlement
# ---------------------------------------------------------------------------


async def load_trip_round_bets(session: AsyncSession, trip_id: str) -> List[RoundBets]:
    rounds = (
        await session.execute(
            select(Round).where(Round.trip_id == trip_id).order_by(Round.date, Round.name)
        )
    ).scalars().all()

    result: List[RoundBets] = []
    for round in rounds:
        inputs = await load_round_inputs(session, round.id)
        bets = RoundBets(
            round_id=round.id,
            round_name=round.name,
            completed=round.status == "completed",
            round_date=round.date,
        )
        match_row = (
            await session.execute(select(MatchRow).where(MatchRow.round_id == round.id))
        ).scalar_one_or_none()
        if match_row is not None:
            bets.match = match_play.compute_match_state(
                match_from_row(match_row, inputs), inputs.scores, inputs.holes
            )
        if await _bet_row(session, NassauBetRow, round.id) is not None:
            bets.nassau = await build_nassau_state(session, round.id, inputs)
        if await _bet_row(session, SkinsBetRow, round.id) is not None:
            bets.skins = await build_skins_state(session, round.id, inputs)
        if await _bet_row(session, WolfBetRow, round.id) is not None:
            try:
                bets.wolf = await build_wolf_state(session, round.id, inputs)
            except ValidationError as exc:
                logger.warning("Skipping wolf settlement for round %s: %s", round.id, exc.detail)
        if round.format in TEAM_FORMATS:
            try:
                bets.format_state = await build_format_state(session, round.id, inputs)
            except ValidationError as exc:
                logger.warning("Skipping %s standings for round %s: %s", round.format, round.id, exc.detail)
        bets.junk = await build_junk_settlement(session, round.id, inputs)
        result.append(bets)
    return result


async def trip_player_names(session: AsyncSession, trip_id: str) -> Dict[str, str]:
    rows = (
        await session.execute(select(Player).where(Player.trip_id == trip_id))
    ).scalars().all()
    return {p.id: p.name for p in rows}
