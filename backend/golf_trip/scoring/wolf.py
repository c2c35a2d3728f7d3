"""Wolf engine for exactly four players with a rotating captain.

The wolf on hole ``h`` is ``tee_order[(h - 1) % 4]``; nothing about the
rotation is stored. Money moves only on holes that are both decided (the wolf
picked a partner or went alone) and complete (all four nets known), and every
hole's transfers sum to zero.
"""

from typing import Dict, List, Optional, Sequence

from .common import best_ball, current_hole, player_hole_score, sort_holes
from .types import (
    Hole,
    PlayerHandicapContext,
    ScoreMap,
    WolfBet,
    WolfDecision,
    WolfHoleResult,
    WolfState,
)

WOLF_PLAYER_COUNT = 4

_ROTATION_LABELS = ["1st", "2nd", "3rd", "4th"]


def wolf_for_hole(tee_order: Sequence[str], hole_number: int) -> str:
    return tee_order[(hole_number - 1) % len(tee_order)]


def tee_order_for_hole(tee_order: Sequence[str], hole_number: int) -> List[str]:
    """Base order rotated so the wolf tees off first."""
    offset = (hole_number - 1) % len(tee_order)
    return list(tee_order[offset:]) + list(tee_order[:offset])


def wolf_rotation_label(hole_number: int, tee_order: Sequence[str]) -> str:
    idx = (hole_number - 1) % len(tee_order)
    return _ROTATION_LABELS[idx] if idx < len(_ROTATION_LABELS) else f"{idx + 1}th"


def available_partners(
    players: Sequence[PlayerHandicapContext], wolf_id: str
) -> List[PlayerHandicapContext]:
    return [p for p in players if p.player_id != wolf_id]


def _valid_decision(
    decision: Optional[WolfDecision], wolf_id: str, player_ids: Sequence[str]
) -> bool:
    if decision is None:
        return False
    if decision.is_lone_wolf:
        return True
    return (
        decision.partner_id is not None
        and decision.partner_id != wolf_id
        and decision.partner_id in player_ids
    )


def _settle_sides(
    winners: Sequence[str], losers: Sequence[str], amount: float, deltas: Dict[str, float]
) -> None:
    # Every winner collects ``amount`` from every loser.
    for w in winners:
        deltas[w] += amount * len(losers)
    for l in losers:
        deltas[l] -= amount * len(winners)


def compute_wolf_state(
    bet: WolfBet, scores: ScoreMap, holes: Sequence[Hole]
) -> Optional[WolfState]:
    """Full Wolf state, or ``None`` unless the tee order is four distinct players."""
    players = list(bet.tee_order)
    order = [p.player_id for p in players]
    if len(order) != WOLF_PLAYER_COUNT or len(set(order)) != WOLF_PLAYER_COUNT:
        return None

    by_id = {p.player_id: p for p in players}
    decisions = {d.hole_number: d for d in bet.decisions}
    sorted_holes = sort_holes(holes)
    totals: Dict[str, float] = {pid: 0 for pid in order}
    results: List[WolfHoleResult] = []

    for hole in sorted_holes:
        wolf_id = wolf_for_hole(order, hole.number)
        decision = decisions.get(hole.number)
        decided = _valid_decision(decision, wolf_id, order)
        lone = decided and decision.is_lone_wolf
        partner_id = decision.partner_id if decided and not lone else None

        player_scores = [player_hole_score(scores, p, hole) for p in players]
        nets = {s.player_id: s.net_score for s in player_scores}
        complete = all(n is not None for n in nets.values())

        deltas: Dict[str, float] = {pid: 0 for pid in order}
        wolf_team_net = field_net = None
        winner = None
        per_man = 0

        if decided and complete:
            wolf_side = [wolf_id] if lone else [wolf_id, partner_id]
            field = [pid for pid in order if pid not in wolf_side]
            wolf_team_net = best_ball(nets[pid] for pid in wolf_side)
            field_net = best_ball(nets[pid] for pid in field)
            amount = bet.stake_per_hole * (bet.lone_wolf_multiplier if lone else 1)

            if wolf_team_net < field_net:
                winner = "wolf"
                per_man = amount
                _settle_sides(wolf_side, field, amount, deltas)
            elif wolf_team_net > field_net:
                winner = "field"
                per_man = amount
                _settle_sides(field, wolf_side, amount, deltas)
            else:
                winner = "halved"

            for pid, delta in deltas.items():
                totals[pid] += delta

        partner = by_id.get(partner_id) if partner_id else None
        results.append(
            WolfHoleResult(
                hole_number=hole.number,
                par=hole.par,
                wolf_id=wolf_id,
                wolf_name=by_id[wolf_id].name,
                partner_id=partner_id,
                partner_name=partner.name if partner else None,
                is_lone_wolf=bool(lone),
                player_scores=player_scores,
                wolf_team_net=wolf_team_net,
                field_team_net=field_net,
                winner=winner,
                wolf_points_per_man=per_man,
                deltas=deltas,
                complete=complete,
                decided=decided,
            )
        )

    hole_now = current_hole(
        results, sorted_holes, lambda r: not (r.complete and r.decided)
    )
    current_wolf = wolf_for_hole(order, hole_now)
    return WolfState(
        round_id=bet.round_id,
        stake_per_hole=bet.stake_per_hole,
        lone_wolf_multiplier=bet.lone_wolf_multiplier,
        tee_order=order,
        players=players,
        hole_results=results,
        decisions=list(bet.decisions),
        player_totals=totals,
        current_wolf_id=current_wolf,
        current_wolf_name=by_id[current_wolf].name,
        current_hole=hole_now,
        holes_played=sum(1 for r in results if r.complete and r.decided),
        total_holes=len(sorted_holes),
    )


def calculate_wolf_settlement(state: WolfState) -> Dict[str, float]:
    return dict(state.player_totals)
