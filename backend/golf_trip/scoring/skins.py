"""Skins engine: lowest unique net on a hole takes the pot.

Ties either carry the skin to the next hole (pot compounds) or, with
carryover disabled, the skin is simply lost.
"""

from typing import Dict, List, Optional, Sequence

from .common import current_hole, player_hole_score, sort_holes
from .types import Hole, ScoreMap, SkinsBet, SkinsHoleResult, SkinsSettlement, SkinsState


def compute_skins_state(
    bet: SkinsBet, scores: ScoreMap, holes: Sequence[Hole]
) -> SkinsState:
    sorted_holes = sort_holes(holes)
    skin_counts: Dict[str, int] = {p.player_id: 0 for p in bet.players}
    skin_values: Dict[str, float] = {p.player_id: 0 for p in bet.players}

    carry = 0
    awarded = 0
    carried_total = 0
    results: List[SkinsHoleResult] = []

    for hole in sorted_holes:
        player_scores = [player_hole_score(scores, p, hole) for p in bet.players]
        complete = bool(player_scores) and all(
            s.net_score is not None for s in player_scores
        )
        pot = (carry + 1) * bet.skin_value
        carry_before = carry
        winner_id: Optional[str] = None
        winner_name: Optional[str] = None
        carried = False

        if complete:
            low = min(s.net_score for s in player_scores)
            leaders = [s for s in player_scores if s.net_score == low]
            if len(leaders) == 1:
                winner_id = leaders[0].player_id
                winner_name = leaders[0].player_name
                skin_counts[winner_id] += carry + 1
                skin_values[winner_id] += pot
                awarded += carry + 1
                carry = 0
            elif bet.carryover:
                carried = True
                carry += 1
                carried_total += 1
            else:
                carry = 0

        results.append(
            SkinsHoleResult(
                hole_number=hole.number,
                par=hole.par,
                player_scores=player_scores,
                winner_id=winner_id,
                winner_name=winner_name,
                carried=carried,
                carry_count_before=carry_before,
                pot_value=pot,
                complete=complete,
            )
        )

    return SkinsState(
        round_id=bet.round_id,
        skin_value=bet.skin_value,
        carryover=bet.carryover,
        players=bet.players,
        hole_results=results,
        current_carry_count=carry,
        current_carry_value=carry * bet.skin_value,
        skin_counts=skin_counts,
        skin_values=skin_values,
        total_skins_awarded=awarded,
        total_skins_carried=carried_total,
        current_hole=current_hole(results, sorted_holes, lambda r: not r.complete),
        holes_played=sum(1 for r in results if r.complete),
        total_holes=len(sorted_holes),
    )


def calculate_skins_settlement(
    state: SkinsState, total_holes: Optional[int] = None
) -> SkinsSettlement:
    """Each player buys in for every hole; net result is winnings minus buy-in."""
    holes = total_holes if total_holes is not None else state.total_holes
    buy_in = state.skin_value * holes
    return SkinsSettlement(
        player_results={
            p.player_id: state.skin_values.get(p.player_id, 0) - buy_in
            for p in state.players
        },
        total_pot=buy_in * len(state.players),
        buy_in=buy_in,
    )
