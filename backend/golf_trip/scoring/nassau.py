"""Nassau engine: front nine, back nine and overall matches in one bet.

All three sub-matches share one hole-by-hole winner sequence. Auto-presses
are recorded when a segment's running lead first reaches the threshold; they
are informational and do not take part in settlement.
"""

from typing import Dict, List, Sequence

from .common import best_ball, current_hole, player_net, sort_holes
from .display import (
    format_lead_status_for_team,
    format_match_status,
    is_closed,
    is_dormie,
)
from .types import (
    Hole,
    NassauAutoPress,
    NassauBet,
    NassauHoleResult,
    NassauSettlement,
    NassauState,
    NassauSubMatchState,
    PlayerHandicapContext,
    ScoreMap,
)

FRONT_NINE_LAST_HOLE = 9

SEGMENT_LABELS = {"front": "Front 9", "back": "Back 9", "overall": "Overall"}

_DELTA = {"team_a": 1, "team_b": -1, "halved": 0}


def _in_segment(segment: str, hole_number: int) -> bool:
    if segment == "front":
        return hole_number <= FRONT_NINE_LAST_HOLE
    if segment == "back":
        return hole_number > FRONT_NINE_LAST_HOLE
    return True


def _team_net(players: Sequence[PlayerHandicapContext], scores: ScoreMap, hole: Hole):
    return best_ball(player_net(scores, p, hole) for p in players)


def compute_hole_results(
    bet: NassauBet, scores: ScoreMap, holes: Sequence[Hole]
) -> List[NassauHoleResult]:
    results = []
    for hole in sort_holes(holes):
        a_net = _team_net(bet.team_a, scores, hole)
        b_net = _team_net(bet.team_b, scores, hole)
        complete = a_net is not None and b_net is not None
        winner = None
        if complete:
            if a_net < b_net:
                winner = "team_a"
            elif b_net < a_net:
                winner = "team_b"
            else:
                winner = "halved"
        results.append(
            NassauHoleResult(
                hole_number=hole.number,
                par=hole.par,
                team_a_net=a_net,
                team_b_net=b_net,
                winner=winner,
                complete=complete,
            )
        )
    return results


def _sub_match(
    segment: str, results: Sequence[NassauHoleResult]
) -> NassauSubMatchState:
    segment_results = [r for r in results if _in_segment(segment, r.hole_number)]
    completed = [r for r in segment_results if r.complete]
    lead = sum(_DELTA[r.winner] for r in completed)
    played = len(completed)
    remaining = len(segment_results) - played
    closed = is_closed(lead, remaining)
    return NassauSubMatchState(
        segment=segment,
        label=SEGMENT_LABELS[segment],
        lead=lead,
        holes_played=played,
        holes_remaining=remaining,
        is_closed=closed,
        is_dormie=is_dormie(lead, remaining),
        is_halved=remaining == 0 and lead == 0,
        status=format_match_status(lead, remaining),
    )


def _auto_presses(
    bet: NassauBet, results: Sequence[NassauHoleResult]
) -> List[NassauAutoPress]:
    presses: List[NassauAutoPress] = []
    if not bet.auto_press:
        return presses

    running: Dict[str, int] = {"front": 0, "back": 0, "overall": 0}
    pressed = set()
    for result in results:
        if not result.complete:
            continue
        for segment in ("front", "back", "overall"):
            if not _in_segment(segment, result.hole_number):
                continue
            running[segment] += _DELTA[result.winner]
            if segment in pressed or abs(running[segment]) < bet.auto_press_threshold:
                continue
            pressed.add(segment)
            segment_holes = [r.hole_number for r in results if _in_segment(segment, r.hole_number)]
            starting_hole = result.hole_number + 1
            presses.append(
                NassauAutoPress(
                    segment=segment,
                    trigger_hole=result.hole_number,
                    starting_hole=starting_hole,
                    lead_at_trigger=running[segment],
                    holes_remaining=sum(1 for h in segment_holes if h >= starting_hole),
                    stake=bet.stake_per_man,
                )
            )
    return presses


def compute_nassau_state(
    bet: NassauBet, scores: ScoreMap, holes: Sequence[Hole]
) -> NassauState:
    sorted_holes = sort_holes(holes)
    results = compute_hole_results(bet, scores, sorted_holes)
    return NassauState(
        round_id=bet.round_id,
        stake_per_man=bet.stake_per_man,
        auto_press=bet.auto_press,
        auto_press_threshold=bet.auto_press_threshold,
        team_a=bet.team_a,
        team_b=bet.team_b,
        front=_sub_match("front", results),
        back=_sub_match("back", results),
        overall=_sub_match("overall", results),
        hole_results=results,
        current_hole=current_hole(results, sorted_holes, lambda r: not r.complete),
        holes_played=sum(1 for r in results if r.complete),
        auto_presses=_auto_presses(bet, results),
    )


def _sign(lead: int) -> int:
    return (lead > 0) - (lead < 0)


def calculate_nassau_settlement(state: NassauState) -> NassauSettlement:
    """Flat per-man payout: each sub-match is worth ``stake_per_man``."""
    stake = state.stake_per_man
    front = _sign(state.front.lead)
    back = _sign(state.back.lead)
    overall = _sign(state.overall.lead)
    team_a_net = (front + back + overall) * stake

    player_results: Dict[str, float] = {}
    for player in state.team_a:
        player_results[player.player_id] = team_a_net
    for player in state.team_b:
        player_results[player.player_id] = -team_a_net

    return NassauSettlement(
        front_result=front * stake,
        back_result=back * stake,
        overall_result=overall * stake,
        player_results=player_results,
    )


def nassau_exposure(state: NassauState) -> float:
    """Per-man exposure: three base bets plus one stake per auto-press."""
    return state.stake_per_man * 3 + len(state.auto_presses) * state.stake_per_man


def format_nassau_status(lead: int, team: str) -> str:
    return format_lead_status_for_team(lead, team)
