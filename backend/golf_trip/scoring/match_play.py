"""Match play engine for 1v1 and 2v2 best-ball matches with presses.

Every state is derived from the full score history on each call. A hole
counts toward a match only once both sides have a net score on it.
"""

from typing import List, NamedTuple, Optional, Sequence

from .common import best_ball, player_net, sort_holes
from .display import (
    format_final_result,
    format_lead_status,
    format_match_status,
    is_closed,
    is_dormie,
)
from .types import (
    ExposureInfo,
    Hole,
    HoleMatchInfo,
    HoleResult,
    Match,
    MatchState,
    MatchTeam,
    PressExposure,
    PressLead,
    PressStake,
    PressState,
    ScoreMap,
)

_DELTA = {"team_a": 1, "team_b": -1, "halved": 0}


class _Outcome(NamedTuple):
    lead: int
    holes_played: int
    holes_remaining: int
    completed: bool
    final_lead: int
    final_result: Optional[str]

    @property
    def winner(self):
        if not self.completed:
            return None
        if self.final_lead > 0:
            return "team_a"
        if self.final_lead < 0:
            return "team_b"
        return "halved"

    @property
    def status_label(self) -> str:
        if self.completed:
            return self.final_result
        return format_match_status(self.lead, self.holes_remaining)


def team_net(
    team: MatchTeam, match_type: str, scores: ScoreMap, hole: Hole
) -> Optional[int]:
    """Net score representing a side on one hole.

    1v1 uses the single player's net; 2v2 uses the better of the teammates
    who have scored.
    """
    if match_type == "1v1":
        return player_net(scores, team.player1, hole)
    return best_ball(player_net(scores, p, hole) for p in team.players)


def compute_hole_results(
    match: Match, scores: ScoreMap, holes: Sequence[Hole]
) -> List[HoleResult]:
    results: List[HoleResult] = []
    lead = 0
    for hole in sort_holes(holes):
        a_net = team_net(match.team_a, match.match_type, scores, hole)
        b_net = team_net(match.team_b, match.match_type, scores, hole)
        winner = None
        if a_net is not None and b_net is not None:
            if a_net < b_net:
                winner = "team_a"
            elif b_net < a_net:
                winner = "team_b"
            else:
                winner = "halved"
            lead += _DELTA[winner]
        results.append(
            HoleResult(
                hole_number=hole.number,
                team_a_net=a_net,
                team_b_net=b_net,
                winner=winner,
                cumulative_lead=lead,
            )
        )
    return results


def _evaluate_window(
    results: Sequence[HoleResult], first_hole: int, last_hole: int
) -> _Outcome:
    """Run a match over the holes in ``[first_hole, last_hole]``.

    The lead starts from zero. The outcome is frozen at the first hole where
    the match closes (or when every hole of the window is complete), so later
    holes cannot rewrite the result.
    """
    window = [r for r in results if first_hole <= r.hole_number <= last_hole]
    total = len(window)
    lead = 0
    played = 0
    frozen: Optional[tuple] = None
    for result in window:
        if result.winner is None:
            continue
        played += 1
        lead += _DELTA[result.winner]
        remaining = total - played
        if frozen is None and (is_closed(lead, remaining) or remaining == 0):
            frozen = (lead, remaining)
    remaining = total - played
    if frozen is None:
        return _Outcome(lead, played, remaining, False, 0, None)
    final_lead, final_remaining = frozen
    return _Outcome(
        lead,
        played,
        remaining,
        True,
        final_lead,
        format_final_result(final_lead, final_remaining),
    )


def compute_match_state(
    match: Match, scores: ScoreMap, holes: Sequence[Hole]
) -> MatchState:
    """Full match state, including every press, from the score history."""
    hole_results = compute_hole_results(match, scores, holes)
    last_hole = hole_results[-1].hole_number if hole_results else 18
    main = _evaluate_window(hole_results, 1, last_hole)

    presses: List[PressState] = []
    for number, press in enumerate(match.presses, start=1):
        outcome = _evaluate_window(hole_results, press.starting_hole, press.ending_hole)
        presses.append(
            PressState(
                id=press.id,
                press_number=number,
                starting_hole=press.starting_hole,
                ending_hole=press.ending_hole,
                stake_per_hole=press.stake_per_hole,
                status="completed" if outcome.completed else "in_progress",
                winner=outcome.winner,
                final_result=outcome.final_result,
                final_lead=outcome.final_lead,
                current_lead=outcome.lead,
                holes_played=outcome.holes_played,
                holes_remaining=outcome.holes_remaining,
                is_dormie=is_dormie(outcome.lead, outcome.holes_remaining),
                is_closed=is_closed(outcome.lead, outcome.holes_remaining),
                status_label=outcome.status_label,
            )
        )

    return MatchState(
        match_id=match.id,
        round_id=match.round_id,
        match_type=match.match_type,
        stake_per_hole=match.stake_per_hole,
        status="completed" if main.completed else "in_progress",
        winner=main.winner,
        final_result=main.final_result,
        final_lead=main.final_lead,
        team_a=match.team_a,
        team_b=match.team_b,
        current_lead=main.lead,
        holes_played=main.holes_played,
        holes_remaining=main.holes_remaining,
        is_dormie=is_dormie(main.lead, main.holes_remaining),
        is_match_closed=is_closed(main.lead, main.holes_remaining),
        status_label=main.status_label,
        hole_results=hole_results,
        presses=presses,
    )


def hole_match_info(state: MatchState, hole_number: int) -> HoleMatchInfo:
    """What is riding on ``hole_number``: the main match plus live presses."""
    main_stake = 0 if state.status == "completed" else state.stake_per_hole
    live = [
        p
        for p in state.presses
        if p.starting_hole <= hole_number <= p.ending_hole and p.status == "in_progress"
    ]
    press_stakes = [
        PressStake(press_number=p.press_number, amount=p.stake_per_hole) for p in live
    ]
    return HoleMatchInfo(
        hole_number=hole_number,
        total_at_stake=main_stake + sum(p.amount for p in press_stakes),
        main_match_stake=main_stake,
        press_stakes=press_stakes,
        lead=state.current_lead,
        status=format_lead_status(state.current_lead),
        is_dormie=state.is_dormie,
        is_match_closed=state.is_match_closed,
        press_states=[
            PressLead(
                press_number=p.press_number,
                lead=p.current_lead,
                status=format_lead_status(p.current_lead),
            )
            for p in state.presses
            if p.starting_hole <= hole_number
        ],
    )


def calculate_exposure(state: MatchState) -> ExposureInfo:
    """Maximum remaining swing and current money position for team A."""
    if state.status == "completed":
        main_exposure = abs(state.final_lead) * state.stake_per_hole
    else:
        main_exposure = state.holes_remaining * state.stake_per_hole

    press_exposures = [
        PressExposure(
            press_number=p.press_number,
            exposure=abs(p.final_lead) * p.stake_per_hole
            if p.status == "completed"
            else p.holes_remaining * p.stake_per_hole,
        )
        for p in state.presses
    ]
    position = state.current_lead * state.stake_per_hole + sum(
        p.current_lead * p.stake_per_hole for p in state.presses
    )
    return ExposureInfo(
        total_exposure=main_exposure + sum(p.exposure for p in press_exposures),
        main_match_exposure=main_exposure,
        press_exposures=press_exposures,
        current_position=position,
    )
