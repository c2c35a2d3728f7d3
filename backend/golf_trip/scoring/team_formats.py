"""Team point formats for two fixed 2-player teams: Points Hi/Lo and Stableford."""

from typing import List, Optional, Sequence, Tuple

from .common import current_hole, player_hole_score, sort_holes
from .types import (
    FormatState,
    Hole,
    HoleFormatResult,
    PlayerHandicapContext,
    PlayerHoleScore,
    ScoreMap,
    TeamFormatBet,
)

POINTS_HILO_PER_HOLE = 2
POINTS_HILO_WIN = 1
POINTS_HILO_TIE = 0.5
TEAM_SIZE = 2


def stableford_points(net: int, par: int) -> int:
    """Net Stableford points: albatross+ 8, eagle 5, birdie 3, par 1, bogey 0, worse -1."""
    diff = net - par
    if diff <= -3:
        return 8
    if diff == -2:
        return 5
    if diff == -1:
        return 3
    if diff == 0:
        return 1
    if diff == 1:
        return 0
    return -1


def stableford_description(net: int, par: int) -> str:
    diff = net - par
    if diff <= -3:
        return "Albatross+"
    return {-2: "Eagle", -1: "Birdie", 0: "Par", 1: "Bogey", 2: "Double"}.get(
        diff, "Triple+"
    )


def team_stableford(nets: Sequence[Optional[int]], par: int) -> int:
    return sum(stableford_points(n, par) for n in nets if n is not None)


def _compare(a: int, b: int) -> Tuple[float, float]:
    # Lower net takes the point in both the low and the high slot.
    if a < b:
        return POINTS_HILO_WIN, 0
    if b < a:
        return 0, POINTS_HILO_WIN
    return POINTS_HILO_TIE, POINTS_HILO_TIE


def points_hilo(
    team1_nets: Sequence[int], team2_nets: Sequence[int]
) -> Tuple[float, float]:
    """Points for one hole: low net vs low net, high net vs high net."""
    t1_low, t1_high = sorted(team1_nets)
    t2_low, t2_high = sorted(team2_nets)
    low1, low2 = _compare(t1_low, t2_low)
    high1, high2 = _compare(t1_high, t2_high)
    return low1 + high1, low2 + high2


def points_hilo_partial(
    team1_nets: Sequence[Optional[int]], team2_nets: Sequence[Optional[int]]
) -> Optional[Tuple[float, float]]:
    t1 = [n for n in team1_nets if n is not None]
    t2 = [n for n in team2_nets if n is not None]
    if len(t1) != TEAM_SIZE or len(t2) != TEAM_SIZE:
        return None
    return points_hilo(t1, t2)


def format_points_hilo_hole_result(
    team1_nets: Sequence[int], team2_nets: Sequence[int]
) -> Tuple[str, str]:
    """``(low_result, high_result)`` as ``"Team 1"``, ``"Team 2"`` or ``"Split"``."""

    def label(a: int, b: int) -> str:
        if a < b:
            return "Team 1"
        if b < a:
            return "Team 2"
        return "Split"

    t1_low, t1_high = sorted(team1_nets)
    t2_low, t2_high = sorted(team2_nets)
    return label(t1_low, t2_low), label(t1_high, t2_high)


def _scored(
    scores: ScoreMap, players: Sequence[PlayerHandicapContext], hole: Hole, stableford: bool
) -> List[PlayerHoleScore]:
    result = []
    for player in players:
        score = player_hole_score(scores, player, hole)
        if stableford and score.net_score is not None:
            score = score.model_copy(
                update={"stableford_points": stableford_points(score.net_score, hole.par)}
            )
        result.append(score)
    return result


def compute_format_state(
    bet: TeamFormatBet, scores: ScoreMap, holes: Sequence[Hole]
) -> Optional[FormatState]:
    """Team points for the round, or ``None`` unless both teams have two players."""
    if len(bet.team1) != TEAM_SIZE or len(bet.team2) != TEAM_SIZE:
        return None

    stableford = bet.format == "stableford"
    sorted_holes = sort_holes(holes)
    results: List[HoleFormatResult] = []
    team1_total = team2_total = 0.0

    for hole in sorted_holes:
        team1_scores = _scored(scores, bet.team1, hole, stableford)
        team2_scores = _scored(scores, bet.team2, hole, stableford)
        complete = all(s.net_score is not None for s in team1_scores + team2_scores)
        team1_points = team2_points = 0.0

        if complete:
            if stableford:
                team1_points = sum(s.stableford_points for s in team1_scores)
                team2_points = sum(s.stableford_points for s in team2_scores)
            else:
                team1_points, team2_points = points_hilo(
                    [s.net_score for s in team1_scores],
                    [s.net_score for s in team2_scores],
                )
            team1_total += team1_points
            team2_total += team2_points

        results.append(
            HoleFormatResult(
                hole_number=hole.number,
                par=hole.par,
                team1_points=team1_points,
                team2_points=team2_points,
                team1_scores=team1_scores,
                team2_scores=team2_scores,
                complete=complete,
            )
        )

    return FormatState(
        format=bet.format,
        round_id=bet.round_id,
        team1=bet.team1,
        team2=bet.team2,
        hole_results=results,
        team1_total=team1_total,
        team2_total=team2_total,
        current_hole=current_hole(results, sorted_holes, lambda r: not r.complete),
        holes_played=sum(1 for r in results if r.complete),
    )
