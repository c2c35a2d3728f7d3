"""Scramble: one score per team per hole, lowest total wins.

Team scores are stored against the team captain, so the score map row of the
captain is the team's card.
"""

from typing import Dict, Mapping, Optional

from .types import ScoreMap, ScrambleResult


def compute_scramble_result(
    team_a_scores: Mapping[int, Optional[int]],
    team_b_scores: Mapping[int, Optional[int]],
    total_holes: int = 18,
) -> Optional[ScrambleResult]:
    """Totals over holes both teams have scored, ``None`` if there are none."""
    a_total = b_total = completed = 0
    for hole in range(1, total_holes + 1):
        a = team_a_scores.get(hole)
        b = team_b_scores.get(hole)
        if a is None or b is None:
            continue
        a_total += a
        b_total += b
        completed += 1

    if completed == 0:
        return None

    if a_total < b_total:
        winner = "team_a"
    elif b_total < a_total:
        winner = "team_b"
    else:
        winner = "tied"
    return ScrambleResult(
        winner=winner,
        team_a_total=a_total,
        team_b_total=b_total,
        margin=abs(a_total - b_total),
        holes_completed=completed,
    )


def team_scores(scores: ScoreMap, captain_id: str) -> Dict[int, Optional[int]]:
    return dict(scores.get(captain_id) or {})
