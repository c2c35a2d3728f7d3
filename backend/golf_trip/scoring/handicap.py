"""Handicap stroke allocation following the USGA/WHS formulas."""

import math
from typing import Optional, Sequence

FORMAT_ALLOWANCES = {
    "stroke_play": 95,
    "best_ball": 85,
    "scramble": 35,
    "match_play": 100,
}

_SCORE_NAMES = {
    -3: "Albatross",
    -2: "Eagle",
    -1: "Birdie",
    0: "Par",
    1: "Bogey",
    2: "Double Bogey",
    3: "Triple Bogey",
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def course_handicap(
    handicap_index: float, slope: float, rating: float, par: int
) -> int:
    """Return the course handicap for a tee.

    ``index * slope / 113 + (rating - par)``, rounded with halves going up.
    """
    return _round_half_up(handicap_index * (slope / 113) + (rating - par))


def strokes_for_hole(course_handicap: int, stroke_index: int) -> int:
    """Number of strokes received on a hole (``-1`` when giving one back).

    A plus (or scratch) player gives strokes back on the easiest holes, so a
    +2 returns ``-1`` on stroke indices 17 and 18. Everyone else gets
    ``course_handicap // 18`` strokes per hole with the remainder going to the
    hardest holes first.
    """
    if course_handicap <= 0:
        gives_back_on = 19 - stroke_index
        return -1 if gives_back_on <= abs(course_handicap) else 0

    base, extra = divmod(course_handicap, 18)
    return base + (1 if stroke_index <= extra else 0)


def net_score(
    gross: Optional[int], playing_handicap: Optional[int], stroke_index: int
) -> Optional[int]:
    if gross is None or playing_handicap is None:
        return None
    return gross - strokes_for_hole(playing_handicap, stroke_index)


def round_net_total(
    gross_scores: Sequence[Optional[int]],
    playing_handicap: int,
    stroke_indices: Sequence[int],
) -> int:
    """Sum of net scores over the played holes of a round."""
    total = 0
    for i, gross in enumerate(gross_scores):
        if gross is None:
            continue
        stroke_index = stroke_indices[i] if i < len(stroke_indices) else i + 1
        total += gross - strokes_for_hole(playing_handicap, stroke_index or i + 1)
    return total


def playing_handicap(
    course_handicap: int, format: str = "stroke_play", allowance: int = 100
) -> int:
    """Apply a format allowance to a course handicap.

    An explicit ``allowance`` other than 100 overrides the format default.
    """
    effective = allowance if allowance != 100 else FORMAT_ALLOWANCES.get(format, 100)
    return _round_half_up(course_handicap * (effective / 100))


def score_name(gross: int, par: int) -> str:
    delta = gross - par
    name = _SCORE_NAMES.get(delta)
    if name:
        return name
    if delta < -3:
        return f"{abs(delta)} under par"
    return f"{delta} over par"


def format_score_delta(delta: int) -> str:
    if delta == 0:
        return "E"
    if delta > 0:
        return f"+{delta}"
    return str(delta)
