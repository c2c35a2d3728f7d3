"""Helpers shared by the per-format scoring engines."""

from typing import Any, Dict, Iterable, List, Optional, Sequence

from .handicap import net_score
from .types import Hole, PlayerHandicapContext, PlayerHoleScore, ScoreMap


def default_holes(count: int = 18) -> List[Hole]:
    """Par-4 holes with stroke index equal to the hole number."""
    return [Hole(number=n, par=4, stroke_index=n) for n in range(1, count + 1)]


def sort_holes(holes: Iterable[Hole]) -> List[Hole]:
    return sorted(holes, key=lambda h: h.number)


def gross_for(scores: ScoreMap, player_id: str, hole_number: int) -> Optional[int]:
    return (scores.get(player_id) or {}).get(hole_number)


def player_net(
    scores: ScoreMap, player: PlayerHandicapContext, hole: Hole
) -> Optional[int]:
    return net_score(
        gross_for(scores, player.player_id, hole.number),
        player.playing_handicap,
        hole.stroke_index,
    )


def player_hole_score(
    scores: ScoreMap, player: PlayerHandicapContext, hole: Hole
) -> PlayerHoleScore:
    gross = gross_for(scores, player.player_id, hole.number)
    return PlayerHoleScore(
        player_id=player.player_id,
        player_name=player.name,
        gross_score=gross,
        net_score=net_score(gross, player.playing_handicap, hole.stroke_index),
    )


def best_ball(nets: Iterable[Optional[int]]) -> Optional[int]:
    """Lowest net among the players who have one, ``None`` if nobody does."""
    present = [n for n in nets if n is not None]
    return min(present) if present else None


def current_hole(results: Sequence[Any], holes: Sequence[Hole], pending) -> int:
    """First hole for which ``pending(result)`` holds, else the last hole."""
    for result in results:
        if pending(result):
            return result.hole_number
    return holes[-1].number if holes else 1


def build_score_map(rows: Iterable[Any]) -> Dict[str, Dict[int, Optional[int]]]:
    """Turn persisted score rows into ``player_id -> hole -> gross``."""
    score_map: Dict[str, Dict[int, Optional[int]]] = {}
    for row in rows:
        score_map.setdefault(row.player_id, {})[row.hole_number] = row.gross_strokes
    return score_map


def build_handicap_map(rows: Iterable[Any], *, default: Optional[int] = 0) -> Dict[str, Optional[int]]:
    """Map player ids to playing handicaps, substituting ``default`` for gaps."""
    return {
        row.player_id: row.playing_handicap
        if row.playing_handicap is not None
        else default
        for row in rows
    }
