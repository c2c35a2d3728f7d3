from typing import Any, List, Optional, Sequence

from ..scoring.types import Hole


class ValidationError(Exception):
    """Raised when a bet or course configuration is invalid."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


MATCH_TEAM_SIZES = {"1v1": 1, "2v2": 2}


def validate_stake(value: Any, *, field: str = "stake") -> float:
    """Return ``value`` as a float, rejecting booleans, negatives and junk."""
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number (not a boolean).")
    try:
        stake = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a number.")
    if stake < 0:
        raise ValidationError(f"{field} must be >= 0.")
    return stake


def validate_press_window(
    starting_hole: int, ending_hole: int = 18, *, last_hole: int = 18
) -> None:
    """Rules:
    - ``1 <= starting_hole <= ending_hole <= last_hole``
    """
    if starting_hole < 1 or starting_hole > last_hole:
        raise ValidationError(
            f"Press must start between hole 1 and hole {last_hole}."
        )
    if ending_hole < starting_hole:
        raise ValidationError("Press cannot end before it starts.")
    if ending_hole > last_hole:
        raise ValidationError(f"Press cannot end after hole {last_hole}.")


def validate_match_teams(
    match_type: str,
    team_a: Sequence[Optional[str]],
    team_b: Sequence[Optional[str]],
) -> None:
    size = MATCH_TEAM_SIZES.get(match_type)
    if size is None:
        raise ValidationError(f"Unknown match type '{match_type}'.")

    a = [p for p in team_a if p]
    b = [p for p in team_b if p]
    if len(a) != size or len(b) != size:
        raise ValidationError(
            f"{match_type} matches require exactly {size} player(s) per side."
        )
    if len(set(a + b)) != len(a) + len(b):
        raise ValidationError("A player cannot appear twice in one match.")


def validate_tee_order(tee_order: Sequence[str]) -> List[str]:
    order = [p for p in tee_order if p]
    if len(order) != 4:
        raise ValidationError("Wolf requires exactly 4 players in the tee order.")
    if len(set(order)) != 4:
        raise ValidationError("Wolf tee order cannot repeat a player.")
    return order


def validate_holes(holes: Sequence[Hole]) -> None:
    """Rules:
    - At least one hole is required
    - Hole numbers are unique
    - Stroke indices are between 1 and 18 and unique
    """
    if not holes:
        raise ValidationError("At least one hole is required.")
    numbers = [h.number for h in holes]
    if len(set(numbers)) != len(numbers):
        raise ValidationError("Hole numbers must be unique.")
    indices = [h.stroke_index for h in holes]
    for hole in holes:
        if not 1 <= hole.stroke_index <= 18:
            raise ValidationError(
                f"Hole #{hole.number} stroke index must be between 1 and 18."
            )
    if len(set(indices)) != len(indices):
        raise ValidationError("Stroke indices must be unique.")


def validate_team_format_teams(
    team1: Sequence[str], team2: Sequence[str]
) -> None:
    if len(team1) != 2 or len(team2) != 2:
        raise ValidationError("Team formats require two teams of two players.")
