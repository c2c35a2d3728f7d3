"""Short display strings for match status, money and side bets."""

import math
from typing import Literal

from .types import SkinsHoleResult

Side = Literal["team_a", "team_b"]


def is_closed(lead: int, holes_remaining: int) -> bool:
    return abs(lead) > holes_remaining


def is_dormie(lead: int, holes_remaining: int) -> bool:
    return abs(lead) == holes_remaining and holes_remaining > 0


def format_lead_status(lead: int) -> str:
    if lead == 0:
        return "A/S"
    if lead > 0:
        return f"{lead} UP"
    return f"{abs(lead)} DN"


def format_lead_status_for_team(lead: int, team: Side) -> str:
    return format_lead_status(lead if team == "team_a" else -lead)


def format_final_result(lead: int, holes_remaining: int) -> str:
    """Result label for a decided match: ``"3&2"``, ``"1 UP"`` or ``"A/S"``."""
    if lead == 0:
        return "A/S"
    if holes_remaining > 0:
        return f"{abs(lead)}&{holes_remaining}"
    return f"{abs(lead)} UP"


def format_match_status(lead: int, holes_remaining: int) -> str:
    """Live status of a match from team A's perspective.

    ``"A/S"`` when level, ``"3&2"`` once closed with holes left, ``"2 UP"``
    when decided on the last hole, otherwise ``"2 UP"`` / ``"1 DN"``.
    """
    if lead == 0:
        return "A/S"
    if is_closed(lead, holes_remaining):
        return format_final_result(lead, holes_remaining)
    return format_lead_status(lead)


def format_status_badge(lead: int, holes_remaining: int) -> str:
    if is_dormie(lead, holes_remaining):
        return "DORMIE"
    return format_match_status(lead, holes_remaining)


def format_money(amount: float) -> str:
    """Whole dollars with halves rounded away from zero: 2.5 is ``"$3"``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${int(math.floor(abs(amount) + 0.5))}"


def format_signed_money(amount: float) -> str:
    if amount == 0:
        return "$0"
    sign = "+" if amount > 0 else "-"
    return f"{sign}${abs(amount):g}"


def format_carryover_alert(carry_count: int, skin_value: float) -> str:
    if carry_count == 0:
        return ""
    total = (carry_count + 1) * skin_value
    plural = "s" if carry_count > 1 else ""
    return f"{carry_count} skin{plural} carried! Next hole worth {format_money(total)}"


def format_skin_count(count: int) -> str:
    return f"{count} skin{'' if count == 1 else 's'}"


def skin_status_icon(result: SkinsHoleResult) -> str:
    if not result.complete:
        return "pending"
    if result.winner_id:
        return "won"
    if result.carried:
        return "carried"
    return "lost"


def format_stableford_points(points: int) -> str:
    if points > 0:
        return f"+{points}"
    return str(points)
