"""Trip-wide money totals built from computed round states.

All amounts are per man: in a 2v2 each player on the winning side collects
the amount and each player on the losing side pays it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from ..scoring.display import format_signed_money, format_skin_count
from ..scoring.nassau import SEGMENT_LABELS
from ..scoring.skins import calculate_skins_settlement
from ..scoring.types import (
    FormatState,
    MatchState,
    NassauState,
    RoundJunkSettlement,
    SkinsState,
    WolfState,
)
from ..scoring.wolf import calculate_wolf_settlement


@dataclass
class SettlementLineItem:
    round_id: str
    round_name: str
    amount: float
    description: str


@dataclass
class PlayerSettlement:
    player_id: str
    player_name: str
    total: float = 0.0
    line_items: List[SettlementLineItem] = field(default_factory=list)


@dataclass
class RoundBets:
    """Computed states for one round; any format the round lacks is ``None``.

    Skins and Wolf only settle once the round is completed.
    """

    round_id: str
    round_name: str
    completed: bool = False
    round_date: Optional[date] = None
    match: Optional[MatchState] = None
    nassau: Optional[NassauState] = None
    skins: Optional[SkinsState] = None
    wolf: Optional[WolfState] = None
    junk: Optional[RoundJunkSettlement] = None
    format_state: Optional[FormatState] = None


class _Ledger:
    def __init__(self, player_names: Mapping[str, str]) -> None:
        self._names = player_names
        self.players: Dict[str, PlayerSettlement] = {}

    def post(self, bets: RoundBets, player_id: str, amount: float, description: str) -> None:
        entry = self.players.get(player_id)
        if entry is None:
            entry = PlayerSettlement(
                player_id=player_id,
                player_name=self._names.get(player_id, "Unknown"),
            )
            self.players[player_id] = entry
        entry.total += amount
        entry.line_items.append(
            SettlementLineItem(
                round_id=bets.round_id,
                round_name=bets.round_name,
                amount=amount,
                description=description,
            )
        )

    def post_sides(
        self,
        bets: RoundBets,
        winners: Iterable[str],
        losers: Iterable[str],
        amount: float,
        label: str,
        result: Optional[str] = None,
    ) -> None:
        suffix = f" {result}" if result else ""
        for pid in winners:
            self.post(bets, pid, amount, f"{label}: Won{suffix}")
        for pid in losers:
            self.post(bets, pid, -amount, f"{label}: Lost{suffix}")


def _sides(winner: Optional[str], team_a: Sequence[str], team_b: Sequence[str]):
    if winner == "team_a":
        return team_a, team_b
    if winner == "team_b":
        return team_b, team_a
    return None


def _settle_match(ledger: _Ledger, bets: RoundBets, state: MatchState) -> None:
    if state.status != "completed":
        return
    team_a = [p.player_id for p in state.team_a.players]
    team_b = [p.player_id for p in state.team_b.players]

    sides = _sides(state.winner, team_a, team_b)
    if sides:
        amount = abs(state.final_lead) * state.stake_per_hole
        ledger.post_sides(bets, *sides, amount, "Main", state.final_result)

    for press in state.presses:
        if press.status != "completed":
            continue
        sides = _sides(press.winner, team_a, team_b)
        if sides:
            amount = abs(press.final_lead) * press.stake_per_hole
            ledger.post_sides(
                bets, *sides, amount, f"Press {press.press_number}", press.final_result
            )


def _settle_nassau(ledger: _Ledger, bets: RoundBets, state: NassauState) -> None:
    team_a = [p.player_id for p in state.team_a]
    team_b = [p.player_id for p in state.team_b]
    for sub in (state.front, state.back, state.overall):
        # A segment pays once it is decided: closed early or fully played.
        if sub.lead == 0 or not (sub.is_closed or sub.holes_remaining == 0):
            continue
        winners, losers = (team_a, team_b) if sub.lead > 0 else (team_b, team_a)
        ledger.post_sides(
            bets, winners, losers, state.stake_per_man, f"Nassau {SEGMENT_LABELS[sub.segment]}"
        )


def _settle_skins(ledger: _Ledger, bets: RoundBets, state: SkinsState) -> None:
    settlement = calculate_skins_settlement(state)
    for pid, amount in settlement.player_results.items():
        if amount == 0:
            continue
        count = state.skin_counts.get(pid, 0)
        ledger.post(bets, pid, amount, f"Skins: {format_skin_count(count)}")


def _settle_wolf(ledger: _Ledger, bets: RoundBets, state: WolfState) -> None:
    for pid, amount in calculate_wolf_settlement(state).items():
        if amount == 0:
            continue
        ledger.post(bets, pid, amount, f"Wolf: {format_signed_money(amount)}")


def _settle_junk(ledger: _Ledger, bets: RoundBets, settlement: RoundJunkSettlement) -> None:
    for summary in settlement.player_summaries:
        if summary.net_junk == 0:
            continue
        ledger.post(bets, summary.player_id, summary.net_junk, "Junk")


def settle_trip(
    rounds: Iterable[RoundBets], player_names: Mapping[str, str]
) -> List[PlayerSettlement]:
    """Per-player totals with line items, highest total first.

    Halved matches, presses and Nassau segments move no money and produce no
    line items.
    """
    ledger = _Ledger(player_names)
    for bets in rounds:
        if bets.match is not None:
            _settle_match(ledger, bets, bets.match)
        if bets.nassau is not None:
            _settle_nassau(ledger, bets, bets.nassau)
        if bets.completed and bets.skins is not None:
            _settle_skins(ledger, bets, bets.skins)
        if bets.completed and bets.wolf is not None:
            _settle_wolf(ledger, bets, bets.wolf)
        if bets.junk is not None:
            _settle_junk(ledger, bets, bets.junk)

    return sorted(ledger.players.values(), key=lambda p: p.total, reverse=True)


# ---------------------------------------------------------------------------
# Who pays who
# ---------------------------------------------------------------------------


@dataclass
class Payment:
    from_player_id: str
    from_player_name: str
    to_player_id: str
    to_player_name: str
    amount: float


def _cents(amount: float) -> float:
    return round(amount, 2)


def simplify_payments(players: Iterable[PlayerSettlement]) -> List[Payment]:
    """Pair the biggest losers with the biggest winners until everyone is square.

    Each loser pays winners in order of size; a payment is the smaller of what
    the loser still owes and what the winner is still due.
    """
    players = list(players)
    winners = sorted(
        (p for p in players if _cents(p.total) > 0), key=lambda p: p.total, reverse=True
    )
    losers = sorted((p for p in players if _cents(p.total) < 0), key=lambda p: p.total)
    due = {p.player_id: _cents(p.total) for p in winners}

    payments: List[Payment] = []
    for loser in losers:
        owed = _cents(-loser.total)
        for winner in winners:
            if owed <= 0:
                break
            remaining = due[winner.player_id]
            if remaining <= 0:
                continue
            amount = min(owed, remaining)
            payments.append(
                Payment(
                    from_player_id=loser.player_id,
                    from_player_name=loser.player_name,
                    to_player_id=winner.player_id,
                    to_player_name=winner.player_name,
                    amount=amount,
                )
            )
            owed = _cents(owed - amount)
            due[winner.player_id] = _cents(remaining - amount)
    return payments


# ---------------------------------------------------------------------------
# Team format standings
# ---------------------------------------------------------------------------


@dataclass
class RoundFormatPoints:
    round_id: str
    round_name: str
    round_date: Optional[date]
    format: str
    points: float
    team_number: int
    teammate: str


@dataclass
class PlayerFormatStanding:
    player_id: str
    player_name: str
    total: float = 0.0
    round_results: List[RoundFormatPoints] = field(default_factory=list)


@dataclass
class TripFormatStandings:
    points_hilo: List[PlayerFormatStanding]
    points_hilo_round_count: int
    stableford: List[PlayerFormatStanding]
    stableford_round_count: int


def trip_format_standings(rounds: Iterable[RoundBets]) -> TripFormatStandings:
    """Per-player Points Hi/Lo and Stableford totals across the trip.

    Every player is credited with their team's total for the round. Rounds
    with no completed hole are not counted.
    """
    tables: Dict[str, Dict[str, PlayerFormatStanding]] = {
        "points_hilo": {},
        "stableford": {},
    }
    round_counts = {"points_hilo": 0, "stableford": 0}

    for bets in rounds:
        state = bets.format_state
        if state is None or state.holes_played == 0:
            continue
        round_counts[state.format] += 1
        table = tables[state.format]
        for team_number, team, points in (
            (1, state.team1, state.team1_total),
            (2, state.team2, state.team2_total),
        ):
            for player in team:
                teammate = next(
                    (p.name for p in team if p.player_id != player.player_id), ""
                )
                standing = table.setdefault(
                    player.player_id,
                    PlayerFormatStanding(player_id=player.player_id, player_name=player.name),
                )
                standing.total += points
                standing.round_results.append(
                    RoundFormatPoints(
                        round_id=bets.round_id,
                        round_name=bets.round_name,
                        round_date=bets.round_date,
                        format=state.format,
                        points=points,
                        team_number=team_number,
                        teammate=teammate,
                    )
                )

    def ranked(fmt: str) -> List[PlayerFormatStanding]:
        return sorted(tables[fmt].values(), key=lambda s: s.total, reverse=True)

    return TripFormatStandings(
        points_hilo=ranked("points_hilo"),
        points_hilo_round_count=round_counts["points_hilo"],
        stableford=ranked("stableford"),
        stableford_round_count=round_counts["stableford"],
    )
