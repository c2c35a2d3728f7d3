"""Junk side bets that run alongside any main format.

Players claim events while scoring (greenie, sandy, ...). Every claim earns
its value; the snake passes to whoever three-putts last and that player pays
each of the others at the end of the round.
"""

from collections import OrderedDict
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from .types import (
    JunkBetConfig,
    JunkClaim,
    JunkClaimSummary,
    JunkType,
    JunkTypeInfo,
    PlayerJunkSummary,
    RoundJunkConfig,
    RoundJunkSettlement,
    SnakeState,
    SnakeTransfer,
)

JUNK_TYPES: Dict[str, JunkTypeInfo] = {
    info.type: info
    for info in (
        JunkTypeInfo(
            type="greenie",
            label="Greenie",
            description="Closest to pin on par 3 (must be on green)",
            self_reported=False,
            auto_detectable=False,
            default_value=5,
        ),
        JunkTypeInfo(
            type="sandy",
            label="Sandy",
            description="Par or better from a bunker",
            self_reported=True,
            auto_detectable=False,
            default_value=5,
        ),
        JunkTypeInfo(
            type="barkie",
            label="Barkie",
            description="Par or better after hitting a tree",
            self_reported=True,
            auto_detectable=False,
            default_value=5,
        ),
        JunkTypeInfo(
            type="polie",
            label="Polie",
            description="Sinking a long putt (20ft+)",
            self_reported=True,
            auto_detectable=False,
            default_value=5,
        ),
        JunkTypeInfo(
            type="snake",
            label="Snake",
            description="3-putt penalty, passes to the last player who 3-putts",
            self_reported=True,
            auto_detectable=False,
            default_value=5,
        ),
        JunkTypeInfo(
            type="birdie",
            label="Birdie",
            description="Score one under par",
            self_reported=False,
            auto_detectable=True,
            default_value=5,
        ),
        JunkTypeInfo(
            type="eagle",
            label="Eagle",
            description="Score two or more under par",
            self_reported=False,
            auto_detectable=True,
            default_value=10,
        ),
    )
}

DEFAULT_JUNK_CONFIG = RoundJunkConfig(
    enabled=False,
    bets=[
        JunkBetConfig(type=info.type, enabled=True, value=info.default_value)
        for info in JUNK_TYPES.values()
    ],
)


def compute_snake_state(
    snake_claims: Iterable[JunkClaim],
    player_names: Mapping[str, str],
    value_per_player: float,
) -> SnakeState:
    """Replay snake claims in hole order; the last claimant holds the snake."""
    ordered = sorted(snake_claims, key=lambda c: c.hole_number)
    transfers = [
        SnakeTransfer(
            player_id=c.player_id,
            player_name=player_names.get(c.player_id, "Unknown"),
            hole_number=c.hole_number,
        )
        for c in ordered
    ]
    last = transfers[-1] if transfers else None
    return SnakeState(
        current_holder_id=last.player_id if last else None,
        current_holder_name=last.player_name if last else None,
        transfers=transfers,
        value_per_player=value_per_player,
    )


def _config_for(config: RoundJunkConfig, junk_type: str) -> Optional[JunkBetConfig]:
    for bet in config.bets:
        if bet.type == junk_type:
            return bet
    return None


def calculate_junk_settlement(
    claims: Sequence[JunkClaim],
    player_ids: Sequence[str],
    player_names: Mapping[str, str],
    config: RoundJunkConfig,
    round_id: Optional[str] = None,
) -> RoundJunkSettlement:
    snake_claims = [c for c in claims if c.junk_type == "snake"]
    regular = [c for c in claims if c.junk_type != "snake"]

    # player -> junk type -> [count, total]
    tallies: Dict[str, "OrderedDict[str, List[float]]"] = {}
    for claim in regular:
        per_type = tallies.setdefault(claim.player_id, OrderedDict())
        entry = per_type.setdefault(claim.junk_type, [0, 0.0])
        entry[0] += 1
        entry[1] += claim.value

    snake_state = None
    penalties: Dict[str, float] = {}
    snake_config = _config_for(config, "snake")
    if snake_config is not None and snake_config.enabled and snake_claims:
        snake_state = compute_snake_state(snake_claims, player_names, snake_config.value)
        holder = snake_state.current_holder_id
        if holder in player_ids:
            penalties[holder] = -snake_config.value * (len(player_ids) - 1)

    summaries: List[PlayerJunkSummary] = []
    total_pot = 0.0
    for player_id in player_ids:
        claim_summaries = [
            JunkClaimSummary(junk_type=junk_type, count=count, total_value=value)
            for junk_type, (count, value) in tallies.get(player_id, {}).items()
        ]
        earnings = sum(c.total_value for c in claim_summaries)
        penalty = penalties.get(player_id, 0)
        total_pot += earnings
        summaries.append(
            PlayerJunkSummary(
                player_id=player_id,
                player_name=player_names.get(player_id, "Unknown"),
                claims=claim_summaries,
                total_earnings=earnings,
                snake_penalty=penalty,
                net_junk=earnings + penalty,
            )
        )

    summaries.sort(key=lambda s: s.net_junk, reverse=True)
    return RoundJunkSettlement(
        round_id=round_id,
        player_summaries=summaries,
        snake_state=snake_state,
        total_pot=total_pot,
    )


def is_junk_relevant_for_hole(junk_type: str, par: int) -> bool:
    """Greenies only happen on par 3s; everything else can happen anywhere."""
    if junk_type == "greenie":
        return par == 3
    return True


def check_auto_junk(gross: int, par: int) -> Optional[JunkType]:
    diff = gross - par
    if diff <= -2:
        return "eagle"
    if diff == -1:
        return "birdie"
    return None


def enabled_junk_types(config: RoundJunkConfig, par: int) -> List[JunkType]:
    if not config.enabled:
        return []
    return [
        bet.type
        for bet in config.bets
        if bet.enabled and is_junk_relevant_for_hole(bet.type, par)
    ]


def format_junk_value(value: float) -> str:
    return f"${value:g}"
