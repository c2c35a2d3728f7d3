"""Single entry point over every betting format.

Each configuration carries a ``format`` tag so callers can hold a list of
heterogeneous bets for a round and compute their states uniformly.
"""

from typing import Annotated, Literal, Sequence, Union

from pydantic import Field, TypeAdapter, model_validator

from . import match_play, nassau, skins, team_formats, wolf
from .types import Frozen, Hole, Match, NassauBet, ScoreMap, SkinsBet, TeamFormatBet, WolfBet


class MatchPlayConfig(Frozen):
    format: Literal["match_play"] = "match_play"
    match: Match


class NassauConfig(Frozen):
    format: Literal["nassau"] = "nassau"
    bet: NassauBet


class SkinsConfig(Frozen):
    format: Literal["skins"] = "skins"
    bet: SkinsBet


class WolfConfig(Frozen):
    format: Literal["wolf"] = "wolf"
    bet: WolfBet


class TeamFormatConfig(Frozen):
    format: Literal["points_hilo", "stableford"]
    bet: TeamFormatBet

    @model_validator(mode="after")
    def _check_format(self):
        if self.bet.format != self.format:
            raise ValueError(
                f"bet format {self.bet.format!r} does not match config format {self.format!r}"
            )
        return self


BetConfig = Annotated[
    Union[MatchPlayConfig, NassauConfig, SkinsConfig, WolfConfig, TeamFormatConfig],
    Field(discriminator="format"),
]

bet_config_adapter = TypeAdapter(BetConfig)


def parse_bet_config(data) -> BetConfig:
    return bet_config_adapter.validate_python(data)


def compute_state(bet: BetConfig, scores: ScoreMap, holes: Sequence[Hole]):
    """Dispatch to the engine for ``bet.format``.

    Returns ``None`` for Wolf and team formats whose player layout is invalid.
    """
    if bet.format == "match_play":
        return match_play.compute_match_state(bet.match, scores, holes)
    if bet.format == "nassau":
        return nassau.compute_nassau_state(bet.bet, scores, holes)
    if bet.format == "skins":
        return skins.compute_skins_state(bet.bet, scores, holes)
    if bet.format == "wolf":
        return wolf.compute_wolf_state(bet.bet, scores, holes)
    if bet.format in ("points_hilo", "stableford"):
        return team_formats.compute_format_state(bet.bet, scores, holes)
    raise ValueError(f"unsupported format: {bet.format}")
