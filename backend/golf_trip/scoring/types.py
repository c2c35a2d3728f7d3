"""Immutable value objects shared by the scoring engines."""

from __future__ import annotations

from typing import Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

ScoreMap = Mapping[str, Mapping[int, Optional[int]]]

MatchType = Literal["1v1", "2v2"]
MatchStatus = Literal["in_progress", "completed", "canceled"]
MatchWinner = Optional[Literal["team_a", "team_b", "halved"]]
HoleWinner = Optional[Literal["team_a", "team_b", "halved"]]
NassauSegment = Literal["front", "back", "overall"]
TeamFormat = Literal["points_hilo", "stableford"]


class Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Hole(Frozen):
    number: int = Field(ge=1, le=18)
    par: int = 4
    stroke_index: int


class PlayerHandicapContext(Frozen):
    player_id: str
    playing_handicap: Optional[int] = None
    name: str = "Unknown"


class PlayerHoleScore(Frozen):
    player_id: str
    player_name: str
    gross_score: Optional[int] = None
    net_score: Optional[int] = None
    stableford_points: Optional[int] = None


# ---------------------------------------------------------------------------
# Match play
# ---------------------------------------------------------------------------


class MatchTeam(Frozen):
    player1: PlayerHandicapContext
    player2: Optional[PlayerHandicapContext] = None

    @property
    def players(self) -> List[PlayerHandicapContext]:
        return [p for p in (self.player1, self.player2) if p is not None]


class Press(Frozen):
    id: Optional[str] = None
    starting_hole: int = Field(ge=1, le=18)
    ending_hole: int = Field(default=18, ge=1, le=18)
    stake_per_hole: float


class Match(Frozen):
    id: Optional[str] = None
    round_id: Optional[str] = None
    match_type: MatchType = "1v1"
    stake_per_hole: float
    team_a: MatchTeam
    team_b: MatchTeam
    presses: List[Press] = Field(default_factory=list)


class HoleResult(Frozen):
    hole_number: int
    team_a_net: Optional[int] = None
    team_b_net: Optional[int] = None
    winner: HoleWinner = None
    cumulative_lead: int = 0


class PressState(Frozen):
    id: Optional[str] = None
    press_number: int
    starting_hole: int
    ending_hole: int
    stake_per_hole: float
    status: MatchStatus
    winner: MatchWinner
    final_result: Optional[str]
    final_lead: int
    current_lead: int
    holes_played: int
    holes_remaining: int
    is_dormie: bool
    is_closed: bool
    status_label: str


class MatchState(Frozen):
    match_id: Optional[str] = None
    round_id: Optional[str] = None
    match_type: MatchType
    stake_per_hole: float
    status: MatchStatus
    winner: MatchWinner
    final_result: Optional[str]
    final_lead: int
    team_a: MatchTeam
    team_b: MatchTeam
    current_lead: int
    holes_played: int
    holes_remaining: int
    is_dormie: bool
    is_match_closed: bool
    status_label: str
    hole_results: List[HoleResult]
    presses: List[PressState]


class PressStake(Frozen):
    press_number: int
    amount: float


class PressLead(Frozen):
    press_number: int
    lead: int
    status: str


class HoleMatchInfo(Frozen):
    hole_number: int
    total_at_stake: float
    main_match_stake: float
    press_stakes: List[PressStake]
    lead: int
    status: str
    is_dormie: bool
    is_match_closed: bool
    press_states: List[PressLead]


class PressExposure(Frozen):
    press_number: int
    exposure: float


class ExposureInfo(Frozen):
    total_exposure: float
    main_match_exposure: float
    press_exposures: List[PressExposure]
    current_position: float


# ---------------------------------------------------------------------------
# Nassau
# ---------------------------------------------------------------------------


class NassauBet(Frozen):
    round_id: Optional[str] = None
    stake_per_man: float
    auto_press: bool = False
    auto_press_threshold: int = Field(default=2, ge=1)
    team_a: List[PlayerHandicapContext]
    team_b: List[PlayerHandicapContext]


class NassauHoleResult(Frozen):
    hole_number: int
    par: int
    team_a_net: Optional[int] = None
    team_b_net: Optional[int] = None
    winner: HoleWinner = None
    complete: bool = False


class NassauSubMatchState(Frozen):
    segment: NassauSegment
    label: str
    lead: int
    holes_played: int
    holes_remaining: int
    is_closed: bool
    is_dormie: bool
    is_halved: bool
    status: str


class NassauAutoPress(Frozen):
    segment: NassauSegment
    trigger_hole: int
    starting_hole: int
    lead_at_trigger: int
    holes_remaining: int
    stake: float


class NassauState(Frozen):
    round_id: Optional[str] = None
    stake_per_man: float
    auto_press: bool
    auto_press_threshold: int
    team_a: List[PlayerHandicapContext]
    team_b: List[PlayerHandicapContext]
    front: NassauSubMatchState
    back: NassauSubMatchState
    overall: NassauSubMatchState
    hole_results: List[NassauHoleResult]
    current_hole: int
    holes_played: int
    auto_presses: List[NassauAutoPress]


class NassauSettlement(Frozen):
    front_result: float
    back_result: float
    overall_result: float
    player_results: Dict[str, float]


# ---------------------------------------------------------------------------
# Skins
# ---------------------------------------------------------------------------


class SkinsBet(Frozen):
    round_id: Optional[str] = None
    skin_value: float
    carryover: bool = True
    players: List[PlayerHandicapContext]


class SkinsHoleResult(Frozen):
    hole_number: int
    par: int
    player_scores: List[PlayerHoleScore]
    winner_id: Optional[str] = None
    winner_name: Optional[str] = None
    carried: bool = False
    carry_count_before: int = 0
    pot_value: float
    complete: bool


class SkinsState(Frozen):
    round_id: Optional[str] = None
    skin_value: float
    carryover: bool
    players: List[PlayerHandicapContext]
    hole_results: List[SkinsHoleResult]
    current_carry_count: int
    current_carry_value: float
    skin_counts: Dict[str, int]
    skin_values: Dict[str, float]
    total_skins_awarded: int
    total_skins_carried: int
    current_hole: int
    holes_played: int
    total_holes: int


class SkinsSettlement(Frozen):
    player_results: Dict[str, float]
    total_pot: float
    buy_in: float


# ---------------------------------------------------------------------------
# Wolf
# ---------------------------------------------------------------------------


class WolfDecision(Frozen):
    hole_number: int = Field(ge=1, le=18)
    partner_id: Optional[str] = None
    is_lone_wolf: bool = False


class WolfBet(Frozen):
    round_id: Optional[str] = None
    stake_per_hole: float
    lone_wolf_multiplier: float = 2
    tee_order: List[PlayerHandicapContext]
    decisions: List[WolfDecision] = Field(default_factory=list)


class WolfHoleResult(Frozen):
    hole_number: int
    par: int
    wolf_id: str
    wolf_name: str
    partner_id: Optional[str] = None
    partner_name: Optional[str] = None
    is_lone_wolf: bool = False
    player_scores: List[PlayerHoleScore]
    wolf_team_net: Optional[int] = None
    field_team_net: Optional[int] = None
    winner: Optional[Literal["wolf", "field", "halved"]] = None
    wolf_points_per_man: float = 0
    deltas: Dict[str, float]
    complete: bool
    decided: bool


class WolfState(Frozen):
    round_id: Optional[str] = None
    stake_per_hole: float
    lone_wolf_multiplier: float
    tee_order: List[str]
    players: List[PlayerHandicapContext]
    hole_results: List[WolfHoleResult]
    decisions: List[WolfDecision]
    player_totals: Dict[str, float]
    current_wolf_id: Optional[str]
    current_wolf_name: Optional[str]
    current_hole: int
    holes_played: int
    total_holes: int


# ---------------------------------------------------------------------------
# Team formats (Points Hi/Lo, Stableford)
# ---------------------------------------------------------------------------


class TeamFormatBet(Frozen):
    round_id: Optional[str] = None
    format: TeamFormat
    team1: List[PlayerHandicapContext]
    team2: List[PlayerHandicapContext]


class HoleFormatResult(Frozen):
    hole_number: int
    par: int
    team1_points: float
    team2_points: float
    team1_scores: List[PlayerHoleScore]
    team2_scores: List[PlayerHoleScore]
    complete: bool


class FormatState(Frozen):
    format: TeamFormat
    round_id: Optional[str] = None
    team1: List[PlayerHandicapContext]
    team2: List[PlayerHandicapContext]
    hole_results: List[HoleFormatResult]
    team1_total: float
    team2_total: float
    current_hole: int
    holes_played: int


# ---------------------------------------------------------------------------
# Junk (side bets) and scramble
# ---------------------------------------------------------------------------

JunkType = Literal["greenie", "sandy", "barkie", "polie", "snake", "birdie", "eagle"]


class JunkTypeInfo(Frozen):
    type: JunkType
    label: str
    description: str
    self_reported: bool
    auto_detectable: bool
    default_value: float


class JunkBetConfig(Frozen):
    type: JunkType
    enabled: bool = True
    value: float


class RoundJunkConfig(Frozen):
    enabled: bool = False
    bets: List[JunkBetConfig] = Field(default_factory=list)


class JunkClaim(Frozen):
    player_id: str
    hole_number: int = Field(ge=1, le=18)
    junk_type: JunkType
    value: float


class SnakeTransfer(Frozen):
    player_id: str
    player_name: str
    hole_number: int


class SnakeState(Frozen):
    current_holder_id: Optional[str] = None
    current_holder_name: Optional[str] = None
    transfers: List[SnakeTransfer]
    value_per_player: float


class JunkClaimSummary(Frozen):
    junk_type: JunkType
    count: int
    total_value: float


class PlayerJunkSummary(Frozen):
    player_id: str
    player_name: str
    claims: List[JunkClaimSummary]
    total_earnings: float
    snake_penalty: float
    net_junk: float


class RoundJunkSettlement(Frozen):
    round_id: Optional[str] = None
    player_summaries: List[PlayerJunkSummary]
    snake_state: Optional[SnakeState] = None
    total_pot: float


class ScrambleResult(Frozen):
    winner: Literal["team_a", "team_b", "tied"]
    team_a_total: int
    team_b_total: int
    margin: int
    holes_completed: int
