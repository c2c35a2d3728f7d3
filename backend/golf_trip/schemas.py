from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, model_validator


class PressCreate(BaseModel):
    starting_hole: int = Field(..., ge=1, le=18)
    ending_hole: int = Field(18, ge=1, le=18)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_window(self):
        if self.ending_hole < self.starting_hole:
            raise ValueError("ending_hole must be >= starting_hole")
        return self


class PressOut(BaseModel):
    id: str
    match_id: str
    starting_hole: int
    ending_hole: int
    stake_per_hole: float
    status: str
    winner: Optional[str] = None
    final_result: Optional[str] = None
    current_lead: int
    holes_played: int

    model_config = ConfigDict(from_attributes=True)


class MatchSyncOut(BaseModel):
    id: str
    round_id: str
    match_type: str
    stake_per_hole: float
    status: str
    winner: Optional[str] = None
    final_result: Optional[str] = None
    current_lead: int
    holes_played: int
    presses: List[PressOut]

    model_config = ConfigDict(from_attributes=True)


class SettlementLineItemOut(BaseModel):
    round_id: str
    round_name: str
    amount: float
    description: str

    model_config = ConfigDict(from_attributes=True)


class PlayerSettlementOut(BaseModel):
    player_id: str
    player_name: str
    total: float
    line_items: List[SettlementLineItemOut]

    model_config = ConfigDict(from_attributes=True)


class PaymentOut(BaseModel):
    from_player_id: str
    from_player_name: str
    to_player_id: str
    to_player_name: str
    amount: float

    model_config = ConfigDict(from_attributes=True)


class TripSettlementOut(BaseModel):
    trip_id: str
    players: List[PlayerSettlementOut]
    payments: List[PaymentOut] = []


class RoundFormatPointsOut(BaseModel):
    round_id: str
    round_name: str
    round_date: Optional[date] = None
    format: str
    points: float
    team_number: int
    teammate: str

    model_config = ConfigDict(from_attributes=True)


class PlayerFormatStandingOut(BaseModel):
    player_id: str
    player_name: str
    total: float
    round_results: List[RoundFormatPointsOut]

    model_config = ConfigDict(from_attributes=True)


class TripFormatStandingsOut(BaseModel):
    trip_id: str
    points_hilo: List[PlayerFormatStandingOut]
    points_hilo_round_count: int
    stableford: List[PlayerFormatStandingOut]
    stableford_round_count: int
