from sqlalchemy.orm import relationship
from sqlalchemy import (
    Column,
    String,
    Date,
    DateTime,
    ForeignKey,
    JSON,
    Integer,
    Float,
    Boolean,
    Index,
    UniqueConstraint,
    CheckConstraint,
)
from sqlalchemy.sql import func
from .db import Base


class Trip(Base):
    __tablename__ = "trip"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)


class Player(Base):
    __tablename__ = "player"
    id = Column(String, primary_key=True)
    trip_id = Column(String, ForeignKey("trip.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    handicap_index = Column(Float, nullable=True)

    __table_args__ = (Index("ix_player_trip_id", "trip_id"),)


class Tee(Base):
    __tablename__ = "tee"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    rating = Column(Float, nullable=False)
    slope = Column(Integer, nullable=False)
    par = Column(Integer, nullable=False)

    holes = relationship(
        "Hole",
        cascade="all, delete-orphan",
        order_by="Hole.hole_number",
        back_populates="tee",
    )


class Hole(Base):
    __tablename__ = "hole"
    id = Column(String, primary_key=True)
    tee_id = Column(String, ForeignKey("tee.id", ondelete="CASCADE"), nullable=False)
    hole_number = Column(Integer, nullable=False)
    par = Column(Integer, nullable=False)
    stroke_index = Column(Integer, nullable=False)

    tee = relationship("Tee", back_populates="holes")

    __table_args__ = (
        UniqueConstraint("tee_id", "hole_number", name="uq_hole_tee_id_hole_number"),
        CheckConstraint("hole_number >= 1 AND hole_number <= 18", name="ck_hole_number"),
    )


class Round(Base):
    __tablename__ = "round"
    id = Column(String, primary_key=True)
    trip_id = Column(String, ForeignKey("trip.id", ondelete="CASCADE"), nullable=False)
    tee_id = Column(String, ForeignKey("tee.id"), nullable=True)
    name = Column(String, nullable=False)
    date = Column(Date, nullable=True)
    # upcoming | in_progress | completed
    status = Column(String, nullable=False, default="upcoming")
    # stroke_play | match_play | points_hilo | stableford | scramble | nassau | skins | wolf
    format = Column(String, nullable=False, default="stroke_play")
    junk_config = Column(JSON, nullable=True)

    __table_args__ = (Index("ix_round_trip_id", "trip_id"),)


class RoundPlayer(Base):
    __tablename__ = "round_player"
    id = Column(String, primary_key=True)
    round_id = Column(String, ForeignKey("round.id", ondelete="CASCADE"), nullable=False)
    player_id = Column(String, ForeignKey("player.id", ondelete="CASCADE"), nullable=False)
    playing_handicap = Column(Integer, nullable=True)
    # team1 | team2, used by the team point formats
    team = Column(String, nullable=True)

    player = relationship("Player", lazy="joined")

    __table_args__ = (
        UniqueConstraint("round_id", "player_id", name="uq_round_player_round_id_player_id"),
    )


class Score(Base):
    __tablename__ = "score"
    id = Column(String, primary_key=True)
    round_id = Column(String, ForeignKey("round.id", ondelete="CASCADE"), nullable=False)
    player_id = Column(String, ForeignKey("player.id", ondelete="CASCADE"), nullable=False)
    hole_number = Column(Integer, nullable=False)
    gross_strokes = Column(Integer, nullable=True)
    updated_at = Column(DateTime, server_default=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint(
            "round_id",
            "player_id",
            "hole_number",
            name="uq_score_round_id_player_id_hole_number",
        ),
        Index("ix_score_round_id", "round_id"),
    )


class Match(Base):
    __tablename__ = "match"
    id = Column(String, primary_key=True)
    round_id = Column(
        String, ForeignKey("round.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    match_type = Column(String, nullable=False)  # 1v1 | 2v2
    stake_per_hole = Column(Float, nullable=False, default=1.0)
    team_a_player1_id = Column(String, ForeignKey("player.id"), nullable=False)
    team_a_player2_id = Column(String, ForeignKey("player.id"), nullable=True)
    team_b_player1_id = Column(String, ForeignKey("player.id"), nullable=False)
    team_b_player2_id = Column(String, ForeignKey("player.id"), nullable=True)

    # Cached from the scores by the sync endpoint.
    status = Column(String, nullable=False, default="in_progress")
    winner = Column(String, nullable=True)
    final_result = Column(String, nullable=True)
    current_lead = Column(Integer, nullable=False, default=0)
    holes_played = Column(Integer, nullable=False, default=0)
    updated_at = Column(DateTime, server_default=func.now(), nullable=False)

    presses = relationship(
        "Press",
        cascade="all, delete-orphan",
        order_by="Press.starting_hole",
        back_populates="match",
        lazy="selectin",
    )


class Press(Base):
    __tablename__ = "press"
    id = Column(String, primary_key=True)
    match_id = Column(String, ForeignKey("match.id", ondelete="CASCADE"), nullable=False)
    starting_hole = Column(Integer, nullable=False)
    ending_hole = Column(Integer, nullable=False, default=18)
    stake_per_hole = Column(Float, nullable=False)

    status = Column(String, nullable=False, default="in_progress")
    winner = Column(String, nullable=True)
    final_result = Column(String, nullable=True)
    current_lead = Column(Integer, nullable=False, default=0)
    holes_played = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    match = relationship("Match", back_populates="presses")

    __table_args__ = (
        CheckConstraint("ending_hole >= starting_hole", name="ck_press_hole_range"),
        Index("ix_press_match_id", "match_id"),
    )


class NassauBet(Base):
    __tablename__ = "nassau_bet"
    id = Column(String, primary_key=True)
    round_id = Column(
        String, ForeignKey("round.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    stake_per_man = Column(Float, nullable=False, default=5.0)
    auto_press = Column(Boolean, nullable=False, default=False)
    auto_press_threshold = Column(Integer, nullable=False, default=2)
    team_a_player1_id = Column(String, ForeignKey("player.id"), nullable=False)
    team_a_player2_id = Column(String, ForeignKey("player.id"), nullable=True)
    team_b_player1_id = Column(String, ForeignKey("player.id"), nullable=False)
    team_b_player2_id = Column(String, ForeignKey("player.id"), nullable=True)


class SkinsBet(Base):
    __tablename__ = "skins_bet"
    id = Column(String, primary_key=True)
    round_id = Column(
        String, ForeignKey("round.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    skin_value = Column(Float, nullable=False, default=5.0)
    carryover = Column(Boolean, nullable=False, default=True)


class WolfBet(Base):
    __tablename__ = "wolf_bet"
    id = Column(String, primary_key=True)
    round_id = Column(
        String, ForeignKey("round.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    stake_per_hole = Column(Float, nullable=False, default=2.0)
    lone_wolf_multiplier = Column(Integer, nullable=False, default=2)
    tee_order = Column(JSON, nullable=False)  # list of player ids

    decisions = relationship(
        "WolfDecision",
        cascade="all, delete-orphan",
        order_by="WolfDecision.hole_number",
        lazy="selectin",
    )


class WolfDecision(Base):
    __tablename__ = "wolf_decision"
    id = Column(String, primary_key=True)
    wolf_bet_id = Column(
        String, ForeignKey("wolf_bet.id", ondelete="CASCADE"), nullable=False
    )
    hole_number = Column(Integer, nullable=False)
    wolf_player_id = Column(String, ForeignKey("player.id"), nullable=False)
    partner_player_id = Column(String, ForeignKey("player.id"), nullable=True)
    is_lone_wolf = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        UniqueConstraint(
            "wolf_bet_id", "hole_number", name="uq_wolf_decision_bet_id_hole_number"
        ),
    )


class JunkBet(Base):
    __tablename__ = "junk_bet"
    id = Column(String, primary_key=True)
    round_id = Column(String, ForeignKey("round.id", ondelete="CASCADE"), nullable=False)
    player_id = Column(String, ForeignKey("player.id", ondelete="CASCADE"), nullable=False)
    hole_number = Column(Integer, nullable=False)
    junk_type = Column(String, nullable=False)
    value = Column(Float, nullable=False, default=5.0)

    __table_args__ = (
        UniqueConstraint(
            "round_id",
            "player_id",
            "hole_number",
            "junk_type",
            name="uq_junk_bet_round_player_hole_type",
        ),
        Index("ix_junk_bet_round_id", "round_id"),
    )
