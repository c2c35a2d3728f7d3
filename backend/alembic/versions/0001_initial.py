from alembic import op
import sqlalchemy as sa

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def _round_fk(ondelete="CASCADE"):
    return sa.ForeignKey("round.id", ondelete=ondelete)


def upgrade():
    op.create_table(
        "trip",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        "player",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("trip_id", sa.String(), sa.ForeignKey("trip.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("handicap_index", sa.Float(), nullable=True),
    )
    op.create_index("ix_player_trip_id", "player", ["trip_id"])
    op.create_table(
        "tee",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("rating", sa.Float(), nullable=False),
        sa.Column("slope", sa.Integer(), nullable=False),
        sa.Column("par", sa.Integer(), nullable=False),
    )
    op.create_table(
        "hole",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("tee_id", sa.String(), sa.ForeignKey("tee.id", ondelete="CASCADE"), nullable=False),
        sa.Column("hole_number", sa.Integer(), nullable=False),
        sa.Column("par", sa.Integer(), nullable=False),
        sa.Column("stroke_index", sa.Integer(), nullable=False),
        sa.UniqueConstraint("tee_id", "hole_number", name="uq_hole_tee_id_hole_number"),
        sa.CheckConstraint("hole_number >= 1 AND hole_number <= 18", name="ck_hole_number"),
    )
    op.create_table(
        "round",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("trip_id", sa.String(), sa.ForeignKey("trip.id", ondelete="CASCADE"), nullable=False),
        sa.Column("tee_id", sa.String(), sa.ForeignKey("tee.id"), nullable=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("date", sa.Date(), nullable=True),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("format", sa.String(), nullable=False),
        sa.Column("junk_config", sa.JSON(), nullable=True),
    )
    op.create_index("ix_round_trip_id", "round", ["trip_id"])
    op.create_table(
        "round_player",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("round_id", sa.String(), _round_fk(), nullable=False),
        sa.Column("player_id", sa.String(), sa.ForeignKey("player.id", ondelete="CASCADE"), nullable=False),
        sa.Column("playing_handicap", sa.Integer(), nullable=True),
        sa.Column("team", sa.String(), nullable=True),
        sa.UniqueConstraint("round_id", "player_id", name="uq_round_player_round_id_player_id"),
    )
    op.create_table(
        "score",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("round_id", sa.String(), _round_fk(), nullable=False),
        sa.Column("player_id", sa.String(), sa.ForeignKey("player.id", ondelete="CASCADE"), nullable=False),
        sa.Column("hole_number", sa.Integer(), nullable=False),
        sa.Column("gross_strokes", sa.Integer(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint(
            "round_id",
            "player_id",
            "hole_number",
            name="uq_score_round_id_player_id_hole_number",
        ),
    )
    op.create_index("ix_score_round_id", "score", ["round_id"])
    op.create_table(
        "match",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("round_id", sa.String(), _round_fk(), nullable=False, unique=True),
        sa.Column("match_type", sa.String(), nullable=False),
        sa.Column("stake_per_hole", sa.Float(), nullable=False),
        sa.Column("team_a_player1_id", sa.String(), sa.ForeignKey("player.id"), nullable=False),
        sa.Column("team_a_player2_id", sa.String(), sa.ForeignKey("player.id"), nullable=True),
        sa.Column("team_b_player1_id", sa.String(), sa.ForeignKey("player.id"), nullable=False),
        sa.Column("team_b_player2_id", sa.String(), sa.ForeignKey("player.id"), nullable=True),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("winner", sa.String(), nullable=True),
        sa.Column("final_result", sa.String(), nullable=True),
        sa.Column("current_lead", sa.Integer(), nullable=False),
        sa.Column("holes_played", sa.Integer(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        "press",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("match_id", sa.String(), sa.ForeignKey("match.id", ondelete="CASCADE"), nullable=False),
        sa.Column("starting_hole", sa.Integer(), nullable=False),
        sa.Column("ending_hole", sa.Integer(), nullable=False),
        sa.Column("stake_per_hole", sa.Float(), nullable=False),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("winner", sa.String(), nullable=True),
        sa.Column("final_result", sa.String(), nullable=True),
        sa.Column("current_lead", sa.Integer(), nullable=False),
        sa.Column("holes_played", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("ending_hole >= starting_hole", name="ck_press_hole_range"),
    )
    op.create_index("ix_press_match_id", "press", ["match_id"])
    op.create_table(
        "nassau_bet",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("round_id", sa.String(), _round_fk(), nullable=False, unique=True),
        sa.Column("stake_per_man", sa.Float(), nullable=False),
        sa.Column("auto_press", sa.Boolean(), nullable=False),
        sa.Column("auto_press_threshold", sa.Integer(), nullable=False),
        sa.Column("team_a_player1_id", sa.String(), sa.ForeignKey("player.id"), nullable=False),
        sa.Column("team_a_player2_id", sa.String(), sa.ForeignKey("player.id"), nullable=True),
        sa.Column("team_b_player1_id", sa.String(), sa.ForeignKey("player.id"), nullable=False),
        sa.Column("team_b_player2_id", sa.String(), sa.ForeignKey("player.id"), nullable=True),
    )
    op.create_table(
        "skins_bet",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("round_id", sa.String(), _round_fk(), nullable=False, unique=True),
        sa.Column("skin_value", sa.Float(), nullable=False),
        sa.Column("carryover", sa.Boolean(), nullable=False),
    )
    op.create_table(
        "wolf_bet",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("round_id", sa.String(), _round_fk(), nullable=False, unique=True),
        sa.Column("stake_per_hole", sa.Float(), nullable=False),
        sa.Column("lone_wolf_multiplier", sa.Integer(), nullable=False),
        sa.Column("tee_order", sa.JSON(), nullable=False),
    )
    op.create_table(
        "wolf_decision",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("wolf_bet_id", sa.String(), sa.ForeignKey("wolf_bet.id", ondelete="CASCADE"), nullable=False),
        sa.Column("hole_number", sa.Integer(), nullable=False),
        sa.Column("wolf_player_id", sa.String(), sa.ForeignKey("player.id"), nullable=False),
        sa.Column("partner_player_id", sa.String(), sa.ForeignKey("player.id"), nullable=True),
        sa.Column("is_lone_wolf", sa.Boolean(), nullable=False),
        sa.UniqueConstraint("wolf_bet_id", "hole_number", name="uq_wolf_decision_bet_id_hole_number"),
    )
    op.create_table(
        "junk_bet",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("round_id", sa.String(), _round_fk(), nullable=False),
        sa.Column("player_id", sa.String(), sa.ForeignKey("player.id", ondelete="CASCADE"), nullable=False),
        sa.Column("hole_number", sa.Integer(), nullable=False),
        sa.Column("junk_type", sa.String(), nullable=False),
        sa.Column("value", sa.Float(), nullable=False),
        sa.UniqueConstraint(
            "round_id",
            "player_id",
            "hole_number",
            "junk_type",
            name="uq_junk_bet_round_player_hole_type",
        ),
    )
    op.create_index("ix_junk_bet_round_id", "junk_bet", ["round_id"])


def downgrade():
    op.drop_index("ix_junk_bet_round_id", table_name="junk_bet")
    op.drop_table("junk_bet")
    op.drop_table("wolf_decision")
    op.drop_table("wolf_bet")
    op.drop_table("skins_bet")
    op.drop_table("nassau_bet")
    op.drop_index("ix_press_match_id", table_name="press")
    op.drop_table("press")
    op.drop_table("match")
    op.drop_index("ix_score_round_id", table_name="score")
    op.drop_table("score")
    op.drop_table("round_player")
    op.drop_index("ix_round_trip_id", table_name="round")
    op.drop_table("round")
    op.drop_table("hole")
    op.drop_table("tee")
    op.drop_index("ix_player_trip_id", table_name="player")
    op.drop_table("player")
    op.drop_table("trip")
