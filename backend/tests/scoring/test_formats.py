import pydantic
import pytest

from golf_trip.scoring import parse_bet_config, compute_state
from golf_trip.scoring.common import default_holes
from golf_trip.scoring.formats import MatchPlayConfig, SkinsConfig, TeamFormatConfig
from golf_trip.scoring.types import MatchState, SkinsState

PLAYER = {"player_id": "a", "playing_handicap": 0, "name": "A"}
OTHER = {"player_id": "b", "playing_handicap": 0, "name": "B"}


def test_parse_picks_config_by_format():
    config = parse_bet_config(
        {
            "format": "match_play",
            "match": {
                "stake_per_hole": 10,
                "team_a": {"player1": PLAYER},
                "team_b": {"player1": OTHER},
            },
        }
    )
    assert isinstance(config, MatchPlayConfig)

    skins = parse_bet_config(
        {"format": "skins", "bet": {"skin_value": 5, "players": [PLAYER, OTHER]}}
    )
    assert isinstance(skins, SkinsConfig)

    stableford = parse_bet_config(
        {
            "format": "stableford",
            "bet": {"format": "stableford", "team1": [PLAYER], "team2": [OTHER]},
        }
    )
    assert isinstance(stableford, TeamFormatConfig)


def test_unknown_format_is_rejected():
    with pytest.raises(pydantic.ValidationError):
        parse_bet_config({"format": "bingo_bango_bongo", "bet": {}})


def test_compute_state_dispatches():
    scores = {"a": {1: 3}, "b": {1: 4}}
    holes = default_holes(1)

    match = parse_bet_config(
        {
            "format": "match_play",
            "match": {
                "stake_per_hole": 10,
                "team_a": {"player1": PLAYER},
                "team_b": {"player1": OTHER},
            },
        }
    )
    state = compute_state(match, scores, holes)
    assert isinstance(state, MatchState)
    assert state.current_lead == 1

    skins = parse_bet_config(
        {"format": "skins", "bet": {"skin_value": 5, "players": [PLAYER, OTHER]}}
    )
    skins_state = compute_state(skins, scores, holes)
    assert isinstance(skins_state, SkinsState)
    assert skins_state.skin_counts == {"a": 1, "b": 0}


def test_invalid_layout_yields_none():
    wolf = parse_bet_config(
        {"format": "wolf", "bet": {"stake_per_hole": 2, "tee_order": [PLAYER, OTHER]}}
    )
    assert compute_state(wolf, {}, default_holes()) is None


def test_team_format_tag_must_match_bet():
    with pytest.raises(pydantic.ValidationError, match="does not match"):
        parse_bet_config(
            {
                "format": "points_hilo",
                "bet": {"format": "stableford", "team1": [PLAYER], "team2": [OTHER]},
            }
        )
