from golf_trip.scoring import junk
from golf_trip.scoring.types import JunkBetConfig, JunkClaim, RoundJunkConfig

PLAYER_IDS = ["p1", "p2", "p3"]
NAMES = {"p1": "Pat", "p2": "Sam", "p3": "Lee"}


def _claim(pid, hole, junk_type, value=5):
    return JunkClaim(player_id=pid, hole_number=hole, junk_type=junk_type, value=value)


def _config(snake=True):
    return RoundJunkConfig(
        enabled=True,
        bets=[
            JunkBetConfig(type="greenie", value=5),
            JunkBetConfig(type="sandy", value=5),
            JunkBetConfig(type="birdie", value=5),
            JunkBetConfig(type="snake", enabled=snake, value=5),
        ],
    )


def test_snake_follows_last_three_putt():
    claims = [_claim("p1", 7, "snake"), _claim("p2", 2, "snake")]
    state = junk.compute_snake_state(claims, NAMES, 5)

    assert [t.hole_number for t in state.transfers] == [2, 7]
    assert state.current_holder_id == "p1"
    assert state.current_holder_name == "Pat"
    assert state.value_per_player == 5


def test_snake_without_claims_has_no_holder():
    state = junk.compute_snake_state([], NAMES, 5)
    assert state.current_holder_id is None
    assert state.transfers == []


def test_settlement_with_snake_penalty():
    claims = [
        _claim("p1", 3, "greenie"),
        _claim("p1", 5, "sandy"),
        _claim("p3", 4, "birdie"),
        _claim("p2", 2, "snake"),
        _claim("p1", 7, "snake"),
    ]
    settlement = junk.calculate_junk_settlement(claims, PLAYER_IDS, NAMES, _config(), round_id="r1")

    by_player = {s.player_id: s for s in settlement.player_summaries}
    assert [s.player_id for s in settlement.player_summaries] == ["p3", "p1", "p2"]
    assert by_player["p1"].total_earnings == 10
    assert by_player["p1"].snake_penalty == -10
    assert by_player["p1"].net_junk == 0
    assert [c.junk_type for c in by_player["p1"].claims] == ["greenie", "sandy"]
    assert by_player["p3"].net_junk == 5
    assert by_player["p2"].net_junk == 0
    assert settlement.snake_state.current_holder_id == "p1"
    assert settlement.total_pot == 15
    assert settlement.round_id == "r1"


def test_disabled_snake_is_ignored():
    claims = [_claim("p2", 2, "snake")]
    settlement = junk.calculate_junk_settlement(claims, PLAYER_IDS, NAMES, _config(snake=False))
    assert settlement.snake_state is None
    assert all(s.net_junk == 0 for s in settlement.player_summaries)


def test_repeated_claims_are_tallied():
    claims = [_claim("p2", 1, "birdie"), _claim("p2", 4, "birdie", value=7)]
    settlement = junk.calculate_junk_settlement(claims, PLAYER_IDS, NAMES, _config())
    summary = settlement.player_summaries[0]
    assert summary.player_id == "p2"
    assert summary.claims[0].count == 2
    assert summary.claims[0].total_value == 12


def test_registry_defaults():
    assert junk.JUNK_TYPES["eagle"].default_value == 10
    assert junk.JUNK_TYPES["birdie"].auto_detectable
    assert not junk.DEFAULT_JUNK_CONFIG.enabled
    assert len(junk.DEFAULT_JUNK_CONFIG.bets) == len(junk.JUNK_TYPES)


def test_hole_helpers():
    assert junk.is_junk_relevant_for_hole("greenie", 3)
    assert not junk.is_junk_relevant_for_hole("greenie", 4)
    assert junk.check_auto_junk(3, 4) == "birdie"
    assert junk.check_auto_junk(3, 5) == "eagle"
    assert junk.check_auto_junk(4, 4) is None
    assert junk.enabled_junk_types(_config(), 4) == ["sandy", "birdie", "snake"]
    assert junk.enabled_junk_types(junk.DEFAULT_JUNK_CONFIG, 3) == []
    assert junk.format_junk_value(7.5) == "$7.5"
