from golf_trip.scoring import nassau
from golf_trip.scoring.common import default_holes
from golf_trip.scoring.types import NassauBet, PlayerHandicapContext

HOLES = default_holes()


def _bet(**kwargs):
    params = dict(
        round_id="r1",
        stake_per_man=10,
        team_a=[PlayerHandicapContext(player_id="a", playing_handicap=0, name="Al")],
        team_b=[PlayerHandicapContext(player_id="b", playing_handicap=0, name="Bo")],
    )
    params.update(kwargs)
    return NassauBet(**params)


def _card(outcomes):
    scores = {"a": {}, "b": {}}
    for hole, outcome in enumerate(outcomes, start=1):
        scores["a"][hole] = 4 if outcome in ("a", "h") else 5
        scores["b"][hole] = 4 if outcome in ("b", "h") else 5
    return scores


# Team A takes holes 1-3, team B takes hole 10, everything else halved.
FULL_ROUND = ["a", "a", "a"] + ["h"] * 6 + ["b"] + ["h"] * 8


def test_segments_share_one_hole_sequence():
    state = nassau.compute_nassau_state(_bet(), _card(FULL_ROUND), HOLES)

    assert state.front.lead == 3
    assert state.back.lead == -1
    assert state.overall.lead == 2
    assert state.front.holes_played == 9
    assert state.front.holes_remaining == 0
    assert state.front.status == "3 UP"
    assert state.back.label == "Back 9"
    assert state.current_hole == 18
    assert state.holes_played == 18


def test_partial_round_tracks_remaining_per_segment():
    state = nassau.compute_nassau_state(_bet(), _card(FULL_ROUND[:5]), HOLES)
    assert state.front.holes_remaining == 4
    assert state.back.holes_played == 0
    assert state.back.holes_remaining == 9
    assert state.overall.holes_remaining == 13
    assert state.current_hole == 6


def test_settlement_is_flat_and_zero_sum():
    state = nassau.compute_nassau_state(_bet(), _card(FULL_ROUND), HOLES)
    settlement = nassau.calculate_nassau_settlement(state)

    assert settlement.front_result == 10
    assert settlement.back_result == -10
    assert settlement.overall_result == 10
    assert settlement.player_results == {"a": 10, "b": -10}
    assert sum(settlement.player_results.values()) == 0


def test_halved_segment_pays_nothing():
    state = nassau.compute_nassau_state(_bet(), _card(["h"] * 18), HOLES)
    assert state.front.is_halved
    assert nassau.calculate_nassau_settlement(state).player_results == {"a": 0, "b": 0}


def test_auto_press_fires_once_per_segment():
    bet = _bet(auto_press=True, auto_press_threshold=2)
    state = nassau.compute_nassau_state(bet, _card(FULL_ROUND), HOLES)

    presses = [(p.segment, p.trigger_hole, p.starting_hole) for p in state.auto_presses]
    assert presses == [("front", 2, 3), ("overall", 2, 3)]
    assert state.auto_presses[0].holes_remaining == 7
    assert state.auto_presses[1].holes_remaining == 16
    assert nassau.nassau_exposure(state) == 50


def test_auto_press_disabled():
    state = nassau.compute_nassau_state(_bet(), _card(FULL_ROUND), HOLES)
    assert state.auto_presses == []
    assert nassau.nassau_exposure(state) == 30


def test_status_from_either_side():
    assert nassau.format_nassau_status(2, "team_a") == "2 UP"
    assert nassau.format_nassau_status(2, "team_b") == "2 DN"
