from golf_trip.scoring import wolf
from golf_trip.scoring.common import default_holes
from golf_trip.scoring.types import PlayerHandicapContext, WolfBet, WolfDecision

ORDER = ["a", "b", "c", "d"]
PLAYERS = [
    PlayerHandicapContext(player_id=pid, playing_handicap=0, name=pid.upper())
    for pid in ORDER
]


def _card(low_by_hole):
    scores = {pid: {} for pid in ORDER}
    for hole, low in enumerate(low_by_hole, start=1):
        for pid in ORDER:
            scores[pid][hole] = 3 if pid == low else 4
    return scores


def _bet(decisions, tee_order=PLAYERS):
    return WolfBet(round_id="r1", stake_per_hole=2, tee_order=tee_order, decisions=decisions)


DECISIONS = [
    WolfDecision(hole_number=1, partner_id="b"),
    WolfDecision(hole_number=2, is_lone_wolf=True),
    WolfDecision(hole_number=3, partner_id="d"),
    # The wolf cannot partner themself; hole 4 stays undecided.
    WolfDecision(hole_number=4, partner_id="d"),
]


def _state():
    return wolf.compute_wolf_state(
        _bet(DECISIONS), _card(["a", "b", "a", None]), default_holes(4)
    )


def test_rotation_helpers():
    assert [wolf.wolf_for_hole(ORDER, h) for h in (1, 2, 4, 5, 18)] == ["a", "b", "d", "a", "b"]
    assert wolf.tee_order_for_hole(ORDER, 3) == ["c", "d", "a", "b"]
    assert wolf.wolf_rotation_label(7, ORDER) == "3rd"
    assert [p.player_id for p in wolf.available_partners(PLAYERS, "c")] == ["a", "b", "d"]


def test_hole_by_hole_transfers():
    state = _state()
    deltas = [r.deltas for r in state.hole_results]

    assert deltas[0] == {"a": 4, "b": 4, "c": -4, "d": -4}
    assert deltas[1] == {"a": -4, "b": 12, "c": -4, "d": -4}
    assert deltas[2] == {"a": 4, "b": 4, "c": -4, "d": -4}
    assert deltas[3] == {"a": 0, "b": 0, "c": 0, "d": 0}
    for d in deltas:
        assert sum(d.values()) == 0


def test_hole_outcomes():
    results = _state().hole_results

    assert results[0].winner == "wolf"
    assert results[0].partner_name == "B"
    assert results[1].is_lone_wolf
    assert results[1].wolf_points_per_man == 4
    assert results[2].winner == "field"
    assert results[3].wolf_id == "d"
    assert results[3].complete
    assert not results[3].decided
    assert results[3].winner is None


def test_totals_and_current_wolf():
    state = _state()

    assert state.player_totals == {"a": 4, "b": 20, "c": -12, "d": -12}
    assert wolf.calculate_wolf_settlement(state) == state.player_totals
    assert state.current_hole == 4
    assert state.current_wolf_id == "d"
    assert state.current_wolf_name == "D"
    assert state.holes_played == 3


def test_halved_hole_moves_nothing():
    state = wolf.compute_wolf_state(
        _bet([WolfDecision(hole_number=1, partner_id="c")]), _card([None]), default_holes(1)
    )
    assert state.hole_results[0].winner == "halved"
    assert state.player_totals == {"a": 0, "b": 0, "c": 0, "d": 0}


def test_requires_four_distinct_players():
    assert wolf.compute_wolf_state(_bet([], PLAYERS[:3]), {}, default_holes()) is None
    duplicated = PLAYERS[:3] + [PLAYERS[0]]
    assert wolf.compute_wolf_state(_bet([], duplicated), {}, default_holes()) is None
