from datetime import date

import pytest

from golf_trip.models import (
    Hole,
    JunkBet,
    Match,
    NassauBet,
    Player,
    Round,
    RoundPlayer,
    Score,
    SkinsBet,
    Tee,
    Trip,
    WolfBet,
)

BASE = "/api/v0"
PLAYERS = ("a", "b", "c", "d")


def _scores(outcomes, start=1):
    """Al and Bo play the match; Cy and Di shoot 5 on every hole."""
    rows = []
    for hole, outcome in enumerate(outcomes, start=start):
        gross = {
            "a": 4 if outcome in ("a", "h") else 5,
            "b": 4 if outcome in ("b", "h") else 5,
            "c": 5,
            "d": 5,
        }
        for pid, strokes in gross.items():
            rows.append(
                Score(
                    id=f"{pid}-{hole}",
                    round_id="r1",
                    player_id=pid,
                    hole_number=hole,
                    gross_strokes=strokes,
                )
            )
    return rows


@pytest.fixture()
def client(api_client, seed):
    names = {"a": "Al", "b": "Bo", "c": "Cy", "d": "Di"}
    seed(
        Trip(id="t1", name="Pinehurst"),
        *[Player(id=pid, trip_id="t1", name=names[pid]) for pid in PLAYERS],
        Round(
            id="r1",
            trip_id="t1",
            name="Day 1",
            status="in_progress",
            format="match_play",
            junk_config={"enabled": True, "bets": [{"type": "sandy", "value": 5}]},
        ),
        *[
            RoundPlayer(id=f"rp-{pid}", round_id="r1", player_id=pid, playing_handicap=0)
            for pid in PLAYERS
        ],
        Match(
            id="m1",
            round_id="r1",
            match_type="1v1",
            stake_per_hole=10,
            team_a_player1_id="a",
            team_b_player1_id="b",
        ),
        NassauBet(
            id="n1",
            round_id="r1",
            stake_per_man=5,
            team_a_player1_id="a",
            team_b_player1_id="b",
        ),
        SkinsBet(id="s1", round_id="r1", skin_value=5),
        WolfBet(id="w1", round_id="r1", stake_per_hole=2, tee_order=list(PLAYERS)),
        JunkBet(id="j1", round_id="r1", player_id="c", hole_number=2, junk_type="sandy", value=5),
        *_scores(["a", "a", "a"] + ["h"] * 12),
    )
    return api_client


def _assert_problem(response, status, code):
    assert response.status_code == status
    assert response.headers["content-type"].startswith("application/problem+json")
    assert response.json()["code"] == code


def test_healthz(api_client):
    assert api_client.get("/healthz").json() == {"status": "ok"}
    assert api_client.get("/api/healthz").json() == {"status": "ok"}


def test_match_state_is_computed_from_scores(client):
    response = client.get(f"{BASE}/rounds/r1/match")
    assert response.status_code == 200

    state = response.json()
    assert state["status"] == "in_progress"
    assert state["current_lead"] == 3
    assert state["holes_remaining"] == 3
    assert state["is_dormie"] is True
    assert state["status_label"] == "3 UP"


def test_unknown_round(client):
    response = client.get(f"{BASE}/rounds/nope/match")
    _assert_problem(response, 404, "round_not_found")
    assert response.json()["instance"] == f"{BASE}/rounds/nope/match"


def test_press_then_sync(client, seed):
    response = client.post(f"{BASE}/rounds/r1/match/presses", json={"starting_hole": 16})
    assert response.status_code == 201
    press = response.json()
    assert press["stake_per_hole"] == 10
    assert press["ending_hole"] == 18
    assert press["status"] == "in_progress"

    info = client.get(f"{BASE}/rounds/r1/match/holes/16").json()
    assert info["main_match_stake"] == 10
    assert info["total_at_stake"] == 20
    assert info["press_stakes"] == [{"press_number": 1, "amount": 10}]

    # Hole 16 halved closes the main match 3&2.
    seed(*_scores(["h"], start=16))
    synced = client.post(f"{BASE}/rounds/r1/match/sync")
    assert synced.status_code == 200
    body = synced.json()
    assert body["status"] == "completed"
    assert body["final_result"] == "3&2"
    assert body["current_lead"] == 3
    assert body["presses"][0]["status"] == "in_progress"
    assert body["presses"][0]["holes_played"] == 1

    again = client.post(f"{BASE}/rounds/r1/match/sync").json()
    assert again == body

    late = client.post(f"{BASE}/rounds/r1/match/presses", json={"starting_hole": 17})
    _assert_problem(late, 409, "match_not_in_progress")


def test_press_window_must_be_ordered(client):
    response = client.post(
        f"{BASE}/rounds/r1/match/presses", json={"starting_hole": 12, "ending_hole": 10}
    )
    assert response.status_code == 422


def test_unknown_hole(client):
    _assert_problem(client.get(f"{BASE}/rounds/r1/match/holes/19"), 404, "hole_not_found")


def test_nassau_skins_and_wolf_states(client):
    nassau = client.get(f"{BASE}/rounds/r1/nassau").json()
    assert nassau["front"]["status"] == "3 UP"
    assert nassau["back"]["status"] == "A/S"
    assert nassau["current_hole"] == 16

    skins = client.get(f"{BASE}/rounds/r1/skins").json()
    assert skins["skin_counts"] == {"a": 3, "b": 0, "c": 0, "d": 0}
    assert skins["current_carry_count"] == 12

    wolf = client.get(f"{BASE}/rounds/r1/wolf").json()
    assert wolf["current_hole"] == 1
    assert wolf["current_wolf_id"] == "a"
    assert wolf["player_totals"] == {"a": 0, "b": 0, "c": 0, "d": 0}


def test_round_without_team_format(client):
    _assert_problem(client.get(f"{BASE}/rounds/r1/format"), 404, "bet_not_found")


def test_trip_settlement(client, seed):
    seed(*_scores(["h"], start=16))
    response = client.get(f"{BASE}/trips/t1/settlement")
    assert response.status_code == 200

    body = response.json()
    assert body["trip_id"] == "t1"
    totals = {p["player_id"]: p["total"] for p in body["players"]}
    # Match 3&2 at $10 a hole, Nassau front and overall at $5, Cy's sandy.
    assert totals == {"a": 40, "c": 5, "b": -40}
    assert [p["player_id"] for p in body["players"]] == ["a", "c", "b"]
    descriptions = [i["description"] for i in body["players"][0]["line_items"]]
    assert descriptions == ["Main: Won 3&2", "Nassau Front 9: Won", "Nassau Overall: Won"]
    # Cy's junk is unfunded, so only Bo pays.
    assert body["payments"] == [
        {
            "from_player_id": "b",
            "from_player_name": "Bo",
            "to_player_id": "a",
            "to_player_name": "Al",
            "amount": 40,
        }
    ]


def test_unknown_trip(client):
    _assert_problem(client.get(f"{BASE}/trips/nope/settlement"), 404, "trip_not_found")


def _tee(tee_id, stroke_indices):
    return [
        Tee(id=tee_id, name="Blue", rating=70.1, slope=125, par=4 * len(stroke_indices)),
        *[
            Hole(id=f"{tee_id}-{n}", tee_id=tee_id, hole_number=n, par=4, stroke_index=si)
            for n, si in enumerate(stroke_indices, start=1)
        ],
    ]


def _side_round(round_id, **kwargs):
    return Round(id=round_id, trip_id="t1", name=f"Round {round_id}", status="in_progress", **kwargs)


def test_stored_hole_table_is_validated(client, seed):
    seed(
        *_tee("dup", [1, 1, 2]),
        _side_round("r4", tee_id="dup"),
        Match(id="m4", round_id="r4", match_type="1v1", stake_per_hole=5,
              team_a_player1_id="a", team_b_player1_id="b"),
    )
    response = client.get(f"{BASE}/rounds/r4/match")
    _assert_problem(response, 422, "validation_error")
    assert response.json()["detail"] == "Stroke indices must be unique."


def test_press_window_uses_the_tee_hole_count(client, seed):
    seed(
        *_tee("nine", range(1, 10)),
        _side_round("r5", tee_id="nine"),
        Match(id="m5", round_id="r5", match_type="1v1", stake_per_hole=5,
              team_a_player1_id="a", team_b_player1_id="b"),
    )
    response = client.post(f"{BASE}/rounds/r5/match/presses", json={"starting_hole": 10})
    _assert_problem(response, 422, "validation_error")
    assert response.json()["detail"] == "Press must start between hole 1 and hole 9."


def test_stored_match_teams_are_validated(client, seed):
    seed(
        _side_round("r6"),
        Match(id="m6", round_id="r6", match_type="2v2", stake_per_hole=5,
              team_a_player1_id="a", team_b_player1_id="b"),
    )
    response = client.get(f"{BASE}/rounds/r6/match")
    _assert_problem(response, 422, "validation_error")
    assert response.json()["detail"] == "2v2 matches require exactly 2 player(s) per side."


def test_short_wolf_tee_order_is_rejected_but_settlement_runs(client, seed):
    seed(
        _side_round("r3", format="wolf"),
        WolfBet(id="w3", round_id="r3", stake_per_hole=2, tee_order=["a", "b", "c"]),
    )
    response = client.get(f"{BASE}/rounds/r3/wolf")
    _assert_problem(response, 422, "validation_error")
    assert response.json()["detail"] == "Wolf requires exactly 4 players in the tee order."

    assert client.get(f"{BASE}/trips/t1/settlement").status_code == 200


def _team_round(round_id, fmt, teams, day, holes_scored):
    rows = [
        _side_round(round_id, format=fmt, date=date(2026, 5, day)),
        *[
            RoundPlayer(id=f"{round_id}-{pid}", round_id=round_id, player_id=pid,
                        playing_handicap=0, team=team)
            for pid, team in teams.items()
        ],
    ]
    for hole in range(1, holes_scored + 1):
        for pid in teams:
            # Al makes 4, everyone else 5.
            rows.append(Score(id=f"{round_id}-{pid}-{hole}", round_id=round_id, player_id=pid,
                              hole_number=hole, gross_strokes=4 if pid == "a" else 5))
    return rows


def test_trip_format_standings(client, seed):
    seed(
        *_team_round("r7", "points_hilo", {"a": "team1", "c": "team1", "b": "team2", "d": "team2"}, 2, 2),
        *_team_round("r8", "stableford", {"a": "team1", "b": "team1", "c": "team2", "d": "team2"}, 3, 0),
    )
    response = client.get(f"{BASE}/trips/t1/format-standings")
    assert response.status_code == 200

    body = response.json()
    assert body["trip_id"] == "t1"
    # Two holes of 1.5 to 0.5; the unplayed Stableford round is not counted.
    assert body["points_hilo_round_count"] == 1
    assert {s["player_id"]: s["total"] for s in body["points_hilo"]} == {
        "a": 3, "c": 3, "b": 1, "d": 1,
    }
    assert body["stableford_round_count"] == 0
    assert body["stableford"] == []

    al = next(s for s in body["points_hilo"] if s["player_id"] == "a")
    assert al["player_name"] == "Al"
    assert al["round_results"] == [
        {
            "round_id": "r7",
            "round_name": "Round r7",
            "round_date": "2026-05-02",
            "format": "points_hilo",
            "points": 3,
            "team_number": 1,
            "teammate": "Cy",
        }
    ]


def test_unknown_trip_standings(client):
    _assert_problem(client.get(f"{BASE}/trips/nope/format-standings"), 404, "trip_not_found")
