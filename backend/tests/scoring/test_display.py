from golf_trip.scoring import display


def test_match_status_strings():
    assert display.format_match_status(0, 5) == "A/S"
    assert display.format_match_status(2, 5) == "2 UP"
    assert display.format_match_status(-1, 5) == "1 DN"
    assert display.format_match_status(3, 2) == "3&2"
    assert display.format_match_status(1, 0) == "1 UP"


def test_dormie_badge():
    assert display.is_dormie(2, 2)
    assert not display.is_dormie(0, 0)
    assert display.format_status_badge(2, 2) == "DORMIE"
    assert display.format_status_badge(1, 3) == "1 UP"


def test_lead_status_for_either_team():
    assert display.format_lead_status_for_team(2, "team_a") == "2 UP"
    assert display.format_lead_status_for_team(2, "team_b") == "2 DN"


def test_money_strings():
    assert display.format_money(-5) == "-$5"
    assert display.format_money(10) == "$10"
    assert display.format_money(2.5) == "$3"
    assert display.format_money(-2.5) == "-$3"
    assert display.format_money(2.49) == "$2"
    assert display.format_signed_money(12) == "+$12"
    assert display.format_signed_money(-4) == "-$4"
    assert display.format_signed_money(0) == "$0"


def test_skins_strings():
    assert display.format_carryover_alert(0, 5) == ""
    assert display.format_carryover_alert(2, 5) == "2 skins carried! Next hole worth $15"
    assert display.format_skin_count(1) == "1 skin"
    assert display.format_skin_count(3) == "3 skins"
    assert display.format_stableford_points(3) == "+3"
    assert display.format_stableford_points(-1) == "-1"
