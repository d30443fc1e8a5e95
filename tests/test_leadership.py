import pytest

from stronghold.leadership import Leadership


def test_election_succeeds_when_popular():
    leadership = Leadership()
    message = leadership.hold_election("Queen Mira")
    assert message == "Election successful. New leader: Queen Mira"
    assert leadership.current_leader == "Queen Mira"
    assert leadership.policy == "Reformist"
    assert leadership.popularity == 65


def test_election_fails_when_unpopular():
    leadership = Leadership(popularity=49)
    assert leadership.hold_election("Queen Mira") == "Election failed. People did not support it."
    assert leadership.current_leader == "King Aldric"
    assert leadership.policy == "Balanced"


def test_coup_fails_against_popular_leader():
    leadership = Leadership()
    assert leadership.initiate_coup() == "Coup attempt failed. Popularity reduced."
    assert leadership.in_power is True
    assert leadership.popularity < 75


def test_coup_succeeds_against_unpopular_leader():
    leadership = Leadership(popularity=29)
    assert leadership.initiate_coup() == "Coup succeeded. Leadership has fallen."
    assert leadership.in_power is False


def test_change_policy_costs_popularity():
    leadership = Leadership()
    assert leadership.change_policy("Reformist") == "Policy changed to: Reformist"
    assert leadership.policy == "Reformist"
    assert leadership.popularity < 75


@pytest.mark.parametrize(
    "popularity, expected",
    [
        (19, "Unstable kingdom! Risk of revolt or coup."),
        (20, "Moderate unrest in the population."),
        (49, "Moderate unrest in the population."),
        (50, "The kingdom is stable."),
    ],
)
def test_assess_stability(popularity, expected):
    assert Leadership(popularity=popularity).assess_stability() == expected


def test_status_report():
    report = Leadership().status_report()
    assert report.splitlines() == [
        "Leadership Status:",
        " Leader: King Aldric",
        " Policy: Balanced",
        " Popularity: 75",
        " In Power: Yes",
    ]


def test_save_format(tmp_path):
    path = tmp_path / "leadership.txt"
    Leadership().save(path)
    assert path.read_text() == "King Aldric\nBalanced\n75 1\n"


def test_round_trip_keeps_spaces_in_names(tmp_path):
    path = tmp_path / "leadership.txt"
    leadership = Leadership("Lady Ysolde the Wise", "Iron Fist", 12, False)
    leadership.save(path)
    assert Leadership.load(path) == leadership


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Leadership.load(tmp_path / "missing.txt")


def test_load_truncated(tmp_path):
    path = tmp_path / "leadership.txt"
    path.write_text("King Aldric\nBalanced\n")
    with pytest.raises(ValueError):
        Leadership.load(path)