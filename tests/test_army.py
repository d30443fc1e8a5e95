import pytest

from stronghold.army import Army


def test_default_strength():
    assert Army().strength == 25


def test_recruit_requires_ten_people():
    army = Army()
    with pytest.raises(ValueError, match="Not enough people to recruit."):
        army.recruit(9)
    assert army.soldiers == 50


def test_recruit_adds_soldiers_and_morale():
    army = Army()
    message = army.recruit(125)
    assert army.soldiers > 50
    assert message == f"Recruited {army.soldiers - 50} soldiers."
    assert army.morale > 70


def test_train_spends_gold():
    army = Army()
    assert army.train() == "Army trained. Morale increased."
    assert army.gold_supply == 500 - 50
    assert army.morale > 70


def test_train_without_gold_raises():
    army = Army(gold_supply=10)
    with pytest.raises(ValueError, match="Insufficient gold"):
        army.train()
    assert army.gold_supply == 10
    assert army.morale == 70


def test_feed_and_pay_success():
    army = Army()
    assert army.feed_and_pay() == "Army fed and paid."
    assert army.food_supply == 50
    assert army.gold_supply < 500


def test_feed_and_pay_underfed():
    army = Army(food_supply=0)
    assert army.feed_and_pay() == "Underfed or unpaid army. Morale dropped."
    assert army.morale < 70
    assert army.corruption > 10
    assert army.food_supply == 0


def test_strength_drops_with_corruption():
    base = Army().strength
    assert Army(corruption=20).strength < base


def test_status_report_lists_fields():
    army = Army()
    report = army.status_report()
    assert report.splitlines()[0] == "Army Status:"
    assert " Soldiers: 50" in report
    assert f" Strength Score: {army.strength}" in report


def test_save_format(tmp_path):
    path = tmp_path / "army.txt"
    Army().save(path)
    assert path.read_text() == "50 70 10 100 500\n"


def test_round_trip(tmp_path):
    path = tmp_path / "army.txt"
    army = Army(soldiers=12, morale=-3, corruption=7, food_supply=0, gold_supply=99)
    army.save(path)
    assert Army.load(path) == army


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Army.load(tmp_path / "missing.txt")


def test_load_truncated_file(tmp_path):
    path = tmp_path / "army.txt"
    path.write_text("1 2 3\n")
    with pytest.raises(ValueError):
        Army.load(path)