import pytest

from stronghold.economy import Economy


def test_collect_taxes():
    economy = Economy()
    assert economy.collect_taxes(100) == "Collected 100 gold in taxes."
    assert economy.treasury == 1000 + 100


def test_collect_taxes_from_nobody():
    economy = Economy()
    assert economy.collect_taxes(0) == "Collected 0 gold in taxes."
    assert economy.treasury == 1000


def test_spend_on_services():
    economy = Economy()
    assert economy.spend_on_services(1000) == "Spent 1000 gold on public services."
    assert economy.treasury == 0


def test_spend_more_than_treasury_raises():
    economy = Economy()
    with pytest.raises(ValueError, match="Not enough gold to spend."):
        economy.spend_on_services(1001)
    assert economy.treasury == 1000


def test_war_raises_inflation_and_peace_lowers_it():
    economy = Economy()
    assert economy.declare_war() == "War declared. Inflation increased."
    assert economy.at_war is True
    at_war = economy.inflation
    assert at_war > 5
    assert economy.end_war() == "War ended. Inflation reduced."
    assert economy.at_war is False
    assert 5 < economy.inflation < at_war


def test_end_war_clamps_inflation_at_zero():
    economy = Economy(inflation=1, at_war=True)
    economy.end_war()
    assert economy.inflation == 0


def test_apply_inflation():
    economy = Economy()
    assert economy.apply_inflation() == "Inflation reduced treasury by 50 gold."
    assert economy.treasury == 1000 - 50


def test_no_inflation_keeps_treasury():
    economy = Economy(inflation=0)
    economy.apply_inflation()
    assert economy.treasury == 1000


def test_status_report():
    report = Economy().status_report()
    assert report.splitlines() == [
        "Economy Status:",
        " Treasury: 1000 gold",
        " Tax Rate: 10%",
        " Inflation: 5%",
        " At War: No",
    ]


def test_save_format(tmp_path):
    path = tmp_path / "economy.txt"
    Economy().save(path)
    assert path.read_text() == "1000 0.1 5 0\n"


def test_round_trip(tmp_path):
    path = tmp_path / "economy.txt"
    economy = Economy(treasury=42, tax_rate=0.25, inflation=9, at_war=True)
    economy.save(path)
    assert Economy.load(path) == economy


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Economy.load(tmp_path / "missing.txt")


def test_load_truncated(tmp_path):
    path = tmp_path / "economy.txt"
    path.write_text("1000 0.1\n")
    with pytest.raises(ValueError):
        Economy.load(path)