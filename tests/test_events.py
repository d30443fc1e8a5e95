import pytest

from stronghold.events import EVENTS, EventManager


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value % stop


def test_defaults():
    events = EventManager()
    assert events.last_event == "No events triggered yet."
    assert events.event_count == 0


def test_trigger_uses_rng_choice():
    events = EventManager()
    assert events.trigger_random_event(FixedRng(0)) == "A bountiful harvest increases food supply!"
    assert events.trigger_random_event(FixedRng(2)) == "Bandits raid nearby villages."
    assert events.event_count == 2
    assert events.last_event == "Bandits raid nearby villages."


def test_trigger_without_rng_picks_known_event():
    events = EventManager()
    for expected_count in range(1, 6):
        assert events.trigger_random_event() in EVENTS
        assert events.event_count == expected_count


def test_save_load_round_trip(tmp_path):
    events = EventManager()
    events.trigger_random_event(FixedRng(3))
    path = tmp_path / "events.txt"
    events.save(path)
    assert EventManager.load(path) == events


def test_load_rejects_missing_count(tmp_path):
    path = tmp_path / "events.txt"
    path.write_text("Only a description")
    with pytest.raises(ValueError):
        EventManager.load(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        EventManager.load(tmp_path / "absent.txt")