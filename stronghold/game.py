"""The turn-based kingdom simulation and its command-line entry point."""

from __future__ import annotations

import argparse
import random
import re
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Protocol, TextIO

from stronghold.army import Army
from stronghold.bank import Bank
from stronghold.economy import Economy
from stronghold.events import EventManager
from stronghold.kingdom_map import KingdomMap
from stronghold.leadership import Leadership
from stronghold.population import Population
from stronghold.resources import ResourceManager

MAX_TURNS = 5

# (attribute, file name, label used in messages)
SAVE_FILES = (
    ("population", "population_data.txt", "Population"),
    ("army", "army_data.txt", "Army"),
    ("leadership", "leadership_data.txt", "Leadership"),
    ("economy", "economy_data.txt", "Economy"),
    ("bank", "bank_data.txt", "Bank"),
    ("resources", "resources_data.txt", "Resource"),
    ("kingdom_map", "map_data.txt", "Map"),
)

_MENU = (
    "",
    "What would you like to do this season?",
    "1. Collect taxes",
    "2. Recruit soldiers",
    "3. Train army",
    "4. Build structure on map",
    "5. Spend on services",
    "6. Change policy",
    "7. Save Game",
    "8. Load Game",
    "9. Do nothing",
)

_INT_PREFIX = re.compile(r"[+-]?\d+")


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class Kingdom:
    """Every part of the kingdom that the game tracks."""

    population: Population = field(default_factory=Population)
    army: Army = field(default_factory=Army)
    leadership: Leadership = field(default_factory=Leadership)
    economy: Economy = field(default_factory=Economy)
    bank: Bank = field(default_factory=Bank)
    resources: ResourceManager = field(default_factory=ResourceManager)
    events: EventManager = field(default_factory=EventManager)
    kingdom_map: KingdomMap = field(default_factory=KingdomMap)

    def save(self, directory: str | PathLike[str]) -> list[Path]:
        """Write every saved part into ``directory``; return the files written."""
        folder = Path(directory)
        written = []
        for attribute, filename, _ in SAVE_FILES:
            path = folder / filename
            getattr(self, attribute).save(path)
            written.append(path)
        return written

    def load(self, directory: str | PathLike[str]) -> list[str]:
        """Load each saved part from ``directory``.

        Parts whose file is missing or unreadable keep their current state;
        their file names are returned.
        """
        folder = Path(directory)
        failed = []
        for attribute, filename, _ in SAVE_FILES:
            current = getattr(self, attribute)
            try:
                loaded = type(current).load(folder / filename)
            except (OSError, ValueError):
                failed.append(filename)
                continue
            setattr(self, attribute, loaded)
        return failed

    def full_report(self) -> str:
        return "\n".join(
            [
                self.population.status_report(),
                self.army.status_report(),
                self.leadership.status_report(),
                self.economy.status_report(),
                self.bank.status_report(),
                self.resources.status_report(),
                "",
                self.kingdom_map.render(),
            ]
        )


class _Input:
    """Whitespace-separated reads from a stream of lines."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self._buffer = ""

    def _fill(self) -> bool:
        while not self._buffer.strip():
            line = next(self._lines, None)
            if line is None:
                self._buffer = ""
                return False
            self._buffer = line
        self._buffer = self._buffer.lstrip()
        return True

    def read_char(self) -> str | None:
        if not self._fill():
            return None
        char, self._buffer = self._buffer[0], self._buffer[1:]
        return char

    def read_int(self) -> int | None:
        if not self._fill():
            return None
        match = _INT_PREFIX.match(self._buffer)
        if match is None:
            parts = self._buffer.split(maxsplit=1)
            self._buffer = parts[1] if len(parts) > 1 else ""
            return None
        self._buffer = self._buffer[match.end() :]
        return int(match.group())


def _save_game(kingdom: Kingdom, out: TextIO) -> None:
    print("Saving game...", file=out)
    kingdom.save(Path.cwd())
    for _, filename, label in SAVE_FILES:
        print(f"{label} data saved to file: {filename}", file=out)
    print("Game saved successfully!", file=out)


def _load_game(kingdom: Kingdom, out: TextIO) -> None:
    print("Loading game...", file=out)
    failed = set(kingdom.load(Path.cwd()))
    for _, filename, label in SAVE_FILES:
        if filename in failed:
            print(f"Error: Unable to open file for loading: {filename}", file=sys.stderr)
        else:
            print(f"{label} data loaded from file: {filename}", file=out)
    print("Game loaded successfully!", file=out)


def _play_choice(choice: int | None, kingdom: Kingdom, reader: _Input, out: TextIO) -> None:
    if choice == 1:
        print(kingdom.economy.collect_taxes(kingdom.population.total), file=out)
    elif choice == 2:
        print(kingdom.army.recruit(kingdom.population.working_class), file=out)
    elif choice == 3:
        try:
            print(kingdom.army.train(), file=out)
        except ValueError as error:
            print(error, file=out)
    elif choice == 4:
        print("Enter building type (F=Farm, M=Mine, W=Wall, B=Barracks): ", end="", file=out)
        building = reader.read_char()
        print("Enter coordinates (x y): ", end="", file=out)
        x = reader.read_int()
        y = reader.read_int()
        try:
            if building is None or x is None or y is None:
                raise ValueError("Cannot build there.")
            kingdom.kingdom_map.place_building(building, x, y)
        except ValueError:
            print("[Map] Cannot build there.", file=out)
    elif choice == 5:
        print("How much gold to spend on services? ", end="", file=out)
        amount = reader.read_int() or 0
        try:
            print(kingdom.economy.spend_on_services(amount), file=out)
        except ValueError as error:
            print(error, file=out)
    elif choice == 6:
        print(kingdom.leadership.change_policy("Reformist"), file=out)
    elif choice == 7:
        _save_game(kingdom, out)
    elif choice == 8:
        _load_game(kingdom, out)
    elif choice == 9:
        print("You chose to do nothing this season.", file=out)
    else:
        print("Invalid choice.", file=out)


def _end_of_season(kingdom: Kingdom, rng: _RandomSource, out: TextIO) -> None:
    print(kingdom.population.simulate_growth(kingdom.resources.food, 300, 200), file=out)
    print(kingdom.army.feed_and_pay(), file=out)
    print(kingdom.economy.apply_inflation(), file=out)
    interest = kingdom.bank.apply_interest()
    if interest is not None:
        print(interest, file=out)
    print(kingdom.bank.audit_treasury(rng), file=out)
    print(kingdom.resources.gather(30, 20, 15, 10), file=out)
    try:
        print(kingdom.resources.consume(50, 10, 5, 3), file=out)
    except ValueError as error:
        print(error, file=out)


def _respond_to_event(response: int | None, kingdom: Kingdom, out: TextIO) -> None:
    if response == 1:
        try:
            print(kingdom.bank.repay_loan(100), file=out)
        except ValueError as error:
            print(error, file=out)
        print(kingdom.population.apply_illness(10), file=out)
    elif response == 2:
        revolt = kingdom.population.check_for_revolt()
        if revolt is not None:
            print(revolt, file=out)
    elif response == 3:
        print(kingdom.army.recruit(kingdom.population.working_class), file=out)
    else:
        print("No effective action taken.", file=out)


def run_game(
    input_lines: Iterable[str] | None = None,
    output: TextIO | None = None,
    rng: _RandomSource | None = None,
    turns: int = MAX_TURNS,
) -> Kingdom:
    """Play the given number of seasons, reading the player's answers from ``input_lines``."""
    out = output if output is not None else sys.stdout
    source = rng if rng is not None else random.Random()
    reader = _Input(input_lines if input_lines is not None else sys.stdin)
    kingdom = Kingdom()

    print("=== STRONGHOLD: KINGDOM SIMULATION STARTED ===", file=out)
    for turn in range(1, turns + 1):
        print(f"\n--- SEASON {turn} ---", file=out)
        print(kingdom.full_report(), file=out)
        print("\n".join(_MENU), file=out)
        _play_choice(reader.read_int(), kingdom, reader, out)

        _end_of_season(kingdom, source, out)

        print("\n[EVENT] Something is happening...", file=out)
        print(f"[EVENT] {kingdom.events.trigger_random_event(source)}", file=out)
        print("How will you respond? (1: Use funds, 2: Ignore, 3: Draft citizens)", file=out)
        _respond_to_event(reader.read_int(), kingdom, out)

        print(kingdom.leadership.assess_stability(), file=out)
        print(kingdom.population.apply_illness(turn), file=out)

    print("\n=== GAME OVER: Final Kingdom Report ===", file=out)
    print(kingdom.full_report(), file=out)
    return kingdom


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="stronghold", description="Rule a small kingdom for five seasons."
    )
    parser.parse_args(argv)
    try:
        run_game()
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0