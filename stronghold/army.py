"""The kingdom's standing army."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

TRAINING_COST = 50
MIN_RECRUITS_POOL = 10


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _read_ints(path: str | PathLike[str], count: int) -> list[int]:
    tokens = Path(path).read_text().split()
    if len(tokens) < count:
        raise ValueError(f"Expected {count} values in {path}, found {len(tokens)}")
    return [int(token) for token in tokens[:count]]


@dataclass
class Army:
    """Soldiers, their morale and the supplies that keep them loyal."""

    soldiers: int = 50
    morale: int = 70
    corruption: int = 10
    food_supply: int = 100
    gold_supply: int = 500

    def recruit(self, available_pop: int) -> str:
        """Enlist one in ten of the available people."""
        if available_pop < MIN_RECRUITS_POOL:
            raise ValueError("Not enough people to recruit.")
        new_recruits = available_pop // 10
        self.soldiers += new_recruits
        self.morale += 2
        return f"Recruited {new_recruits} soldiers."

    def train(self) -> str:
        """Spend gold on drills to raise morale."""
        if self.gold_supply < TRAINING_COST:
            raise ValueError("Insufficient gold to train army.")
        self.gold_supply -= TRAINING_COST
        self.morale += 5
        return "Army trained. Morale increased."

    def feed_and_pay(self) -> str:
        """Feed and pay every soldier, or suffer the consequences."""
        wages = self.soldiers * 2
        if self.food_supply < self.soldiers or self.gold_supply < wages:
            self.morale -= 10
            self.corruption += 5
            return "Underfed or unpaid army. Morale dropped."
        self.food_supply -= self.soldiers
        self.gold_supply -= wages
        self.morale += 3
        return "Army fed and paid."

    @property
    def strength(self) -> int:
        """Fighting strength: morale-weighted soldiers minus corruption."""
        return _trunc_div(self.soldiers * self.morale, 100) - self.corruption

    def status_report(self) -> str:
        return "\n".join(
            [
                "Army Status:",
                f" Soldiers: {self.soldiers}",
                f" Morale: {self.morale}",
                f" Corruption: {self.corruption}",
                f" Food Supply: {self.food_supply}",
                f" Gold Supply: {self.gold_supply}",
                f" Strength Score: {self.strength}",
            ]
        )

    def save(self, path: str | PathLike[str]) -> None:
        Path(path).write_text(
            f"{self.soldiers} {self.morale} {self.corruption} "
            f"{self.food_supply} {self.gold_supply}\n"
        )

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Army:
        soldiers, morale, corruption, food, gold = _read_ints(path, 5)
        return cls(soldiers, morale, corruption, food, gold)