"""The people of the kingdom."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

REVOLT_THRESHOLD = 50


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


@dataclass
class Population:
    """Peasants, merchants and nobles, and how many are sick or revolting."""

    peasants: int = 100
    merchants: int = 25
    nobles: int = 10
    ill: int = 0
    revolting: bool = False

    def simulate_growth(self, food: int, shelter: int, jobs: int) -> str:
        """Grow the population if food, shelter and jobs suffice."""
        total = self.total
        if food < total or shelter < total or jobs < self.working_class:
            return "Growth stalled due to poor conditions."
        self.peasants += 5
        self.merchants += 2
        return "Population grew: +5 peasants, +2 merchants"

    def apply_illness(self, severity: int) -> str:
        affected = severity * 2
        self.ill += affected
        self.peasants -= _trunc_div(affected, 2)
        self.merchants -= _trunc_div(affected, 3)
        self.nobles -= _trunc_div(affected, 6)
        return f"Illness hit! {affected} fell ill."

    def check_for_revolt(self) -> str | None:
        """Start a revolt when peasants grow too few; None if calm."""
        if self.peasants < REVOLT_THRESHOLD:
            self.revolting = True
            return "Peasant revolt triggered!"
        return None

    @property
    def total(self) -> int:
        return self.peasants + self.merchants + self.nobles

    @property
    def working_class(self) -> int:
        return self.peasants + self.merchants

    def status_report(self) -> str:
        return "\n".join(
            [
                "Population Report:",
                f" Peasants: {self.peasants}",
                f" Merchants: {self.merchants}",
                f" Nobles: {self.nobles}",
                f" Ill: {self.ill}",
                f" Revolting: {'Yes' if self.revolting else 'No'}",
            ]
        )

    def save(self, path: str | PathLike[str]) -> None:
        Path(path).write_text(
            f"{self.peasants} {self.merchants} {self.nobles} "
            f"{self.ill} {int(self.revolting)}\n"
        )

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Population:
        tokens = Path(path).read_text().split()
        if len(tokens) < 5:
            raise ValueError(f"Expected 5 values in {path}, found {len(tokens)}")
        peasants, merchants, nobles, ill, revolting = (int(t) for t in tokens[:5])
        return cls(peasants, merchants, nobles, ill, revolting != 0)