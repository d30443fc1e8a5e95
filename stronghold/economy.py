"""Taxes, spending, war and inflation."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

INCOME_PER_PERSON = 10


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


@dataclass
class Economy:
    """The kingdom's economy: treasury, tax rate and inflation."""

    treasury: int = 1000
    tax_rate: float = 0.1
    inflation: int = 5
    at_war: bool = False

    def collect_taxes(self, population_size: int) -> str:
        income = population_size * INCOME_PER_PERSON
        collected = int(income * self.tax_rate)
        self.treasury += collected
        return f"Collected {collected} gold in taxes."

    def spend_on_services(self, amount: int) -> str:
        if amount > self.treasury:
            raise ValueError("Not enough gold to spend.")
        self.treasury -= amount
        return f"Spent {amount} gold on public services."

    def declare_war(self) -> str:
        self.at_war = True
        self.inflation += 5
        return "War declared. Inflation increased."

    def end_war(self) -> str:
        self.at_war = False
        self.inflation = max(self.inflation - 3, 0)
        return "War ended. Inflation reduced."

    def apply_inflation(self) -> str:
        loss = _trunc_div(self.treasury * self.inflation, 100)
        self.treasury -= loss
        return f"Inflation reduced treasury by {loss} gold."

    def status_report(self) -> str:
        return "\n".join(
            [
                "Economy Status:",
                f" Treasury: {self.treasury} gold",
                f" Tax Rate: {self.tax_rate * 100:g}%",
                f" Inflation: {self.inflation}%",
                f" At War: {'Yes' if self.at_war else 'No'}",
            ]
        )

    def save(self, path: str | PathLike[str]) -> None:
        Path(path).write_text(
            f"{self.treasury} {self.tax_rate:g} {self.inflation} {int(self.at_war)}\n"
        )

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Economy:
        tokens = Path(path).read_text().split()
        if len(tokens) < 4:
            raise ValueError(f"Expected 4 values in {path}, found {len(tokens)}")
        treasury, rate, inflation, flag = tokens[:4]
        return cls(int(treasury), float(rate), int(inflation), int(flag) == 1)