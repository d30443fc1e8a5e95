"""The royal bank: treasury, loans and audits."""

from __future__ import annotations

import random
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Protocol

AUDIT_CORRUPTION_CHANCE = 20


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class Bank:
    """Treasury holdings and the crown's outstanding debt."""

    treasury: int = 500
    outstanding_loan: int = 0
    interest_rate: float = 0.10
    corruption_detected: bool = False

    def issue_loan(self, amount: int) -> str:
        if amount <= 0:
            raise ValueError("Invalid loan amount.")
        self.outstanding_loan += amount
        self.treasury += amount
        return f"Loan issued: {amount} gold."

    def repay_loan(self, amount: int) -> str:
        """Repay up to ``amount``, never more than is owed."""
        if amount <= 0 or amount > self.treasury:
            raise ValueError(
                "Cannot repay loan. Invalid amount or insufficient treasury."
            )
        amount = min(amount, self.outstanding_loan)
        self.treasury -= amount
        self.outstanding_loan -= amount
        return f"Repaid loan: {amount} gold."

    def apply_interest(self) -> str | None:
        """Add interest to the loan; returns None when nothing is owed."""
        if self.outstanding_loan <= 0:
            return None
        interest = int(self.outstanding_loan * self.interest_rate)
        self.outstanding_loan += interest
        return f"Interest applied: +{interest} gold to loan."

    def audit_treasury(self, rng: _RandomSource | None = None) -> str:
        """Audit the books; one time in five a tenth of the treasury is lost."""
        source = rng if rng is not None else random
        if source.randrange(100) < AUDIT_CORRUPTION_CHANCE:
            self.corruption_detected = True
            loss = self.treasury // 10
            self.treasury -= loss
            return f"Corruption detected! {loss} gold lost."
        return "Audit clean. No corruption found."

    def status_report(self) -> str:
        return "\n".join(
            [
                "Bank Status:",
                f" Treasury: {self.treasury} gold",
                f" Outstanding Loan: {self.outstanding_loan} gold",
                f" Interest Rate: {self.interest_rate * 100:g}%",
                f" Corruption: {'Yes' if self.corruption_detected else 'No'}",
            ]
        )

    def save(self, path: str | PathLike[str]) -> None:
        Path(path).write_text(
            f"{self.treasury} {self.outstanding_loan} {self.interest_rate:g} "
            f"{int(self.corruption_detected)}\n"
        )

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Bank:
        tokens = Path(path).read_text().split()
        if len(tokens) < 4:
            raise ValueError(f"Expected 4 values in {path}, found {len(tokens)}")
        treasury, loan, rate, flag = tokens[:4]
        return cls(int(treasury), int(loan), float(rate), int(flag) == 1)