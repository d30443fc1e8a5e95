"""Random events that befall the kingdom."""

from __future__ import annotations

import random
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Protocol

EVENTS = (
    "A bountiful harvest increases food supply!",
    "A sudden drought reduces water availability.",
    "Bandits raid nearby villages.",
    "A merchant caravan brings wealth to the kingdom.",
    "An outbreak of illness spreads among the population.",
)


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class EventManager:
    """Remembers the latest event and how many have happened."""

    last_event: str = "No events triggered yet."
    event_count: int = 0

    def trigger_random_event(self, rng: _RandomSource | None = None) -> str:
        """Pick one of the known events at random and return it."""
        source = rng if rng is not None else random
        self.last_event = EVENTS[source.randrange(len(EVENTS))]
        self.event_count += 1
        return self.last_event

    def save(self, path: str | PathLike[str]) -> None:
        Path(path).write_text(f"{self.last_event}\n{self.event_count}\n")

    @classmethod
    def load(cls, path: str | PathLike[str]) -> EventManager:
        parts = Path(path).read_text().split("\n", 1)
        tokens = parts[1].split() if len(parts) == 2 else []
        if not tokens:
            raise ValueError(f"Incomplete event data in {path}")
        return cls(parts[0], int(tokens[0]))