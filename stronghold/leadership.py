"""The ruler, their policy and their hold on power."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path


@dataclass
class Leadership:
    """Who rules, under which policy, and how popular they are."""

    current_leader: str = "King Aldric"
    policy: str = "Balanced"
    popularity: int = 75
    in_power: bool = True

    def hold_election(self, new_leader: str) -> str:
        """Elect a new leader if the people support an election."""
        if self.popularity < 50:
            return "Election failed. People did not support it."
        self.current_leader = new_leader
        self.policy = "Reformist"
        self.popularity = 65
        return f"Election successful. New leader: {self.current_leader}"

    def initiate_coup(self) -> str:
        if self.popularity < 30:
            self.in_power = False
            return "Coup succeeded. Leadership has fallen."
        self.popularity -= 15
        return "Coup attempt failed. Popularity reduced."

    def change_policy(self, new_policy: str) -> str:
        self.policy = new_policy
        self.popularity -= 5
        return f"Policy changed to: {self.policy}"

    def assess_stability(self) -> str:
        if self.popularity < 20:
            return "Unstable kingdom! Risk of revolt or coup."
        if self.popularity < 50:
            return "Moderate unrest in the population."
        return "The kingdom is stable."

    def status_report(self) -> str:
        return "\n".join(
            [
                "Leadership Status:",
                f" Leader: {self.current_leader}",
                f" Policy: {self.policy}",
                f" Popularity: {self.popularity}",
                f" In Power: {'Yes' if self.in_power else 'No'}",
            ]
        )

    def save(self, path: str | PathLike[str]) -> None:
        Path(path).write_text(
            f"{self.current_leader}\n{self.policy}\n"
            f"{self.popularity} {int(self.in_power)}\n"
        )

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Leadership:
        parts = Path(path).read_text().split("\n", 2)
        if len(parts) < 3:
            raise ValueError(f"Incomplete leadership data in {path}")
        leader, policy, rest = parts
        tokens = rest.split()
        if len(tokens) < 2:
            raise ValueError(f"Incomplete leadership data in {path}")
        return cls(leader, policy, int(tokens[0]), int(tokens[1]) == 1)