"""Stockpiles of food, wood, stone and iron."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path


@dataclass
class ResourceManager:
    """The kingdom's raw materials."""

    food: int = 200
    wood: int = 100
    stone: int = 80
    iron: int = 50

    def gather(self, food: int, wood: int, stone: int, iron: int) -> str:
        if min(food, wood, stone, iron) < 0:
            raise ValueError("Invalid gathering values.")
        self.food += food
        self.wood += wood
        self.stone += stone
        self.iron += iron
        return "Resources gathered."

    def consume(self, food: int, wood: int, stone: int, iron: int) -> str:
        """Use up resources; nothing is taken unless every amount is available."""
        if food > self.food or wood > self.wood or stone > self.stone or iron > self.iron:
            raise ValueError("Not enough resources to consume.")
        self.food -= food
        self.wood -= wood
        self.stone -= stone
        self.iron -= iron
        return "Resources consumed."

    def lose(self, food: int, wood: int, stone: int, iron: int) -> str:
        """Lose resources to a disaster, never going below what is held."""
        self.food -= min(food, self.food)
        self.wood -= min(wood, self.wood)
        self.stone -= min(stone, self.stone)
        self.iron -= min(iron, self.iron)
        return "Resources lost due to disaster."

    def status_report(self) -> str:
        return "\n".join(
            [
                "Resources:",
                f" Food: {self.food}",
                f" Wood: {self.wood}",
                f" Stone: {self.stone}",
                f" Iron: {self.iron}",
            ]
        )

    def save(self, path: str | PathLike[str]) -> None:
        Path(path).write_text(f"{self.food} {self.wood} {self.stone} {self.iron}\n")

    @classmethod
    def load(cls, path: str | PathLike[str]) -> ResourceManager:
        tokens = Path(path).read_text().split()
        if len(tokens) < 4:
            raise ValueError(f"Expected 4 values in {path}, found {len(tokens)}")
        food, wood, stone, iron = (int(token) for token in tokens[:4])
        return cls(food, wood, stone, iron)