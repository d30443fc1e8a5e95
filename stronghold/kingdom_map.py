"""The kingdom's building grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

MAP_WIDTH = 5
MAP_HEIGHT = 5
EMPTY = "."
KEEP = "K"
KEEP_POSITION = (2, 2)


def _fresh_grid() -> list[list[str]]:
    grid = [[EMPTY] * MAP_WIDTH for _ in range(MAP_HEIGHT)]
    keep_x, keep_y = KEEP_POSITION
    grid[keep_y][keep_x] = KEEP
    return grid


@dataclass
class KingdomMap:
    """A small grid of land, indexed as ``grid[y][x]``, with the keep at its centre."""

    grid: list[list[str]] = field(default_factory=_fresh_grid)

    def render(self) -> str:
        """Draw the map, each cell followed by a space."""
        rows = ["".join(f"{cell} " for cell in row) for row in self.grid]
        return "\n".join(["=== KINGDOM MAP ===", *rows, "================="])

    def place_building(self, building_type: str, x: int, y: int) -> None:
        """Put a building on an empty tile; raise ValueError if that is not possible."""
        if len(building_type) != 1:
            raise ValueError("Building type must be a single character.")
        if not (0 <= x < MAP_WIDTH and 0 <= y < MAP_HEIGHT) or self.grid[y][x] != EMPTY:
            raise ValueError("Cannot build there.")
        self.grid[y][x] = building_type

    def save(self, path: str | PathLike[str]) -> None:
        Path(path).write_text("".join("".join(row) + "\n" for row in self.grid))

    @classmethod
    def load(cls, path: str | PathLike[str]) -> KingdomMap:
        cells = [char for char in Path(path).read_text() if not char.isspace()]
        needed = MAP_WIDTH * MAP_HEIGHT
        if len(cells) < needed:
            raise ValueError(f"Expected {needed} map cells in {path}, found {len(cells)}")
        grid = [
            cells[row * MAP_WIDTH : (row + 1) * MAP_WIDTH] for row in range(MAP_HEIGHT)
        ]
        return cls(grid)