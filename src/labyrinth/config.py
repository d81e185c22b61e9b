from dataclasses import dataclass

from .rng import GENERATORS


@dataclass(frozen=True)
class MazeConfig:
    # Reference sizes; changing any of them changes every maze.
    rows: int = 4
    cols: int = 4
    twisty_size: int = 12
    generator: str = "dotnet"

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"grid must be at least 1x1, got {self.rows}x{self.cols}")
        if self.rows * self.cols < 4:
            raise ValueError("grid maze needs at least 4 cells to place start and items")
        if self.twisty_size < 4:
            raise ValueError("twisty maze needs at least 4 cells to place start and items")
        if self.generator not in GENERATORS:
            raise ValueError(f"unknown generator {self.generator!r}")


# Global defaults (the launcher builds its own from flags)
DEFAULTS = MazeConfig()
