from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class GridShape:
    rows: int
    cols: int

    @property
    def count(self) -> int:
        return self.rows * self.cols

    def idx(self, row: int, col: int) -> int:
        # Row-major; this is the index space of the distance matrix too.
        return row * self.cols + col

    def cells(self) -> Iterator[Tuple[int, int]]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col
