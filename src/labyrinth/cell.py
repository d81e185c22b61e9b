# src/labyrinth/cell.py
# Maze cells live in an arena (Maze.cells); links are arena indices, so
# cyclic twisty graphs need no owning references.

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Dict, Iterator, List, Optional

from .items import Item, Port, symbol_for


class MazeInvariantError(RuntimeError):
    """Maze construction broke an internal invariant; the maze is unusable."""


class CellIds:
    """Hands out monotonically increasing cell ids."""

    def __init__(self, start: int = 0):
        self._next = count(start)

    def next(self) -> int:
        return next(self._next)


# Process-wide counter used when the caller does not inject one.
DEFAULT_IDS = CellIds()


@dataclass
class MazeCell:
    id: int
    whats_here: Item = Item.NOTHING
    links: Dict[Port, int] = field(default_factory=dict)

    def neighbor(self, port: Port) -> Optional[int]:
        return self.links.get(port)

    def clear(self) -> None:
        self.whats_here = Item.NOTHING
        self.links.clear()

    def __str__(self) -> str:
        return f"{self.id}{symbol_for(self.whats_here)}"


@dataclass(frozen=True)
class NodeLink:
    src: MazeCell
    direction: Port
    dst: MazeCell

    @property
    def label(self) -> str:
        return f"{self.direction.title} to {self.dst.id}"


@dataclass
class Maze:
    cells: List[MazeCell]
    start: int = 0

    @classmethod
    def fresh(cls, n: int, ids: Optional[CellIds] = None) -> "Maze":
        """Create n unlinked cells; all cells exist before any linking."""
        ids = ids or DEFAULT_IDS
        return cls(cells=[MazeCell(id=ids.next()) for _ in range(n)])

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> MazeCell:
        return self.cells[index]

    @property
    def start_cell(self) -> MazeCell:
        return self.cells[self.start]

    def link(self, src: int, dst: int, port: Port) -> None:
        """Point src's port at dst (one direction only)."""
        if not isinstance(port, Port) or port is Port.UNDEFINED:
            raise MazeInvariantError(f"Unknown port {port!r} linking {src} -> {dst}")
        self.cells[src].links[port] = dst

    def clear(self) -> None:
        for cell in self.cells:
            cell.clear()

    def neighbors(self, index: int) -> Iterator[int]:
        return iter(self.cells[index].links.values())

    def are_adjacent(self, first: int, second: int) -> bool:
        return second in self.cells[first].links.values()

    def links_from(self, index: int) -> List[NodeLink]:
        src = self.cells[index]
        return [
            NodeLink(src, port, self.cells[dst])
            for port, dst in sorted(src.links.items(), key=lambda kv: list(Port).index(kv[0]))
        ]

    def edge_count(self) -> int:
        # Every edge is stored once on each side.
        return sum(len(c.links) for c in self.cells) // 2

    def reachable_from(self, index: int) -> set:
        """Depth-first traversal over all four directional links."""
        visited = set()
        frontier = [index]
        while frontier:
            cur = frontier.pop()
            if cur in visited:
                continue
            visited.add(cur)
            frontier.extend(self.neighbors(cur))
        return visited

    def is_connected(self) -> bool:
        if not self.cells:
            return True
        return len(self.reachable_from(0)) == len(self.cells)

    def item_locations(self) -> Dict[Item, int]:
        return {
            c.whats_here: i for i, c in enumerate(self.cells) if c.whats_here is not Item.NOTHING
        }
