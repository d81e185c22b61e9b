# src/labyrinth/mapgen/kruskal.py
# Grid maze via randomized Kruskal: shuffle every possible wall, then knock
# walls down whenever that joins two separate regions.

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..cell import CellIds, Maze, MazeInvariantError
from ..grid import GridShape
from ..items import Port

logger = logging.getLogger(__name__)


@dataclass
class EdgeCandidate:
    src: int
    dst: int
    src_port: Port
    dst_port: Port


def all_possible_edges(shape: GridShape) -> List[EdgeCandidate]:
    """Every grid-adjacent pair once: south neighbor first, then east."""
    edges = []
    for row, col in shape.cells():
        here = shape.idx(row, col)
        if row + 1 < shape.rows:
            edges.append(EdgeCandidate(here, shape.idx(row + 1, col), Port.SOUTH, Port.NORTH))
        if col + 1 < shape.cols:
            edges.append(EdgeCandidate(here, shape.idx(row, col + 1), Port.EAST, Port.WEST))
    return edges


def shuffle_edges(edges: List[EdgeCandidate], rng) -> None:
    # Fisher-Yates; the last position still costs one draw.
    n = len(edges)
    for i in range(n):
        j = rng.next_int(n - i) + i
        edges[i], edges[j] = edges[j], edges[i]


def rep_for(reps: List[int], index: int) -> int:
    # Union-find FIND without path compression (N is tiny).
    while reps[index] != index:
        index = reps[index]
    return index


def make_grid_maze(rows: int, cols: int, rng, ids: Optional[CellIds] = None) -> Maze:
    """
    Build a rows×cols spanning-tree maze. Cells are returned row-major, so
    maze[row * cols + col] is the cell at (row, col).
    """
    shape = GridShape(rows, cols)
    maze = Maze.fresh(shape.count, ids)

    edges = all_possible_edges(shape)
    shuffle_edges(edges, rng)

    reps = list(range(shape.count))
    edges_left = shape.count - 1
    for edge in edges:
        if edges_left == 0:
            break
        rep1 = rep_for(reps, edge.src)
        rep2 = rep_for(reps, edge.dst)
        if rep1 == rep2:
            continue
        reps[rep1] = rep2
        maze.link(edge.src, edge.dst, edge.src_port)
        maze.link(edge.dst, edge.src, edge.dst_port)
        edges_left -= 1

    if edges_left != 0:
        raise MazeInvariantError(f"{edges_left} edges remain after exhausting candidates")

    logger.debug("grid maze %dx%d built from %d candidates", rows, cols, len(edges))
    return maze
