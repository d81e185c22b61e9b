# src/labyrinth/mapgen/placement.py
from itertools import combinations
from typing import List, Sequence, Tuple

from ..cell import Maze
from ..items import Item

Locations = Tuple[int, int, int, int]

# locations[1..3] receive these, locations[0] is the start.
PLACEMENT_ORDER = (Item.SPELLBOOK, Item.POTION, Item.WAND)


def score_of(nodes: Sequence[int], distances: List[List[int]]) -> List[int]:
    """Sorted pairwise distances between the given nodes."""
    return sorted(distances[a][b] for a, b in combinations(nodes, 2))


def lexicographically_follows(lhs: Sequence[int], rhs: Sequence[int]) -> bool:
    # Equal-length inputs; equal sequences do not follow each other.
    for a, b in zip(lhs, rhs):
        if a != b:
            return a > b
    return False


def remote_locations_in(distances: List[List[int]]) -> Locations:
    """
    Exhaustively pick the four nodes whose sorted pairwise distances are
    lexicographically largest. Ties keep the first combination found.
    """
    n = len(distances)
    if n < 4:
        raise ValueError(f"need at least 4 nodes to place start and items, got {n}")

    best: Locations = (0, 1, 2, 3)
    best_score = score_of(best, distances)
    for i in range(n):
        for j in range(i + 1, n):
            for k in range(j + 1, n):
                for l in range(k + 1, n):
                    cur = (i, j, k, l)
                    cur_score = score_of(cur, distances)
                    if lexicographically_follows(cur_score, best_score):
                        best, best_score = cur, cur_score
    return best


def place_items(maze: Maze, locations: Locations) -> None:
    """Drop the items at locations[1..3] and start the maze at locations[0]."""
    for index, item in zip(locations[1:], PLACEMENT_ORDER):
        maze[index].whats_here = item
    maze.start = locations[0]
