# src/labyrinth/mapgen/distances.py
from typing import List

from ..cell import Maze


def all_pairs_shortest_paths(maze: Maze) -> List[List[int]]:
    """
    Floyd–Warshall over the arena order of maze.cells: result[i][j] is the
    hop count between cell i and cell j, or len(maze) + 1 if unreachable.
    """
    n = len(maze)
    dist = [[n + 1] * n for _ in range(n)]

    for i in range(n):
        dist[i][i] = 0

    for i in range(n):
        for j in range(n):
            if maze.are_adjacent(i, j):
                dist[i][j] = 1

    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            row_i = dist[i]
            d_ik = row_i[k]
            for j in range(n):
                if d_ik + row_k[j] < row_i[j]:
                    row_i[j] = d_ik + row_k[j]
    return dist
