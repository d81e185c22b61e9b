# src/labyrinth/mapgen/twisty.py
# Twisty maze: Erdős–Rényi style random links, at most one link per port,
# regenerated until the graph is connected.

import logging
import math
from typing import Optional

from ..cell import CellIds, Maze, MazeCell
from ..items import FREE_PORT_ORDER, Port

logger = logging.getLogger(__name__)


def random_free_port(cell: MazeCell, rng) -> Port:
    ports = [p for p in FREE_PORT_ORDER if p not in cell.links]
    if not ports:
        return Port.UNDEFINED
    return ports[rng.next_int(len(ports))]


def erdos_renyi_link(maze: Maze, rng) -> bool:
    """
    One linking pass. Each pair i<j is linked with probability ln(n)/n.
    Returns False as soon as a chosen pair has no free port on either side.
    """
    n = len(maze)
    threshold = math.log(n) / n

    for i in range(n):
        for j in range(i + 1, n):
            if rng.next_double() <= threshold:
                i_port = random_free_port(maze[i], rng)
                j_port = random_free_port(maze[j], rng)
                if i_port is Port.UNDEFINED or j_port is Port.UNDEFINED:
                    logger.debug("pair (%d, %d) out of free ports", i, j)
                    return False
                maze.link(i, j, i_port)
                maze.link(j, i, j_port)
    return True


def make_twisty_maze(n: int, rng, ids: Optional[CellIds] = None) -> Maze:
    maze = Maze.fresh(n, ids)

    # No attempt cap: the generator is never reset, so every failed attempt
    # shifts the draws the accepted one sees.
    attempts = 0
    while True:
        attempts += 1
        maze.clear()
        if not erdos_renyi_link(maze, rng):
            continue
        if maze.is_connected():
            break
        logger.debug("attempt %d disconnected", attempts)

    logger.debug("twisty maze of %d cells accepted after %d attempt(s)", n, attempts)
    return maze
