# src/labyrinth/mapgen/generator.py
# Name-seeded maze entry points. The seed depends on the structural sizes,
# so the same name yields different mazes at different sizes.

import logging
from typing import Optional

from ..cell import CellIds, Maze
from ..config import DEFAULTS, MazeConfig
from ..hashing import hash_name
from ..rng import make_random
from .distances import all_pairs_shortest_paths
from .kruskal import make_grid_maze
from .placement import place_items, remote_locations_in
from .twisty import make_twisty_maze

logger = logging.getLogger(__name__)


def _finish(maze: Maze) -> Maze:
    distances = all_pairs_shortest_paths(maze)
    locations = remote_locations_in(distances)
    place_items(maze, locations)
    return maze


def maze_for(name: str, config: MazeConfig = DEFAULTS, ids: Optional[CellIds] = None) -> Maze:
    """Grid maze tailored to name; maze.start is where you begin."""
    seed = hash_name(name, (config.rows, config.cols))
    rng = make_random(seed, config.generator)
    maze = _finish(make_grid_maze(config.rows, config.cols, rng, ids))
    logger.info("maze for %r: seed=%d start=%s", name, seed, maze.start_cell)
    return maze


def twisty_maze_for(name: str, config: MazeConfig = DEFAULTS, ids: Optional[CellIds] = None) -> Maze:
    seed = hash_name(name, (config.twisty_size,))
    rng = make_random(seed, config.generator)
    maze = _finish(make_twisty_maze(config.twisty_size, rng, ids))
    logger.info("twisty maze for %r: seed=%d start=%s", name, seed, maze.start_cell)
    return maze
