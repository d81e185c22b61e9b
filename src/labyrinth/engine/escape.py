# src/labyrinth/engine/escape.py
# Walk a move string (N/S/E/W, no separators) through a finished maze.

from typing import List, Optional

from ..cell import Maze
from ..items import ESCAPE_ITEMS, MOVES, Item


def walk(maze: Maze, moves: str, start: Optional[int] = None) -> Optional[List[int]]:
    """
    Return the cell indices visited (start included), or None as soon as a
    move is not N/S/E/W or leaves through a port with no link.
    """
    cur = maze.start if start is None else start
    visited = [cur]
    for ch in moves:
        port = MOVES.get(ch)
        if port is None:
            return None
        nxt = maze[cur].neighbor(port)
        if nxt is None:
            return None
        cur = nxt
        visited.append(cur)
    return visited


def is_path_to_freedom(maze: Maze, moves: str, start: Optional[int] = None) -> bool:
    """True iff following moves from start picks up the spellbook, potion and wand."""
    visited = walk(maze, moves, start)
    if visited is None:
        return False
    found = {maze[i].whats_here for i in visited} - {Item.NOTHING}
    return found == ESCAPE_ITEMS
