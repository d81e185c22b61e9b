from labyrinth.cell import CellIds, Maze
from labyrinth.engine.escape import is_path_to_freedom, walk
from labyrinth.items import Item, Port


def make_square():
    """
    2x2 cycle:  0 - 1
                |   |
                2 - 3
    Items on 1, 2, 3; start on 0.
    """
    maze = Maze.fresh(4, CellIds())
    for a, b, pa, pb in [
        (0, 1, Port.EAST, Port.WEST),
        (1, 3, Port.SOUTH, Port.NORTH),
        (3, 2, Port.WEST, Port.EAST),
        (2, 0, Port.NORTH, Port.SOUTH),
    ]:
        maze.link(a, b, pa)
        maze.link(b, a, pb)
    maze[1].whats_here = Item.SPELLBOOK
    maze[2].whats_here = Item.POTION
    maze[3].whats_here = Item.WAND
    maze.start = 0
    return maze


def test_visiting_all_three_escapes():
    maze = make_square()
    assert is_path_to_freedom(maze, "ESW")
    assert is_path_to_freedom(maze, "SEN")
    assert walk(maze, "ESW") == [0, 1, 3, 2]


def test_partial_collection_fails():
    maze = make_square()
    assert not is_path_to_freedom(maze, "E")
    assert not is_path_to_freedom(maze, "")


def test_revisits_are_harmless():
    maze = make_square()
    assert is_path_to_freedom(maze, "EWESWN")


def test_bad_character_fails():
    maze = make_square()
    assert not is_path_to_freedom(maze, "NXS")
    assert not is_path_to_freedom(maze, "ESx")
    assert not is_path_to_freedom(maze, "ESWQ")  # even with everything collected
    assert walk(maze, "EsW") is None


def test_walking_off_the_graph_fails_quietly():
    maze = make_square()
    assert not is_path_to_freedom(maze, "N")
    assert not is_path_to_freedom(maze, "ESWW")
    assert walk(maze, "W") is None


def test_explicit_start_and_start_item():
    maze = make_square()
    # Starting on the wand: the fencepost cell counts.
    assert is_path_to_freedom(maze, "NWS", start=3)
    assert not is_path_to_freedom(maze, "NWS")
