#!/usr/bin/env python3
import argparse
import logging
import sys

from labyrinth.config import MazeConfig
from labyrinth.engine.escape import is_path_to_freedom, walk
from labyrinth.mapgen.generator import maze_for, twisty_maze_for
from labyrinth.rng import GENERATORS

log = logging.getLogger("labtool")


def build(args):
    config = MazeConfig(rows=args.rows, cols=args.cols, twisty_size=args.size, generator=args.generator)
    builder = twisty_maze_for if args.twisty else maze_for
    return builder(args.name, config)


def cmd_check(args):
    maze = build(args)
    kind = "twisty labyrinth" if args.twisty else "labyrinth"
    visited = walk(maze, args.path)
    if visited is not None:
        log.debug("visited %s", " ".join(str(maze[i]) for i in visited))
    if is_path_to_freedom(maze, args.path):
        print(f"Congratulations! You've found a way out of your {kind}.")
        return 0
    print(f"Sorry, but you're still stuck in your {kind}.")
    return 1


def cmd_links(args):
    maze = build(args)
    order = [maze.start] + [i for i in range(len(maze)) if i != maze.start]
    for i in order:
        mark = " (start)" if i == maze.start else ""
        labels = ", ".join(link.label for link in maze.links_from(i))
        print(f"{maze[i]}{mark}: {labels}")
    return 0


def main(argv=None):
    p = argparse.ArgumentParser(description="Name-seeded labyrinths")
    p.add_argument('--generator', choices=sorted(GENERATORS), default='dotnet')
    p.add_argument('--rows', type=int, default=4)
    p.add_argument('--cols', type=int, default=4)
    p.add_argument('--size', type=int, default=12, help='twisty maze size')
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('check')
    p1.add_argument('--name', type=str, required=True)
    p1.add_argument('--path', type=str, required=True)
    p1.add_argument('--twisty', action='store_true')
    p1.set_defaults(func=cmd_check)
    p2 = sub.add_parser('links')
    p2.add_argument('--name', type=str, required=True)
    p2.add_argument('--twisty', action='store_true')
    p2.set_defaults(func=cmd_links)
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except ValueError as exc:
        p.error(str(exc))


if __name__ == '__main__':
    sys.exit(main())
