#!/usr/bin/env python3
"""
Load a maze file and print it to the console.

Usage:
    python maze_demo.py [PATH] [--flow] [--color] [--verbose]

PATH defaults to maze.txt. --flow draws each level in a box, side by side.
"""

from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from ascii_render import RenderOptions, render_levels, render_maze_flow
from maze_parser import MazeParseError, load_maze
from maze_types import Maze, Tile

DEFAULT_PATH = "maze.txt"


def describe(maze: Maze) -> Text:
    """Summary line: dimensions plus player and finish positions."""
    summary = Text()
    summary.append("Size: ", style="bold")
    summary.append(f"{maze.width}x{maze.height}x{maze.depth}\n")
    for label, tile in (("Player", Tile.PLAYER), ("Finish", Tile.FINISH)):
        positions = ", ".join(str(coord) for coord in maze.find(tile)) or "none"
        summary.append(f"{label}: ", style="bold")
        summary.append(f"{positions}\n")
    return summary


def main(argv: list[str]) -> int:
    """Run the demo. Returns the process exit status."""
    flags = {arg for arg in argv if arg.startswith("--")}
    paths = [arg for arg in argv if not arg.startswith("--")]
    path = paths[0] if paths else DEFAULT_PATH

    if "--verbose" in flags:
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

    console = Console()

    try:
        maze = load_maze(path)
    except FileNotFoundError:
        console.print(f"[bold red]No such maze file:[/] {escape(path)}")
        return 2
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[bold red]Cannot read maze file:[/] {escape(path)}")
        console.print(escape(str(e)), style="red")
        return 2
    except MazeParseError as e:
        status = Text()
        status.append(f"{path}\n", style="bold")
        status.append(str(e), style="red")
        console.print(Panel(status, title="Maze - Error", border_style="red"))
        return 1

    options = RenderOptions(color="--color" in flags)
    if "--flow" in flags:
        body = render_maze_flow(maze, options)
    else:
        body = render_levels(maze, options)

    console.print(Panel(describe(maze), title=f"Maze - {escape(path)}"))
    # Chalk output carries its own ANSI codes, keep rich out of it
    print(body)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
