"""
ASCII rendering for mazes.

Provides three rendering approaches:
1. Plain text in the maze file format (re-parseable with maze_parser)
2. Level listing - one indented block per level under a "Level z" header
3. Box flow rendering - each level boxed, boxes laid out left to right
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from maze_types import TILE_TO_CHAR, Maze, Tile

__all__ = [
    "RenderOptions",
    "TILE_COLORS",
    "format_maze",
    "render_level_box",
    "render_levels",
    "render_maze_flow",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderOptions:
    """Settings for console rendering."""

    indent: str = "    "
    level_headers: bool = True
    color: bool = False
    cell_width: int = 1  # characters per tile in boxed rendering
    terminal_width: int = 120
    box_spacing: int = 2  # spaces between boxes in flow layout


TILE_COLORS: dict[Tile, Callable[[str], str]] = {
    Tile.EMPTY: chalk.white,
    Tile.WALL: chalk.blue,
    Tile.PORTAL: chalk.magenta,
    Tile.STAIRCASE: chalk.yellow,
    Tile.PLAYER: chalk.greenBright,
    Tile.FINISH: chalk.redBright,
}


def _plain(s: str) -> str:
    return s


def _tile_painter(options: RenderOptions) -> Callable[[Tile], str]:
    """Return a function mapping a tile to its (possibly colored) character."""
    if options.color:
        return lambda tile: TILE_COLORS[tile](TILE_TO_CHAR[tile])
    return lambda tile: TILE_TO_CHAR[tile]


# =============================================================================
# Plain Text Rendering
# =============================================================================


def format_maze(maze: Maze, separator: str | None = None) -> str:
    """
    Render a maze back into the text format read by maze_parser.

    Args:
        maze: The maze to render
        separator: Line placed between levels. Must start with '-'.
            Defaults to a run of dashes as wide as the maze.

    Returns:
        Maze text, one row per line, without a trailing newline
    """
    if separator is None:
        separator = "-" * max(maze.width, 1)
    if not separator.startswith("-"):
        raise ValueError(f"Separator must start with '-', got {separator!r}")

    blocks = [
        "\n".join("".join(TILE_TO_CHAR[tile] for tile in row) for row in maze.level(z))
        for z in range(maze.depth)
    ]
    return f"\n{separator}\n".join(blocks)


def render_levels(maze: Maze, options: RenderOptions | None = None) -> str:
    """
    Render every level as an indented block, levels separated by a blank line.

    Example (two 2x2 levels, default options):
        Level 0
            .#
            @.

        Level 1
            +.
            .*
    """
    if options is None:
        options = RenderOptions()
    paint = _tile_painter(options)

    blocks: list[str] = []
    for z in range(maze.depth):
        lines: list[str] = []
        if options.level_headers:
            lines.append(f"Level {z}")
        for row in maze.level(z):
            lines.append(options.indent + "".join(paint(tile) for tile in row))
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks)


# =============================================================================
# Box Flow Rendering
# =============================================================================


def _box_width(maze: Maze, options: RenderOptions) -> int:
    border_width = 2  # left and right borders
    return maze.width * options.cell_width + border_width


def render_level_box(maze: Maze, z: int, options: RenderOptions | None = None) -> list[str]:
    """
    Render a single level inside a box-drawing border.

    Args:
        maze: The maze to render
        z: Level to render
        options: Rendering settings (cell_width, color)

    Returns:
        List of strings representing the rendered box lines
    """
    if options is None:
        options = RenderOptions()
    paint = _tile_painter(options)
    frame = chalk.white if options.color else _plain

    title = f" Level {z} "
    box_width = _box_width(maze, options)

    lines: list[str] = []

    # Top border with title, centered when it fits
    title_line = "┌" + "─" * (box_width - 2) + "┐"
    if len(title) <= box_width - 2:
        title_start = (box_width - len(title)) // 2
        title_line = (
            "┌" +
            "─" * (title_start - 1) +
            title +
            "─" * (box_width - title_start - len(title) - 1) +
            "┐"
        )
    lines.append(frame(title_line))

    for row in maze.level(z):
        line_parts = [frame("│")]
        for tile in row:
            char = TILE_TO_CHAR[tile]
            if options.cell_width == 1:
                content = paint(tile)
            else:
                padded = char.center(options.cell_width)
                content = TILE_COLORS[tile](padded) if options.color else padded
            line_parts.append(content)
        line_parts.append(frame("│"))
        lines.append("".join(line_parts))

    lines.append(frame("└" + "─" * (box_width - 2) + "┘"))

    return lines


def render_maze_flow(maze: Maze, options: RenderOptions | None = None) -> str:
    """
    Render all levels as boxes in flow layout (multiple levels per row).

    Args:
        maze: The maze to render
        options: Rendering settings (terminal_width, box_spacing, cell_width, color)

    Returns:
        Rendered string with all levels in flow layout
    """
    if options is None:
        options = RenderOptions()

    # All boxes share the maze width; measure it without ANSI codes
    box_width = _box_width(maze, options)
    boxes = [render_level_box(maze, z, options) for z in range(maze.depth)]

    output_lines: list[str] = []
    current_row: list[list[str]] = []
    current_row_width = 0

    for box in boxes:
        needed_width = box_width
        if current_row:
            needed_width += options.box_spacing

        if current_row and current_row_width + needed_width > options.terminal_width:
            _flush_box_row(current_row, output_lines, options.box_spacing)
            current_row = []
            current_row_width = 0
            needed_width = box_width

        current_row.append(box)
        current_row_width += needed_width

    if current_row:
        _flush_box_row(current_row, output_lines, options.box_spacing)

    logger.debug(
        "render_maze_flow: %d levels, box_width=%d, terminal_width=%d",
        len(boxes),
        box_width,
        options.terminal_width,
    )
    return "\n".join(output_lines)


def _flush_box_row(
    row_boxes: list[list[str]],
    output_lines: list[str],
    box_spacing: int,
) -> None:
    """Helper to flush a row of level boxes to output_lines."""
    # Levels all have the same height, so every box has the same line count
    for line_idx in range(len(row_boxes[0])):
        line_parts = [box[line_idx] for box in row_boxes]
        output_lines.append((" " * box_spacing).join(line_parts))

    # Add spacing between rows
    output_lines.append("")
