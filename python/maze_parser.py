"""
Maze parsing utilities.

Reads the line-oriented maze format into a Maze:
- Each tile row is a string of single-character tiles (see maze_types.Tile)
- A line starting with '-' separates two levels
- The first row fixes the width, the first separator fixes the height
"""

from __future__ import annotations

import io
import logging
import os
from enum import Enum
from typing import Iterable

from maze_types import CHAR_TO_TILE, Maze, Tile

__all__ = [
    "MazeParseError",
    "ParseErrorKind",
    "load_maze",
    "parse_maze",
    "parse_maze_string",
]

logger = logging.getLogger(__name__)

SEPARATOR_PREFIX = "-"


class ParseErrorKind(Enum):
    """Why a maze failed to parse."""

    SEPARATOR_BEFORE_WIDTH_KNOWN = "separator_before_width_known"
    LEVEL_TOO_SHORT = "level_too_short"
    LEVEL_TOO_LONG = "level_too_long"
    ROW_TOO_SHORT = "row_too_short"
    ROW_TOO_LONG = "row_too_long"
    UNKNOWN_TILE = "unknown_tile"
    EMPTY_OR_CORRUPT_INPUT = "empty_or_corrupt_input"
    FINAL_LEVEL_TOO_SHORT = "final_level_too_short"


_MESSAGES: dict[ParseErrorKind, str] = {
    ParseErrorKind.SEPARATOR_BEFORE_WIDTH_KNOWN: "separator can only happen after a row of tiles",
    ParseErrorKind.LEVEL_TOO_SHORT: "level needs more rows",
    ParseErrorKind.LEVEL_TOO_LONG: "level needs less rows",
    ParseErrorKind.ROW_TOO_SHORT: "row is too short",
    ParseErrorKind.ROW_TOO_LONG: "row is too long",
    ParseErrorKind.UNKNOWN_TILE: "unknown tile",
    ParseErrorKind.EMPTY_OR_CORRUPT_INPUT: "input maze is corrupted",
    ParseErrorKind.FINAL_LEVEL_TOO_SHORT: "the last level of the maze is too short",
}

# Failures detected after the last line has been read.
_END_OF_INPUT = {ParseErrorKind.EMPTY_OR_CORRUPT_INPUT, ParseErrorKind.FINAL_LEVEL_TOO_SHORT}


class MazeParseError(ValueError):
    """
    Raised when maze text is structurally invalid.

    Attributes:
        kind: Which check failed
        line: 1-based line where the failure was detected. End-of-input
            failures report the line just past the last one read.
        char: The offending character (UNKNOWN_TILE only)
    """

    def __init__(self, kind: ParseErrorKind, line: int, char: str | None = None) -> None:
        self.kind = kind
        self.line = line
        self.char = char
        message = _MESSAGES[kind]
        if char is not None:
            message = f"{message} {char!r}"
        if kind not in _END_OF_INPUT:
            message = f"line {line}: {message}"
        super().__init__(message)


def parse_maze(lines: Iterable[str]) -> Maze:
    """
    Parse a maze from a sequence of text lines.

    Format:
    - Tile rows use one character per cell:
      '.' empty, '#' wall, '=' portal, '+' staircase, '@' player, '*' finish
    - Every tile row must be as long as the first tile row
    - Any line starting with '-' ends the current level
    - Every level must have as many rows as the first level
    - Without any separator the input is a single level

    Example:
        ..#
        #@.
        ---
        +..
        ..*

        Creates a 3x2x2 maze with a wall at (2, 0, 0) and the finish at (2, 1, 1).

    Args:
        lines: Lines of maze text, consumed once. Trailing newlines are
            stripped, so an open text file can be passed directly.

    Returns:
        The fully populated Maze

    Raises:
        MazeParseError: On the first structural violation found
    """
    width: int | None = None
    height: int | None = None
    rowcount = 0  # rows seen in the current level
    lineno = 0
    tiles: list[Tile] = []

    for lineno, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")

        if line.startswith(SEPARATOR_PREFIX):
            if width is None:
                raise MazeParseError(ParseErrorKind.SEPARATOR_BEFORE_WIDTH_KNOWN, lineno)

            if height is None:
                height = rowcount
            elif rowcount < height:
                raise MazeParseError(ParseErrorKind.LEVEL_TOO_SHORT, lineno)

            rowcount = 0
            continue

        rowcount += 1

        if width is None:
            width = len(line)
        elif height is not None and rowcount > height:
            raise MazeParseError(ParseErrorKind.LEVEL_TOO_LONG, lineno)
        elif len(line) < width:
            raise MazeParseError(ParseErrorKind.ROW_TOO_SHORT, lineno)
        elif len(line) > width:
            raise MazeParseError(ParseErrorKind.ROW_TOO_LONG, lineno)

        for char in line:
            tile = CHAR_TO_TILE.get(char)
            if tile is None:
                raise MazeParseError(ParseErrorKind.UNKNOWN_TILE, lineno, char)
            tiles.append(tile)

    end_line = lineno + 1

    if width is None:
        raise MazeParseError(ParseErrorKind.EMPTY_OR_CORRUPT_INPUT, end_line)
    if height is None:
        # No separator: the only level is as tall as the rows read.
        height = rowcount
    if width == 0:
        raise MazeParseError(ParseErrorKind.EMPTY_OR_CORRUPT_INPUT, end_line)
    if rowcount < height:
        raise MazeParseError(ParseErrorKind.FINAL_LEVEL_TOO_SHORT, end_line)

    level_size = width * height
    depth = len(tiles) // level_size
    leftover = len(tiles) - depth * level_size
    # Unreachable while every level is checked for completeness
    if leftover:
        logger.warning("parse_maze: dropping %d tiles past the last full level", leftover)

    logger.info("parse_maze: width=%d height=%d depth=%d", width, height, depth)

    maze = Maze(width, height, depth)
    for z in range(depth):
        for y in range(height):
            for x in range(width):
                maze.set_at(x, y, z, tiles[z * level_size + y * width + x])

    return maze


def parse_maze_string(text: str) -> Maze:
    """Parse a maze from a single string of rows separated by newlines only."""
    return parse_maze(io.StringIO(text))


def load_maze(path: str | os.PathLike[str]) -> Maze:
    """
    Load a maze from a text file.

    Args:
        path: File to read (UTF-8)

    Returns:
        The parsed Maze

    Raises:
        MazeParseError: If the file contents are not a valid maze
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    logger.debug("load_maze: reading %s", path)
    with open(path, encoding="utf-8") as f:
        return parse_maze(f)
