"""
Shared type definitions for the maze loader.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class Tile(Enum):
    """Classification of a single maze cell. Values are the file characters."""

    EMPTY = "."
    WALL = "#"
    PORTAL = "="
    STAIRCASE = "+"
    PLAYER = "@"
    FINISH = "*"

    @property
    def char(self) -> str:
        return TILE_TO_CHAR[self]

    @classmethod
    def from_char(cls, char: str) -> Tile:
        """Look up the tile for a file character. Raises KeyError if unknown."""
        return CHAR_TO_TILE[char]


TILE_TO_CHAR: dict[Tile, str] = {tile: tile.value for tile in Tile}
CHAR_TO_TILE: dict[str, Tile] = {char: tile for tile, char in TILE_TO_CHAR.items()}

Coord = tuple[int, int, int]


# =============================================================================
# Maze Grid
# =============================================================================


@dataclass
class Maze:
    """
    A 3D grid of tiles stored as one flat list.

    Cell (x, y, z) lives at index z*width*height + y*width + x, so x varies
    fastest, then y, then z. Each z-slice is a level.
    """

    width: int
    height: int
    depth: int
    tiles: list[Tile] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0 or self.depth < 0:
            raise ValueError(
                f"Maze dimensions must be non-negative, got "
                f"{self.width}x{self.height}x{self.depth}"
            )
        if self.tiles is None:
            self.tiles = [Tile.EMPTY] * self.size
        elif len(self.tiles) != self.size:
            raise ValueError(
                f"Tile list has {len(self.tiles)} entries, expected {self.size} "
                f"for a {self.width}x{self.height}x{self.depth} maze"
            )
        else:
            self.tiles = list(self.tiles)

    @property
    def size(self) -> int:
        return self.width * self.height * self.depth

    def index(self, x: int, y: int, z: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height and 0 <= z < self.depth):
            raise IndexError(
                f"Coordinate ({x}, {y}, {z}) out of range for "
                f"{self.width}x{self.height}x{self.depth} maze"
            )
        return z * self.width * self.height + y * self.width + x

    def at(self, x: int, y: int, z: int) -> Tile:
        return self.tiles[self.index(x, y, z)]

    def set_at(self, x: int, y: int, z: int, tile: Tile) -> None:
        self.tiles[self.index(x, y, z)] = tile

    def coords(self) -> Iterator[Coord]:
        """Yield every (x, y, z) in storage order."""
        for z in range(self.depth):
            for y in range(self.height):
                for x in range(self.width):
                    yield (x, y, z)

    def level(self, z: int) -> tuple[tuple[Tile, ...], ...]:
        """Return level z as a tuple of rows."""
        if not 0 <= z < self.depth:
            raise IndexError(f"Level {z} out of range for maze of depth {self.depth}")
        start = z * self.width * self.height
        return tuple(
            tuple(self.tiles[start + y * self.width : start + (y + 1) * self.width])
            for y in range(self.height)
        )

    def find(self, tile: Tile) -> Iterator[Coord]:
        """Yield the coordinates of every cell holding `tile`, in storage order."""
        for coord, cell in zip(self.coords(), self.tiles):
            if cell is tile:
                yield coord
