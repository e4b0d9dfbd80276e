"""Tests for maze_types module."""

import pytest

from maze_types import CHAR_TO_TILE, TILE_TO_CHAR, Maze, Tile


class TestTile:
    """Tests for the tile character table."""

    def test_char_mapping(self) -> None:
        """Each tile maps to its file character."""
        assert Tile.EMPTY.char == "."
        assert Tile.WALL.char == "#"
        assert Tile.PORTAL.char == "="
        assert Tile.STAIRCASE.char == "+"
        assert Tile.PLAYER.char == "@"
        assert Tile.FINISH.char == "*"

    def test_tables_are_inverse(self) -> None:
        """Both lookup tables cover all six tiles and invert each other."""
        assert len(TILE_TO_CHAR) == 6
        assert len(CHAR_TO_TILE) == 6
        for tile, char in TILE_TO_CHAR.items():
            assert CHAR_TO_TILE[char] is tile

    def test_from_char(self) -> None:
        """from_char looks up known characters."""
        assert Tile.from_char("@") is Tile.PLAYER
        assert Tile.from_char("*") is Tile.FINISH

    def test_from_char_unknown(self) -> None:
        """Unknown characters raise KeyError."""
        with pytest.raises(KeyError):
            Tile.from_char("?")


class TestMaze:
    """Tests for the flat 3D grid."""

    def test_new_maze_is_empty(self) -> None:
        """A new maze has width*height*depth cells, all empty."""
        maze = Maze(3, 2, 4)
        assert maze.size == 24
        assert len(maze.tiles) == 24
        assert all(tile is Tile.EMPTY for tile in maze.tiles)

    def test_index_layout(self) -> None:
        """x varies fastest, then y, then z."""
        maze = Maze(3, 2, 4)
        assert maze.index(0, 0, 0) == 0
        assert maze.index(1, 0, 0) == 1
        assert maze.index(0, 1, 0) == 3
        assert maze.index(0, 0, 1) == 6
        assert maze.index(2, 1, 3) == 3 * 3 * 2 + 1 * 3 + 2

    def test_set_and_get(self) -> None:
        """set_at writes exactly one cell."""
        maze = Maze(2, 2, 2)
        maze.set_at(1, 0, 1, Tile.WALL)

        assert maze.at(1, 0, 1) is Tile.WALL
        assert maze.tiles[5] is Tile.WALL
        assert sum(1 for tile in maze.tiles if tile is Tile.WALL) == 1

    def test_out_of_range_raises(self) -> None:
        """Coordinates outside the grid fail fast, negatives never wrap."""
        maze = Maze(2, 2, 2)
        with pytest.raises(IndexError):
            maze.at(2, 0, 0)
        with pytest.raises(IndexError):
            maze.at(0, 0, 2)
        with pytest.raises(IndexError):
            maze.set_at(-1, 0, 0, Tile.WALL)

    def test_zero_sized_maze(self) -> None:
        """Zero dimensions are allowed and hold no cells."""
        maze = Maze(0, 3, 2)
        assert maze.size == 0
        assert maze.tiles == []
        assert list(maze.coords()) == []

    def test_negative_dimension_rejected(self) -> None:
        """Negative dimensions are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            Maze(-1, 2, 2)

    def test_explicit_tiles(self) -> None:
        """A full tile list can be supplied up front."""
        tiles = [Tile.WALL, Tile.EMPTY, Tile.PLAYER, Tile.FINISH]
        maze = Maze(2, 2, 1, tiles)

        assert maze.at(0, 0, 0) is Tile.WALL
        assert maze.at(0, 1, 0) is Tile.PLAYER
        assert maze.at(1, 1, 0) is Tile.FINISH

        # The maze keeps its own copy
        tiles[0] = Tile.EMPTY
        assert maze.at(0, 0, 0) is Tile.WALL

    def test_explicit_tiles_wrong_length(self) -> None:
        """A tile list that does not match the volume is rejected."""
        with pytest.raises(ValueError, match="expected 4"):
            Maze(2, 2, 1, [Tile.WALL] * 3)

    def test_explicit_empty_tiles_checked(self) -> None:
        """An explicit empty tile list is length-checked, not filled in."""
        with pytest.raises(ValueError, match="expected 4"):
            Maze(2, 2, 1, [])

    def test_explicit_empty_tiles_zero_volume(self) -> None:
        """An explicit empty list is fine for a zero-sized maze."""
        assert Maze(0, 2, 1, []).tiles == []

    def test_coords_storage_order(self) -> None:
        """coords() follows the flat storage order."""
        maze = Maze(2, 2, 2)
        coords = list(maze.coords())

        assert len(coords) == 8
        assert coords[:3] == [(0, 0, 0), (1, 0, 0), (0, 1, 0)]
        assert coords[4] == (0, 0, 1)
        for i, (x, y, z) in enumerate(coords):
            assert maze.index(x, y, z) == i

    def test_level_rows(self) -> None:
        """level(z) returns rows of tiles for one z-slice."""
        maze = Maze(3, 2, 2)
        maze.set_at(2, 1, 1, Tile.STAIRCASE)

        level = maze.level(1)
        assert len(level) == 2
        assert len(level[0]) == 3
        assert level[1][2] is Tile.STAIRCASE
        assert maze.level(0)[1][2] is Tile.EMPTY

    def test_level_out_of_range(self) -> None:
        """Asking for a missing level raises IndexError."""
        with pytest.raises(IndexError):
            Maze(2, 2, 1).level(1)

    def test_find(self) -> None:
        """find() yields matching coordinates in storage order."""
        maze = Maze(2, 2, 2)
        maze.set_at(1, 1, 1, Tile.PORTAL)
        maze.set_at(0, 1, 0, Tile.PORTAL)

        assert list(maze.find(Tile.PORTAL)) == [(0, 1, 0), (1, 1, 1)]
        assert list(maze.find(Tile.FINISH)) == []

    def test_equality(self) -> None:
        """Mazes compare equal on dimensions and contents."""
        a = Maze(2, 1, 1)
        b = Maze(2, 1, 1)
        assert a == b

        b.set_at(0, 0, 0, Tile.WALL)
        assert a != b
        assert Maze(2, 1, 1) != Maze(1, 2, 1)
